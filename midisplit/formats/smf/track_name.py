"""
Track name discovery.

A track's display name comes from its first "Sequence/Track Name"
meta-event (FF 03 <len> <text>). The scan is a plain byte search over a
bounded prefix of the track; the delta-time that precedes the event is
not decoded, and the length is read as a single byte.
"""

import logging
from typing import BinaryIO

from midisplit.config import NAME_SEARCH_LIMIT
from midisplit.utils.search import find_all

logger = logging.getLogger(__name__)

TRACK_NAME_MARKER = bytes([0xFF, 0x03])
TEMPO_TRACK_NAME = "Tempo Track"


def fallback_track_name(number: int) -> str:
    """Name used when a track carries no usable name meta-event."""
    if number == 1:
        return TEMPO_TRACK_NAME
    return f"Track {number}"


def decode_track_name(window: bytes) -> str:
    """
    Return the first non-empty track name found in window, or "".

    Matches whose length byte or text run past the end of the window
    are skipped.
    """
    for pos in find_all(window, TRACK_NAME_MARKER):
        length_index = pos + len(TRACK_NAME_MARKER)
        if length_index >= len(window):
            continue
        length = window[length_index]
        start = length_index + 1
        if start + length > len(window):
            continue
        name = window[start : start + length].decode("latin-1")
        if name:
            return name
    return ""


def extract_track_name(
    stream: BinaryIO,
    number: int,
    size: int,
    search_limit: int = NAME_SEARCH_LIMIT,
) -> str:
    """
    Derive a display name for the track whose data starts at the
    stream's current position.

    The stream position is restored before returning. This never raises;
    any problem yields the fallback name.

    Args:
        stream: Readable, seekable binary stream positioned at track data
        number: 1-based track ordinal
        size: Declared track payload length
        search_limit: Maximum number of bytes inspected

    Returns:
        The decoded name, or fallback_track_name(number)
    """
    fallback = fallback_track_name(number)

    try:
        name = _scan_track_name(stream, number, size, search_limit)
    except Exception as e:
        logger.debug("Track %d: name scan failed (%s: %s)", number, type(e).__name__, e)
        return fallback

    return name or fallback


def _scan_track_name(stream: BinaryIO, number: int, size: int, search_limit: int) -> str:
    window_size = max(0, min(size, search_limit))
    position = stream.tell()

    try:
        window = stream.read(window_size)
    finally:
        try:
            stream.seek(position)
        except Exception as e:
            logger.debug("Track %d: cannot restore stream position (%s)", number, e)

    if window is None or len(window) < window_size:
        return ""

    return decode_track_name(window)
