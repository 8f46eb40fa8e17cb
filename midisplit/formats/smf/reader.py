"""
Standard MIDI File (Format 1) reader.

Walks the chunk list of a Format 1 file and records where each track
lives, without loading track data into memory.

SMF Structure:
    Offset  Size    Description
    0x00    4       "MThd"
    0x04    4       Header length (always 6)
    0x08    2       Format (0, 1 or 2)
    0x0A    2       Number of tracks
    0x0C    2       Division (PPQ, or SMPTE if bit 15 set)
    0x0E    ...     Track chunks: "MTrk" <u32 length> <data>
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from midisplit.config import NAME_SEARCH_LIMIT
from midisplit.errors import (
    InvalidFormatError,
    SourceFileError,
    TruncatedFileError,
    UnsupportedFormatError,
)
from midisplit.formats.smf.track_name import extract_track_name
from midisplit.models.smf import (
    CHUNK_HEADER_SIZE,
    HEADER_LENGTH,
    HEADER_MAGIC,
    HEADER_SIZE,
    SUPPORTED_FORMAT,
    TRACK_MAGIC,
    MidiFileIndex,
    MidiHeader,
    TrackInfo,
)
from midisplit.utils.byte_codec import read_u16_be, read_u32_be

logger = logging.getLogger(__name__)


class SMFReader:
    """
    Reader for Format 1 Standard MIDI Files.

    Validation stops at the first violation. Tracks are indexed in file
    order, track 1 included.

    Example:
        index = SMFReader.read("song.mid")
        for track in index.tracks:
            print(track.number, track.name, track.size)
    """

    def __init__(self, name_search_limit: int = NAME_SEARCH_LIMIT):
        self.name_search_limit = name_search_limit

    @classmethod
    def read(cls, filepath: Union[str, Path], **kwargs) -> MidiFileIndex:
        """
        Read a MIDI file and return its track index.

        Args:
            filepath: Path to .mid file

        Returns:
            Parsed MidiFileIndex
        """
        reader = cls(**kwargs)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> MidiFileIndex:
        filepath = Path(filepath)

        if not filepath.is_file():
            raise SourceFileError("Input file does not exist", filepath)

        try:
            f = open(filepath, "rb")
        except OSError as e:
            raise SourceFileError(f"Cannot open file ({e.strerror})", filepath) from e

        with f:
            index = self.parse_stream(f)

        index.path = filepath
        return index

    def parse_stream(self, stream: BinaryIO) -> MidiFileIndex:
        """
        Parse a MIDI file from a readable, seekable binary stream.

        The file is expected to start at the stream's current position.
        Recorded track offsets are absolute stream positions.

        Raises:
            InvalidFormatError: Bad magic, header length or track chunk tag
            UnsupportedFormatError: Format is not 1
            TruncatedFileError: A chunk extends past the end of the stream
        """
        base = stream.tell()
        end = stream.seek(0, os.SEEK_END)
        stream.seek(base)

        header = self._read_header(stream, base)
        logger.debug(
            "Header: format %d, %d tracks, division %s",
            header.format,
            header.track_count,
            header.division.hex(),
        )

        index = MidiFileIndex(path=None, header=header, file_size=end - base)

        position = base + HEADER_SIZE
        for number in range(1, header.track_count + 1):
            track = self._read_track(stream, position, number, end)
            index.tracks.append(track)
            logger.debug(
                "Track %d: %r, %d bytes at 0x%X", track.number, track.name, track.size, position
            )
            position = track.data_offset + track.size

        return index

    def _read_header(self, stream: BinaryIO, base: int) -> MidiHeader:
        data = stream.read(HEADER_SIZE)

        if len(data) < 4 or data[:4] != HEADER_MAGIC:
            raise InvalidFormatError("Not a valid MIDI file (missing header magic)", offset=base)

        if len(data) < HEADER_SIZE:
            raise TruncatedFileError(
                f"MIDI header is incomplete ({len(data)} of {HEADER_SIZE} bytes)", offset=base
            )

        header_length = read_u32_be(data, 4)
        if header_length != HEADER_LENGTH:
            raise InvalidFormatError(
                f"Unexpected header size {header_length} (expected {HEADER_LENGTH})",
                offset=base + 4,
            )

        midi_format = read_u16_be(data, 8)
        if midi_format != SUPPORTED_FORMAT:
            raise UnsupportedFormatError(
                f"Only Format 1 supported (file is Format {midi_format})"
            )

        return MidiHeader(
            format=midi_format,
            track_count=read_u16_be(data, 10),
            division=bytes(data[12:14]),
        )

    def _read_track(
        self,
        stream: BinaryIO,
        position: int,
        number: int,
        end: int,
    ) -> TrackInfo:
        stream.seek(position)
        chunk_header = stream.read(CHUNK_HEADER_SIZE)

        if len(chunk_header) < CHUNK_HEADER_SIZE:
            raise TruncatedFileError(
                "File ends inside track chunk header", track=number, offset=position
            )

        if chunk_header[:4] != TRACK_MAGIC:
            raise InvalidFormatError(
                f"Invalid track header {bytes(chunk_header[:4])!r}", track=number, offset=position
            )

        size = read_u32_be(chunk_header, 4)
        data_offset = position + CHUNK_HEADER_SIZE

        name = extract_track_name(stream, number, size, self.name_search_limit)

        if data_offset + size > end:
            raise TruncatedFileError(
                f"Track length {size} exceeds remaining {end - data_offset} bytes",
                track=number,
                offset=position,
            )

        return TrackInfo(number=number, name=name, size=size, chunk_offset=position)
