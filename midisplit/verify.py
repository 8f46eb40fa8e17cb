"""
Output verification with mido.

Re-reads a written file with an independent parser to confirm it is a
playable single-track Format 1 file.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import mido

logger = logging.getLogger(__name__)


def verify_split_file(
    filepath: Union[str, Path], ticks_per_beat: Optional[int] = None
) -> List[str]:
    """
    Check that a file loads as a one-track Format 1 MIDI file.

    Args:
        filepath: File to check
        ticks_per_beat: Expected division, or None to skip the check
            (SMPTE divisions are not compared)

    Returns:
        List of problems found; empty if the file is valid
    """
    problems: List[str] = []

    try:
        midi = mido.MidiFile(str(filepath))
    except (OSError, EOFError, ValueError, KeyError, IndexError) as e:
        return [f"mido could not parse file: {e}"]

    if midi.type != 1:
        problems.append(f"expected type 1, got type {midi.type}")

    if len(midi.tracks) != 1:
        problems.append(f"expected 1 track, got {len(midi.tracks)}")

    if ticks_per_beat is not None and midi.ticks_per_beat != ticks_per_beat:
        problems.append(
            f"ticks per beat {midi.ticks_per_beat} does not match source {ticks_per_beat}"
        )

    for problem in problems:
        logger.debug("%s: %s", filepath, problem)

    return problems
