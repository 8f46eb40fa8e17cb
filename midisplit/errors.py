"""
Exceptions raised while reading and splitting MIDI files.
"""

from pathlib import Path
from typing import Optional, Union


class MidiSplitError(Exception):
    """
    Base class for all midisplit errors.

    Attributes:
        message: Human readable description
        track: 1-based track index the error relates to, if any
        offset: Byte offset in the source file, if known
    """

    def __init__(self, message: str, track: Optional[int] = None, offset: Optional[int] = None):
        self.message = message
        self.track = track
        self.offset = offset
        super().__init__(str(self))

    def __str__(self) -> str:
        context = []
        if self.track is not None:
            context.append(f"track {self.track}")
        if self.offset is not None:
            context.append(f"offset 0x{self.offset:X}")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message


class InvalidFormatError(MidiSplitError):
    """The file violates the MThd/MTrk chunk grammar."""

    pass


class UnsupportedFormatError(MidiSplitError):
    """The file is MIDI but not Format 1."""

    pass


class TruncatedFileError(MidiSplitError):
    """A declared length runs past the end of the file."""

    pass


class SourceFileError(MidiSplitError, OSError):
    """The input file or output directory cannot be used."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{message}: {path}")


class TrackWriteError(MidiSplitError, OSError):
    """An output file could not be created or fully written."""

    def __init__(self, message: str, path: Union[str, Path], track: Optional[int] = None):
        self.path = Path(path)
        super().__init__(f"{message}: {path}", track=track)
