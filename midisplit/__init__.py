"""
midisplit - Split Format 1 Standard MIDI Files into one file per track.

This library provides tools to:
- Index the tracks of a Format 1 .mid file without loading track data
- Name each track from its track name meta-event
- Write each track to its own single-track Format 1 file

Example usage:
    from midisplit import SMFReader, split_midi_file

    # List tracks
    index = SMFReader.read("song.mid")
    for track in index.tracks:
        print(track.number, track.name)

    # Split into out/"song - <track name>.mid"
    result = split_midi_file("song.mid", "out/")
"""

__version__ = "0.1.0"
__author__ = "midisplit Contributors"

from midisplit.config import SplitOptions
from midisplit.errors import (
    InvalidFormatError,
    MidiSplitError,
    SourceFileError,
    TrackWriteError,
    TruncatedFileError,
    UnsupportedFormatError,
)
from midisplit.formats.smf.reader import SMFReader
from midisplit.formats.smf.writer import TrackWriter
from midisplit.models.smf import MidiFileIndex, MidiHeader, SplitResult, TrackInfo
from midisplit.splitter import SplitReporter, split_midi_file

__all__ = [
    "SplitOptions",
    "InvalidFormatError",
    "MidiSplitError",
    "SourceFileError",
    "TrackWriteError",
    "TruncatedFileError",
    "UnsupportedFormatError",
    "SMFReader",
    "TrackWriter",
    "MidiFileIndex",
    "MidiHeader",
    "SplitResult",
    "TrackInfo",
    "SplitReporter",
    "split_midi_file",
]
