"""Data models for MIDI file splitting."""

from midisplit.models.smf import (
    FailedTrack,
    MidiFileIndex,
    MidiHeader,
    SplitResult,
    TrackInfo,
    WrittenTrack,
)

__all__ = [
    "FailedTrack",
    "MidiFileIndex",
    "MidiHeader",
    "SplitResult",
    "TrackInfo",
    "WrittenTrack",
]
