"""Standard MIDI File handlers."""

from midisplit.formats.smf.reader import SMFReader
from midisplit.formats.smf.track_name import extract_track_name, fallback_track_name
from midisplit.formats.smf.writer import (
    TrackWriter,
    plan_output_paths,
    safe_filename,
    unique_output_path,
)

__all__ = [
    "SMFReader",
    "TrackWriter",
    "extract_track_name",
    "fallback_track_name",
    "safe_filename",
    "plan_output_paths",
    "unique_output_path",
]
