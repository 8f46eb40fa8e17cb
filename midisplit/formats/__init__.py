"""Format handlers."""

from midisplit.formats.smf import SMFReader, TrackWriter

__all__ = ["SMFReader", "TrackWriter"]
