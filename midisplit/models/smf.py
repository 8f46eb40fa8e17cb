"""
Standard MIDI File data models.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

HEADER_MAGIC = b"MThd"
TRACK_MAGIC = b"MTrk"
HEADER_LENGTH = 6
HEADER_SIZE = 14
CHUNK_HEADER_SIZE = 8
SUPPORTED_FORMAT = 1


@dataclass(frozen=True)
class MidiHeader:
    """
    Parsed MThd chunk.

    Attributes:
        format: SMF format (only 1 is accepted)
        track_count: Number of MTrk chunks declared
        division: Raw 2-byte time division, kept verbatim
    """

    format: int
    track_count: int
    division: bytes
    magic: bytes = HEADER_MAGIC
    header_length: int = HEADER_LENGTH

    @property
    def is_smpte(self) -> bool:
        """True if the division encodes SMPTE frames instead of PPQ."""
        return bool(self.division[0] & 0x80)

    @property
    def ticks_per_beat(self) -> Optional[int]:
        if self.is_smpte:
            return None
        return (self.division[0] << 8) | self.division[1]


@dataclass(frozen=True)
class TrackInfo:
    """
    Location and display name of one MTrk chunk.

    Track bytes are never held in memory; only where they live.

    Attributes:
        number: 1-based ordinal in file order
        name: Display name (from the track name meta-event or a fallback)
        size: Declared payload length
        chunk_offset: Offset of the "MTrk" tag
    """

    number: int
    name: str
    size: int
    chunk_offset: int

    @property
    def data_offset(self) -> int:
        return self.chunk_offset + CHUNK_HEADER_SIZE

    @property
    def chunk_size(self) -> int:
        """Size of the chunk including its 8-byte header."""
        return CHUNK_HEADER_SIZE + self.size

    @property
    def is_tempo_track(self) -> bool:
        return self.number == 1


@dataclass
class MidiFileIndex:
    """Header plus ordered track list of a parsed file."""

    path: Optional[Path]
    header: MidiHeader
    tracks: List[TrackInfo] = field(default_factory=list)
    file_size: int = 0


@dataclass
class WrittenTrack:
    """A track successfully written to its own file."""

    track: TrackInfo
    path: Path
    bytes_written: int

    @property
    def complete(self) -> bool:
        """False if the source ran out before the declared size was copied."""
        return self.bytes_written == HEADER_SIZE + self.track.chunk_size


@dataclass
class FailedTrack:
    """
    A track whose output could not be written or verified.

    stage is "write" when no complete file was produced, or "verify" when
    the file was written (and is listed in SplitResult.written) but did
    not reload cleanly.
    """

    track: TrackInfo
    error: str
    stage: str = "write"


@dataclass
class SplitResult:
    """Outcome of splitting one input file."""

    index: MidiFileIndex
    written: List[WrittenTrack] = field(default_factory=list)
    failed: List[FailedTrack] = field(default_factory=list)
    dry_run: bool = False

    @property
    def tracks_found(self) -> int:
        return len(self.index.tracks)

    @property
    def files_written(self) -> int:
        return len(self.written)

    @property
    def failures(self) -> int:
        return len(self.failed)

    @property
    def write_failures(self) -> List[FailedTrack]:
        return [f for f in self.failed if f.stage == "write"]

    @property
    def verify_failures(self) -> List[FailedTrack]:
        return [f for f in self.failed if f.stage == "verify"]

    @property
    def ok(self) -> bool:
        return not self.failed
