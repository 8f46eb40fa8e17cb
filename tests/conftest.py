"""Test configuration and fixtures."""

import struct
from pathlib import Path
from typing import List, Optional

import pytest

DIVISION = b"\x01\xe0"  # 480 ticks per beat

END_OF_TRACK = b"\x00\xff\x2f\x00"
TEMPO_EVENT = b"\x00\xff\x51\x03\x07\xa1\x20"  # 120 BPM


def name_event(name: str) -> bytes:
    """Delta 0 + track name meta-event."""
    text = name.encode("latin-1")
    return b"\x00\xff\x03" + bytes([len(text)]) + text


def note_events(note: int = 60, channel: int = 0) -> bytes:
    """One quarter note on the given channel."""
    return bytes([0x00, 0x90 | channel, note, 0x64, 0x83, 0x60, 0x80 | channel, note, 0x40])


def track_data(name: Optional[str] = None, body: bytes = b"") -> bytes:
    """Event data for a track: optional name, body, end of track."""
    data = name_event(name) if name is not None else b""
    return data + body + END_OF_TRACK


def track_chunk(data: bytes, declared_size: Optional[int] = None) -> bytes:
    size = len(data) if declared_size is None else declared_size
    return b"MTrk" + struct.pack(">I", size) + data


def build_smf(
    tracks: List[bytes],
    midi_format: int = 1,
    division: bytes = DIVISION,
    track_count: Optional[int] = None,
) -> bytes:
    """Assemble a Standard MIDI File from track event data."""
    count = len(tracks) if track_count is None else track_count
    header = b"MThd" + struct.pack(">IHH", 6, midi_format, count) + division
    return header + b"".join(track_chunk(t) for t in tracks)


@pytest.fixture
def song_tracks():
    """Event data for a typical 3-track Format 1 song."""
    return [
        track_data("Tempo", TEMPO_EVENT),
        track_data("Bass", note_events(40, 1)),
        track_data("A/B:C", note_events(72, 2)),
    ]


@pytest.fixture
def song_bytes(song_tracks):
    return build_smf(song_tracks)


@pytest.fixture
def song_file(tmp_path, song_bytes) -> Path:
    """A 3-track Format 1 file named Song.mid."""
    path = tmp_path / "Song.mid"
    path.write_bytes(song_bytes)
    return path


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "out"
