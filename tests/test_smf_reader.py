"""Tests for the Format 1 MIDI reader."""

import io
import struct

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from midisplit.errors import (
    InvalidFormatError,
    SourceFileError,
    TruncatedFileError,
    UnsupportedFormatError,
)
from midisplit.formats.smf.reader import SMFReader
from conftest import DIVISION, TEMPO_EVENT, build_smf, note_events, track_chunk, track_data


def parse(data: bytes):
    return SMFReader().parse_stream(io.BytesIO(data))


class TestSMFHeader:
    """Test cases for MThd validation."""

    def test_parse_header(self, song_bytes):
        """Test parsing a valid Format 1 header."""
        index = parse(song_bytes)

        assert index.header.format == 1
        assert index.header.track_count == 3
        assert index.header.division == DIVISION
        assert index.header.ticks_per_beat == 480
        assert index.file_size == len(song_bytes)

    def test_smpte_division_preserved(self):
        """Test that an SMPTE division is kept verbatim."""
        index = parse(build_smf([track_data("A")], division=b"\xe7\x28"))

        assert index.header.division == b"\xe7\x28"
        assert index.header.is_smpte
        assert index.header.ticks_per_beat is None

    def test_missing_magic(self):
        """Test that a non-MIDI file is rejected."""
        with pytest.raises(InvalidFormatError, match="missing header magic"):
            parse(b"RIFF" + bytes(20))

    def test_empty_file(self):
        """Test that an empty file is rejected."""
        with pytest.raises(InvalidFormatError):
            parse(b"")

    def test_wrong_header_length(self):
        """Test that a header length other than 6 is rejected."""
        data = b"MThd" + struct.pack(">IHH", 8, 1, 0) + DIVISION + b"\x00\x00"
        with pytest.raises(InvalidFormatError, match="Unexpected header size"):
            parse(data)

    @pytest.mark.parametrize("midi_format", [0, 2])
    def test_unsupported_format(self, midi_format):
        """Test that Format 0 and 2 files are rejected."""
        data = build_smf([track_data("A")], midi_format=midi_format)
        with pytest.raises(UnsupportedFormatError, match="Only Format 1"):
            parse(data)

    def test_incomplete_header(self):
        """Test a file that ends inside the header."""
        with pytest.raises(TruncatedFileError):
            parse(b"MThd\x00\x00\x00\x06\x00")


class TestSMFTracks:
    """Test cases for track discovery."""

    def test_track_index(self, song_bytes, song_tracks):
        """Test that every track is found in order with its location."""
        index = parse(song_bytes)

        assert [t.number for t in index.tracks] == [1, 2, 3]
        assert [t.size for t in index.tracks] == [len(t) for t in song_tracks]

        offset = 14
        for track, data in zip(index.tracks, song_tracks):
            assert track.chunk_offset == offset
            assert track.data_offset == offset + 8
            assert song_bytes[track.data_offset : track.data_offset + track.size] == data
            offset += 8 + len(data)

    def test_track_names(self, song_bytes):
        """Test names from track name meta-events."""
        index = parse(song_bytes)
        assert [t.name for t in index.tracks] == ["Tempo", "Bass", "A/B:C"]

    def test_fallback_names(self):
        """Test fallback names for unnamed tracks."""
        data = build_smf(
            [track_data(None, TEMPO_EVENT), track_data(None, note_events()), track_data("Keys")]
        )
        index = parse(data)
        assert [t.name for t in index.tracks] == ["Tempo Track", "Track 2", "Keys"]

    def test_first_track_is_splittable(self, song_bytes):
        """Test that track 1 is indexed like any other track."""
        index = parse(song_bytes)
        assert index.tracks[0].is_tempo_track
        assert not index.tracks[1].is_tempo_track

    def test_zero_tracks(self):
        """Test a header declaring no tracks."""
        index = parse(build_smf([]))
        assert index.tracks == []

    def test_bad_track_magic(self):
        """Test that a bad chunk tag names the failing track."""
        good = track_chunk(track_data("A"))
        data = build_smf([], track_count=2) + good + b"XTrk\x00\x00\x00\x00"

        with pytest.raises(InvalidFormatError, match="Invalid track header") as exc_info:
            parse(data)

        assert exc_info.value.track == 2
        assert exc_info.value.offset == 14 + len(good)
        assert "track 2" in str(exc_info.value)

    def test_truncated_track(self):
        """Test a declared length running past the end of the file."""
        data = build_smf([], track_count=1) + track_chunk(b"\x00\xff\x2f\x00", declared_size=100)

        with pytest.raises(TruncatedFileError) as exc_info:
            parse(data)

        assert exc_info.value.track == 1

    def test_missing_track(self):
        """Test a header declaring more tracks than the file holds."""
        data = build_smf([track_data("A")], track_count=2)

        with pytest.raises(TruncatedFileError) as exc_info:
            parse(data)

        assert exc_info.value.track == 2

    def test_trailing_bytes_ignored(self, song_bytes):
        """Test that data after the declared tracks is not read."""
        index = parse(song_bytes + b"\x00" * 32)
        assert len(index.tracks) == 3

    def test_stream_not_at_start(self, song_bytes):
        """Test offsets are absolute when the file starts mid-stream."""
        stream = io.BytesIO(b"PREFIX" + song_bytes)
        stream.seek(6)

        index = SMFReader().parse_stream(stream)

        assert index.tracks[0].chunk_offset == 6 + 14
        assert index.file_size == len(song_bytes)


class TestSMFReaderFile:
    """Test cases for reading from disk."""

    def test_read_file(self, song_file):
        """Test reading a file by path."""
        index = SMFReader.read(song_file)

        assert index.path == song_file
        assert len(index.tracks) == 3

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported with its path."""
        with pytest.raises(SourceFileError, match="does not exist"):
            SMFReader.read(tmp_path / "missing.mid")

    def test_missing_file_is_os_error(self, tmp_path):
        """Test that source errors can be handled as OSError."""
        with pytest.raises(OSError):
            SMFReader.read(tmp_path / "missing.mid")

    def test_custom_search_limit(self, tmp_path):
        """Test passing reader options through read()."""
        path = tmp_path / "late.mid"
        path.write_bytes(build_smf([track_data(None, note_events() + b"\x00\xff\x03\x01X")]))

        assert SMFReader.read(path).tracks[0].name == "X"
        assert SMFReader.read(path, name_search_limit=4).tracks[0].name == "Tempo Track"
