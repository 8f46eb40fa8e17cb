"""Tests for big-endian field helpers and byte search."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from midisplit.utils.byte_codec import read_u16_be, read_u32_be, u16_to_bytes, u32_to_bytes
from midisplit.utils.search import find_all


class TestByteCodec:
    """Test cases for 16/32-bit big-endian encode/decode."""

    def test_read_u32(self):
        """Test reading a 32-bit value."""
        assert read_u32_be(b"\x00\x00\x00\x06") == 6
        assert read_u32_be(b"\x12\x34\x56\x78") == 0x12345678
        assert read_u32_be(b"\xff\xff\xff\xff") == 0xFFFFFFFF

    def test_read_u32_at_offset(self):
        """Test reading a 32-bit value past a chunk tag."""
        assert read_u32_be(b"MTrk\x00\x00\x01\x00", 4) == 256

    def test_read_u16(self):
        """Test reading a 16-bit value."""
        assert read_u16_be(b"\x01\xe0") == 480
        assert read_u16_be(b"\x00\x00\x00\x01", 2) == 1

    def test_short_buffer_reads_zero(self):
        """Test that reading past the end yields 0 instead of raising."""
        assert read_u32_be(b"\x01\x02\x03") == 0
        assert read_u32_be(b"\x01\x02\x03\x04", 1) == 0
        assert read_u16_be(b"\x01") == 0
        assert read_u16_be(b"", 0) == 0
        assert read_u16_be(b"\x01\x02", 5) == 0

    def test_encode(self):
        """Test encoding to big-endian bytes."""
        assert u32_to_bytes(6) == b"\x00\x00\x00\x06"
        assert u16_to_bytes(1) == b"\x00\x01"
        assert u16_to_bytes(480) == b"\x01\xe0"

    def test_encode_masks_overflow(self):
        """Test that values wider than the field are truncated."""
        assert u16_to_bytes(0x12345) == b"\x23\x45"
        assert u32_to_bytes(0x1_0000_0001) == b"\x00\x00\x00\x01"

    def test_accepts_bytearray(self):
        """Test decoding from a mutable buffer."""
        assert read_u32_be(bytearray(u32_to_bytes(0xCAFEBABE))) == 0xCAFEBABE


class TestFindAll:
    """Test cases for byte pattern search."""

    def test_single_match(self):
        """Test locating one occurrence."""
        assert find_all(b"\x00\xff\x03\x04Bass", b"\xff\x03") == [1]

    def test_multiple_matches(self):
        """Test locating several occurrences in order."""
        data = b"\xff\x03\x00\x00\xff\x03\x00\xff\x03"
        assert find_all(data, b"\xff\x03") == [0, 4, 7]

    def test_non_overlapping(self):
        """Test that the scan resumes after each match."""
        assert find_all(b"aaaa", b"aa") == [0, 2]
        assert find_all(b"aaa", b"aa") == [0]

    def test_no_match(self):
        """Test that a missing pattern yields nothing."""
        assert find_all(b"\x00\x01\x02", b"\xff\x03") == []

    def test_empty_needle(self):
        """Test that an empty pattern yields nothing."""
        assert find_all(b"abc", b"") == []

    def test_needle_longer_than_haystack(self):
        """Test that an oversized pattern yields nothing."""
        assert find_all(b"\xff", b"\xff\x03") == []

    def test_match_at_end(self):
        """Test a match touching the last byte."""
        assert find_all(b"\x00\x00\xff\x03", b"\xff\x03") == [2]
