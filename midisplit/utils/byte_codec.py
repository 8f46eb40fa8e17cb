"""
Big-endian integer helpers for Standard MIDI File chunk fields.

SMF stores every multi-byte header field big-endian:
    MThd  <u32 length> <u16 format> <u16 ntrks> <u16 division>
    MTrk  <u32 length> <event data...>

The readers never raise on short buffers; they return 0 when fewer than
the required bytes remain after the offset.
"""

import struct
from typing import Union

ByteBuffer = Union[bytes, bytearray, memoryview]


def read_u32_be(data: ByteBuffer, offset: int = 0) -> int:
    """
    Read an unsigned 32-bit big-endian integer.

    Args:
        data: Source buffer
        offset: Position of the first byte

    Returns:
        The decoded value, or 0 if fewer than 4 bytes remain
    """
    if offset < 0 or offset + 4 > len(data):
        return 0
    return struct.unpack_from(">I", data, offset)[0]


def read_u16_be(data: ByteBuffer, offset: int = 0) -> int:
    """
    Read an unsigned 16-bit big-endian integer.

    Args:
        data: Source buffer
        offset: Position of the first byte

    Returns:
        The decoded value, or 0 if fewer than 2 bytes remain
    """
    if offset < 0 or offset + 2 > len(data):
        return 0
    return struct.unpack_from(">H", data, offset)[0]


def u32_to_bytes(value: int) -> bytes:
    """Encode a value as 4 big-endian bytes (masked to 32 bits)."""
    return struct.pack(">I", value & 0xFFFFFFFF)


def u16_to_bytes(value: int) -> bytes:
    """Encode a value as 2 big-endian bytes (masked to 16 bits)."""
    return struct.pack(">H", value & 0xFFFF)
