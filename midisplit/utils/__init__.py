"""Utility functions for midisplit."""

from midisplit.utils.byte_codec import read_u16_be, read_u32_be, u16_to_bytes, u32_to_bytes
from midisplit.utils.search import find_all

__all__ = [
    "read_u16_be",
    "read_u32_be",
    "u16_to_bytes",
    "u32_to_bytes",
    "find_all",
]
