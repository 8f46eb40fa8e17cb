"""
Byte pattern search.
"""

from typing import List

from midisplit.utils.byte_codec import ByteBuffer


def find_all(haystack: ByteBuffer, needle: bytes) -> List[int]:
    """
    Find every non-overlapping occurrence of needle in haystack.

    This is a plain position-by-position comparison. It is only ever run
    over small windows (the first kilobyte of a track), so the quadratic
    worst case does not matter.

    Args:
        haystack: Buffer to search
        needle: Byte sequence to look for

    Returns:
        Match offsets in ascending order. Empty if needle is empty or
        longer than haystack.

    Example:
        >>> find_all(b"\\xff\\x03\\xff\\x03", b"\\xff\\x03")
        [0, 2]
    """
    matches: List[int] = []
    size = len(needle)
    if size == 0 or len(haystack) < size:
        return matches

    i = 0
    last = len(haystack) - size
    while i <= last:
        match = True
        for j in range(size):
            if haystack[i + j] != needle[j]:
                match = False
                break
        if match:
            matches.append(i)
            i += size
        else:
            i += 1

    return matches
