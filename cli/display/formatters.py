"""
Display formatting utilities for CLI output.
"""

from midisplit.models.smf import MidiHeader


def format_division(header: MidiHeader) -> str:
    """
    Describe the header time division.

    Returns:
        "480 ticks/beat" or "SMPTE 25 fps, 40 ticks/frame"
    """
    if header.ticks_per_beat is not None:
        return f"{header.ticks_per_beat} ticks/beat"

    # High byte is the negative frame rate in two's complement
    fps = 256 - header.division[0]
    return f"SMPTE {fps} fps, {header.division[1]} ticks/frame"


def format_size(size: int) -> str:
    """
    Format a byte count.

    Returns:
        "532 B", "12.4 KB" or "1.2 MB"
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def hex_with_ascii(data: bytes, offset: int = 0, bytes_per_line: int = 16) -> str:
    """
    Format bytes as hex dump with ASCII representation.

    Returns:
        Multi-line string with format: "0x000: 00 01 02 ...  .ABC..."
    """
    lines = []
    for i in range(0, len(data), bytes_per_line):
        chunk = data[i : i + bytes_per_line]
        hex_part = " ".join(f"{b:02X}" for b in chunk)
        ascii_part = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        # Pad hex part for alignment
        hex_padded = f"{hex_part:<{bytes_per_line * 3 - 1}}"

        lines.append(f"0x{offset + i:03X}: {hex_padded}  {ascii_part}")

    return "\n".join(lines)
