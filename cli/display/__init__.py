"""
CLI display modules.
"""

from cli.display.tables import (
    display_header,
    display_split_result,
    display_track_table,
)

__all__ = [
    "display_header",
    "display_split_result",
    "display_track_table",
]
