"""
Split options.
"""

from dataclasses import dataclass

# Track names are expected near the start of a track
NAME_SEARCH_LIMIT = 1024
COPY_BUFFER_SIZE = 4096
MAX_COPY_SUFFIX = 10000


@dataclass
class SplitOptions:
    """
    Settings for a split run.

    Attributes:
        name_search_limit: Bytes of each track scanned for a name
        copy_buffer_size: Chunk size used when copying track bytes
        max_copy_suffix: Highest "(Copy k)" suffix tried before giving up
        fail_fast: Abort the run on the first track that fails to write
        verify: Re-read every output with mido after writing
        dry_run: Discover and report tracks without writing anything
    """

    name_search_limit: int = NAME_SEARCH_LIMIT
    copy_buffer_size: int = COPY_BUFFER_SIZE
    max_copy_suffix: int = MAX_COPY_SUFFIX
    fail_fast: bool = False
    verify: bool = False
    dry_run: bool = False

    def __post_init__(self):
        if self.name_search_limit < 0:
            raise ValueError(f"name_search_limit must be >= 0, got {self.name_search_limit}")
        if self.copy_buffer_size < 1:
            raise ValueError(f"copy_buffer_size must be >= 1, got {self.copy_buffer_size}")
        if self.max_copy_suffix < 1:
            raise ValueError(f"max_copy_suffix must be >= 1, got {self.max_copy_suffix}")
