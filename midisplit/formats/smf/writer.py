"""
Single-track MIDI file writer.

Each output file is a complete Format 1 file holding exactly one track:

    "MThd" 00 00 00 06 00 01 00 01 <division>
    "MTrk" <u32 length> <original event data>

The MTrk chunk is copied byte-for-byte from the source file.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Collection, Dict, Iterator, List, Optional, Tuple, Union

from midisplit.config import COPY_BUFFER_SIZE, MAX_COPY_SUFFIX
from midisplit.errors import TrackWriteError
from midisplit.models.smf import (
    HEADER_LENGTH,
    HEADER_MAGIC,
    SUPPORTED_FORMAT,
    FailedTrack,
    MidiHeader,
    TrackInfo,
    WrittenTrack,
)
from midisplit.utils.byte_codec import u16_to_bytes, u32_to_bytes

logger = logging.getLogger(__name__)

INVALID_FILENAME_CHARS = '<>:"/\\|?*'
OUTPUT_SUFFIX = ".mid"


def safe_filename(name: str) -> str:
    """
    Replace characters that are not allowed in file names with "_".

    Length and case are preserved.

    Example:
        >>> safe_filename("A/B:C")
        'A_B_C'
    """
    for char in INVALID_FILENAME_CHARS:
        name = name.replace(char, "_")
    return name


def output_candidates(
    output_dir: Path, base_name: str, track_name: str, max_suffix: int = MAX_COPY_SUFFIX
) -> Iterator[Path]:
    """
    Yield output paths in the order they should be tried.

    "{base} - {name}.mid", then "{base} - {name} (Copy 1).mid",
    "(Copy 2)" and so on up to max_suffix.
    """
    stem = f"{base_name} - {safe_filename(track_name)}"
    yield output_dir / f"{stem}{OUTPUT_SUFFIX}"
    for k in range(1, max_suffix + 1):
        yield output_dir / f"{stem} (Copy {k}){OUTPUT_SUFFIX}"


def unique_output_path(
    output_dir: Union[str, Path],
    base_name: str,
    track_name: str,
    max_suffix: int = MAX_COPY_SUFFIX,
    taken: Collection[Path] = (),
    track: Optional[int] = None,
) -> Path:
    """
    Return the first candidate output path that does not exist yet.

    Args:
        taken: Paths to treat as already used (names planned for
            earlier tracks of the same split)
        track: Track number reported in errors

    Raises:
        TrackWriteError: If every candidate up to max_suffix is taken, or
            a candidate cannot be checked (e.g. the name is too long)
    """
    output_dir = Path(output_dir)
    for candidate in output_candidates(output_dir, base_name, track_name, max_suffix):
        if candidate in taken:
            continue
        try:
            candidate.stat()
        except FileNotFoundError:
            return candidate
        except (OSError, ValueError) as e:
            raise TrackWriteError(
                f"Cannot check output file name ({e})", candidate, track=track
            ) from e
    raise TrackWriteError(
        "No free output file name",
        output_dir / f"{base_name} - {safe_filename(track_name)}{OUTPUT_SUFFIX}",
        track=track,
    )


def plan_output_paths(
    output_dir: Union[str, Path],
    base_name: str,
    tracks: List[TrackInfo],
    max_suffix: int = MAX_COPY_SUFFIX,
) -> Tuple[Dict[int, Path], List[FailedTrack]]:
    """
    Work out the file each track would be written to, without writing.

    Tracks sharing a name get successive "(Copy k)" names, as they
    would in a real split.

    Returns:
        Map of track number to planned path, and the tracks for which
        no usable name exists
    """
    planned: Dict[int, Path] = {}
    failed: List[FailedTrack] = []
    for track in tracks:
        try:
            planned[track.number] = unique_output_path(
                output_dir,
                base_name,
                track.name,
                max_suffix,
                taken=set(planned.values()),
                track=track.number,
            )
        except TrackWriteError as e:
            failed.append(FailedTrack(track=track, error=str(e)))
    return planned, failed


class TrackWriter:
    """
    Writer for single-track files split out of a Format 1 file.

    Files are created exclusively, so an existing file (or directory)
    of the same name is never overwritten.

    Example:
        index = SMFReader.read("song.mid")
        writer = TrackWriter(index.header, "out/", base_name="song")
        with open("song.mid", "rb") as source:
            written = writer.write_all(source, index.tracks)
    """

    def __init__(
        self,
        header: MidiHeader,
        output_dir: Union[str, Path],
        base_name: str,
        copy_buffer_size: int = COPY_BUFFER_SIZE,
        max_copy_suffix: int = MAX_COPY_SUFFIX,
    ):
        self.header = header
        self.output_dir = Path(output_dir)
        self.base_name = base_name
        self.copy_buffer_size = copy_buffer_size
        self.max_copy_suffix = max_copy_suffix
        self._header_bytes = self.build_header(header.division)

    @staticmethod
    def build_header(division: bytes) -> bytes:
        """
        Build the 14-byte MThd chunk for a one-track Format 1 file.

        Args:
            division: Raw 2-byte division from the source header

        Returns:
            Header chunk bytes
        """
        if len(division) != 2:
            raise ValueError(f"Division must be 2 bytes, got {len(division)}")

        return (
            HEADER_MAGIC
            + u32_to_bytes(HEADER_LENGTH)
            + u16_to_bytes(SUPPORTED_FORMAT)
            + u16_to_bytes(1)
            + bytes(division)
        )

    def write_all(self, source: BinaryIO, tracks: List[TrackInfo]) -> List[WrittenTrack]:
        """
        Write every track to its own file, in order.

        Stops at the first failure. Use write_track directly to keep
        going after a failed track.
        """
        return [self.write_track(source, track) for track in tracks]

    def write_track(self, source: BinaryIO, track: TrackInfo) -> WrittenTrack:
        """
        Write one track to a new file in the output directory.

        Args:
            source: Seekable stream of the original file
            track: Track to copy

        Returns:
            WrittenTrack with the path used and bytes written

        Raises:
            TrackWriteError: If no file could be created or a write failed
        """
        out, path = self._create_output(track)

        try:
            with out:
                self._write(out, self._header_bytes, path, track)
                copied = self._copy_chunk(source, out, track, path)
        except OSError as e:
            self._discard(path)
            if isinstance(e, TrackWriteError):
                raise
            raise TrackWriteError(f"Error writing ({e})", path, track=track.number) from e

        bytes_written = len(self._header_bytes) + copied
        if copied < track.chunk_size:
            logger.warning(
                "Track %d: source ended early, copied %d of %d bytes to %s",
                track.number,
                copied,
                track.chunk_size,
                path,
            )
        else:
            logger.info("Track %d: wrote %s (%d bytes)", track.number, path, bytes_written)

        return WrittenTrack(track=track, path=path, bytes_written=bytes_written)

    def _create_output(self, track: TrackInfo) -> Tuple[BinaryIO, Path]:
        """Open the first free candidate path for exclusive writing."""
        for candidate in output_candidates(
            self.output_dir, self.base_name, track.name, self.max_copy_suffix
        ):
            try:
                return open(candidate, "xb"), candidate
            except FileExistsError:
                continue
            except (OSError, ValueError) as e:
                raise TrackWriteError(
                    f"Cannot create output file ({e})", candidate, track=track.number
                ) from e

        raise TrackWriteError(
            "No free output file name",
            self.output_dir / f"{self.base_name} - {safe_filename(track.name)}{OUTPUT_SUFFIX}",
            track=track.number,
        )

    def _copy_chunk(self, source: BinaryIO, out: BinaryIO, track: TrackInfo, path: Path) -> int:
        """
        Copy the track's MTrk chunk (header and data) from source to out.

        A short read ends the copy without error.

        Returns:
            Number of bytes copied
        """
        try:
            source.seek(track.chunk_offset)
        except (OSError, ValueError) as e:
            raise TrackWriteError(
                f"Cannot seek source to 0x{track.chunk_offset:X} ({e})", path, track=track.number
            ) from e

        remaining = track.chunk_size
        copied = 0
        while remaining > 0:
            try:
                block = source.read(min(remaining, self.copy_buffer_size))
            except OSError as e:
                raise TrackWriteError(
                    f"Error reading source ({e})", path, track=track.number
                ) from e
            if not block:
                break
            self._write(out, block, path, track)
            copied += len(block)
            remaining -= len(block)

        return copied

    @staticmethod
    def _write(out: BinaryIO, data: bytes, path: Path, track: TrackInfo) -> None:
        try:
            written = out.write(data)
        except OSError as e:
            raise TrackWriteError(f"Error writing ({e})", path, track=track.number) from e
        if written is not None and written != len(data):
            raise TrackWriteError(
                f"Short write ({written} of {len(data)} bytes)", path, track=track.number
            )

    @staticmethod
    def _discard(path: Path) -> None:
        """Remove a partially written output file."""
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove partial output %s: %s", path, e)
