"""
Split a Format 1 MIDI file into one file per track.

Sequences discovery (SMFReader) and writing (TrackWriter) over a single
source stream, and reports progress through a SplitReporter.

Example:
    from midisplit import split_midi_file

    result = split_midi_file("song.mid", "out/")
    print(f"{result.files_written} of {result.tracks_found} tracks written")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from midisplit.config import SplitOptions
from midisplit.errors import SourceFileError, TrackWriteError
from midisplit.formats.smf.reader import SMFReader
from midisplit.formats.smf.writer import TrackWriter, plan_output_paths
from midisplit.models.smf import (
    FailedTrack,
    MidiFileIndex,
    SplitResult,
    TrackInfo,
    WrittenTrack,
)
from midisplit.verify import verify_split_file

logger = logging.getLogger(__name__)


class SplitReporter:
    """
    Receives progress events from split_midi_file.

    The default implementation logs; subclass it to show progress
    elsewhere.
    """

    def on_header(self, index: MidiFileIndex) -> None:
        logger.info("Found %d tracks to split", index.header.track_count)

    def on_track_found(self, track: TrackInfo) -> None:
        logger.info("Track %d: %s (%d bytes)", track.number, track.name, track.size)

    def on_track_written(self, written: WrittenTrack) -> None:
        logger.info("Created: %s", written.path.name)

    def on_track_failed(self, failed: FailedTrack) -> None:
        logger.warning("Track %d %s failed: %s", failed.track.number, failed.stage, failed.error)

    def on_finished(self, result: SplitResult) -> None:
        logger.info("Split %d of %d tracks", result.files_written, result.tracks_found)


def prepare_output_dir(output_dir: Union[str, Path]) -> Path:
    """
    Make sure the output directory exists, creating parents as needed.

    Raises:
        SourceFileError: If the path exists but is not a directory, or
            cannot be created
    """
    output_dir = Path(output_dir)

    if output_dir.exists() and not output_dir.is_dir():
        raise SourceFileError("Output path is not a directory", output_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SourceFileError(f"Cannot create output directory ({e.strerror})", output_dir) from e

    return output_dir


def split_midi_file(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    options: Optional[SplitOptions] = None,
    reporter: Optional[SplitReporter] = None,
) -> SplitResult:
    """
    Split a Format 1 MIDI file into single-track Format 1 files.

    Every track is indexed before anything is written, so a parse error
    leaves the output directory untouched. Output files are named
    "{input stem} - {track name}.mid".

    Args:
        input_path: MIDI file to split
        output_dir: Directory for the output files (created if missing)
        options: Split settings (defaults if None)
        reporter: Progress receiver (logging if None)

    Returns:
        SplitResult listing written and failed tracks

    Raises:
        SourceFileError: Input missing/unreadable, or output dir unusable
        InvalidFormatError, UnsupportedFormatError, TruncatedFileError:
            The input is not a well-formed Format 1 file
        TrackWriteError: A track failed to write and options.fail_fast is set
    """
    options = options or SplitOptions()
    reporter = reporter or SplitReporter()
    input_path = Path(input_path)

    if not input_path.is_file():
        raise SourceFileError("Input file does not exist", input_path)

    if not options.dry_run:
        output_dir = prepare_output_dir(output_dir)
    else:
        output_dir = Path(output_dir)

    logger.debug("Reading MIDI file: %s", input_path)

    try:
        source = open(input_path, "rb")
    except OSError as e:
        raise SourceFileError(f"Cannot open file ({e.strerror})", input_path) from e

    with source:
        index = SMFReader(name_search_limit=options.name_search_limit).parse_stream(source)
        index.path = input_path

        reporter.on_header(index)
        for track in index.tracks:
            reporter.on_track_found(track)

        result = SplitResult(index=index, dry_run=options.dry_run)

        if options.dry_run:
            planned, unplanned = plan_output_paths(
                output_dir, input_path.stem, index.tracks, options.max_copy_suffix
            )
            for number, path in planned.items():
                logger.info("Would write track %d to %s", number, path)
            for failed in unplanned:
                result.failed.append(failed)
                reporter.on_track_failed(failed)
            reporter.on_finished(result)
            return result

        writer = TrackWriter(
            index.header,
            output_dir,
            base_name=input_path.stem,
            copy_buffer_size=options.copy_buffer_size,
            max_copy_suffix=options.max_copy_suffix,
        )

        for track in index.tracks:
            try:
                written = writer.write_track(source, track)
            except TrackWriteError as e:
                failed = FailedTrack(track=track, error=str(e))
                result.failed.append(failed)
                reporter.on_track_failed(failed)
                if options.fail_fast:
                    raise
                continue

            result.written.append(written)
            reporter.on_track_written(written)

            if options.verify:
                problems = verify_split_file(written.path, index.header.ticks_per_beat)
                if problems:
                    failed = FailedTrack(
                        track=track,
                        error=f"{written.path.name}: {'; '.join(problems)}",
                        stage="verify",
                    )
                    result.failed.append(failed)
                    reporter.on_track_failed(failed)

    reporter.on_finished(result)
    return result
