"""
Split command - write each track of a Format 1 MIDI file to its own file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from midisplit.config import SplitOptions
from midisplit.errors import MidiSplitError
from midisplit.models.smf import FailedTrack, MidiFileIndex, SplitResult, TrackInfo, WrittenTrack
from midisplit.splitter import SplitReporter, split_midi_file
from cli.display.formatters import format_division
from cli.display.tables import display_split_result
from cli.log import setup_logging
from cli.prompts import PathProvider, PromptPathProvider

console = Console()
app = typer.Typer()


class ConsoleReporter(SplitReporter):
    """Prints split progress to the console."""

    def __init__(self, console: Console):
        self.console = console

    def on_header(self, index: MidiFileIndex) -> None:
        self.console.print(f"Reading MIDI file: [cyan]{escape(str(index.path))}[/cyan]")
        self.console.print(
            f"Found [bold]{index.header.track_count}[/bold] tracks to split "
            f"[dim]({format_division(index.header)})[/dim]"
        )

    def on_track_found(self, track: TrackInfo) -> None:
        label = "Primary Track" if track.is_tempo_track else f"Track {track.number}"
        self.console.print(f"  {label}: [cyan]{escape(track.name)}[/cyan] ({track.size} bytes)")

    def on_track_written(self, written: WrittenTrack) -> None:
        note = "" if written.complete else " [yellow](source ended early)[/yellow]"
        self.console.print(f"  [green]->[/green] Created: {escape(written.path.name)}{note}")

    def on_track_failed(self, failed: FailedTrack) -> None:
        label = "verify failed" if failed.stage == "verify" else "failed"
        self.console.print(
            f"  [red]x[/red] Track {failed.track.number} {label}: {escape(failed.error)}"
        )

    def on_finished(self, result: SplitResult) -> None:
        self.console.print()
        display_split_result(result)


def run_split(provider: PathProvider, options: SplitOptions) -> SplitResult:
    """
    Resolve paths from the provider and split.

    Raises:
        typer.Exit: If a path is missing or the split fails fatally
    """
    input_path = provider.input_path()
    if input_path is None:
        console.print("No file selected. Exiting.")
        raise typer.Exit(1)

    output_dir = provider.output_dir()
    if output_dir is None:
        console.print("No output folder selected. Exiting.")
        raise typer.Exit(1)

    try:
        return split_midi_file(input_path, output_dir, options, ConsoleReporter(console))
    except MidiSplitError as e:
        console.print(f"[red]Error: {type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def split(
    source: Optional[Path] = typer.Argument(None, help="Format 1 MIDI file to split"),
    output_dir: Optional[Path] = typer.Argument(None, help="Directory for the split files"),
    verify: bool = typer.Option(False, "--verify", help="Re-read every output file with mido"),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", help="Stop at the first track that cannot be written"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="List tracks and output names without writing"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Split a Format 1 MIDI file into one single-track file per track.

    Output files are named "<input name> - <track name>.mid". Existing
    files are never overwritten; " (Copy 1)", " (Copy 2)", ... is
    appended instead.

    Paths that are not given on the command line are asked for.

    Examples:

        midisplit split song.mid out/

        midisplit split song.mid out/ --verify

        midisplit split
    """
    setup_logging(verbose, console)

    options = SplitOptions(verify=verify, fail_fast=fail_fast, dry_run=dry_run)
    provider = PromptPathProvider(source, output_dir, console=console)

    result = run_split(provider, options)

    if not result.ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
