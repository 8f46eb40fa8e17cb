"""
Tracks command - list the tracks of a MIDI file without splitting it.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from midisplit.errors import MidiSplitError
from midisplit.formats.smf.reader import SMFReader
from midisplit.formats.smf.writer import plan_output_paths
from cli.display.formatters import hex_with_ascii
from cli.display.tables import display_header, display_track_table

console = Console()
app = typer.Typer()

HEX_PREVIEW_BYTES = 48


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="MIDI file to inspect"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Show the file names a split into this directory would use"
    ),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show the first bytes of each track"),
) -> None:
    """
    Show the header and track list of a Format 1 MIDI file.

    Examples:

        midisplit tracks song.mid

        midisplit tracks song.mid --output out/ --hex
    """
    try:
        index = SMFReader.read(file)
    except MidiSplitError as e:
        console.print(f"[red]Error: {type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    display_header(index)

    planned = None
    if output_dir is not None:
        paths, unplanned = plan_output_paths(output_dir, file.stem, index.tracks)
        planned = {number: path.name for number, path in paths.items()}
        for failed in unplanned:
            planned[failed.track.number] = "(no usable file name)"

    display_track_table(index, planned)

    if show_hex:
        with open(file, "rb") as f:
            for track in index.tracks:
                f.seek(track.data_offset)
                preview = f.read(min(track.size, HEX_PREVIEW_BYTES))
                console.print(
                    Panel(
                        escape(hex_with_ascii(preview, offset=track.data_offset)),
                        title=f"[bold]Track {track.number}: {escape(track.name)}[/bold]",
                        border_style="dim",
                        expand=False,
                    )
                )


if __name__ == "__main__":
    app()
