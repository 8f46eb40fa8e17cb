"""
Rich table displays for MIDI track information.
"""

from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from midisplit.models.smf import MidiFileIndex, SplitResult
from cli.display.formatters import format_division, format_size

console = Console()


def display_header(index: MidiFileIndex) -> None:
    """Display the file header panel."""
    content = f"""[bold]File:[/bold] {escape(str(index.path or "-"))}
[bold]Format:[/bold] {index.header.format}
[bold]Tracks:[/bold] {index.header.track_count}
[bold]Division:[/bold] {format_division(index.header)} (raw: {index.header.division.hex(" ").upper()})
[bold]File Size:[/bold] {format_size(index.file_size)}"""

    console.print(
        Panel(
            content,
            title="[bold blue]MIDI File Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_track_table(index: MidiFileIndex, planned: Optional[Dict[int, str]] = None) -> None:
    """
    Display all tracks in a table.

    Args:
        index: Parsed file index
        planned: Optional map of track number to output file name
    """
    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Offset", style="dim", justify="right")
    if planned is not None:
        table.add_column("Output", style="green")

    for track in index.tracks:
        row = [
            str(track.number),
            escape(track.name),
            format_size(track.size),
            f"0x{track.chunk_offset:06X}",
        ]
        if planned is not None:
            row.append(escape(planned.get(track.number, "")))
        table.add_row(*row)

    console.print(table)


def display_split_result(result: SplitResult) -> None:
    """Display the summary panel after a split."""
    if result.dry_run:
        status = "[yellow]DRY RUN[/yellow]"
        border = "yellow"
    elif result.ok:
        status = "[bold green]OK[/bold green]"
        border = "green"
    else:
        status = "[bold red]FAILED[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]Status:[/bold] {status}\n"
            f"Tracks found: {result.tracks_found}  "
            f"Files written: [green]{result.files_written}[/green]\n"
            f"Write failures: [red]{len(result.write_failures)}[/red]  "
            f"Verify failures: [red]{len(result.verify_failures)}[/red]",
            title="[bold]Split Result[/bold]",
            border_style=border,
            expand=False,
        )
    )

    if result.failed:
        table = Table(title="Failures", box=box.ROUNDED, show_header=True, header_style="bold red")
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Stage", style="yellow")
        table.add_column("Error")
        for failed in result.failed:
            table.add_row(
                str(failed.track.number),
                escape(failed.track.name),
                failed.stage,
                escape(failed.error),
            )
        console.print(table)
