"""
midisplit - Split Format 1 MIDI files into one file per track.

A small CLI for breaking multi-track Standard MIDI Files apart.
"""

import typer
from rich.console import Console

from midisplit import __version__
from cli.commands.split import split
from cli.commands.tracks import tracks

console = Console()

# Main app
app = typer.Typer(
    name="midisplit",
    help="Split Format 1 MIDI files into one file per track.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="split")(split)
app.command(name="tracks")(tracks)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]midisplit[/bold] version {__version__}")
    console.print("[dim]Format 1 MIDI track splitter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    midisplit - Split Format 1 MIDI files into one file per track.

    [bold]Quick Start:[/bold]

        midisplit tracks song.mid          # List tracks and names
        midisplit split song.mid out/      # Write one file per track
        midisplit split                    # Ask for the paths

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
