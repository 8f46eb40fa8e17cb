"""
Logging setup for the CLI.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route library log records through rich; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, markup=False)],
        force=True,
    )
