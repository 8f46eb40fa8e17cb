"""
Path providers for the split command.

The splitter itself only takes two paths. Where they come from is
decided here: command line arguments, or an interactive prompt for
whichever one is missing.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt


class PathProvider:
    """Supplies the input file and output directory for a split."""

    def input_path(self) -> Optional[Path]:
        raise NotImplementedError

    def output_dir(self) -> Optional[Path]:
        raise NotImplementedError


class StaticPathProvider(PathProvider):
    """Paths given up front."""

    def __init__(self, input_path: Optional[Path], output_dir: Optional[Path]):
        self._input_path = input_path
        self._output_dir = output_dir

    def input_path(self) -> Optional[Path]:
        return self._input_path

    def output_dir(self) -> Optional[Path]:
        return self._output_dir


class PromptPathProvider(StaticPathProvider):
    """
    Asks on the console for any path not given up front.

    An empty answer yields None.
    """

    def __init__(
        self,
        input_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(input_path, output_dir)
        self.console = console

    def input_path(self) -> Optional[Path]:
        if self._input_path is None:
            self._input_path = self._ask("Enter MIDI file path")
        return self._input_path

    def output_dir(self) -> Optional[Path]:
        if self._output_dir is None:
            self._output_dir = self._ask("Enter output directory")
        return self._output_dir

    def _ask(self, prompt: str) -> Optional[Path]:
        answer = Prompt.ask(prompt, console=self.console, default="", show_default=False)
        # Paths dragged into a terminal often arrive quoted
        answer = answer.strip().strip('"').strip("'")
        return Path(answer) if answer else None
