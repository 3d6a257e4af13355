"""Exit command for the companion CLI."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console

from commands import Command


class ExitCommand(Command):
    """Leave the companion; the main loop stops after this command."""

    def __init__(self, console: Console) -> None:
        super().__init__(console)

    @property
    def name(self) -> str:
        return "/exit"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/quit",)

    @property
    def description(self) -> str:
        return "Exit the companion."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        self.console.print("Bye!", style="cyan")
