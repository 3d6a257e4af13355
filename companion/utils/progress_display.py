"""Live display for multi-step loads (e.g. refreshing every player's rank)."""

from __future__ import annotations

from typing import List

from rich.console import Console, Group
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text


class ProgressDisplay:
    """Spinner for the current step above a growing list of finished steps."""

    def __init__(self, console: Console):
        self.console = console
        self.completed_lines: List[str] = []
        self.current_status: str | None = None
        self.live: Live | None = None

    def start(self) -> None:
        self.live = Live(
            self._render(), console=self.console, refresh_per_second=10, transient=False
        )
        self.live.start()

    def stop(self) -> None:
        if self.live:
            self.live.stop()
            self.live = None

    def update_status(self, message: str) -> None:
        """Show the step currently running next to the spinner."""
        self.current_status = message
        self._refresh()

    def complete_step(self, message: str) -> None:
        """Persist a finished step and clear the spinner."""
        self.completed_lines.append(f"[green]✓[/green] {message}")
        self.current_status = None
        self._refresh()

    def fail_step(self, message: str) -> None:
        """Persist a failed step and clear the spinner."""
        self.completed_lines.append(f"[red]✗[/red] {message}")
        self.current_status = None
        self._refresh()

    def add_line(self, message: str) -> None:
        """Persist a raw markup line (retry warnings, load errors)."""
        self.completed_lines.append(message)
        self._refresh()

    def _refresh(self) -> None:
        if self.live:
            self.live.update(self._render())

    def _render(self):
        elements = [Text.from_markup(line) for line in self.completed_lines]
        if self.current_status:
            elements.append(Spinner("dots", text=Text.from_markup(self.current_status)))
        return Group(*elements) if elements else Text("")

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
