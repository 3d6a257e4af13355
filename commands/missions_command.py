"""Missions command for the companion CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command, CommandError
from commands.session_context import SessionContext
from companion.data.loaders import load_contract
from companion.errors import CorruptSnapshotError
from companion.missions.contract_view import MISSIONS_NOT_LOADED, catalog_rows, contract_rows
from companion.utils.render import render_missions_table


class MissionsCommand(Command):
    """Show mission progress for a user."""

    def __init__(self, console: Console, session: SessionContext) -> None:
        super().__init__(console)
        self.session = session

    @property
    def name(self) -> str:
        return "/missions"

    @property
    def description(self) -> str:
        return "Show current missions and their progress."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[user_id]",
                "required": False,
                "default": "default user",
                "description": "Whose missions to show",
            },
            {
                "name": "--all",
                "required": False,
                "description": "List every catalog mission without progress",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        unknown = [part for part in parts[1:] if part.startswith("--") and part != "--all"]
        if unknown:
            raise CommandError(f"Unknown option: {unknown[0]}")

        if "--all" in parts:
            self._show_catalog()
            return

        user_id = self.session.resolve_user_id(parts)
        if not user_id:
            return

        details = load_contract(self.session.load_manager, self.session.store, user_id)
        if details is None:
            self.console.print(MISSIONS_NOT_LOADED, style="yellow")
            return

        try:
            rows = contract_rows(details, self.session.assets)
        except CorruptSnapshotError as err:
            self.console.print(f"Corrupt contract snapshot: {err}", style="red")
            return

        if not rows:
            self.console.print("No active missions.", style="yellow")
            return
        self.console.print(render_missions_table(rows))

    def _show_catalog(self) -> None:
        assets = self.session.assets
        if assets is None:
            self.console.print(MISSIONS_NOT_LOADED, style="yellow")
            return
        rows = catalog_rows(sorted(assets.missions), assets)
        self.console.print(render_missions_table(rows, title="Mission Catalog"))
