"""Rank refresh command for the companion CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command, CommandError
from commands.session_context import SessionContext
from companion.data import local_data
from companion.data.loaders import load_match
from companion.utils import api_retry
from companion.utils.progress_display import ProgressDisplay


class RanksCommand(Command):
    """Fetch career summaries for everybody in a match."""

    def __init__(self, console: Console, session: SessionContext) -> None:
        super().__init__(console)
        self.session = session

    @property
    def name(self) -> str:
        return "/ranks"

    @property
    def description(self) -> str:
        return "Update the ranks of every player in a match."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "<match_id>",
                "required": True,
                "description": "Match whose players to update",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        if len(parts) != 2:
            raise CommandError("Usage: /ranks <match_id>")
        match_id = parts[1]

        manager = self.session.load_manager
        store = self.session.store
        details = load_match(manager, store, match_id)
        if details is None:
            return

        updated = 0
        with ProgressDisplay(self.console) as display:
            api_retry.set_progress_display(display)
            try:
                for player in details.players:
                    display.update_status(f"Updating {player.game_name}...")
                    summary = manager.load(
                        lambda client, player_id=player.id: client.get_career_summary(player_id),
                        on_success=lambda value, player_id=player.id: store.store(
                            local_data.CAREER_SUMMARY, player_id, value
                        ),
                        description=f"rank of {player.game_name}",
                    )
                    if summary is None:
                        display.fail_step(player.game_name)
                    else:
                        display.complete_step(player.game_name)
                        updated += 1
            finally:
                api_retry.set_progress_display(None)

        self.console.print(
            f"Updated {updated}/{len(details.players)} ranks. Run /scoreboard {match_id} to view.",
            style="green" if updated == len(details.players) else "yellow",
        )
