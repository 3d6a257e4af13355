"""Scoreboard command for the companion CLI."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rich.console import Console

from commands import Command, CommandError
from commands.session_context import SessionContext
from companion.data.loaders import cached_summaries, load_match
from companion.errors import CorruptSnapshotError
from companion.match.match_view import MatchViewData
from companion.match.scoreboard import build_scoreboard
from companion.utils.cli_common import ask
from companion.utils.render import render_scoreboard_table, render_suggestions_table

MAX_MATCH_CHOICES = 20


def parse_scoreboard_args(command: str) -> Dict[str, object]:
    """Parse arguments for the /scoreboard command."""
    parts = command.split()
    args: Dict[str, object] = {"match_id": None, "user": None, "highlights": []}
    highlights: List[str] = []

    i = 1
    while i < len(parts):
        token = parts[i]
        if token in ("--user", "--highlight"):
            if i + 1 >= len(parts):
                raise CommandError(f"{token} requires a value")
            if token == "--user":
                args["user"] = parts[i + 1]
            else:
                highlights.append(parts[i + 1])
            i += 2
        elif token.startswith("--"):
            raise CommandError(f"Unknown option: {token}")
        elif args["match_id"] is None:
            args["match_id"] = token
            i += 1
        else:
            raise CommandError(f"Unexpected argument: {token}")

    args["highlights"] = highlights
    return args


class ScoreboardCommand(Command):
    """Show a match scoreboard relative to the viewer."""

    def __init__(self, console: Console, session: SessionContext) -> None:
        super().__init__(console)
        self.session = session

    @property
    def name(self) -> str:
        return "/scoreboard"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/sb",)

    @property
    def description(self) -> str:
        return "Show a match scoreboard, colored relative to you."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[match_id]",
                "required": False,
                "default": "interactive selection",
                "description": "Cached match to show",
            },
            {
                "name": "--user <user_id>",
                "required": False,
                "default": "default user",
                "description": "Whose point of view to color the scoreboard from",
            },
            {
                "name": "--highlight <player_id>",
                "required": False,
                "description": "Toggle highlight on a player (repeatable)",
            },
        ]

    def _choose_match(self) -> Optional[str]:
        match_ids = self.session.load_manager.client.list_match_ids()[:MAX_MATCH_CHOICES]
        if not match_ids:
            self.console.print("No cached matches found.", style="yellow")
            return None

        table = render_suggestions_table(
            [{"full_name": match_id} for match_id in match_ids], title="Select a Match"
        )
        self.console.print(table)
        selection = ask(
            "Choose match by number",
            choices=[str(i) for i in range(1, len(match_ids) + 1)],
            show_choices=False,
        )
        return match_ids[int(selection) - 1]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        args = parse_scoreboard_args(command)

        match_id = args["match_id"] or self._choose_match()
        if not match_id:
            return

        details = load_match(self.session.load_manager, self.session.store, match_id)
        if details is None:
            return

        viewer_id = args["user"] or self.session.get_default_user_id()
        try:
            data = MatchViewData(details, viewer_id)
        except CorruptSnapshotError as err:
            self.console.print(f"Corrupt match snapshot: {err}", style="red")
            return

        for player_id in args["highlights"]:
            player = data.players.get(player_id)
            if player is None:
                self.console.print(f"Player {player_id} is not in this match.", style="yellow")
                continue
            data.switch_highlight(player.id)

        scoreboard = build_scoreboard(
            data,
            summaries=cached_summaries(self.session.store, data.players.keys()),
            assets=self.session.assets,
        )
        self.console.print(render_scoreboard_table(scoreboard, title=f"Match {details.id}"))
        if data.myself is None and viewer_id:
            self.console.print(
                f"[dim]{viewer_id} did not play in this match; showing team colors.[/dim]"
            )
