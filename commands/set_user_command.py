"""Set user command for the companion CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command
from commands.session_context import SessionContext
from companion.data import local_data
from companion.utils.cli_common import ask
from companion.utils.render import render_suggestions_table


class SetUserCommand(Command):
    """Set or update the default viewer."""

    def __init__(self, console: Console, session: SessionContext) -> None:
        super().__init__(console)
        self.session = session

    @property
    def name(self) -> str:
        return "/set-user"

    @property
    def description(self) -> str:
        return "Set the player whose point of view the other commands use."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[user_id]",
                "required": False,
                "default": "pick from bookmarks",
                "description": "Your player ID",
            },
        ]

    def _select_bookmark(self) -> str | None:
        user_ids = self.session.bookmarks.user_ids
        if not user_ids:
            self.console.print(
                "No bookmarks to choose from; pass a user ID instead.", style="yellow"
            )
            return None

        options = []
        for user_id in user_ids:
            user = self.session.store.get(local_data.USER, user_id)
            label = f"{user.game_name} #{user.tag_line}" if user else user_id
            options.append({"full_name": label})

        table = render_suggestions_table(options, title="Select a Player")
        self.console.print(table)
        selection = ask(
            "Choose player by number",
            choices=[str(i) for i in range(1, len(user_ids) + 1)],
            show_choices=False,
        )
        return user_ids[int(selection) - 1]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        user_id = parts[1] if len(parts) > 1 else self._select_bookmark()
        if not user_id:
            self.console.print("No user selected; default unchanged.", style="yellow")
            return

        self.session.set_default_user_id(user_id)
        self.console.print(f"Default user set to {user_id}.", style="green")
