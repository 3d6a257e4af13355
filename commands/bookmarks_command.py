"""Bookmarks command for the companion CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command, CommandError
from commands.session_context import SessionContext
from companion.bookmarks.user_cell import UserCellBinding
from companion.data import local_data
from companion.data.loaders import load_user_records, refresh_auto_updating
from companion.utils.render import render_user_cells_table

USAGE = "Usage: /bookmarks [add <user_id> | remove <user_id> | refresh]"


class BookmarksCommand(Command):
    """List and edit bookmarked players."""

    def __init__(self, console: Console, session: SessionContext) -> None:
        super().__init__(console)
        self.session = session
        self._bindings: Dict[str, UserCellBinding] = {}

    @property
    def name(self) -> str:
        return "/bookmarks"

    @property
    def description(self) -> str:
        return "List bookmarked players, or add/remove/refresh bookmarks."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "add <user_id>",
                "required": False,
                "description": "Bookmark a player",
            },
            {
                "name": "remove <user_id>",
                "required": False,
                "description": "Remove a bookmark",
            },
            {
                "name": "refresh",
                "required": False,
                "description": "Update ranks of all bookmarked players",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        action = parts[1] if len(parts) > 1 else "list"

        if action in ("add", "remove"):
            if len(parts) != 3:
                raise CommandError(USAGE)
            self._edit(action, parts[2])
        elif action == "refresh":
            self._sync_bindings()
            refreshed = refresh_auto_updating(self.session.load_manager, self.session.store)
            self.console.print(f"Refreshed {len(refreshed)} ranks.", style="green")
        elif action == "list":
            pass
        else:
            raise CommandError(USAGE)

        self._show()

    def _edit(self, action: str, user_id: str) -> None:
        bookmarks = self.session.bookmarks
        try:
            changed = bookmarks.add(user_id) if action == "add" else bookmarks.remove(user_id)
        except IOError as err:
            self.console.print(f"Warning: Could not save bookmarks: {err}", style="yellow")
            return

        if action == "add":
            if changed:
                self.console.print(f"Bookmarked {user_id}.", style="green")
            else:
                self.console.print(f"{user_id} is already bookmarked.", style="yellow")
        elif changed:
            self.console.print(f"Removed bookmark {user_id}.", style="green")
        else:
            self.console.print(f"{user_id} is not bookmarked.", style="yellow")

    def _sync_bindings(self) -> None:
        """Keep one live binding per bookmarked user; drop bindings of removed ones."""
        wanted = set(self.session.bookmarks.user_ids)
        for user_id in list(self._bindings):
            if user_id not in wanted:
                self._bindings.pop(user_id).close()

        store = self.session.store
        for user_id in self.session.bookmarks:
            if user_id in self._bindings:
                continue
            if store.get(local_data.USER, user_id) is None:
                load_user_records(self.session.load_manager, store, user_id)
            self._bindings[user_id] = UserCellBinding(store, user_id, self.session.assets)

    def _show(self) -> None:
        self._sync_bindings()
        if not self._bindings:
            self.console.print("No bookmarks yet. Use /bookmarks add <user_id>.", style="yellow")
            return
        cells = [self._bindings[user_id].cell for user_id in self.session.bookmarks]
        self.console.print(render_user_cells_table(cells))

    def close(self) -> None:
        for binding in self._bindings.values():
            binding.close()
        self._bindings.clear()
