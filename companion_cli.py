"""Interactive entry point for the companion CLI."""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List, Sequence

from rich.console import Console

from commands import Command, CommandError
from commands.bookmarks_command import BookmarksCommand
from commands.exit_command import ExitCommand
from commands.help_command import HelpCommand
from commands.missions_command import MissionsCommand
from commands.ranks_command import RanksCommand
from commands.scoreboard_command import ScoreboardCommand
from commands.session_context import SessionContext
from commands.set_user_command import SetUserCommand
from companion.config import settings
from companion.utils.cli_common import CommandRegistry, prompt_with_completion

# Configure logging - can be controlled via LOG_LEVEL environment variable
log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def build_registry(
    console: Console, session: SessionContext
) -> tuple[CommandRegistry, Dict[str, Sequence[str]], List[Command]]:
    """Create every command and register it (and its aliases)."""
    registry = CommandRegistry()
    alias_map: Dict[str, Sequence[str]] = {}
    commands: List[Command] = [
        ScoreboardCommand(console, session),
        RanksCommand(console, session),
        MissionsCommand(console, session),
        BookmarksCommand(console, session),
        SetUserCommand(console, session),
        ExitCommand(console),
    ]
    commands.append(HelpCommand(console, registry, alias_map))

    for command in commands:
        registry.register(command.name, command.execute, command.description)
        if command.aliases:
            alias_map[command.name] = command.aliases
        for alias in command.aliases:
            registry.register(alias, command.execute, command.description)
    return registry, alias_map, commands


def dispatch(registry: CommandRegistry, console: Console, line: str) -> None:
    """Run one command line, reporting usage errors instead of raising."""
    name = line.split()[0]
    ctx = registry.get(name)
    if ctx is None:
        console.print(f"Unknown command: {name}. Type /help.", style="yellow")
        return
    try:
        ctx.handler(line)
    except CommandError as err:
        console.print(str(err), style="yellow")


def main() -> int:
    console = Console()
    session = SessionContext(console)
    registry, _, commands = build_registry(console, session)

    console.print(f"[bold cyan]{settings.app_name}[/bold cyan] - type /help for commands")
    try:
        while True:
            try:
                line = prompt_with_completion(registry.names())
            except (EOFError, KeyboardInterrupt):
                break
            if not line:
                continue
            if not line.startswith("/"):
                line = f"/{line}"
            dispatch(registry, console, line)
            if line.split()[0] in EXIT_COMMANDS:
                break
    finally:
        for command in commands:
            if isinstance(command, BookmarksCommand):
                command.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
