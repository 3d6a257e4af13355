"""Configuration for scoreboard and team display colors."""

from __future__ import annotations

import os
import re
from typing import Optional

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _resolve_color_env(env_var: str, default: str) -> str:
    """Resolve a hex color ("#rrggbb") from an environment variable.

    Args:
        env_var: Environment variable name
        default: Default color if not set or invalid

    Returns:
        Color string from environment or default
    """
    value = os.environ.get(env_var)
    if value is None:
        return default
    # Strip comments (text after a space-separated #) and whitespace
    value = value.split(" #", 1)[0].strip()
    return value if _HEX_COLOR.match(value) else default


class DisplayColors:
    """Container for display colors loaded from environment."""

    def __init__(self):
        """Load all colors from environment variables."""
        # The viewer's own row
        self.self_color = _resolve_color_env("COLOR_SELF", "#ebd33f")

        # Relative to the viewer's team
        self.ally = _resolve_color_env("COLOR_ALLY", "#4bb6a1")
        self.enemy = _resolve_color_env("COLOR_ENEMY", "#f05c57")

        # Absolute team colors, used when the viewer is not in the match
        self.team_blue = _resolve_color_env("COLOR_TEAM_BLUE", "#4bb6a1")
        self.team_red = _resolve_color_env("COLOR_TEAM_RED", "#f05c57")

    def team_color(self, team_id: str) -> Optional[str]:
        """Return the team's own color, or None for teams without one (e.g. deathmatch)."""
        if team_id == "Blue":
            return self.team_blue
        if team_id == "Red":
            return self.team_red
        return None


# Singleton instance - load once on import
_colors = DisplayColors()


def get_colors() -> DisplayColors:
    """Get the global display colors instance.

    Returns:
        DisplayColors instance with all configured colors
    """
    return _colors
