"""View data for a match, shared by the match detail views."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from companion.data.models import MatchDetails, Player
from companion.errors import CorruptSnapshotError
from companion.match.ranking import rank_players, recognized_parties
from companion.utils.colors import DisplayColors, get_colors

logger = logging.getLogger(__name__)


class MatchViewData:
    """A match as seen by one viewer during one view session.

    Holds the viewer's own player (if they played), a player lookup table
    and the currently highlighted player. The highlight is the only mutable
    state and only changes through switch_highlight().
    """

    def __init__(
        self,
        details: MatchDetails,
        player_id: Optional[str] = None,
        colors: Optional[DisplayColors] = None,
    ) -> None:
        self.details = details
        self.colors = colors or get_colors()
        self.highlighted_player: Optional[str] = None

        candidates = [player for player in details.players if player.id == player_id]
        if len(candidates) > 1:
            raise CorruptSnapshotError(
                f"Match {details.id} lists player {player_id} {len(candidates)} times"
            )
        self.myself: Optional[Player] = candidates[0] if candidates else None

        self.players: Dict[str, Player] = {}
        for player in details.players:
            if player.id in self.players:
                raise CorruptSnapshotError(
                    f"Match {details.id} lists player {player.id} more than once"
                )
            self.players[player.id] = player

        logger.debug(
            "Match view for %s: %d players, viewer %s",
            details.id,
            len(self.players),
            "present" if self.myself else "absent",
        )

    @property
    def ranked_players(self) -> List[Player]:
        return rank_players(self.details.players)

    @property
    def parties(self) -> List[str]:
        """Party IDs shown in the party column (empty hides the column)."""
        return recognized_parties(self.ranked_players)

    @property
    def is_highlighting(self) -> bool:
        return self.highlighted_player is not None

    def switch_highlight(self, player_id: str) -> None:
        # switch highlight to this player or toggle it off
        if self.highlighted_player == player_id:
            self.highlighted_player = None
        else:
            self.highlighted_player = player_id

    def should_fade(self, player_id: str) -> bool:
        if self.highlighted_player is None:
            return False
        return player_id != self.highlighted_player

    def is_myself(self, player_id: str) -> bool:
        return self.myself is not None and self.myself.id == player_id

    def relative_color(self, other: Union[Player, str]) -> Optional[str]:
        """Color of a player or team relative to the viewer.

        Precedence: the viewer themself, then ally/enemy relative to the
        viewer's team, then the team's own color when the viewer is unknown,
        then None.

        Args:
            other: A Player, or a team ID

        Returns:
            Hex color string, or None if no color applies
        """
        if isinstance(other, Player):
            if self.is_myself(other.id):
                return self.colors.self_color
            return self._team_relative_color(other.team_id) or self.colors.ally
        return self._team_relative_color(other)

    def _team_relative_color(self, team_id: str) -> Optional[str]:
        if self.myself is not None:
            return self.colors.ally if team_id == self.myself.team_id else self.colors.enemy
        return self.colors.team_color(team_id)
