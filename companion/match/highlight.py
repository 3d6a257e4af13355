"""Party highlighting derived from the match view's player highlight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from companion.match.match_view import MatchViewData


@dataclass
class PlayerHighlight:
    """Party of the player the user tapped on.

    The highlighted player itself lives in MatchViewData; only the party is
    derived here. A row's icon fades unless its player is the highlighted
    one, while its party label fades unless its party is the highlighted
    party.
    """

    highlighted_party: Optional[str] = None

    @classmethod
    def for_view(cls, data: MatchViewData) -> "PlayerHighlight":
        if data.highlighted_player is None:
            return cls()
        player = data.players.get(data.highlighted_player)
        return cls(player.party_id if player is not None else None)

    def should_fade_party(self, party_id: str) -> bool:
        if self.highlighted_party is None:
            return False
        return party_id != self.highlighted_party

    def is_highlighting_party(self, party_id: str) -> Optional[bool]:
        """None while nothing is highlighted, else whether this party is."""
        if self.highlighted_party is None:
            return None
        return party_id == self.highlighted_party
