"""Scoreboard ordering and party grouping."""

from __future__ import annotations

import string
from collections import Counter
from typing import Iterable, List, Sequence

from companion.data.models import Player

PARTY_LETTERS = string.ascii_uppercase
UNKNOWN_PARTY_LABEL = "–"


def rank_players(players: Iterable[Player]) -> List[Player]:
    """Order players by score, best first.

    The sort is stable: players with equal scores keep their input order,
    which is itself meaningful (e.g. team order).
    """
    return sorted(players, key=lambda player: player.stats.score, reverse=True)


def recognized_parties(ranked: Sequence[Player]) -> List[str]:
    """Return the party IDs that get letter labels, in first-seen order.

    Order follows the ranked sequence, not party ID order. If no party has
    more than one member there is no grouping worth showing and the result
    is empty, which hides the party column altogether.
    """
    sizes = Counter(player.party_id for player in ranked)
    if not any(count > 1 for count in sizes.values()):
        return []

    parties: List[str] = []
    for player in ranked:
        if player.party_id not in parties:
            parties.append(player.party_id)
    return parties


def party_label(party_id: str, parties: Sequence[str]) -> str:
    """Return "Party A", "Party B", ... or "–" for unrecognized parties."""
    if party_id not in parties:
        return UNKNOWN_PARTY_LABEL
    index = list(parties).index(party_id)
    if index >= len(PARTY_LETTERS):
        return UNKNOWN_PARTY_LABEL
    return f"Party {PARTY_LETTERS[index]}"
