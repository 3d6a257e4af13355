"""Scoreboard rows for a match."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from companion.data.assets import AssetCollection
from companion.data.models import CareerSummary, Player
from companion.match.highlight import PlayerHighlight
from companion.match.match_view import MatchViewData
from companion.match.ranking import party_label

# Name weights keyed by PlayerHighlight.is_highlighting_party()
NAME_WEIGHTS = {True: "semibold", False: "regular", None: "medium"}


@dataclass
class RankInfo:
    """Competitive rank as displayed next to a player."""

    tier: int
    tier_name: str
    ranked_rating: int
    is_faded: bool  # unranked players are shown faded


@dataclass
class ScoreboardRow:
    """Everything needed to draw one scoreboard row."""

    position: int
    player: Player
    display_name: str
    score: int
    kda: str
    color: Optional[str]
    icon_faded: bool
    name_weight: str
    links_to_profile: bool
    party_label: Optional[str] = None
    party_faded: bool = False
    party_emphasized: bool = False
    rank: Optional[RankInfo] = None


@dataclass
class Scoreboard:
    rows: List[ScoreboardRow] = field(default_factory=list)
    show_parties: bool = False


def format_kda(player: Player) -> str:
    stats = player.stats
    return f"{stats.kills} / {stats.deaths} / {stats.assists}"


def rank_info(
    summary: Optional[CareerSummary], assets: Optional[AssetCollection] = None
) -> Optional[RankInfo]:
    """Build rank info from a cached career summary (None if not loaded yet)."""
    if summary is None:
        return None
    catalog = assets or AssetCollection()
    return RankInfo(
        tier=summary.competitive_tier,
        tier_name=catalog.tier_name(summary.competitive_tier),
        ranked_rating=summary.ranked_rating,
        is_faded=summary.competitive_tier <= 0,
    )


def build_scoreboard(
    data: MatchViewData,
    summaries: Optional[Dict[str, CareerSummary]] = None,
    assets: Optional[AssetCollection] = None,
) -> Scoreboard:
    """Project a match into ordered scoreboard rows.

    Args:
        data: Match view data of the current session; its highlighted player
            drives icon fading and, through their party, the party column
        summaries: Career summaries by player ID, as far as they are cached
        assets: Asset catalog for tier names

    Returns:
        Scoreboard with rows sorted by score and the party column flag
    """
    summaries = summaries or {}
    highlight = PlayerHighlight.for_view(data)
    ranked = data.ranked_players
    parties = data.parties
    show_parties = bool(parties)

    rows: List[ScoreboardRow] = []
    for position, player in enumerate(ranked, start=1):
        row = ScoreboardRow(
            position=position,
            player=player,
            display_name=player.game_name,
            score=player.stats.score,
            kda=format_kda(player),
            color=data.relative_color(player),
            icon_faded=data.should_fade(player.id),
            name_weight=NAME_WEIGHTS[highlight.is_highlighting_party(player.party_id)],
            links_to_profile=not data.is_myself(player.id),
            rank=rank_info(summaries.get(player.id), assets),
        )
        if show_parties:
            row.party_label = party_label(player.party_id, parties)
            row.party_faded = highlight.should_fade_party(player.party_id)
            row.party_emphasized = highlight.is_highlighting_party(player.party_id) is True
        rows.append(row)

    return Scoreboard(rows=rows, show_parties=show_parties)
