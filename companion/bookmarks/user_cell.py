"""User cells shown in the bookmark list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from companion.data import local_data
from companion.data.assets import AssetCollection
from companion.data.local_data import LocalDataStore, Subscription
from companion.data.models import CareerSummary, PlayerIdentity, User
from companion.match.scoreboard import RankInfo, rank_info

UNKNOWN_PLAYER = "Unknown Player"


@dataclass
class UserCellData:
    user_id: str
    name: str
    tag: Optional[str] = None
    level_text: Optional[str] = None
    card_id: Optional[str] = None
    rank: Optional[RankInfo] = None

    @property
    def display_name(self) -> str:
        return f"{self.name} #{self.tag}" if self.tag else self.name


def build_user_cell(
    user_id: str,
    user: Optional[User] = None,
    identity: Optional[PlayerIdentity] = None,
    summary: Optional[CareerSummary] = None,
    assets: Optional[AssetCollection] = None,
) -> UserCellData:
    """Project whatever is cached about a user into a cell."""
    cell = UserCellData(user_id=user_id, name=UNKNOWN_PLAYER)
    if user is not None:
        cell.name = user.game_name
        cell.tag = user.tag_line or None
    if identity is not None:
        cell.level_text = f"Level {identity.account_level}"
        cell.card_id = identity.card_id
    cell.rank = rank_info(summary, assets)
    return cell


class UserCellBinding:
    """Keeps a user cell in sync with the local data store.

    Subscribes to the user, identity and career summary of one user (the
    summary auto-updates) and rebuilds the cell whenever one of them
    changes. Call close() when the cell goes away.
    """

    def __init__(
        self,
        store: LocalDataStore,
        user_id: str,
        assets: Optional[AssetCollection] = None,
    ) -> None:
        self.user_id = user_id
        self.assets = assets
        self._user: Optional[User] = None
        self._identity: Optional[PlayerIdentity] = None
        self._summary: Optional[CareerSummary] = None
        self.cell = build_user_cell(user_id, assets=assets)
        self.updates = 0

        self._subscriptions: List[Subscription] = [
            store.subscribe(local_data.USER, user_id, self._on_user),
            store.subscribe(local_data.IDENTITY, user_id, self._on_identity),
            store.subscribe(
                local_data.CAREER_SUMMARY, user_id, self._on_summary, auto_update=True
            ),
        ]

    def _on_user(self, value: Optional[User]) -> None:
        self._user = value
        self._rebuild()

    def _on_identity(self, value: Optional[PlayerIdentity]) -> None:
        self._identity = value
        self._rebuild()

    def _on_summary(self, value: Optional[CareerSummary]) -> None:
        self._summary = value
        self._rebuild()

    def _rebuild(self) -> None:
        self.cell = build_user_cell(
            self.user_id, self._user, self._identity, self._summary, self.assets
        )
        self.updates += 1

    def close(self) -> None:
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions = []
