"""Load orchestration: fetch snapshots through a LoadManager into the local store."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from companion.data import local_data
from companion.data.assets import AssetCollection
from companion.data.local_data import LocalDataStore
from companion.data.models import CareerSummary, ContractDetails, MatchDetails
from companion.utils.load_manager import LoadManager

logger = logging.getLogger(__name__)


def load_assets(manager: LoadManager) -> Optional[AssetCollection]:
    """Load the asset catalog (None if it isn't available)."""
    return manager.load(lambda client: client.get_assets(), description="assets")


def load_match(
    manager: LoadManager, store: LocalDataStore, match_id: str
) -> Optional[MatchDetails]:
    """Load match details and cache them under MATCH_DETAILS."""
    return manager.load(
        lambda client: client.get_match_details(match_id),
        on_success=lambda details: store.store(local_data.MATCH_DETAILS, match_id, details),
        description=f"match {match_id}",
    )


def load_contract(
    manager: LoadManager, store: LocalDataStore, user_id: str
) -> Optional[ContractDetails]:
    """Load a user's contract details and cache them under CONTRACT_DETAILS."""
    return manager.load(
        lambda client: client.get_contract_details(user_id),
        on_success=lambda details: store.store(local_data.CONTRACT_DETAILS, user_id, details),
        description=f"contract details for {user_id}",
    )


def load_user_records(manager: LoadManager, store: LocalDataStore, user_id: str) -> None:
    """Load user, identity and career summary of one user into the store.

    Each record is loaded independently; a missing one leaves the others
    (and the cell showing them) intact.
    """
    manager.load(
        lambda client: client.get_user(user_id),
        on_success=lambda user: store.store(local_data.USER, user_id, user),
        description=f"user {user_id}",
    )
    manager.load(
        lambda client: client.get_identity(user_id),
        on_success=lambda identity: store.store(local_data.IDENTITY, user_id, identity),
        description=f"identity of {user_id}",
    )
    refresh_career_summaries(manager, store, [user_id])


def refresh_career_summaries(
    manager: LoadManager, store: LocalDataStore, user_ids: Iterable[str]
) -> Dict[str, CareerSummary]:
    """Fetch career summaries for the given users into the store.

    Returns:
        Summaries that loaded successfully, by user ID
    """
    loaded: Dict[str, CareerSummary] = {}
    for user_id in user_ids:
        summary = manager.load(
            lambda client, user_id=user_id: client.get_career_summary(user_id),
            on_success=lambda value, user_id=user_id: store.store(
                local_data.CAREER_SUMMARY, user_id, value
            ),
            description=f"career summary of {user_id}",
        )
        if summary is not None:
            loaded[user_id] = summary
    logger.info("Refreshed %d career summaries", len(loaded))
    return loaded


def refresh_auto_updating(manager: LoadManager, store: LocalDataStore) -> Dict[str, CareerSummary]:
    """Refresh every career summary that an auto-updating subscriber is watching."""
    return refresh_career_summaries(
        manager, store, store.auto_update_ids(local_data.CAREER_SUMMARY)
    )


def cached_summaries(store: LocalDataStore, user_ids: Iterable[str]) -> Dict[str, CareerSummary]:
    """Collect whatever career summaries are currently cached for these users."""
    summaries: Dict[str, CareerSummary] = {}
    for user_id in user_ids:
        summary = store.get(local_data.CAREER_SUMMARY, user_id)
        if summary is not None:
            summaries[user_id] = summary
    return summaries
