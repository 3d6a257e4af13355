"""In-memory store of locally cached game data with change subscriptions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Kinds of records held in the store
USER = "user"
IDENTITY = "identity"
CAREER_SUMMARY = "career_summary"
MATCH_DETAILS = "match_details"
CONTRACT_DETAILS = "contract_details"

Key = Tuple[str, str]
Listener = Callable[[Any], None]


@dataclass(eq=False)
class Subscription:
    """Handle returned by LocalDataStore.subscribe."""

    store: "LocalDataStore"
    key: Key
    callback: Listener
    auto_update: bool = False
    active: bool = field(default=True)

    def unsubscribe(self) -> None:
        """Stop receiving updates. Safe to call more than once."""
        if self.active:
            self.store._remove(self)
            self.active = False


class LocalDataStore:
    """Values keyed by (kind, id); subscribers are called on every store.

    The store never fetches anything itself. Subscriptions flagged with
    auto_update only mark their IDs as wanted by a refresh (see
    auto_update_ids); whoever owns the load manager decides when to fetch.
    """

    def __init__(self) -> None:
        self._values: Dict[Key, Any] = {}
        self._subscriptions: Dict[Key, List[Subscription]] = {}

    def get(self, kind: str, object_id: str) -> Optional[Any]:
        return self._values.get((kind, object_id))

    def store(self, kind: str, object_id: str, value: Any) -> None:
        """Store a value and notify every subscriber of its key."""
        key = (kind, object_id)
        self._values[key] = value
        listeners = list(self._subscriptions.get(key, ()))
        logger.debug("Stored %s %s (%d subscribers)", kind, object_id, len(listeners))
        for subscription in listeners:
            subscription.callback(value)

    def subscribe(
        self,
        kind: str,
        object_id: str,
        callback: Listener,
        auto_update: bool = False,
    ) -> Subscription:
        """Register a callback for changes to one record.

        The callback is invoked immediately with the current value (possibly
        None) so views can render whatever is cached right away.

        Args:
            kind: Record kind (USER, IDENTITY, ...)
            object_id: Record ID
            callback: Called with the new value after every store
            auto_update: Mark this record as wanted by periodic refreshes

        Returns:
            Subscription handle; call unsubscribe() on view teardown
        """
        key = (kind, object_id)
        subscription = Subscription(self, key, callback, auto_update)
        self._subscriptions.setdefault(key, []).append(subscription)
        callback(self._values.get(key))
        return subscription

    def auto_update_ids(self, kind: str) -> List[str]:
        """Return IDs of the given kind with at least one auto-updating subscriber."""
        ids: List[str] = []
        for (sub_kind, object_id), subscriptions in self._subscriptions.items():
            if sub_kind != kind:
                continue
            if any(sub.auto_update for sub in subscriptions):
                ids.append(object_id)
        return ids

    def subscriber_count(self, kind: str, object_id: str) -> int:
        return len(self._subscriptions.get((kind, object_id), ()))

    def _remove(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions.get(subscription.key, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.key, None)
