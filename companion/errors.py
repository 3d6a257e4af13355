"""Exceptions shared across the companion data and view layers."""

from __future__ import annotations


class CompanionError(Exception):
    """Base class for companion errors."""


class CorruptSnapshotError(CompanionError):
    """Raised when a game-data snapshot breaks an invariant.

    Examples: a match listing the same player twice, or a mission record
    carrying more than one objective progress entry.
    """


class SnapshotNotFoundError(CompanionError):
    """Raised when no snapshot exists for the requested key."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"No {kind} snapshot found for {key}")
        self.kind = kind
        self.key = key
