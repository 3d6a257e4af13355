"""Reads game-data snapshots written to disk by the sync job.

Layout under the data directory:

    assets.json
    matches/<match_id>.json
    contracts/<user_id>.json
    users/<user_id>.json
    identities/<user_id>.json
    career/<user_id>.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from companion.config import settings
from companion.data.assets import AssetCollection
from companion.data.models import (
    CareerSummary,
    ContractDetails,
    MatchDetails,
    PlayerIdentity,
    User,
)
from companion.errors import CorruptSnapshotError, SnapshotNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SnapshotClient:
    """Typed access to the snapshot directory."""

    def __init__(self, data_dir: Optional[Path] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else settings.data_dir

    def _read_json(self, kind: str, path: Path) -> Any:
        if not path.exists():
            raise SnapshotNotFoundError(kind, path.stem)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise CorruptSnapshotError(f"Malformed {kind} snapshot {path}: {err}") from err

    def _load(self, kind: str, path: Path, model: Type[ModelT]) -> ModelT:
        raw = self._read_json(kind, path)
        try:
            return model.model_validate(raw)
        except ValidationError as err:
            raise CorruptSnapshotError(f"Invalid {kind} snapshot {path}: {err}") from err

    def get_match_details(self, match_id: str) -> MatchDetails:
        return self._load("match", self.data_dir / "matches" / f"{match_id}.json", MatchDetails)

    def get_contract_details(self, user_id: str) -> ContractDetails:
        return self._load(
            "contract", self.data_dir / "contracts" / f"{user_id}.json", ContractDetails
        )

    def get_user(self, user_id: str) -> User:
        return self._load("user", self.data_dir / "users" / f"{user_id}.json", User)

    def get_identity(self, user_id: str) -> PlayerIdentity:
        return self._load(
            "identity", self.data_dir / "identities" / f"{user_id}.json", PlayerIdentity
        )

    def get_career_summary(self, user_id: str) -> CareerSummary:
        return self._load(
            "career summary", self.data_dir / "career" / f"{user_id}.json", CareerSummary
        )

    def get_assets(self) -> AssetCollection:
        return self._load("assets", self.data_dir / "assets.json", AssetCollection)

    def list_match_ids(self) -> List[str]:
        """Return IDs of all cached matches, sorted by name."""
        matches_dir = self.data_dir / "matches"
        if not matches_dir.exists():
            return []
        return sorted(path.stem for path in matches_dir.glob("*.json"))
