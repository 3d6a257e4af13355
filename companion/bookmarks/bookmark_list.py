"""Bookmarked players, persisted in the config directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from companion.config import settings
from companion.utils.file_utils import read_json, write_json

logger = logging.getLogger(__name__)


class BookmarkList:
    """Ordered list of bookmarked user IDs (oldest first, no duplicates)."""

    FILE_NAME = "bookmarks.json"

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else settings.config_dir / self.FILE_NAME
        self._user_ids: List[str] = []
        self._load()

    def _load(self) -> None:
        data = read_json(self.path, default={})
        user_ids = data.get("bookmarks", []) if isinstance(data, dict) else []
        for user_id in user_ids:
            if isinstance(user_id, str) and user_id not in self._user_ids:
                self._user_ids.append(user_id)

    def _save(self, user_ids: List[str]) -> None:
        # Only adopt the new list once it is on disk
        write_json(self.path, {"bookmarks": user_ids})
        self._user_ids = user_ids

    @property
    def user_ids(self) -> List[str]:
        return list(self._user_ids)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._user_ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._user_ids))

    def __len__(self) -> int:
        return len(self._user_ids)

    def add(self, user_id: str) -> bool:
        """Bookmark a user. Returns False if they were already bookmarked."""
        if user_id in self._user_ids:
            return False
        self._save([*self._user_ids, user_id])
        logger.info("Bookmarked %s", user_id)
        return True

    def remove(self, user_id: str) -> bool:
        """Remove a bookmark. Returns False if the user wasn't bookmarked."""
        if user_id not in self._user_ids:
            return False
        self._save([uid for uid in self._user_ids if uid != user_id])
        logger.info("Removed bookmark %s", user_id)
        return True

    def toggle(self, user_id: str) -> bool:
        """Flip a bookmark; returns whether the user is bookmarked afterwards."""
        if user_id in self._user_ids:
            self.remove(user_id)
            return False
        self.add(user_id)
        return True
