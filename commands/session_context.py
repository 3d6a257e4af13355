"""Shared state for the commands of one CLI session."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from companion.bookmarks.bookmark_list import BookmarkList
from companion.config import settings
from companion.data.assets import AssetCollection
from companion.data.loaders import load_assets
from companion.data.local_data import LocalDataStore
from companion.data.snapshot_client import SnapshotClient
from companion.utils.file_utils import read_json, write_json
from companion.utils.load_manager import LoadManager


class SessionContext:
    """Owns the collaborators commands share and the default viewer.

    Everything is created here and handed to commands explicitly: the local
    data store, the load manager, the bookmark list and the (lazily loaded)
    asset catalog.
    """

    def __init__(
        self,
        console: Console,
        client: Optional[SnapshotClient] = None,
        config_dir: Optional[Path] = None,
    ) -> None:
        self.console = console
        self.config_dir = Path(config_dir) if config_dir is not None else settings.config_dir
        self.config_file = self.config_dir / "config.json"
        self.store = LocalDataStore()
        self.load_manager = LoadManager(client or SnapshotClient(), console=console)
        self.bookmarks = BookmarkList(self.config_dir / BookmarkList.FILE_NAME)
        self._assets: Optional[AssetCollection] = None
        self._default_user_id: Optional[str] = None
        self._load_config()

    @property
    def assets(self) -> Optional[AssetCollection]:
        """Asset catalog, loaded on first use (None if unavailable)."""
        if self._assets is None:
            self._assets = load_assets(self.load_manager)
        return self._assets

    def get_default_user_id(self) -> Optional[str]:
        """Get the viewer's own user ID, if set."""
        return self._default_user_id

    def set_default_user_id(self, user_id: Optional[str]) -> None:
        """Set the viewer's user ID and persist it to the config file."""
        self._default_user_id = user_id
        self._save_config()

    def _load_config(self) -> None:
        config = read_json(self.config_file, default={})
        if isinstance(config, dict):
            self._default_user_id = config.get("default_user_id")

    def _save_config(self) -> None:
        try:
            write_json(self.config_file, {"default_user_id": self._default_user_id})
        except IOError as err:
            self.console.print(
                f"Warning: Could not save config file: {err}", style="yellow"
            )

    def resolve_user_id(self, parts: Sequence[str]) -> Optional[str]:
        """Resolve a user ID from command parts or use the default."""
        if len(parts) > 1:
            return parts[1]

        user_id = self.get_default_user_id()
        if not user_id:
            self.console.print("No default user set. Use /set-user first.", style="yellow")
        return user_id
