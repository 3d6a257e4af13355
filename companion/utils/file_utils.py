"""File utilities for session state kept in the config directory."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


def atomic_write(file_path: Union[str, Path], content: str) -> None:
    """Write content to a file atomically.

    Writes to a temporary file in the same directory, then renames it over
    the target so readers never see a partially written file.

    Args:
        file_path: Path to the target file
        content: Content to write to the file
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.name}.",
        suffix=".tmp"
    )

    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.replace(temp_path, file_path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def write_json(file_path: Union[str, Path], data: Any) -> None:
    """Serialize data as indented JSON and write it atomically."""
    atomic_write(file_path, json.dumps(data, indent=2) + '\n')


def read_json(file_path: Union[str, Path], default: Any = None) -> Any:
    """Read a JSON file, returning default if it is missing or unreadable.

    Corrupted state files are logged and treated as absent so the app can
    start fresh.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        return default
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError) as err:
        logger.warning("Could not read %s: %s", file_path, err)
        return default
