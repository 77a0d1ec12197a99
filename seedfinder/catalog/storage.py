"""
Storage port for persisted user state.

The pipeline never touches storage; only the browser session reads and
writes the two keyed collections below.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Protocol, Union


logger = logging.getLogger(__name__)

USER_SEEDS_KEY = "userSeeds"
FAVORITES_KEY = "favorites"


class StoragePort(Protocol):
    """Load and save JSON-compatible values by key."""

    def load(self, key: str) -> Optional[Any]:
        """Return the stored value, or None if nothing is stored."""

    def save(self, key: str, value: Any) -> None:
        """Replace the stored value."""


class MemoryStorage:
    """In-process storage, used for tests and ephemeral sessions."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.save(key, value)

    def load(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, value: Any) -> None:
        # Stored as text so callers never share mutable state with the store
        self._data[key] = json.dumps(value, ensure_ascii=False)


class JsonFileStorage:
    """One pretty-printed JSON file per key inside a directory."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable storage file {path}: {e}")
            return None

    def save(self, key: str, value: Any) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(
            json.dumps(value, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        os.replace(tmp_path, path)
