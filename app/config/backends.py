"""
Record backends for the store.

Every backend implements the same two calls:

    load() -> {record_key: list of dicts, or None when nothing is stored}
    save({record_key: list of dicts}) -> None   (whole-record overwrite)

A record that is missing or cannot be parsed loads as None and the store
falls back to seed data for it. Any other read or write failure raises
PersistenceUnavailable.
"""

import copy
import json
import logging
import os
from typing import Dict, List, Optional

from app.config.seed import RECORD_KEYS
from app.core.errors import PersistenceUnavailable
from app.core.settings import settings

logger = logging.getLogger(__name__)


class MemoryBackend:
    """Keeps serialized records in a dict. Used by tests and throwaway runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        # Stored as JSON text to behave like a real blob store
        self.blobs: Dict[str, str] = dict(initial or {})

    def load(self) -> Dict[str, Optional[List[Dict]]]:
        records = {}
        for key in RECORD_KEYS:
            blob = self.blobs.get(key)
            records[key] = _decode(key, blob) if blob is not None else None
        return records

    def save(self, records: Dict[str, List[Dict]]) -> None:
        for key, items in records.items():
            self.blobs[key] = json.dumps(copy.deepcopy(items))

    def describe(self) -> str:
        return "memory"


class JsonFileBackend:
    """
    Local-storage analogue: one JSON file per record under a directory.
    Writes go to a temp file first and are moved into place.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory or settings.STORE_DIR

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def load(self) -> Dict[str, Optional[List[Dict]]]:
        records = {}
        for key in RECORD_KEYS:
            path = self._path(key)
            if not os.path.exists(path):
                records[key] = None
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    blob = f.read()
            except OSError as e:
                logger.error(f"Failed to read record '{key}' from {path}: {e}", exc_info=True)
                raise PersistenceUnavailable(f"Cannot read record '{key}' from {path}: {e}")
            records[key] = _decode(key, blob)
        return records

    def save(self, records: Dict[str, List[Dict]]) -> None:
        try:
            os.makedirs(self.directory, exist_ok=True)
            for key, items in records.items():
                path = self._path(key)
                tmp_path = f"{path}.tmp"
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(items, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, path)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to write records {list(records)} to {self.directory}: {e}", exc_info=True)
            raise PersistenceUnavailable(f"Cannot write records to {self.directory}: {e}")

    def describe(self) -> str:
        return f"json:{os.path.abspath(self.directory)}"


def _decode(key: str, blob: str) -> Optional[List[Dict]]:
    try:
        items = json.loads(blob)
    except json.JSONDecodeError as e:
        logger.warning(f"Record '{key}' is not valid JSON ({e}), falling back to seed data")
        return None
    if not isinstance(items, list):
        logger.warning(f"Record '{key}' is not a list, falling back to seed data")
        return None
    return items


def build_backend(name: Optional[str] = None):
    """Create the backend named by STORAGE_BACKEND."""
    name = (name or settings.STORAGE_BACKEND).lower()
    if name == "json":
        return JsonFileBackend()
    if name == "memory":
        return MemoryBackend()
    if name == "firestore":
        from app.config.firebase import FirestoreBackend
        return FirestoreBackend()
    raise ValueError(f"Unknown STORAGE_BACKEND '{name}'. Expected one of: json, memory, firestore")
