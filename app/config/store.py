"""
In-process record store.

Single owner of the alerts, messages and notifications records plus the
read-only form type catalogue. Records are loaded once from the configured
backend and every mutation rewrites the affected record through it.

Reads hand out deep copies; nothing outside the store holds a reference to
stored data. A mutation is applied to a copy of the record, persisted, and
only then swapped in, so a failed write leaves the in-memory state intact.

Services group a read-modify-write (entity plus its notifications) under
transaction(). Backend calls are blocking, so from the async routes they
hold the event loop while they run.
"""

import copy
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from app.config.backends import build_backend
from app.config.seed import FORM_TYPES, RECORD_KEYS, build_seed_records
from app.core.errors import NotFoundError
from app.models.form import FormType

logger = logging.getLogger(__name__)


class Store:

    def __init__(
        self,
        backend,
        form_types: Optional[List[Dict]] = None,
        seed_factory: Callable[[], Dict[str, List[Dict]]] = build_seed_records,
    ):
        self.backend = backend
        self._seed_factory = seed_factory
        self._lock = threading.RLock()
        self._records: Dict[str, List[Dict]] = {key: [] for key in RECORD_KEYS}
        self._form_types: List[FormType] = [
            FormType.model_validate(f) for f in (FORM_TYPES if form_types is None else form_types)
        ]
        self.initialized = False

    def initialize(self) -> "Store":
        """
        Load every record from the backend, using seed data for records
        that are absent or unparsable.

        Raises PersistenceUnavailable if the backend cannot be read at all.
        """
        with self._lock:
            loaded = self.backend.load()
            seed = None
            for key in RECORD_KEYS:
                items = loaded.get(key)
                if items is None:
                    if seed is None:
                        seed = self._seed_factory()
                    items = seed[key]
                    logger.info(f"[STORE] No stored '{key}' record, using {len(items)} seed item(s)")
                self._records[key] = copy.deepcopy(items)
            self.initialized = True
        logger.info(
            f"[STORE] Loaded from {self.describe()}: "
            + ", ".join(f"{key}={len(self._records[key])}" for key in RECORD_KEYS)
        )
        return self

    def describe(self) -> str:
        describe = getattr(self.backend, "describe", None)
        return describe() if describe else type(self.backend).__name__

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """Serialize a read-modify-write sequence against other callers."""
        with self._lock:
            yield self

    # Reads

    def list(self, key: str) -> List[Dict]:
        with self._lock:
            return copy.deepcopy(self._records[key])

    def get(self, key: str, item_id: str) -> Optional[Dict]:
        with self._lock:
            for item in self._records[key]:
                if item.get("id") == item_id:
                    return copy.deepcopy(item)
        return None

    def snapshot(self) -> Dict[str, List[Dict]]:
        with self._lock:
            return {key: copy.deepcopy(items) for key, items in self._records.items()}

    def form_types(self) -> List[FormType]:
        return [form.model_copy(deep=True) for form in self._form_types]

    def form_type(self, form_type_id: str) -> Optional[FormType]:
        for form in self._form_types:
            if form.id == form_type_id:
                return form.model_copy(deep=True)
        return None

    # Writes

    def insert(self, key: str, items: List[Dict], prepend: bool = False) -> None:
        """Add items to a record in a single write."""
        new_items = copy.deepcopy(items)
        with self._lock:
            current = self._records[key]
            updated = new_items + current if prepend else current + new_items
            self._commit(key, updated)

    def replace(self, key: str, item: Dict) -> None:
        """Overwrite the stored item that has the same id."""
        with self._lock:
            updated = list(self._records[key])
            for index, existing in enumerate(updated):
                if existing.get("id") == item["id"]:
                    updated[index] = copy.deepcopy(item)
                    self._commit(key, updated)
                    return
        raise NotFoundError(key, item["id"])

    def update_where(self, key: str, predicate: Callable[[Dict], bool], changes: Dict) -> int:
        """
        Apply `changes` to every item matching `predicate`.
        Returns the number of matched items; nothing is written when zero.
        """
        with self._lock:
            matched = 0
            updated = []
            for item in self._records[key]:
                if predicate(item):
                    item = {**item, **copy.deepcopy(changes)}
                    matched += 1
                updated.append(item)
            if matched:
                self._commit(key, updated)
            return matched

    def _commit(self, key: str, items: List[Dict]) -> None:
        self.backend.save({key: copy.deepcopy(items)})
        self._records[key] = items


_store: Optional[Store] = None


def initialize_store(backend=None) -> Store:
    """
    Build and load the global store from settings, once.
    """
    global _store

    if _store is not None:
        return _store

    store = Store(backend or build_backend())
    store.initialize()
    _store = store
    return _store


def get_store() -> Store:
    """Get the global store, initializing it on first use."""
    if _store is None:
        return initialize_store()
    return _store


def set_store(store: Optional[Store]) -> None:
    """Replace the global store (tests, seed script)."""
    global _store
    _store = store
