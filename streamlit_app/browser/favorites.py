"""
Favorites persistence.

Favorites are an ordered list of FavoriteRecord snapshots (the source of
truth, persisted and rendered on the Favorites page) plus a derived set of
hrefs for O(1) membership checks. FavoritesCollection keeps the two in step;
FavoritesStore owns the collection and writes it through to key-value
storage after every mutation.

The Streamlit app shares one FavoritesStore across sessions; each runtime
hands it to every page at construction. Pages and recipe cards only ever go
through its add/remove/contains methods.

Failure handling:
- Load failures (missing, empty, corrupt, unreadable) give an empty collection.
- Write failures are logged, `degraded` is set and the in-memory collection
  stays authoritative for the rest of the session.
"""

import json
import logging
import threading
from typing import Iterable, List, Optional, Set

from pydantic import ValidationError

from recipes.models import FavoriteRecord, Recipe

from .errors import StorageError
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

# Storage slot holding the JSON-serialized favorites list
FAVORITES_SLOT = "favorites"


class FavoritesCollection:
    """
    Ordered favorites plus the set of their hrefs.

    Invariant: `hrefs` is exactly {record.href for record in records}.
    """

    def __init__(self, records: Optional[Iterable[FavoriteRecord]] = None) -> None:
        self._records: List[FavoriteRecord] = []
        self._hrefs: Set[str] = set()
        for record in records or []:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def __contains__(self, href: object) -> bool:
        return href in self._hrefs

    @property
    def records(self) -> List[FavoriteRecord]:
        return list(self._records)

    @property
    def hrefs(self) -> Set[str]:
        return set(self._hrefs)

    def add(self, record: FavoriteRecord) -> bool:
        """Append a record unless its href is already present. Returns True if added."""
        if record.href in self._hrefs:
            return False
        self._records.append(record)
        self._hrefs.add(record.href)
        return True

    def remove(self, href: str) -> int:
        """Remove every record with `href`. Returns the number removed."""
        kept = [record for record in self._records if record.href != href]
        removed = len(self._records) - len(kept)
        self._records = kept
        self._hrefs.discard(href)
        return removed

    def to_json(self) -> str:
        return json.dumps([record.model_dump() for record in self._records], ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "FavoritesCollection":
        """
        Parse a persisted favorites list, failing soft.

        Missing, empty, non-JSON and non-list values give an empty collection.
        Entries that aren't valid FavoriteRecords are skipped.
        """
        if not raw or not raw.strip():
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Persisted favorites are not valid JSON, starting empty")
            return cls()
        if not isinstance(data, list):
            logger.warning("Persisted favorites are not a list, starting empty")
            return cls()

        records: List[FavoriteRecord] = []
        for entry in data:
            try:
                records.append(FavoriteRecord.model_validate(entry))
            except ValidationError:
                logger.debug("Skipping invalid favorites entry: %r", entry)
                continue
        return cls(records)


class FavoritesStore:
    """
    Favorites written through to durable storage.

    Several sessions (and processes) may share one storage slot. Each
    mutation therefore re-reads the slot, applies the change on top of what
    is persisted and writes the result back, all under a lock so mutations
    arriving from different runtime threads are applied one at a time.

    Attributes:
        storage: Key-value storage backend
        slot: Storage key holding the favorites list
        degraded: True while the last write failed; in-memory state is then the only copy
    """

    def __init__(self, storage: KeyValueStorage, slot: str = FAVORITES_SLOT) -> None:
        self.storage = storage
        self.slot = slot
        self.degraded = False
        self.collection = FavoritesCollection()
        self._lock = threading.RLock()

    @classmethod
    def open(cls, storage: KeyValueStorage, slot: str = FAVORITES_SLOT) -> "FavoritesStore":
        """Create a store and load the persisted favorites into it."""
        store = cls(storage, slot=slot)
        store.load()
        return store

    def load(self) -> FavoritesCollection:
        """Replace the in-memory collection with the persisted one. Never raises."""
        with self._lock:
            try:
                raw = self.storage.read(self.slot)
            except StorageError as e:
                logger.warning("Could not read favorites, starting empty: %s", e)
                raw = None
            self.collection = FavoritesCollection.from_json(raw)
            logger.debug("Loaded %d favorites", len(self.collection))
            return self.collection

    def add(self, recipe: Recipe) -> None:
        with self._lock:
            self._refresh()
            if not self.collection.add(FavoriteRecord.from_recipe(recipe)):
                logger.debug("Already a favorite: %s", recipe.href)
                return
            self.persist()

    def remove(self, href: str) -> None:
        with self._lock:
            self._refresh()
            self.collection.remove(href)
            self.persist()

    def contains(self, href: str) -> bool:
        return href in self.collection

    def list(self) -> List[FavoriteRecord]:
        return self.collection.records

    def persist(self) -> None:
        with self._lock:
            try:
                self.storage.write(self.slot, self.collection.to_json())
            except StorageError as e:
                if not self.degraded:
                    logger.warning("Could not save favorites, keeping them in memory only: %s", e)
                self.degraded = True
                return
            self.degraded = False

    def _refresh(self) -> None:
        # Unsaved changes while degraded only exist in memory
        if self.degraded:
            return
        try:
            raw = self.storage.read(self.slot)
        except StorageError as e:
            logger.debug("Could not re-read favorites before saving: %s", e)
            return
        self.collection = FavoritesCollection.from_json(raw)
