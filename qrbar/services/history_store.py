"""QR code history store."""

import json
import threading
import uuid
from typing import Optional

from ..interfaces import ISettingsStore, ILogSink, QRItem, ItemId

DEFAULT_KEY = "qrcodes"


class HistoryStore:
    """Ordered, persisted collection of QR items (newest first).

    The store is constructed explicitly and handed to whoever owns it.
    Lifecycle: construct -> load() -> add/delete/clear... Every mutation
    writes the whole sequence back to the settings slot.

    Mutations are serialized by an internal lock; readers get snapshot
    lists, never the live sequence.
    """

    def __init__(
        self,
        settings: ISettingsStore,
        logger: ILogSink,
        key: str = DEFAULT_KEY
    ):
        self.settings = settings
        self.logger = logger
        self.key = key
        self._items: list[QRItem] = []
        self._lock = threading.RLock()

    @property
    def items(self) -> list[QRItem]:
        """Snapshot of all items, newest first."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _decode(self, blob: str) -> list[QRItem]:
        """Parse stored blob; raises on any malformed entry."""
        raw = json.loads(blob)
        if not isinstance(raw, list):
            raise ValueError(f"expected list, got {type(raw).__name__}")

        items = []
        seen = set()
        for entry in raw:
            item = QRItem.from_dict(entry)
            if item.id in seen:
                self.logger.log("warn", f"Dropped duplicate item {item.id}")
                continue
            seen.add(item.id)
            items.append(item)
        return items

    def load(self) -> bool:
        """Read history from storage; fall back to empty on failure."""
        with self._lock:
            try:
                blob = self.settings.get(self.key)
            except (OSError, ValueError) as e:
                self.logger.log("error", f"History read failed: {e}")
                self._items = []
                return False

            if blob is None:
                self.logger.log("debug", f"No stored history under '{self.key}'")
                self._items = []
                return False

            try:
                self._items = self._decode(blob)
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                self.logger.log("error", f"History decode failed: {e}")
                self._items = []
                return False

            self.logger.log("info", f"Loaded {len(self._items)} items")
            return True

    def persist(self) -> bool:
        """Overwrite the storage slot with the full sequence."""
        with self._lock:
            try:
                blob = json.dumps(
                    [item.to_dict() for item in self._items],
                    ensure_ascii=False
                )
                self.settings.set(self.key, blob)
            except (OSError, ValueError, TypeError) as e:
                self.logger.log("error", f"History persist failed: {e}")
                return False

            self.logger.log("debug", f"Persisted {len(self._items)} items")
            return True

    def add(self, content: str) -> QRItem:
        """Insert new item at the front and persist."""
        # Callers filter empty input; enforce anyway
        if not content:
            raise ValueError("content required")

        with self._lock:
            item = QRItem.create(content)
            self._items.insert(0, item)
            self.persist()
            return item

    def _parse_id(self, item_id: ItemId) -> Optional[uuid.UUID]:
        if isinstance(item_id, uuid.UUID):
            return item_id
        try:
            return uuid.UUID(str(item_id))
        except ValueError:
            return None

    def get(self, item_id: ItemId) -> Optional[QRItem]:
        """Get item by ID, None if absent."""
        target = self._parse_id(item_id)
        with self._lock:
            for item in self._items:
                if item.id == target:
                    return item
        return None

    def delete(self, item_id: ItemId) -> bool:
        """Remove item by ID; no-op when absent."""
        target = self._parse_id(item_id)
        with self._lock:
            remaining = [item for item in self._items if item.id != target]
            if len(remaining) == len(self._items):
                return False

            self._items = remaining
            self.persist()
            return True

    def clear(self) -> bool:
        """Remove all items and drop the storage slot."""
        with self._lock:
            self._items = []
            try:
                self.settings.remove(self.key)
            except (OSError, ValueError) as e:
                self.logger.log("error", f"History clear failed: {e}")
                return False

            self.logger.log("debug", f"Removed stored history under '{self.key}'")
            return True

    def search(self, query: str) -> list[QRItem]:
        """Case-insensitive substring filter over content."""
        with self._lock:
            if not query:
                return list(self._items)

            needle = query.casefold()
            return [
                item for item in self._items
                if needle in item.content.casefold()
            ]
