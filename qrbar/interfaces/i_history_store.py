"""History store interface and QR item record."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol, Union

ItemId = Union[uuid.UUID, str]


@dataclass(frozen=True)
class QRItem:
    """One generated QR code in the history."""
    id: uuid.UUID
    content: str
    timestamp: datetime

    @classmethod
    def create(cls, content: str) -> "QRItem":
        """Build a new item with a fresh id and the current time."""
        return cls(
            id=uuid.uuid4(),
            content=content,
            timestamp=datetime.now(timezone.utc)
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QRItem":
        """Build item from its stored form; raises on malformed data."""
        if not isinstance(data, dict):
            raise ValueError(f"item must be an object, got {type(data).__name__}")

        content = data["content"]
        if not isinstance(content, str) or not content:
            raise ValueError("item content must be a non-empty string")

        timestamp = datetime.fromisoformat(data["timestamp"])
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return cls(
            id=uuid.UUID(data["id"]),
            content=content,
            timestamp=timestamp
        )


class IHistoryStore(Protocol):
    """Interface for the QR code history."""

    @property
    def items(self) -> list[QRItem]:
        """Snapshot of all items, newest first."""
        ...

    def load(self) -> bool:
        """Read history from storage."""
        ...

    def persist(self) -> bool:
        """Write history to storage."""
        ...

    def add(self, content: str) -> QRItem:
        """Insert new item at the front."""
        ...

    def delete(self, item_id: ItemId) -> bool:
        """Remove item by ID."""
        ...

    def clear(self) -> bool:
        """Remove all items and the stored slot."""
        ...

    def get(self, item_id: ItemId) -> Optional[QRItem]:
        """Get item by ID."""
        ...

    def search(self, query: str) -> list[QRItem]:
        """Case-insensitive content filter."""
        ...
