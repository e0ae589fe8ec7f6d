"""Durable key-value settings interface (adapter pattern)."""

from typing import ContextManager, Optional, Protocol


class ISettingsStore(Protocol):
    """Interface for per-user persisted settings."""

    def get(self, key: str) -> Optional[str]:
        """Read value, None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite value."""
        ...

    def remove(self, key: str) -> None:
        """Delete value if present."""
        ...

    def lock(self) -> ContextManager:
        """Exclusive access across processes sharing the store."""
        ...
