"""In-process settings adapter."""

import threading
from typing import Optional


class MemorySettingsAdapter:
    """Adapter keeping settings in a dict; nothing survives the process."""

    def __init__(self, initial: Optional[dict] = None):
        self.values: dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise ValueError(f"value for {key} must be str")
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)

    def lock(self) -> threading.RLock:
        return self._lock
