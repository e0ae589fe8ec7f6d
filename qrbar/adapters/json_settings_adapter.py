"""Per-user settings adapter backed by a JSON file."""

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

from filelock import FileLock


class JsonSettingsAdapter:
    """Adapter for durable key-value settings.

    All keys of one namespace live in ``<settings_dir>/<namespace>.json``
    as a flat object of string values. Every write replaces the file
    atomically.
    """

    def __init__(self, settings_dir: Path, namespace: str):
        if not namespace:
            raise ValueError("namespace required")
        self.settings_dir = Path(settings_dir).expanduser()
        self.namespace = namespace

    @property
    def path(self) -> Path:
        return self.settings_dir / f"{self.namespace}.json"

    def lock(self, timeout: float = 10) -> FileLock:
        """Advisory lock on the namespace file, held around load-modify-persist."""
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        return FileLock(f"{self.path}.lock", timeout=timeout)

    def _read(self) -> dict:
        """Read whole namespace, empty on missing or unreadable file."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            print(f"ERROR: settings read failed ({self.path}): {e}", file=sys.stderr)
            return {}

        if not isinstance(data, dict):
            print(f"ERROR: settings file is not an object ({self.path})", file=sys.stderr)
            return {}
        return data

    def _write(self, data: dict) -> None:
        """Atomic replace of the namespace file."""
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.namespace}_", suffix=".tmp", dir=self.settings_dir
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> Optional[str]:
        """Read value, None if absent."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Overwrite value."""
        if not isinstance(value, str):
            raise ValueError(f"value for {key} must be str")
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        """Delete value if present."""
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
