"""Clipboard interface (adapter pattern)."""

from typing import Protocol


class IClipboard(Protocol):
    """Interface for system clipboard access."""

    def read_text(self) -> str:
        """Read current clipboard text."""
        ...

    def write_text(self, text: str) -> bool:
        """Replace clipboard contents with text."""
        ...

    def write_image(self, png: bytes) -> bool:
        """Replace clipboard contents with PNG image."""
        ...
