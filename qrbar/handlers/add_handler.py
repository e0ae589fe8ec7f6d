"""Handler for add command."""

import sys

from ..interfaces import IHistoryStore, IClipboard, ILogSink
from .lookup import format_item


class AddHandler:
    """Handler for add command - stores text as a new QR code."""

    def __init__(
        self,
        store: IHistoryStore,
        clipboard: IClipboard,
        logger: ILogSink
    ):
        self.store = store
        self.clipboard = clipboard
        self.logger = logger

    def _read_input(self, args) -> str:
        """Text from argument, or clipboard with --paste."""
        if getattr(args, "paste", False):
            return self.clipboard.read_text()
        return " ".join(getattr(args, "text", None) or [])

    def handle(self, args) -> int:
        """Handle add command."""
        content = self._read_input(args)

        # Early validation
        if not content:
            print("ERROR: nothing to encode", file=sys.stderr)
            return 1

        item = self.store.add(content)
        self.logger.log("info", f"Added item {item.id}")
        print(format_item(item))
        return 0
