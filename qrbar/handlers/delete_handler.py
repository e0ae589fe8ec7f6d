"""Handler for delete and clear commands."""

import sys

from ..interfaces import IHistoryStore, ILogSink
from .lookup import resolve_item


class DeleteHandler:
    """Handler for delete command."""

    def __init__(self, store: IHistoryStore, logger: ILogSink):
        self.store = store
        self.logger = logger

    def handle(self, args) -> int:
        """Handle delete command."""
        item = resolve_item(self.store, args.id)
        if not item:
            print(f"ERROR: no QR code with id {args.id}", file=sys.stderr)
            return 1

        self.store.delete(item.id)
        self.logger.log("info", f"Deleted item {item.id}")
        print(f"Deleted {str(item.id)[:8]}")
        return 0


class ClearHandler:
    """Handler for clear command."""

    def __init__(self, store: IHistoryStore, logger: ILogSink):
        self.store = store
        self.logger = logger

    def handle(self, args) -> int:
        count = len(self.store.items)
        self.store.clear()
        self.logger.log("info", f"Cleared {count} items")
        print(f"Cleared {count} QR codes")
        return 0
