"""Handler for list command."""

from ..interfaces import IHistoryStore, ILogSink
from .lookup import format_item


class ListHandler:
    """Handler for list command - prints history, optionally filtered."""

    def __init__(self, store: IHistoryStore, logger: ILogSink):
        self.store = store
        self.logger = logger

    def handle(self, args) -> int:
        query = getattr(args, "query", "") or ""
        items = self.store.search(query)
        self.logger.log("debug", f"Search '{query}' matched {len(items)} items")

        if not items:
            print("No QR codes" if not query else f"No QR codes matching '{query}'")
            return 0

        for item in items:
            print(format_item(item))
        return 0
