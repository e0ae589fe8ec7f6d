"""Item lookup shared by handlers."""

from typing import Optional

from ..interfaces import IHistoryStore, QRItem


def resolve_item(store: IHistoryStore, ref: str) -> Optional[QRItem]:
    """Find item by full ID or unique ID prefix."""
    ref = (ref or "").strip().lower()
    if not ref:
        return None

    item = store.get(ref)
    if item:
        return item

    matches = [i for i in store.items if str(i.id).startswith(ref)]
    return matches[0] if len(matches) == 1 else None


def format_item(item: QRItem, width: int = 60) -> str:
    """One-line summary: short id, date, first line of content."""
    lines = item.content.splitlines()
    text = lines[0] if lines else item.content
    if len(text) > width:
        text = text[:width - 1] + "…"
    stamp = item.timestamp.astimezone().strftime("%Y-%m-%d %H:%M")
    return f"{str(item.id)[:8]}  {stamp}  {text}"
