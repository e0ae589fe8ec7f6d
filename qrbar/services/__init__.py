"""Core services for qrbar."""

from .history_store import HistoryStore

__all__ = ['HistoryStore']
