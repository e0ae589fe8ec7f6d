"""Command handlers for qrbar."""

from .add_handler import AddHandler
from .list_handler import ListHandler
from .delete_handler import DeleteHandler, ClearHandler
from .show_handler import ShowHandler, ExportHandler, CopyHandler

# Table-driven dispatch
COMMAND_HANDLERS = {
    'add': AddHandler,
    'list': ListHandler,
    'delete': DeleteHandler,
    'clear': ClearHandler,
    'show': ShowHandler,
    'copy': CopyHandler,
    'export': ExportHandler,
}

__all__ = [
    'COMMAND_HANDLERS',
    'AddHandler',
    'ListHandler',
    'DeleteHandler',
    'ClearHandler',
    'ShowHandler',
    'ExportHandler',
    'CopyHandler',
]
