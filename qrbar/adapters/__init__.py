"""Adapter implementations for qrbar."""

from .qr_code_adapter import QRCodeAdapter
from .json_settings_adapter import JsonSettingsAdapter
from .memory_settings_adapter import MemorySettingsAdapter
from .clipboard_adapter import ClipboardAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'JsonSettingsAdapter',
    'MemorySettingsAdapter',
    'ClipboardAdapter',
    'StdoutAdapter',
]
