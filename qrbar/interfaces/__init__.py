"""Interface definitions for qrbar adapters."""

from .i_qr_generator import IQRGenerator, EncodedImage, EncodeFailure, EncodeResult
from .i_history_store import IHistoryStore, QRItem, ItemId
from .i_settings_store import ISettingsStore
from .i_clipboard import IClipboard
from .i_log_sink import ILogSink

__all__ = [
    'IQRGenerator',
    'EncodedImage',
    'EncodeFailure',
    'EncodeResult',
    'IHistoryStore',
    'QRItem',
    'ItemId',
    'ISettingsStore',
    'IClipboard',
    'ILogSink',
]
