"""Configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir


# Storage Configuration
APP_NAME = "qrbar"
DEFAULT_NAMESPACE = "qrcode_generator"
DEFAULT_HISTORY_KEY = "qrcodes"

# Encoder Configuration
DEFAULT_SCALE = "10"
DEFAULT_ERROR_CORRECTION = "M"


@dataclass
class Settings:
    """Validated runtime settings."""
    settings_dir: Path
    namespace: str
    history_key: str
    scale: int
    error_correction: str
    debug: bool = False


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Read environment, raise ValueError on invalid values."""
    # Per-user app data dir (~/Library/Application Support/qrbar on macOS)
    settings_dir = os.getenv("QRBAR_SETTINGS_DIR") or user_data_dir(APP_NAME, appauthor=False)
    namespace = os.getenv("QRBAR_NAMESPACE", DEFAULT_NAMESPACE)
    history_key = os.getenv("QRBAR_HISTORY_KEY", DEFAULT_HISTORY_KEY)
    scale_str = os.getenv("QRBAR_SCALE", DEFAULT_SCALE)
    level = os.getenv("QRBAR_ERROR_CORRECTION", DEFAULT_ERROR_CORRECTION).strip().upper()

    # Early validation
    if not namespace or not history_key:
        raise ValueError("QRBAR_NAMESPACE and QRBAR_HISTORY_KEY must not be empty")

    try:
        scale = int(scale_str)
    except ValueError:
        raise ValueError(f"QRBAR_SCALE must be an integer, got {scale_str!r}")
    if scale < 1:
        raise ValueError(f"QRBAR_SCALE must be >= 1, got {scale}")

    if level not in ("L", "M", "Q", "H"):
        raise ValueError(f"QRBAR_ERROR_CORRECTION must be L, M, Q or H, got {level!r}")

    return Settings(
        settings_dir=Path(settings_dir).expanduser(),
        namespace=namespace,
        history_key=history_key,
        scale=scale,
        error_correction=level,
        debug=_flag(os.getenv("QRBAR_DEBUG", ""))
    )
