"""Shared fixtures."""

import pytest


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Point settings at a temp dir and clear overrides."""
    for name in (
        "QRBAR_NAMESPACE",
        "QRBAR_HISTORY_KEY",
        "QRBAR_SCALE",
        "QRBAR_ERROR_CORRECTION",
        "QRBAR_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("QRBAR_SETTINGS_DIR", str(tmp_path))
    return tmp_path
