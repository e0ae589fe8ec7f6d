"""Unit tests for configuration."""

import pytest
from unittest.mock import patch
from qrbar import config
from qrbar.config import load_settings

pytestmark = pytest.mark.usefixtures("isolated_env")


def test_load_settings_defaults(tmp_path):
    settings = load_settings()

    assert settings.settings_dir == tmp_path
    assert settings.namespace == "qrcode_generator"
    assert settings.history_key == "qrcodes"
    assert settings.scale == 10
    assert settings.error_correction == "M"
    assert settings.debug is False


def test_settings_dir_defaults_to_user_data_dir(monkeypatch, tmp_path):
    """Without override the per-user app data dir is used."""
    monkeypatch.delenv("QRBAR_SETTINGS_DIR")
    app_dir = tmp_path / "Library" / "Application Support" / "qrbar"

    with patch.object(config, "user_data_dir", return_value=str(app_dir)) as mock_dir:
        settings = load_settings()

    mock_dir.assert_called_once_with("qrbar", appauthor=False)
    assert settings.settings_dir == app_dir


def test_settings_dir_override_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("QRBAR_SETTINGS_DIR", str(tmp_path / "custom"))

    with patch.object(config, "user_data_dir") as mock_dir:
        settings = load_settings()

    mock_dir.assert_not_called()
    assert settings.settings_dir == tmp_path / "custom"


def test_load_settings_overrides(monkeypatch):
    monkeypatch.setenv("QRBAR_SCALE", "4")
    monkeypatch.setenv("QRBAR_ERROR_CORRECTION", "h")
    monkeypatch.setenv("QRBAR_DEBUG", "yes")

    settings = load_settings()

    assert settings.scale == 4
    assert settings.error_correction == "H"
    assert settings.debug is True


@pytest.mark.parametrize("name,value", [
    ("QRBAR_SCALE", "ten"),
    ("QRBAR_SCALE", "0"),
    ("QRBAR_ERROR_CORRECTION", "X"),
    ("QRBAR_NAMESPACE", ""),
])
def test_load_settings_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()
