"""Tests for the entry point."""

import threading

import pytest
from unittest.mock import patch
from qrbar.adapters import JsonSettingsAdapter
from qrbar.main import main

pytestmark = pytest.mark.usefixtures("isolated_env")


def test_main_history_persists_between_runs(tmp_path, capsys):
    assert main(["add", "https://example.com"]) == 0
    assert main(["add", "second"]) == 0
    capsys.readouterr()

    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "second" in lines[0]
    assert "https://example.com" in lines[1]
    assert (tmp_path / "qrcode_generator.json").exists()


def test_main_ephemeral_does_not_write(tmp_path):
    assert main(["--ephemeral", "add", "temp"]) == 0
    assert not (tmp_path / "qrcode_generator.json").exists()


def test_main_bad_config(monkeypatch, capsys):
    monkeypatch.setenv("QRBAR_SCALE", "-1")

    assert main(["list"]) == 1
    assert "QRBAR_SCALE" in capsys.readouterr().err


def test_main_recovers_from_corrupt_history(tmp_path, capsys):
    (tmp_path / "qrcode_generator.json").write_text(
        '{"qrcodes": "garbage"}', encoding="utf-8"
    )

    assert main(["add", "fresh"]) == 0
    capsys.readouterr()
    assert main(["list"]) == 0
    assert "fresh" in capsys.readouterr().out


def test_main_concurrent_adds_keep_every_entry(tmp_path, capsys):
    """Parallel runs serialize on the storage lock, nothing is lost."""
    def worker(n):
        for i in range(10):
            main(["add", f"worker {n} item {i}"])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    capsys.readouterr()

    assert main(["list"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 30


def test_main_reports_busy_storage(capsys):
    with patch.object(JsonSettingsAdapter, "lock", side_effect=TimeoutError("held")):
        assert main(["add", "blocked"]) == 1

    assert "busy" in capsys.readouterr().err


def test_json_settings_lock_excludes_second_holder(tmp_path):
    adapter = JsonSettingsAdapter(tmp_path, "ns")
    other = JsonSettingsAdapter(tmp_path, "ns")

    with adapter.lock():
        with pytest.raises(TimeoutError):
            other.lock(timeout=0.1).acquire()
