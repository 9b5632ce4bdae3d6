# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ticklist.cli.bootstrap import create_initial_state
from ticklist.config import Settings
from ticklist.logging_setup import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "DATA_DIR", "FILE_LOGGING", "DELETE_DELAY_MS", "BAR_WIDTH"):
        monkeypatch.delenv(f"TICKLIST_{name}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "ticklist"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/ticklist")
    assert s.file_logging is True
    assert s.delete_delay_ms == 200
    assert s.delete_delay_seconds == pytest.approx(0.2)
    assert s.bar_width == 30


def test_settings_from_env_and_bad_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TICKLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TICKLIST_FILE_LOGGING", "off")
    monkeypatch.setenv("TICKLIST_DELETE_DELAY_MS", "50")
    monkeypatch.setenv("TICKLIST_BAR_WIDTH", "wide")

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.file_logging is False
    assert s.delete_delay_seconds == pytest.approx(0.05)
    assert s.bar_width == 30


def test_bootstrap_uses_configured_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKLIST_DELETE_DELAY_MS", "1000")
    state = create_initial_state(settings=Settings.from_env())
    assert state.engine.delete_delay_seconds == pytest.approx(1.0)


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("ticklist.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "ticklist.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)


def test_console_filter_keeps_own_logs_and_drops_library_noise(tmp_path: Path, capsys) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.INFO)
        logging.getLogger("ticklist.tasks").info("own info")
        logging.getLogger("asyncio").warning("loop warning")
        logging.getLogger("py.warnings").warning("deprecated thing")
        logging.getLogger("somelib").error("library error")
        for h in root.handlers:
            h.flush()

        err = capsys.readouterr().err
        assert "own info" in err
        assert "library error" in err
        assert "loop warning" not in err
        assert "deprecated thing" not in err

        file_text = (tmp_path / "ticklist.log").read_text("utf-8")
        assert "loop warning" in file_text
        assert "deprecated thing" in file_text
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)
