"""Tests for logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from spotify_jukebox import logging_setup


@pytest.fixture
def bare_root(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(logging_setup, "_default_log_dir", lambda: tmp_path / "logs")
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


def _console_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [
        h for h in root.handlers if h.get_name() == logging_setup.CONSOLE_HANDLER_NAME
    ]


def test_default_log_dir_uses_local_appdata(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    log_dir = logging_setup._default_log_dir()
    assert log_dir == tmp_path / "SpotifyJukebox" / "logs"


def test_default_log_dir_falls_back_to_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.setattr(logging_setup.Path, "home", lambda: tmp_path)
    log_dir = logging_setup._default_log_dir()
    assert log_dir == tmp_path / ".spotify_jukebox" / "logs"


def test_init_logging_console_defaults_to_warning(
    bare_root: logging.Logger, tmp_path: Path
) -> None:
    log_path = logging_setup.init_logging()
    assert log_path == tmp_path / "logs" / "app.log"
    assert any(isinstance(h, RotatingFileHandler) for h in bare_root.handlers)
    consoles = _console_handlers(bare_root)
    assert len(consoles) == 1
    assert consoles[0].level == logging.WARNING
    logging_setup.init_logging(console_level=logging.ERROR)
    assert len(bare_root.handlers) == 2
    assert consoles[0].level == logging.ERROR


def test_init_logging_without_console(bare_root: logging.Logger) -> None:
    logging_setup.init_logging()
    logging_setup.init_logging(console_level=None)
    assert _console_handlers(bare_root) == []
    assert len(bare_root.handlers) == 1


def test_init_logging_info_goes_to_file_only(
    bare_root: logging.Logger, tmp_path: Path, capsys
) -> None:
    log_path = logging_setup.init_logging()
    logging.getLogger("spotify_jukebox.test").info("hello file")
    for handler in bare_root.handlers:
        handler.flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")
    assert "hello file" not in capsys.readouterr().err


def test_init_logging_level_from_env(monkeypatch, bare_root: logging.Logger) -> None:
    monkeypatch.setenv("JUKEBOX_LOG_LEVEL", "debug")
    logging_setup.init_logging()
    assert bare_root.level == logging.DEBUG
    monkeypatch.setenv("JUKEBOX_LOG_LEVEL", "notalevel")
    logging_setup.init_logging()
    assert bare_root.level == logging.INFO
