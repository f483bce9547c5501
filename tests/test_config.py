# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import config
from config import load_settings
from logging_setup import setup_logging


@pytest.fixture()
def clean_env(monkeypatch):
    # setenv first so teardown removes whatever a .env load puts back
    for name in ("TODO_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = load_settings()
    assert settings.data_file == Path("todo.json")
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TODO_FILE", str(tmp_path / "tasks.json"))
    clean_env.setenv("TODO_LOG_LEVEL", "debug")
    clean_env.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    settings = load_settings()
    assert settings.data_file == tmp_path / "tasks.json"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "todo.log"


def test_invalid_log_level_falls_back(clean_env) -> None:
    clean_env.setenv("TODO_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "WARNING"


def test_explicit_path_beats_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TODO_FILE", str(tmp_path / "env.json"))
    assert load_settings(tmp_path / "cli.json").data_file == tmp_path / "cli.json"


def test_dotenv_is_read_but_env_wins(clean_env, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODO_FILE=dotenv.json\nTODO_LOG_LEVEL=ERROR\n")
    clean_env.chdir(tmp_path)
    clean_env.setattr(config, "_ENV_LOADED", False)
    clean_env.setenv("TODO_LOG_LEVEL", "INFO")
    settings = load_settings()
    assert settings.data_file == Path("dotenv.json")
    assert settings.log_level == "INFO"


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    log_file = tmp_path / "logs" / "todo.log"
    try:
        setup_logging(console_level="ERROR", log_file=log_file)
        logging.getLogger("storage").debug("saved %d task(s)", 2)
        for h in root.handlers:
            h.flush()
        assert "DEBUG storage: saved 2 task(s)" in log_file.read_text()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        root.setLevel(saved_level)
        for h in saved_handlers:
            root.addHandler(h)
        logging.captureWarnings(False)
