# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner, Result

from cli import cli
from models import Task
from storage import Storage


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    """Backing file path inside the per-test tmp dir (not created yet)."""
    return tmp_path / "todo.json"


@pytest.fixture()
def storage(data_file: Path) -> Storage:
    return Storage(data_file)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    tz = timezone(timedelta(hours=2))
    return [
        Task(id=1, description="buy milk", created_at=datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=tz)),
        Task(id=3, description="walk dog", completed=True,
             created_at=datetime(2024, 5, 2, 8, 30, 0, tzinfo=timezone.utc)),
    ]


@pytest.fixture()
def run(data_file: Path) -> Callable[..., Result]:
    """
    Invoke the click group against the per-test backing file.

    Each call is a separate "process": the list is reloaded from disk.
    """
    runner = CliRunner()

    def _run(*args: str) -> Result:
        return runner.invoke(cli, ["--file", str(data_file), *args])

    return _run
