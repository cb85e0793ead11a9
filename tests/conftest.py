# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todos.logging_setup import CONSOLE_HANDLER, FILE_HANDLER
from todos.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and the real tasks file.
    """
    return SimpleNamespace(
        app_name="todos-test",
        log_level="WARNING",
        log_file=None,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    s = TaskStore(settings.tasks_path)
    yield s
    s.close()


@pytest.fixture(autouse=True)
def _drop_todos_log_handlers():
    """main() reconfigures the root logger; undo that after each test."""
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            root.removeHandler(h)
            h.close()
    logging.captureWarnings(False)
