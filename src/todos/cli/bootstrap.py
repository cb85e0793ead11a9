# src/todos/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the composition root: it resolves settings once and wires the
configured tasks path into a TaskStore.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def open_task_store(*, settings=None) -> TaskStore:
    """
    Open (and load) the task store configured by settings.

    Keeping settings injectable lets tests point the store at a temporary file.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = Path(settings.tasks_path)
    logger.debug("Opening task store at %s", path)
    return TaskStore(path)
