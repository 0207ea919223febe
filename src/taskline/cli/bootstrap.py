# src/taskline/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task list and its file store into AppState,
- performs the single startup load of the tasks file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..commands.errors import StorageError
from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


def _set_aside(path: Path) -> Path | None:
    """Move an unreadable tasks file out of the way so the next save does not destroy it."""
    target = path.with_name(path.name + ".corrupt")
    n = 1
    while target.exists():
        n += 1
        target = path.with_name(f"{path.name}.corrupt.{n}")
    try:
        os.replace(path, target)
    except OSError:
        logger.exception("Could not move unreadable tasks file %s aside.", path)
        return None
    return target


def load_tasks(store: TaskFileStore) -> list[Task]:
    try:
        return store.load_all()
    except StorageError:
        logger.exception("Failed to load tasks from %s; starting with an empty list.", store.path)
        moved = _set_aside(store.path)
        if moved is not None:
            logger.warning("Unreadable tasks file kept at %s", moved)
        return []


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_file)
    return AppState(
        settings=settings,
        tasks=TaskList(load_tasks(store)),
        store=store,
    )


def flush_tasks(state: AppState) -> bool:
    """Final full save at shutdown. Returns False if the file could not be written."""
    try:
        state.store.save_all(state.tasks.snapshot())
    except StorageError:
        logger.exception("Final save of %d tasks failed.", state.tasks.size())
        return False
    logger.info("Saved %d tasks to %s", state.tasks.size(), state.store.path)
    return True
