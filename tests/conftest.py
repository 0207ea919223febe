# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskline.core.state import AppState
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_store import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskline",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        data_dir=data_dir,
        tasks_file=data_dir / "tasks.txt",
        greeting_enabled=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.tasks_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFileStore) -> AppState:
    """
    AppState with an empty list and a real file store under tmp_path.

    File persistence is part of what we want to test, so no fake store here.
    """
    return AppState(settings=settings, tasks=TaskList(), store=store)
