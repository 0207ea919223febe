# src/taskline/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    tasks: TaskList
    store: TaskFileStore
