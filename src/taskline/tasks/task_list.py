# src/taskline/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..commands.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered, in-memory task collection for the running session.

    Positions are 0-based here; commands convert from the 1-based numbers users type.
    Nothing in this class touches storage.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._tasks):
            raise TaskIndexError(f"Task position {i} is outside [0, {len(self._tasks)})")

    def get(self, i: int) -> Task:
        self._check(i)
        return self._tasks[i]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, i: int) -> Task:
        self._check(i)
        return self._tasks.pop(i)

    def mark_done(self, i: int) -> Task:
        task = self.get(i)
        task.mark_done()
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Return (1-based position, task) for every description containing `keyword`."""
        return [
            (pos, task)
            for pos, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        ]

    def snapshot(self) -> list[Task]:
        return list(self._tasks)
