# src/taskline/commands/executor.py

from __future__ import annotations

import logging
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .command_models import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    CommandKind,
    Delete,
    Done,
    Exit,
    Find,
    List,
    Outcome,
    Unknown,
)
from .errors import StorageError

logger = logging.getLogger(__name__)


class TaskRepo(Protocol):
    """What execution needs from storage: a full overwrite of the mirrored list."""

    def save_all(self, tasks: list[Task]) -> None: ...


def _persist(tasks: TaskList, store: TaskRepo) -> str | None:
    """Rewrite storage from the in-memory list. Returns an error message instead of raising."""
    try:
        store.save_all(tasks.snapshot())
    except StorageError as e:
        logger.warning("Tasks file not updated; in-memory list stays authoritative: %s", e)
        return e.message
    return None


def _add(kind: CommandKind, task: Task, tasks: TaskList, store: TaskRepo) -> Outcome:
    tasks.add(task)
    logger.info("Added %s task #%d", kind.value, tasks.size())
    err = _persist(tasks, store)
    return Outcome(kind, count=tasks.size(), task=task, storage_error=err)


def execute(command: Command, tasks: TaskList, store: TaskRepo) -> Outcome:
    """
    Run one interpreted command against the session's task list.

    Mutating commands re-save the whole list afterwards. Indices were validated
    by the interpreter against the same list, so they are in range here.
    """
    match command:
        case Exit():
            return Outcome(CommandKind.EXIT, count=tasks.size(), exit=True)

        case List():
            matches = tuple(enumerate(tasks, start=1))
            return Outcome(CommandKind.LIST, count=tasks.size(), matches=matches)

        case Done(index=index):
            task = tasks.mark_done(index - 1)
            err = _persist(tasks, store)
            return Outcome(
                CommandKind.DONE, count=tasks.size(), task=task, index=index, storage_error=err
            )

        case Delete(index=index):
            task = tasks.remove(index - 1)
            logger.info("Deleted task #%d", index)
            err = _persist(tasks, store)
            return Outcome(
                CommandKind.DELETE, count=tasks.size(), task=task, index=index, storage_error=err
            )

        case AddTodo(desc=desc):
            return _add(CommandKind.ADD_TODO, Task.todo(desc), tasks, store)

        case AddDeadline(desc=desc, by=by):
            return _add(CommandKind.ADD_DEADLINE, Task.deadline(desc, by), tasks, store)

        case AddEvent(desc=desc, at=at):
            return _add(CommandKind.ADD_EVENT, Task.event(desc, at), tasks, store)

        case Find(keyword=keyword):
            matches = tuple(tasks.find(keyword))
            return Outcome(CommandKind.FIND, count=tasks.size(), matches=matches, keyword=keyword)

        case Unknown(keyword=keyword):
            return Outcome(CommandKind.UNKNOWN, count=tasks.size(), keyword=keyword)

    raise TypeError(f"Unsupported command: {command!r}")
