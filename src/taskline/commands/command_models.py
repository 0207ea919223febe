# src/taskline/commands/command_models.py

"""
Command variants produced by the interpreter, and the Outcome returned by execution.

Each variant is an immutable record carrying only what it needs to run.
Dispatch happens in executor.execute() via structural pattern matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..tasks.task_models import Task


class CommandKind(StrEnum):
    EXIT = "bye"
    LIST = "list"
    DONE = "done"
    DELETE = "delete"
    ADD_TODO = "todo"
    ADD_DEADLINE = "deadline"
    ADD_EVENT = "event"
    FIND = "find"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Exit:
    pass


@dataclass(frozen=True, slots=True)
class List:
    pass


@dataclass(frozen=True, slots=True)
class Done:
    index: int  # 1-based


@dataclass(frozen=True, slots=True)
class Delete:
    index: int  # 1-based


@dataclass(frozen=True, slots=True)
class AddTodo:
    desc: str


@dataclass(frozen=True, slots=True)
class AddDeadline:
    desc: str
    by: datetime


@dataclass(frozen=True, slots=True)
class AddEvent:
    desc: str
    at: datetime


@dataclass(frozen=True, slots=True)
class Find:
    keyword: str


@dataclass(frozen=True, slots=True)
class Unknown:
    keyword: str = ""


Command = Exit | List | Done | Delete | AddTodo | AddDeadline | AddEvent | Find | Unknown


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Structured result of one executed command, handed to the presentation layer.

    - task: the affected task (added, marked done, or removed)
    - index: its 1-based position before the command ran (None for adds/queries)
    - matches: (1-based position, task) pairs for list/find
    - count: number of tasks after the command
    - storage_error: set when the in-memory change stood but the tasks file could not be updated
    """

    kind: CommandKind
    count: int
    task: Task | None = None
    index: int | None = None
    matches: tuple[tuple[int, Task], ...] = ()
    keyword: str | None = None
    exit: bool = False
    storage_error: str | None = None
