# src/taskline/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

DISPLAY_TIME_FORMAT = "%d %b %Y %H:%M"


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the marker shown in listings and the tag written to the tasks file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def time_label(self) -> str | None:
        if self is TaskKind.DEADLINE:
            return "by"
        if self is TaskKind.EVENT:
            return "at"
        return None


@dataclass(slots=True)
class Task:
    """
    A single tracked task.

    `when` is meaningful only for deadlines (due time) and events (start time);
    it is always None for todos.
    """

    kind: TaskKind
    description: str
    done: bool = False
    when: datetime | None = None

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if self.kind is TaskKind.TODO and self.when is not None:
            raise ValueError("todo tasks carry no timestamp")
        if self.kind is not TaskKind.TODO and self.when is None:
            raise ValueError(f"{self.kind.name.lower()} tasks require a timestamp")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: datetime) -> Task:
        return cls(TaskKind.DEADLINE, description, when=by)

    @classmethod
    def event(cls, description: str, at: datetime) -> Task:
        return cls(TaskKind.EVENT, description, when=at)

    @property
    def is_done(self) -> bool:
        return self.done

    def mark_done(self) -> None:
        self.done = True

    def describe(self) -> str:
        status = "X" if self.done else " "
        text = f"[{self.kind.value}][{status}] {self.description}"
        label = self.kind.time_label
        if label and self.when is not None:
            text += f" ({label}: {self.when.strftime(DISPLAY_TIME_FORMAT)})"
        return text
