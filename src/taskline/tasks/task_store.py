# src/taskline/tasks/task_store.py

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..commands.errors import StorageError
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

DELIMITER = " | "
RECORD_SEPARATOR = "\n"

# Records are split on "\n" only; these are escaped inside descriptions.
_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {v: k for k, v in _ESCAPES.items()}
_ESCAPE_RE = re.compile(r"[\\\n\r]")
_UNESCAPE_RE = re.compile(r"\\[\\nr]")


class TaskFileStore:
    """
    Flat-file mirror of the task list.

    Record format, one task per line:
        TAG | DONE | WHEN | DESCRIPTION
    e.g.
        T | 0 |  | read book
        D | 1 | 2019-12-02T18:00 | return book

    The description goes last so it may itself contain the delimiter; backslashes
    and line breaks inside it are written as \\\\, \\n and \\r.
    Every save rewrites the whole file through a temp file + os.replace,
    so readers never observe a half-written list.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def encode(task: Task) -> str:
        when = task.when.isoformat(timespec="minutes") if task.when is not None else ""
        done = "1" if task.done else "0"
        description = _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group()], task.description)
        return DELIMITER.join((task.kind.value, done, when, description))

    @staticmethod
    def decode(line: str) -> Task:
        parts = line.split(DELIMITER, 3)
        if len(parts) != 4:
            raise ValueError(f"expected 4 fields, got {len(parts)}")
        tag, done, when, description = parts

        kind = TaskKind(tag)
        if done not in ("0", "1"):
            raise ValueError(f"bad done flag {done!r}")
        ts = datetime.fromisoformat(when) if when else None
        description = _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group()], description)

        return Task(kind, description, done=done == "1", when=ts)

    # ---- public API ----

    def load_all(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No tasks file at %s; starting empty.", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            raise StorageError(f"Could not read {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split(RECORD_SEPARATOR), start=1):
            line = line.removesuffix("\r")  # tolerate hand-edited CRLF files
            if not line.strip():
                continue
            try:
                tasks.append(self.decode(line))
            except ValueError as e:
                raise StorageError(f"{self._path}:{lineno}: unreadable task record ({e})") from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> None:
        lines = [self.encode(t) + RECORD_SEPARATOR for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write("".join(lines))
            os.replace(tmp, self._path)
        except OSError as e:
            logger.warning("Failed to save tasks to %s: %s", self._path, e)
            raise StorageError(f"Could not save tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
