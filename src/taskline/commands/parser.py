# src/taskline/commands/parser.py

"""
Turns one raw input line into a validated Command.

Policy for unrecognised keywords: they become `Unknown` (not an error);
the console decides how to present that.
"""

from __future__ import annotations

import logging
import re

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
    Unknown,
)
from .dates import parse_when
from .errors import EmptyDescriptionError, InvalidFormatError, InvalidIndexError, MissingIndexError

logger = logging.getLogger(__name__)

# keyword, then exactly one separator; the rest is kept verbatim.
_LINE_RE = re.compile(r"\s*(\S*)\s?(.*)", re.DOTALL)
_INT_RE = re.compile(r"[+-]?\d+")


def _separator_re(token: str) -> re.Pattern[str]:
    # /by and /at count only as standalone whitespace-delimited tokens
    return re.compile(rf"(?<!\S){re.escape(token)}(?!\S)")


_BY_RE = _separator_re("/by")
_AT_RE = _separator_re("/at")


def split_keyword(line: str) -> tuple[str, str]:
    m = _LINE_RE.match(line)
    assert m is not None  # the pattern matches any string
    return m.group(1).lower(), m.group(2)


def _parse_index(kind: CommandKind, args: str, task_count: int) -> int:
    tokens = args.split()
    if not tokens:
        raise MissingIndexError(f"Please give the number of the task, e.g. '{kind.value} 2'.")

    raw = tokens[0]
    if not _INT_RE.fullmatch(raw):
        raise InvalidIndexError(f"'{raw}' is not a task number.")

    try:
        index = int(raw)
    except ValueError:
        # past the interpreter's int digit limit
        raise InvalidIndexError(f"'{raw[:12]}...' is not a usable task number.") from None
    if index <= 0:
        raise InvalidIndexError("Please give a task number greater than 0.")
    if index > task_count:
        if task_count == 0:
            raise InvalidIndexError("Your list is empty, there is no task to pick.")
        raise InvalidIndexError(f"The largest task number is {task_count}.")
    return index


def _require_desc(kind: CommandKind, desc: str) -> str:
    desc = desc.strip()
    if not desc:
        raise EmptyDescriptionError(f"The description of a {kind.value} cannot be empty.")
    return desc


def _split_timed(kind: CommandKind, args: str, sep: re.Pattern[str], token: str) -> tuple[str, str]:
    parts = sep.split(args)
    if len(parts) != 2:
        problem = "is missing" if len(parts) < 2 else "appears more than once"
        raise InvalidFormatError(
            f"'{token}' {problem}. Usage: {kind.value} <description> {token} <date time>"
        )
    desc, when = parts
    return _require_desc(kind, desc), when


def interpret(line: str, task_count: int) -> Command:
    """
    Parse `line` against a list that currently holds `task_count` tasks.

    Raises a ParseError subclass with a user-facing message on malformed input.
    Index bounds are checked here, against the count at interpretation time.
    """
    keyword, args = split_keyword(line)

    try:
        kind = CommandKind(keyword)
    except ValueError:
        logger.debug("Unrecognised keyword %r", keyword)
        return Unknown(keyword)

    match kind:
        case CommandKind.EXIT:
            return Exit()
        case CommandKind.LIST:
            return List()
        case CommandKind.DONE:
            return Done(_parse_index(kind, args, task_count))
        case CommandKind.DELETE:
            return Delete(_parse_index(kind, args, task_count))
        case CommandKind.ADD_TODO:
            return AddTodo(_require_desc(kind, args))
        case CommandKind.ADD_DEADLINE:
            desc, when = _split_timed(kind, args, _BY_RE, "/by")
            return AddDeadline(desc, parse_when(when))
        case CommandKind.ADD_EVENT:
            desc, when = _split_timed(kind, args, _AT_RE, "/at")
            return AddEvent(desc, parse_when(when))
        case CommandKind.FIND:
            return Find(args)
        case _:
            # "unknown" typed literally
            return Unknown(keyword)
