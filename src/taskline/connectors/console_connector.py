# src/taskline/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..commands.command_models import CommandKind, Outcome
from ..commands.errors import ParseError
from ..commands.executor import execute
from ..commands.parser import interpret
from ..core.state import AppState

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

HELP_TEXT = (
    "Commands:\n"
    "  todo <description>\n"
    "  deadline <description> /by <date time>\n"
    "  event <description> /at <date time>\n"
    "  list | find <keyword> | done <n> | delete <n> | bye"
)


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def _numbered(matches) -> list[str]:
    return [f"{pos}. {task.describe()}" for pos, task in matches]


def render_outcome(outcome: Outcome) -> str:
    """Turn an Outcome into console text."""
    lines: list[str] = []

    match outcome.kind:
        case CommandKind.EXIT:
            lines.append("Bye. Hope to see you again soon!")
        case CommandKind.LIST:
            if outcome.matches:
                lines.append("Here are the tasks in your list:")
                lines.extend(_numbered(outcome.matches))
            else:
                lines.append("Your list is empty.")
        case CommandKind.FIND:
            if outcome.matches:
                lines.append("Here are the matching tasks in your list:")
                lines.extend(_numbered(outcome.matches))
            else:
                lines.append("No matching tasks.")
        case CommandKind.DONE:
            assert outcome.task is not None
            lines.append("Nice! I've marked this task as done:")
            lines.append(f"  {outcome.task.describe()}")
        case CommandKind.DELETE:
            assert outcome.task is not None
            lines.append("Noted. I've removed this task:")
            lines.append(f"  {outcome.index}. {outcome.task.describe()}")
            lines.append(_count_line(outcome.count))
        case CommandKind.ADD_TODO | CommandKind.ADD_DEADLINE | CommandKind.ADD_EVENT:
            assert outcome.task is not None
            lines.append("Got it. I've added this task:")
            lines.append(f"  {outcome.task.describe()}")
            lines.append(_count_line(outcome.count))
        case _:
            lines.append("Sorry, I don't know what that means.")
            lines.append(HELP_TEXT)

    if outcome.storage_error:
        lines.append(f"Warning: your tasks file was not updated ({outcome.storage_error}).")

    return "\n".join(lines)


def handle_line(state: AppState, line: str) -> tuple[str, bool]:
    """
    Interpret and execute one input line.

    Returns (text to show, whether the session should end).
    """
    try:
        command = interpret(line, state.tasks.size())
    except ParseError as e:
        logger.debug("Rejected input %r: %s", line, e.message)
        return f"Oops: {e.message}", False

    outcome = execute(command, state.tasks, state.store)
    return render_outcome(outcome), outcome.exit


def run_console_loop(state: AppState, read: Reader = input, write: Writer = print) -> None:
    logger.info("Console connector started (tasks=%d).", state.tasks.size())

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskline"))
    if getattr(getattr(state, "settings", None), "greeting_enabled", True):
        write(f"Hello! I'm {app_name}. What can I do for you?")

    while True:
        try:
            line = read("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line.strip():
            continue

        text, should_exit = handle_line(state, line)
        write(text)
        if should_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
