# src/taskline/commands/errors.py

"""
Error taxonomy.

Parse errors abort the current input line only; the session keeps running.
StorageError is reported by the executor but never ends the session.
"""

from __future__ import annotations


class TasklineError(Exception):
    """Base class for all taskline errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(TasklineError):
    """An input line could not be turned into a command."""


class MissingIndexError(ParseError):
    pass


class InvalidIndexError(ParseError):
    pass


class EmptyDescriptionError(ParseError):
    pass


class InvalidFormatError(ParseError):
    pass


class InvalidDateError(ParseError):
    pass


class TaskIndexError(TasklineError, IndexError):
    """Position outside [0, size) of a TaskList."""


class StorageError(TasklineError, OSError):
    """The tasks file could not be written or read back."""
