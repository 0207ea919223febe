# tests/test_parser.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskline.commands.command_models import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Delete,
    Done,
    Exit,
    Find,
    List,
    Unknown,
)
from taskline.commands.errors import (
    EmptyDescriptionError,
    InvalidDateError,
    InvalidFormatError,
    InvalidIndexError,
    MissingIndexError,
    ParseError,
)
from taskline.commands.parser import interpret, split_keyword


def test_simple_keywords() -> None:
    assert interpret("bye", 0) == Exit()
    assert interpret("list", 3) == List()
    assert interpret("  LIST  ", 3) == List()


def test_unknown_keyword_is_not_an_error() -> None:
    assert interpret("blah blah", 2) == Unknown("blah")
    assert interpret("", 0) == Unknown("")


def test_todo_takes_trimmed_rest_of_line() -> None:
    assert interpret("todo read book", 0) == AddTodo("read book")
    assert interpret("todo    read   book  ", 0) == AddTodo("read   book")


@pytest.mark.parametrize("line", ["todo", "todo ", "todo    "])
def test_todo_without_description(line: str) -> None:
    with pytest.raises(EmptyDescriptionError):
        interpret(line, 0)


def test_deadline_parses_description_and_time() -> None:
    cmd = interpret("deadline return book /by 2/12/2019 18:00", 0)
    assert cmd == AddDeadline("return book", datetime(2019, 12, 2, 18, 0))


def test_event_uses_at_separator() -> None:
    cmd = interpret("event project meeting /at 6-Aug-2019 14:00", 0)
    assert cmd == AddEvent("project meeting", datetime(2019, 8, 6, 14, 0))


def test_deadline_without_by_is_a_format_error() -> None:
    with pytest.raises(InvalidFormatError):
        interpret("deadline buy milk", 0)


def test_separator_twice_is_a_format_error() -> None:
    with pytest.raises(InvalidFormatError):
        interpret("deadline a /by 1/1/2020 10:00 /by 2/1/2020 10:00", 0)
    with pytest.raises(InvalidFormatError):
        interpret("event a /at /at 1/1/2020 10:00", 0)


def test_separator_must_be_its_own_token() -> None:
    with pytest.raises(InvalidFormatError):
        interpret("deadline go /bye 1/1/2020 10:00", 0)


def test_deadline_with_empty_description() -> None:
    with pytest.raises(EmptyDescriptionError):
        interpret("deadline /by 2/12/2019 18:00", 0)


def test_deadline_with_bad_date_explains_formats() -> None:
    with pytest.raises(InvalidDateError) as ei:
        interpret("deadline return book /by next tuesday", 0)
    assert "D/M/YYYY H:mm" in ei.value.message

    with pytest.raises(InvalidDateError):
        interpret("deadline return book /by", 0)


def test_done_and_delete_indices() -> None:
    assert interpret("done 1", 2) == Done(1)
    assert interpret("delete 2", 2) == Delete(2)
    assert interpret("done 2 extra", 2) == Done(2)


@pytest.mark.parametrize("keyword", ["done", "delete"])
def test_missing_index(keyword: str) -> None:
    with pytest.raises(MissingIndexError):
        interpret(keyword, 3)
    with pytest.raises(MissingIndexError):
        interpret(f"{keyword}   ", 3)


@pytest.mark.parametrize("keyword", ["done", "delete"])
@pytest.mark.parametrize("raw", ["0", "-1", "4", "abc", "1.5"])
def test_invalid_index(keyword: str, raw: str) -> None:
    with pytest.raises(InvalidIndexError):
        interpret(f"{keyword} {raw}", 3)


def test_index_checked_against_current_count() -> None:
    with pytest.raises(InvalidIndexError) as ei:
        interpret("done 1", 0)
    assert "empty" in ei.value.message


def test_find_keeps_keyword_verbatim() -> None:
    assert interpret("find book", 0) == Find("book")
    assert interpret("find  two words ", 0) == Find(" two words ")
    assert interpret("find", 0) == Find("")


def test_parse_errors_share_a_base() -> None:
    with pytest.raises(ParseError):
        interpret("delete x", 1)


def test_split_keyword() -> None:
    assert split_keyword("todo a b") == ("todo", "a b")
    assert split_keyword("  Find\tx ") == ("find", "x ")
    assert split_keyword("") == ("", "")


@pytest.mark.parametrize("keyword", ["done", "delete"])
def test_index_too_long_for_int_is_invalid(keyword: str) -> None:
    with pytest.raises(InvalidIndexError):
        interpret(f"{keyword} " + "1" * 5000, 3)
