# tests/test_dates.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskline.commands.dates import parse_when
from taskline.commands.errors import InvalidDateError


@pytest.mark.parametrize(
    "raw",
    [
        "2/12/2019 18:00",
        "02/12/2019 18:00",
        "2/12/19 18:00",
        "2-Dec-2019 18:00",
        "2-12-2019 18:00",
        "2/Dec/2019 18:00",
        "  2/12/2019   18:00 ",
    ],
)
def test_accepted_shapes(raw: str) -> None:
    assert parse_when(raw) == datetime(2019, 12, 2, 18, 0)


def test_two_digit_year_window() -> None:
    assert parse_when("1/1/68 9:30").year == 2068
    assert parse_when("1/1/69 9:30").year == 1969


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "2019-12-02 18:00",
        "2/12/2019",
        "2/12/2019 6pm",
        "2/12/2019 18:0",
        "31/2/2019 10:00",
        "2/13/2019 10:00",
        "2/12/2019 25:00",
    ],
)
def test_rejected_shapes(raw: str) -> None:
    with pytest.raises(InvalidDateError):
        parse_when(raw)
