# src/taskline/commands/dates.py

from __future__ import annotations

from datetime import datetime

from .errors import InvalidDateError

# Tried in order. %Y before %y so "2019" is never read as "20" + leftovers.
ACCEPTED_FORMATS: tuple[tuple[str, str], ...] = (
    ("%d/%m/%Y %H:%M", "D/M/YYYY H:mm"),
    ("%d/%m/%y %H:%M", "D/M/YY H:mm"),
    ("%d-%b-%Y %H:%M", "D-Mon-YYYY H:mm"),
    ("%d-%m-%Y %H:%M", "D-M-YYYY H:mm"),
    ("%d/%b/%Y %H:%M", "D/Mon/YYYY H:mm"),
)


def format_help() -> str:
    examples = ", ".join(label for _, label in ACCEPTED_FORMATS)
    return f"Accepted date formats: {examples} (24-hour time), e.g. 2/12/2019 18:00 or 2-Dec-2019 18:00."


def parse_when(raw: str) -> datetime:
    """
    Parse a deadline/event time expression.

    Two-digit years follow strptime's %y window (69-99 -> 19xx, 00-68 -> 20xx).
    Minutes must be written with two digits.
    """
    text = " ".join(raw.split())
    if not text:
        raise InvalidDateError(f"The date/time is missing. {format_help()}")

    _, _, clock = text.rpartition(" ")
    minutes = clock.rpartition(":")[2]
    if len(minutes) == 2:
        for fmt, _ in ACCEPTED_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue

    raise InvalidDateError(f"Could not understand the date/time '{text}'. {format_help()}")
