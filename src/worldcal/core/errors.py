from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base error."""


class CalendarConfigError(CalendarError, ValueError):
    """Raised when a calendar definition fails to load or validate."""


class InvalidDate(CalendarError, ValueError):
    """Raised when a date cannot be built from the supplied fields or text.

    ``field`` names the offending part of the input and ``value`` holds what
    was supplied for it.
    """

    field = "date"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidMonth(InvalidDate):
    field = "month"


class InvalidDay(InvalidDate):
    field = "day"


class InvalidYear(InvalidDate):
    field = "year"


class InvalidDateText(InvalidDate):
    field = "text"


class UnknownMonthName(InvalidDate):
    field = "month_name"


__all__ = [
    "CalendarError",
    "CalendarConfigError",
    "InvalidDate",
    "InvalidMonth",
    "InvalidDay",
    "InvalidYear",
    "InvalidDateText",
    "UnknownMonthName",
]
