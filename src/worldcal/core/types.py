from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .calendar import CalendarDefinition


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _blank(s: str) -> bool:
    return not s or not s.strip()


@dataclass(frozen=True)
class Month:
    name: str
    days: int

    @property
    def abbreviation(self) -> str:
        """First three characters, with whitespace runs collapsed and a trailing space dropped."""
        return " ".join(self.name.split())[:3].rstrip()

    def check_validity(self) -> Optional[str]:
        if _blank(self.name):
            return "month names must not be blank"
        if self.days < 1:
            return f"month '{self.name}' must have at least 1 day"
        return None


@dataclass(frozen=True)
class Season:
    """
    A named stretch of the year, from (start_month, start_day) through
    (end_month, end_day) inclusive. The end may precede the start, in which
    case the season wraps across the new year.
    """
    name: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int

    @property
    def start(self) -> Tuple[int, int]:
        return (self.start_month, self.start_day)

    @property
    def end(self) -> Tuple[int, int]:
        return (self.end_month, self.end_day)

    @property
    def wraps(self) -> bool:
        return self.end < self.start

    def contains(self, month: int, day: int) -> bool:
        md = (month, day)
        if self.wraps:
            return md >= self.start or md <= self.end
        return self.start <= md <= self.end

    def check_validity(self, calendar: CalendarDefinition) -> Optional[str]:
        if _blank(self.name):
            return "season names must not be blank"
        count = len(calendar.months)
        for label, month, day in (
            ("start", self.start_month, self.start_day),
            ("end", self.end_month, self.end_day),
        ):
            if month < 1 or month > count:
                return f"season '{self.name}' has an invalid {label} month ({month}); must be 1..{count}"
            days = calendar.months[month - 1].days
            if day < 1 or day > days:
                return f"season '{self.name}' has an invalid {label} day ({day}); must be 1..{days}"
        return None


@dataclass(frozen=True)
class LeapYearRule:
    """
    Parameterized leap-year predicate.

    A year is a leap year when it is divisible by ``every``, except when it is
    also divisible by ``except_``, unless it is also divisible by ``unless``.
    Zero disables the ``except_`` and ``unless`` terms. Years before 1 are
    shifted up by one before testing since there is no year 0, so -1 is
    tested as 0, -5 as -4, and so on.
    """
    month: int
    every: int
    except_: int = 0
    unless: int = 0

    def is_leap(self, year: int) -> bool:
        if year < 1:
            year += 1
        if year % self.every != 0:
            return False
        if self.except_ == 0 or year % self.except_ != 0:
            return True
        return self.unless != 0 and year % self.unless == 0

    def since(self, year: int) -> int:
        """
        Leap years elapsed before ``year``.

        For positive years this counts leap years in [1, year). For negative
        years it counts leap years in (year, -1], i.e. those between ``year``
        and the start of year 1, excluding ``year`` itself.
        """
        if year == -1:
            return 0
        delta = year if year >= 1 else -(year + 1)
        count = _trunc_div(delta, self.every)
        if self.except_ != 0:
            count -= _trunc_div(delta, self.except_)
            if self.unless != 0:
                count += _trunc_div(delta, self.unless)
        if self.is_leap(year):
            count -= 1
        # The shifted count above starts at 1; year -1 (shifted to 0) is added back here.
        if year < -1 and self.is_leap(-1):
            count += 1
        return count

    def check_validity(self, calendar: CalendarDefinition) -> Optional[str]:
        count = len(calendar.months)
        if self.month < 1 or self.month > count:
            return f"leap year month ({self.month}) must be 1..{count}"
        if self.every < 2:
            return f"leap year 'every' ({self.every}) must be at least 2"
        if self.except_ != 0:
            if self.except_ <= self.every:
                return f"leap year 'except' ({self.except_}) must be greater than 'every' ({self.every})"
            if self.except_ % self.every != 0:
                return f"leap year 'except' ({self.except_}) must be a multiple of 'every' ({self.every})"
        if self.unless != 0:
            if self.except_ == 0:
                return "leap year 'unless' requires a nonzero 'except'"
            if self.unless <= self.except_:
                return f"leap year 'unless' ({self.unless}) must be greater than 'except' ({self.except_})"
            if self.unless % self.except_ != 0:
                return f"leap year 'unless' ({self.unless}) must be a multiple of 'except' ({self.except_})"
        return None
