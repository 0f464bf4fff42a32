"""
worldcal.core.date
------------------
Dates as day counts. A CalendarDate is an immutable (definition, days) pair
where days == 0 is 1/1/1. Every other field (year, month, day, weekday, era)
is derived on demand.

There is no year 0: the year before 1 is -1. The arithmetic below is
asymmetric around that gap and relies on LeapYearRule.since() for the
number of leap days between year 1 and any other year.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple

import structlog

from . import layout, text
from .calendar import CalendarDefinition
from .errors import InvalidDay, InvalidMonth, InvalidYear
from .types import _trunc_div

log = structlog.get_logger(__name__)

FULL_FORMAT = "%W, %M %D, %Y"
LONG_FORMAT = "%M %D, %Y"
MEDIUM_FORMAT = "%m %D, %Y"
SHORT_FORMAT = "%N/%D/%Y"


# ---------------------------------------------------------
# Day-count arithmetic
# ---------------------------------------------------------

def year_to_days(cal: CalendarDefinition, year: int) -> int:
    """Day count of the first day of ``year``."""
    days = (year - 1 if year >= 1 else year) * cal.min_days_per_year()
    rule = cal.leap_year
    if rule is not None:
        leaps = rule.since(year)
        if year > 1:
            days += leaps
        else:
            days -= leaps
            # The leap day of a negative year still lies ahead of its first day.
            if rule.is_leap(year):
                days -= 1
    return days


def days_to_year(cal: CalendarDefinition, days: int) -> int:
    """Year containing day count ``days``. Never returns 0."""
    estimate = _trunc_div(days, cal.min_days_per_year())
    if days < 0:
        estimate -= 1
        while days >= year_to_days(cal, estimate + 1):
            estimate += 1
    else:
        estimate += 1
        while days < year_to_days(cal, estimate):
            estimate -= 1
    return estimate


def compute_days(cal: CalendarDefinition, month: int, day: int, year: int) -> int:
    """Day count for month/day/year, raising InvalidDate subclasses on bad input."""
    if year == 0:
        raise InvalidYear("year 0 is invalid", year)
    if month < 1 or month > cal.month_count:
        raise InvalidMonth(f"month {month} is invalid", month)
    if day < 1 or day > cal.days_in_month(month, year):
        raise InvalidDay(f"day {day} is invalid", day)
    days = year_to_days(cal, year) + day - 1
    days += sum(m.days for m in cal.months[: month - 1])
    if cal.is_leap_year(year) and cal.leap_year.month < month:
        days += 1
    return days


def month_and_day(cal: CalendarDefinition, year: int, day_in_year: int) -> Tuple[int, int]:
    """Split a 1-based day of ``year`` into (month, day_in_month)."""
    remaining = day_in_year
    for month in range(1, cal.month_count + 1):
        amount = cal.days_in_month(month, year)
        if remaining <= amount:
            return month, remaining
        remaining -= amount
    # Only reachable when the definition is inconsistent with its own leap rule.
    log.critical("date.month_walk_exhausted", year=year, day_in_year=day_in_year)
    raise RuntimeError(f"unable to determine month for day {day_in_year} of year {year}")


# ---------------------------------------------------------
# CalendarDate
# ---------------------------------------------------------

@dataclass(frozen=True, order=True)
class CalendarDate:
    """A date in ``definition``; dates compare and order by day count."""
    definition: CalendarDefinition = field(compare=False, repr=False)
    days: int

    @classmethod
    def from_mdy(cls, definition: CalendarDefinition, month: int, day: int, year: int) -> CalendarDate:
        return cls(definition, compute_days(definition, month, day, year))

    @classmethod
    def parse(cls, definition: CalendarDefinition, s: str) -> CalendarDate:
        """
        Parse "M/D/Y [era]" or "Month D, Y [era]".

        Month names may be abbreviated to three letters. A trailing era equal
        to the calendar's previous era negates the year.
        """
        month, day, year = text.parse_date_text(definition, s)
        return cls.from_mdy(definition, month, day, year)

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return days_to_year(self.definition, self.days)

    @property
    def day_in_year(self) -> int:
        """1-based day within the year."""
        return 1 + self.days - year_to_days(self.definition, self.year)

    @property
    def mdy(self) -> Tuple[int, int, int]:
        year = self.year
        day_in_year = 1 + self.days - year_to_days(self.definition, year)
        month, day = month_and_day(self.definition, year, day_in_year)
        return month, day, year

    @property
    def month(self) -> int:
        """1-based month."""
        return self.mdy[0]

    @property
    def day_in_month(self) -> int:
        """1-based day within the month."""
        return self.mdy[1]

    @property
    def month_name(self) -> str:
        return self.definition.months[self.month - 1].name

    @property
    def days_in_month(self) -> int:
        month, _, year = self.mdy
        return self.definition.days_in_month(month, year)

    @property
    def is_leap_year(self) -> bool:
        return self.definition.is_leap_year(self.year)

    @property
    def weekday(self) -> int:
        """0-based index into the definition's weekdays."""
        count = self.definition.weekday_count
        return (self.days % count + self.definition.day_zero_weekday) % count

    @property
    def weekday_name(self) -> str:
        return self.definition.weekdays[self.weekday]

    @property
    def era(self) -> str:
        return self.definition.previous_era if self.year < 0 else self.definition.era

    @property
    def seasons(self) -> List[str]:
        """Names of the seasons this date falls in, in definition order."""
        month, day, _ = self.mdy
        return [s.name for s in self.definition.seasons if s.contains(month, day)]

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: int) -> CalendarDate:
        if isinstance(other, int):
            return replace(self, days=self.days + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, CalendarDate):
            return self.days - other.days
        if isinstance(other, int):
            return replace(self, days=self.days - other)
        return NotImplemented

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format(self, fmt: str) -> str:
        """Render using %-directives; see worldcal.core.layout.format_date."""
        return layout.format_date(self, fmt)

    def text_calendar_month(self) -> str:
        """Fixed-width grid of the month containing this date."""
        return layout.text_calendar_month(self)

    def __str__(self) -> str:
        return self.format(SHORT_FORMAT)
