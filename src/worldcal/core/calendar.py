"""
worldcal.core.calendar
----------------------
The calendar definition: weekday names, month table, seasons, era labels and
the optional leap-year rule. A definition is built once and then shared,
read-only, by every CalendarDate that refers to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import structlog

from .errors import CalendarConfigError
from .types import LeapYearRule, Month, Season, _blank

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalendarDefinition:
    weekdays: Tuple[str, ...]
    day_zero_weekday: int
    months: Tuple[Month, ...]
    seasons: Tuple[Season, ...]
    era: str = ""
    previous_era: str = ""
    leap_year: Optional[LeapYearRule] = None

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so definitions stay hashable.
        object.__setattr__(self, "weekdays", tuple(self.weekdays))
        object.__setattr__(self, "months", tuple(self.months))
        object.__setattr__(self, "seasons", tuple(self.seasons))

    # ---------------------------------------------------------
    # Sizes
    # ---------------------------------------------------------

    @property
    def weekday_count(self) -> int:
        return len(self.weekdays)

    @property
    def month_count(self) -> int:
        return len(self.months)

    def min_days_per_year(self) -> int:
        """Length of a common (non-leap) year."""
        return sum(m.days for m in self.months)

    def days_in_year(self, year: int) -> int:
        return self.min_days_per_year() + (1 if self.is_leap_year(year) else 0)

    def days_in_month(self, month: int, year: int) -> int:
        """Length of ``month`` (1-based) in ``year``, leap day included."""
        days = self.months[month - 1].days
        if self.is_leap_month(month) and self.is_leap_year(year):
            days += 1
        return days

    # ---------------------------------------------------------
    # Leap rule delegation
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return self.leap_year is not None and self.leap_year.is_leap(year)

    def is_leap_month(self, month: int) -> bool:
        return self.leap_year is not None and self.leap_year.month == month

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def check_validity(self) -> Optional[str]:
        """Return a description of the first problem found, or None if the definition is usable."""
        if not self.weekdays:
            return "calendar must have at least one weekday"
        if not self.months:
            return "calendar must have at least one month"
        if not self.seasons:
            return "calendar must have at least one season"
        if self.day_zero_weekday < 0 or self.day_zero_weekday >= len(self.weekdays):
            return (
                f"day zero weekday ({self.day_zero_weekday}) must be "
                f"0..{len(self.weekdays) - 1}"
            )
        for name in self.weekdays:
            if _blank(name):
                return "weekday names must not be blank"
        for month in self.months:
            result = month.check_validity()
            if result is not None:
                return result
        for season in self.seasons:
            result = season.check_validity(self)
            if result is not None:
                return result
        if self.leap_year is not None:
            return self.leap_year.check_validity(self)
        return None

    def validate(self) -> CalendarDefinition:
        """Raise CalendarConfigError if check_validity() reports a problem; return self otherwise."""
        problem = self.check_validity()
        if problem is not None:
            log.debug("calendar.invalid", reason=problem)
            raise CalendarConfigError(problem)
        log.debug(
            "calendar.valid",
            months=self.month_count,
            weekdays=self.weekday_count,
            leap=self.leap_year is not None,
        )
        return self

    def month_index(self, name: str) -> Optional[int]:
        """
        1-based index of the month called ``name``, matched case-insensitively
        against the full name or, for names longer than three letters, the
        abbreviation. Runs of whitespace in either name compare as one space.
        """
        wanted = " ".join(name.split()).lower()
        for i, month in enumerate(self.months, start=1):
            full = " ".join(month.name.split()).lower()
            if full == wanted or (len(full) > 3 and month.abbreviation.lower() == wanted):
                return i
        return None


DEFAULT_WEEKDAYS: Sequence[str] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

DEFAULT_MONTHS: Sequence[Month] = (
    Month("January", 31),
    Month("February", 28),
    Month("March", 31),
    Month("April", 30),
    Month("May", 31),
    Month("June", 30),
    Month("July", 31),
    Month("August", 31),
    Month("September", 30),
    Month("October", 31),
    Month("November", 30),
    Month("December", 31),
)

DEFAULT_SEASONS: Sequence[Season] = (
    Season("Winter", 12, 21, 3, 19),
    Season("Spring", 3, 20, 6, 20),
    Season("Summer", 6, 21, 9, 21),
    Season("Autumn", 9, 22, 12, 20),
)


def default_calendar() -> CalendarDefinition:
    """
    Gregorian-shaped calendar. Day 0 (1/1/1) falls on a Monday, so dates line
    up with the proleptic Gregorian calendar used by ``datetime.date``.
    """
    return CalendarDefinition(
        weekdays=DEFAULT_WEEKDAYS,
        day_zero_weekday=1,
        months=DEFAULT_MONTHS,
        seasons=DEFAULT_SEASONS,
        era="AD",
        previous_era="BC",
        leap_year=LeapYearRule(month=2, every=4, except_=100, unless=400),
    )
