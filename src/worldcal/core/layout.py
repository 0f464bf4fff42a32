"""
worldcal.core.layout
--------------------
Text rendering for CalendarDate: %-directive formatting and the fixed-width
month grid.

Directives:
    %W  full weekday name            %w  weekday name, first 3 chars
    %M  full month name              %m  month abbreviation (Month.abbreviation)
    %N  month number                 %n  month number, zero padded
    %D  day of month                 %d  day of month, zero padded
    %Y  year, "<n> <previous era>" for negative years when eras differ
    %y  year followed by the era of the date
    %z  signed year, no era
    %%  literal %

Unknown directives are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .date import CalendarDate


def _width(count: int) -> int:
    return len(str(count))


def _year_with_previous_era(d: CalendarDate) -> str:
    cal = d.definition
    year = d.year
    if not cal.previous_era.strip():
        return str(year)
    if cal.era == cal.previous_era:
        return f"{year} {cal.previous_era}"
    if year < 0:
        return f"{-year} {cal.previous_era}"
    return str(year)


def _year_with_era(d: CalendarDate) -> str:
    cal = d.definition
    era = d.era
    year = d.year
    if not era.strip():
        return str(year)
    if year < 0 and cal.era != cal.previous_era:
        year = -year
    return f"{year} {era}"


def format_date(d: CalendarDate, fmt: str) -> str:
    cal = d.definition
    month, day, year = d.mdy
    out: List[str] = []
    directive = False
    for ch in fmt:
        if not directive:
            if ch == "%":
                directive = True
            else:
                out.append(ch)
            continue
        directive = False
        if ch == "W":
            out.append(d.weekday_name)
        elif ch == "w":
            out.append(d.weekday_name[:3])
        elif ch == "M":
            out.append(cal.months[month - 1].name)
        elif ch == "m":
            out.append(cal.months[month - 1].abbreviation)
        elif ch == "N":
            out.append(str(month))
        elif ch == "n":
            out.append(str(month).zfill(_width(cal.month_count)))
        elif ch == "D":
            out.append(str(day))
        elif ch == "d":
            out.append(str(day).zfill(_width(cal.days_in_month(month, year))))
        elif ch == "Y":
            out.append(_year_with_previous_era(d))
        elif ch == "y":
            out.append(_year_with_era(d))
        elif ch == "z":
            out.append(str(year))
        elif ch == "%":
            out.append("%")
    return "".join(out)


def text_calendar_month(d: CalendarDate) -> str:
    """
    Render the month containing ``d``:

        2: February
         S  M  T  W  T  F  S
                  1  2  3  4
         5  6  7  8  9 10 11
        ...

    Columns are as wide as the longest month's day count. Rows break when
    the weekday wraps back to index 0.
    """
    cal = d.definition
    month, day, year = d.mdy
    width = _width(max(m.days for m in cal.months))
    last_weekday = cal.weekday_count - 1

    parts: List[str] = [f"{month}: {cal.months[month - 1].name}"]
    for i, name in enumerate(cal.weekdays):
        parts.append("\n" if i == 0 else " ")
        parts.append(name[0].rjust(width))

    first = d - (day - 1)
    for i in range(1, cal.days_in_month(month, year) + 1):
        weekday = (first + (i - 1)).weekday
        if i == 1 or weekday == 0:
            parts.append("\n")
        if i == 1 and weekday != 0:
            parts.append(" " * (weekday * (width + 1)))
        parts.append(str(i).rjust(width))
        if weekday != last_weekday:
            parts.append(" ")
    parts.append("\n")
    return "".join(parts)
