"""worldcal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .core.calendar import CalendarDefinition, default_calendar
from .core.date import (
    FULL_FORMAT,
    LONG_FORMAT,
    MEDIUM_FORMAT,
    SHORT_FORMAT,
    CalendarDate,
)
from .core.errors import (
    CalendarConfigError,
    CalendarError,
    InvalidDate,
    InvalidDateText,
    InvalidDay,
    InvalidMonth,
    InvalidYear,
    UnknownMonthName,
)
from .core.types import LeapYearRule, Month, Season
from .config import calendar_from_dict, calendar_to_dict

__all__ = [
    "CalendarDefinition",
    "CalendarDate",
    "LeapYearRule",
    "Month",
    "Season",
    "default_calendar",
    "calendar_from_dict",
    "calendar_to_dict",
    "FULL_FORMAT",
    "LONG_FORMAT",
    "MEDIUM_FORMAT",
    "SHORT_FORMAT",
    "CalendarError",
    "CalendarConfigError",
    "InvalidDate",
    "InvalidMonth",
    "InvalidDay",
    "InvalidYear",
    "InvalidDateText",
    "UnknownMonthName",
]
