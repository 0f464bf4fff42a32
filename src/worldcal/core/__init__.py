from .calendar import CalendarDefinition, default_calendar
from .date import CalendarDate
from .errors import CalendarError
from .types import LeapYearRule, Month, Season

__all__ = [
    "CalendarDefinition",
    "CalendarDate",
    "CalendarError",
    "LeapYearRule",
    "Month",
    "Season",
    "default_calendar",
]
