"""
worldcal.config
---------------
Key-value (JSON-shaped) form of a CalendarDefinition.

    {
      "weekdays": ["Sunday", ...],
      "day_zero_weekday": 1,
      "months": [{"name": "January", "days": 31}, ...],
      "seasons": [{"name": "Winter", "start_month": 12, "start_day": 21,
                   "end_month": 3, "end_day": 19}, ...],
      "era": "AD",
      "previous_era": "BC",
      "leap": {"month": 2, "every": 4, "except": 100, "unless": 400}
    }

"leap" is optional. Loading checks the shape with pydantic, then runs the
definition's own check_validity(); either failure raises CalendarConfigError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.calendar import CalendarDefinition
from .core.errors import CalendarConfigError
from .core.types import LeapYearRule, Month, Season

log = structlog.get_logger(__name__)


class MonthConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    days: int


class SeasonConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int


class LeapConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    month: int
    every: int
    except_: int = Field(default=0, alias="except")
    unless: int = 0


class CalendarConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    weekdays: List[str]
    day_zero_weekday: int = 0
    months: List[MonthConfig]
    seasons: List[SeasonConfig]
    era: str = ""
    previous_era: str = ""
    leap: Optional[LeapConfig] = None

    def to_definition(self) -> CalendarDefinition:
        leap = None
        if self.leap is not None:
            leap = LeapYearRule(
                month=self.leap.month,
                every=self.leap.every,
                except_=self.leap.except_,
                unless=self.leap.unless,
            )
        return CalendarDefinition(
            weekdays=tuple(self.weekdays),
            day_zero_weekday=self.day_zero_weekday,
            months=tuple(Month(m.name, m.days) for m in self.months),
            seasons=tuple(
                Season(s.name, s.start_month, s.start_day, s.end_month, s.end_day)
                for s in self.seasons
            ),
            era=self.era,
            previous_era=self.previous_era,
            leap_year=leap,
        )

    @classmethod
    def from_definition(cls, cal: CalendarDefinition) -> CalendarConfig:
        leap = None
        if cal.leap_year is not None:
            rule = cal.leap_year
            leap = LeapConfig(month=rule.month, every=rule.every, except_=rule.except_, unless=rule.unless)
        return cls(
            weekdays=list(cal.weekdays),
            day_zero_weekday=cal.day_zero_weekday,
            months=[MonthConfig(name=m.name, days=m.days) for m in cal.months],
            seasons=[
                SeasonConfig(
                    name=s.name,
                    start_month=s.start_month,
                    start_day=s.start_day,
                    end_month=s.end_month,
                    end_day=s.end_day,
                )
                for s in cal.seasons
            ],
            era=cal.era,
            previous_era=cal.previous_era,
            leap=leap,
        )


def _describe(err: ValidationError) -> str:
    first = err.errors()[0]
    where = ".".join(str(p) for p in first["loc"]) or "<root>"
    extra = f" (and {err.error_count() - 1} more)" if err.error_count() > 1 else ""
    return f"invalid calendar config at '{where}': {first['msg']}{extra}"


def calendar_from_dict(data: Mapping[str, Any]) -> CalendarDefinition:
    """Build and validate a definition from its key-value form."""
    try:
        cfg = CalendarConfig.model_validate(data)
    except ValidationError as e:
        raise CalendarConfigError(_describe(e)) from e
    cal = cfg.to_definition().validate()
    log.debug("config.loaded", months=cal.month_count, seasons=len(cal.seasons))
    return cal


def calendar_to_dict(cal: CalendarDefinition) -> Dict[str, Any]:
    """Key-value form of ``cal``; "leap" is omitted when there is no leap rule."""
    return CalendarConfig.from_definition(cal).model_dump(by_alias=True, exclude_none=True)


def load_calendar_file(path: Union[str, Path]) -> CalendarDefinition:
    """Read a JSON calendar file; any read, decode or validation failure raises CalendarConfigError."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CalendarConfigError(f"{path}: {e}") from e
    try:
        return calendar_from_dict(data)
    except CalendarConfigError as e:
        raise CalendarConfigError(f"{path}: {e}") from e
