# tests/conftest.py

import pytest
import structlog

from worldcal import CalendarDefinition, LeapYearRule, Month, Season, default_calendar


@pytest.fixture(autouse=True)
def _reset_logging():
    # The CLI configures structlog globally against the captured stderr of the running test.
    yield
    structlog.reset_defaults()


@pytest.fixture
def gregorian():
    return default_calendar()


@pytest.fixture
def custom():
    """Five-day week, three uneven months, leap day at the end of the year."""
    return CalendarDefinition(
        weekdays=("Ash", "Bel", "Cor", "Dun", "Eld"),
        day_zero_weekday=3,
        months=(Month("Thaw", 40), Month("Bloom", 45), Month("Deep Winter", 35)),
        seasons=(Season("Growing", 1, 10, 2, 45), Season("Dark", 3, 1, 1, 9)),
        era="AR",
        previous_era="BR",
        leap_year=LeapYearRule(month=3, every=5, except_=25, unless=125),
    )


@pytest.fixture
def except_only():
    """Every 4th year is leap except centuries, with no 'unless' term."""
    return CalendarDefinition(
        weekdays=("One", "Two", "Three"),
        day_zero_weekday=0,
        months=(Month("First", 20), Month("Second", 21)),
        seasons=(Season("All", 1, 1, 2, 21),),
        era="NE",
        previous_era="OE",
        leap_year=LeapYearRule(month=1, every=4, except_=100),
    )


@pytest.fixture
def tiny():
    """No leap rule; short months so grids are easy to check by hand."""
    return CalendarDefinition(
        weekdays=("Ash", "Bel", "Cor", "Dun", "Eld"),
        day_zero_weekday=0,
        months=(Month("Ice", 9), Month("Mud", 12)),
        seasons=(Season("Cold", 1, 1, 1, 9), Season("Wet", 2, 1, 2, 12)),
    )
