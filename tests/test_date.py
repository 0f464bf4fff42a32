# tests/test_date.py

import random
from dataclasses import replace
from datetime import date

import pytest

from worldcal import CalendarDate, InvalidDate, InvalidDay, InvalidMonth, InvalidYear
from worldcal.core.date import compute_days, days_to_year, year_to_days


def all_months_days(cal, year):
    for m in range(1, cal.month_count + 1):
        for d in range(1, cal.days_in_month(m, year) + 1):
            yield m, d


def test_day_zero_is_first_of_year_one(gregorian):
    d = CalendarDate(gregorian, 0)
    assert d.mdy == (1, 1, 1)
    assert d.weekday_name == "Monday"
    assert CalendarDate.from_mdy(gregorian, 1, 1, 1).days == 0


def test_day_before_zero_is_last_of_year_minus_one(gregorian):
    d = CalendarDate(gregorian, -1)
    assert d.mdy == (12, 31, -1)
    assert d.era == "BC"
    assert d.weekday_name == "Sunday"


def test_year_minus_one_is_a_leap_year(gregorian):
    d = CalendarDate.from_mdy(gregorian, 2, 29, -1)
    assert d.days == -366 + 31 + 28
    assert CalendarDate(gregorian, -366).mdy == (1, 1, -1)


def test_matches_proleptic_gregorian_ordinals(gregorian):
    random.seed(42)
    for _ in range(3000):
        ordinal = random.randint(1, date(9999, 12, 31).toordinal())
        g = date.fromordinal(ordinal)
        d = CalendarDate(gregorian, ordinal - 1)
        assert d.mdy == (g.month, g.day, g.year)
        assert d.weekday == (g.weekday() + 1) % 7
        assert d.day_in_year == g.timetuple().tm_yday
        assert CalendarDate.from_mdy(gregorian, g.month, g.day, g.year).days == ordinal - 1


@pytest.mark.parametrize("name", ["gregorian", "custom", "except_only", "tiny"])
def test_round_trip_mdy(request, name):
    cal = request.getfixturevalue(name)
    for year in list(range(-60, 0)) + list(range(1, 60)):
        for m, d in all_months_days(cal, year):
            days = CalendarDate.from_mdy(cal, m, d, year).days
            assert CalendarDate(cal, days).mdy == (m, d, year)


@pytest.mark.parametrize("name", ["gregorian", "custom", "except_only"])
def test_every_day_count_resolves(request, name):
    cal = request.getfixturevalue(name)
    previous = None
    for n in range(-20000, 20000, 7):
        d = CalendarDate(cal, n)
        assert d.year != 0
        assert CalendarDate.from_mdy(cal, *d.mdy).days == n
        if previous is not None:
            assert d >= previous
        previous = d


def test_year_zero_rejected(gregorian):
    with pytest.raises(InvalidYear, match="year 0"):
        CalendarDate.from_mdy(gregorian, 1, 1, 0)


def test_year_is_never_zero_around_epoch(gregorian, custom):
    for cal in (gregorian, custom):
        for n in range(-800, 800):
            assert days_to_year(cal, n) != 0


@pytest.mark.parametrize("name", ["gregorian", "custom", "except_only", "tiny"])
def test_year_to_days_strictly_increasing(request, name):
    cal = request.getfixturevalue(name)
    years = [y for y in range(-1000, 1001) if y != 0]
    starts = [year_to_days(cal, y) for y in years]
    for y, a, b in zip(years, starts, starts[1:]):
        assert b - a == cal.days_in_year(y), y
    assert year_to_days(cal, 1) == 0


def test_compute_days_rejects_bad_fields(gregorian):
    with pytest.raises(InvalidMonth) as e:
        compute_days(gregorian, 13, 1, 2017)
    assert e.value.field == "month"
    assert e.value.value == 13
    with pytest.raises(InvalidMonth):
        compute_days(gregorian, 0, 1, 2017)
    with pytest.raises(InvalidDay) as e:
        compute_days(gregorian, 2, 29, 2017)
    assert e.value.field == "day"
    with pytest.raises(InvalidDay):
        compute_days(gregorian, 1, 0, 2017)
    assert compute_days(gregorian, 2, 29, 2016) == date(2016, 2, 29).toordinal() - 1


def test_invalid_date_is_a_value_error(gregorian):
    with pytest.raises(ValueError):
        CalendarDate.from_mdy(gregorian, 2, 30, 2000)
    assert issubclass(InvalidDay, InvalidDate)


def test_weekday_is_periodic(gregorian, custom):
    for cal in (gregorian, custom):
        n = cal.weekday_count
        for days in range(-50, 50):
            w = CalendarDate(cal, days).weekday
            assert 0 <= w < n
            for k in (-3, -1, 1, 4):
                assert CalendarDate(cal, days + n * k).weekday == w


def test_custom_day_zero_weekday(custom):
    assert CalendarDate(custom, 0).weekday_name == "Dun"
    assert CalendarDate(custom, 2).weekday_name == "Ash"
    assert CalendarDate(custom, -1).weekday_name == "Cor"


def test_leap_day_in_last_month(custom):
    # Year 5 is a leap year with the extra day at the end of "Deep Winter".
    assert custom.is_leap_year(5)
    last = CalendarDate.from_mdy(custom, 3, 36, 5)
    assert last.day_in_year == 121
    assert (last + 1).mdy == (1, 1, 6)
    assert last.days_in_month == 36


def test_accessors(gregorian):
    d = CalendarDate.from_mdy(gregorian, 9, 22, 2017)
    assert d.year == 2017
    assert d.month == 9
    assert d.day_in_month == 22
    assert d.month_name == "September"
    assert d.weekday_name == "Friday"
    assert d.days_in_month == 30
    assert not d.is_leap_year
    assert d.era == "AD"
    assert d.seasons == ["Autumn"]
    assert CalendarDate.from_mdy(gregorian, 1, 5, 2017).seasons == ["Winter"]


def test_arithmetic_and_ordering(gregorian):
    a = CalendarDate.from_mdy(gregorian, 12, 31, -1)
    b = a + 1
    assert b.mdy == (1, 1, 1)
    assert 1 + a == b
    assert b - a == 1
    assert (b - 1) == a
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert hash(a) == hash(CalendarDate(gregorian, a.days))
    assert replace(a, days=0).mdy == (1, 1, 1)


def test_dates_are_immutable(gregorian):
    d = CalendarDate(gregorian, 5)
    with pytest.raises(AttributeError):
        d.days = 6


def test_month_walk_exhaustion_is_fatal(gregorian):
    from worldcal.core.date import month_and_day

    with pytest.raises(RuntimeError):
        month_and_day(gregorian, 2017, 366)
