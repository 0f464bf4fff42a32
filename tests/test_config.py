# tests/test_config.py

import json

import pytest

from worldcal import CalendarConfigError, calendar_from_dict, calendar_to_dict
from worldcal.config import load_calendar_file


def test_default_calendar_dict(gregorian):
    data = calendar_to_dict(gregorian)
    assert data["weekdays"][0] == "Sunday"
    assert data["day_zero_weekday"] == 1
    assert data["months"][1] == {"name": "February", "days": 28}
    assert data["seasons"][0] == {
        "name": "Winter",
        "start_month": 12,
        "start_day": 21,
        "end_month": 3,
        "end_day": 19,
    }
    assert data["era"] == "AD"
    assert data["previous_era"] == "BC"
    assert data["leap"] == {"month": 2, "every": 4, "except": 100, "unless": 400}


def test_leap_key_omitted_without_rule(tiny):
    assert "leap" not in calendar_to_dict(tiny)


@pytest.mark.parametrize("name", ["gregorian", "custom", "except_only", "tiny"])
def test_dict_round_trip(request, name):
    cal = request.getfixturevalue(name)
    data = json.loads(json.dumps(calendar_to_dict(cal)))
    assert calendar_from_dict(data) == cal


def test_optional_keys_default(gregorian):
    data = calendar_to_dict(gregorian)
    for key in ("day_zero_weekday", "era", "previous_era", "leap"):
        del data[key]
    cal = calendar_from_dict(data)
    assert cal.day_zero_weekday == 0
    assert cal.era == ""
    assert cal.previous_era == ""
    assert cal.leap_year is None


def test_leap_except_and_unless_default_to_zero(gregorian):
    data = calendar_to_dict(gregorian)
    data["leap"] = {"month": 2, "every": 4}
    rule = calendar_from_dict(data).leap_year
    assert (rule.except_, rule.unless) == (0, 0)


def test_missing_key_rejected(gregorian):
    data = calendar_to_dict(gregorian)
    del data["months"]
    with pytest.raises(CalendarConfigError, match="months"):
        calendar_from_dict(data)


def test_unknown_key_rejected(gregorian):
    data = calendar_to_dict(gregorian)
    data["colour"] = "blue"
    with pytest.raises(CalendarConfigError, match="colour"):
        calendar_from_dict(data)


def test_wrong_type_rejected(gregorian):
    data = calendar_to_dict(gregorian)
    data["months"][3]["days"] = "many"
    with pytest.raises(CalendarConfigError, match=r"months\.3\.days"):
        calendar_from_dict(data)


def test_invalid_definition_rejected(gregorian):
    data = calendar_to_dict(gregorian)
    data["leap"]["every"] = 1
    with pytest.raises(CalendarConfigError, match="'every'"):
        calendar_from_dict(data)

    data = calendar_to_dict(gregorian)
    data["months"] = []
    with pytest.raises(CalendarConfigError, match="at least one month"):
        calendar_from_dict(data)


def test_config_error_is_a_value_error(gregorian):
    with pytest.raises(ValueError):
        calendar_from_dict({})


def test_load_calendar_file(tmp_path, custom):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(calendar_to_dict(custom)), encoding="utf-8")
    assert load_calendar_file(path) == custom
    assert load_calendar_file(str(path)) == custom


def test_load_calendar_file_failures(tmp_path, gregorian):
    missing = tmp_path / "missing.json"
    with pytest.raises(CalendarConfigError, match="missing.json"):
        load_calendar_file(missing)

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CalendarConfigError, match="broken.json"):
        load_calendar_file(broken)

    data = calendar_to_dict(gregorian)
    data["day_zero_weekday"] = 9
    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(CalendarConfigError) as e:
        load_calendar_file(invalid)
    assert str(e.value).startswith(str(invalid))
    assert "day zero weekday" in str(e.value)


def test_load_calendar_file_not_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"weekdays": ["Caf\xe9"]}')
    with pytest.raises(CalendarConfigError, match="latin1.json"):
        load_calendar_file(path)
