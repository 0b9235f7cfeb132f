# tests/test_api.py

import pytest
from datetime import date

import tricalendar
from tricalendar.core.errors import UnknownCalendarError


def test_list_calendars():
    assert tricalendar.list_calendars() == ["bengali", "hijri"]


def test_convert_dispatch():
    d = date(2024, 4, 15)
    assert tricalendar.convert(d) == tricalendar.gregorian_to_bangla(d)
    assert tricalendar.convert(d, calendar="hijri") == tricalendar.gregorian_to_hijri(d)


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        tricalendar.convert(date(2024, 4, 15), calendar="julian")
    # also a KeyError, like other registry lookups
    with pytest.raises(KeyError):
        tricalendar.convert(date(2024, 4, 15), calendar="julian")


def test_day_info_without_attributes():
    info = tricalendar.day_info((2024, 12, 17))
    assert info.civil_date == tricalendar.CivilDate(2024, 12, 17)
    assert (info.bengali.year, info.bengali.month, info.bengali.day) == (1431, 8, 1)
    assert info.hijri.year == 1446
    assert info.attributes is None


def test_day_info_attributes():
    info = tricalendar.day_info(date(2024, 4, 20), attributes=("weekday", "day_of_year", "week_number"))
    assert info.attributes == {"weekday": 6, "day_of_year": 111, "week_number": 16}


def test_unknown_attribute():
    with pytest.raises(UnknownCalendarError):
        tricalendar.day_info(date(2024, 4, 20), attributes=("moon_phase",))


def test_info_bar():
    assert tricalendar.info_bar((2024, 4, 20)) == {
        "season": "Spring",
        "bengali_season": "গ্রীষ্ম",
        "day_of_year": 111,
        "week_number": 16,
    }
    assert tricalendar.info_bar((2024, 1, 10))["bengali_season"] == "শীত"
    assert tricalendar.info_bar((2024, 7, 1))["season"] == "Autumn"


def test_converted_dates_are_frozen():
    b = tricalendar.gregorian_to_bangla((2024, 4, 20))
    with pytest.raises(AttributeError):
        b.day = 3
