# tests/test_time.py

import pytest
import random
from datetime import date, datetime

from tricalendar.core import time as ct
from tricalendar.core.errors import InvalidDateError
from tricalendar.core.types import CivilDate

def test_jdn_date_roundtrip():
        random.seed(42)
        # Constrain to year 1 - 9999 to compare against datetime ordinals
        for _ in range(10000):
            jdn_in = random.randint(1721426, 5373484)
            c = ct.from_jdn(jdn_in)
            assert c.to_date() == date.fromordinal(jdn_in - 1721425)
            assert ct.to_jdn(c) == jdn_in

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert ct.to_jdn(date(2000, 1, 1)) == 2451545
    assert ct.to_jdn((2025, 3, 1)) == 2460736
    # Julian 622-07-16 is proleptic Gregorian 622-07-19
    assert ct.from_jdn(1948440) == CivilDate(622, 7, 19)

def test_proleptic_years_before_one():
    c = ct.from_jdn(ct.to_jdn((0, 2, 29)))
    assert c == CivilDate(0, 2, 29)
    assert ct.to_jdn((0, 3, 1)) - ct.to_jdn((0, 2, 28)) == 2
    assert ct.to_jdn((-1, 12, 31)) + 1 == ct.to_jdn((0, 1, 1))

@pytest.mark.parametrize("year, leap", [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (2100, False)])
def test_is_leap_year(year, leap):
    assert ct.is_leap_year(year) is leap

@pytest.mark.parametrize("d, doy", [
    ((2024, 1, 1), 1),
    ((2023, 3, 1), 60),
    ((2024, 3, 1), 61),
    ((2023, 12, 31), 365),
    ((2024, 12, 31), 366),
])
def test_day_of_year(d, doy):
    assert ct.day_of_year(d) == doy

def test_weekday_matches_datetime():
    assert ct.weekday((2000, 1, 1)) == 6  # Saturday
    d = date(2024, 1, 1)
    for i in range(400):
        x = date.fromordinal(d.toordinal() + i)
        assert ct.weekday(x) == x.isoweekday() % 7

def test_week_number_january_first_is_week_one():
    for y in range(1990, 2040):
        assert ct.week_number((y, 1, 1)) == 1

def test_week_number_sunday_start():
    # 2022-01-01 is a Saturday, so the Sunday after starts week 2
    assert ct.week_number((2022, 1, 1)) == 1
    assert ct.week_number((2022, 1, 2)) == 2
    # 2023-01-01 is a Sunday
    assert ct.week_number((2023, 1, 7)) == 1
    assert ct.week_number((2023, 1, 8)) == 2

def test_week_number_against_strftime():
    # %U counts days before the first Sunday as week 0
    for i in range(366):
        x = date.fromordinal(date(2024, 1, 1).toordinal() + i)
        jan1_is_sunday = date(x.year, 1, 1).isoweekday() == 7
        assert ct.week_number(x) == int(x.strftime("%U")) + (0 if jan1_is_sunday else 1)

def test_is_same_day_ignores_time():
    a = datetime(2024, 4, 15, 0, 1)
    b = datetime(2024, 4, 15, 23, 59, 59)
    assert ct.is_same_day(a, b)
    assert ct.is_same_day(a, CivilDate(2024, 4, 15))
    assert ct.is_same_day(date(2024, 4, 15), (2024, 4, 15))
    assert not ct.is_same_day(a, datetime(2024, 4, 16, 0, 1))

@pytest.mark.parametrize("ym, delta, expected", [
    ((2024, 12), 1, (2025, 1)),
    ((2024, 1), -1, (2023, 12)),
    ((2024, 5), -17, (2022, 12)),
    ((2024, 5), 0, (2024, 5)),
    ((2024, 5), 24, (2026, 5)),
])
def test_shift_month(ym, delta, expected):
    assert ct.shift_month(*ym, delta) == expected

def test_days_in_month():
    assert ct.days_in_month(2024, 2) == 29
    assert ct.days_in_month(2023, 2) == 28
    assert ct.days_in_month(1900, 2) == 28
    assert ct.days_in_month(2023, 4) == 30
    assert ct.days_in_month(2023, 12) == 31

@pytest.mark.parametrize("bad", [
    (2024, 0, 1),
    (2024, 13, 1),
    (2024, 1, 0),
    (2024, 1, -3),
    (2024, 2, 30),
    (2023, 2, 29),
    (2024.0, 1, 1),
    (2024, True, 1),
    "2024-01-01",
    (2024, 1),
])
def test_as_civil_rejects(bad):
    with pytest.raises(InvalidDateError):
        ct.as_civil(bad)

def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        ct.to_jdn((2024, 4, 31))

def test_as_civil_accepts():
    assert ct.as_civil((2024, 2, 29)) == CivilDate(2024, 2, 29)
    assert ct.as_civil(datetime(2024, 2, 29, 13, 30)) == CivilDate(2024, 2, 29)
    assert ct.as_civil([2024, 2, 29]) == CivilDate(2024, 2, 29)
    assert ct.as_civil(CivilDate(0, 2, 29)) == CivilDate(0, 2, 29)
