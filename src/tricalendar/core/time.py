from __future__ import annotations
from datetime import date
from typing import Tuple, Union

from .errors import InvalidDateError
from .types import CivilDate

DateLike = Union[CivilDate, date, Tuple[int, int, int]]

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4 and not by 100, or divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def as_civil(d: DateLike) -> CivilDate:
    """
    Coerce a date-like value to a validated CivilDate.

    Accepts CivilDate, datetime.date / datetime.datetime (time of day is
    dropped) or a (year, month, day) tuple with a 1-based month.
    """
    if isinstance(d, CivilDate):
        y, m, day = d.year, d.month, d.day
    elif isinstance(d, date):
        return CivilDate(d.year, d.month, d.day)
    elif isinstance(d, (tuple, list)) and len(d) == 3:
        y, m, day = d
    else:
        raise InvalidDateError(f"Not a date: {d!r}")

    if not (_is_int(y) and _is_int(m) and _is_int(day)):
        raise InvalidDateError(f"Date components must be integers: {(y, m, day)!r}")
    if not 1 <= m <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {m}")
    if day < 1:
        raise InvalidDateError(f"day must be positive, got {day}")
    if day > days_in_month(y, m):
        raise InvalidDateError(f"day {day} out of range for {y:04d}-{m:02d}")
    return CivilDate(y, m, day)


def to_jdn(d: DateLike) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    c = as_civil(d)
    a = (14 - c.month) // 12
    y2 = c.year + 4800 - a
    m2 = c.month + 12 * a - 3
    return c.day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> CivilDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CivilDate(year, month, day)


def weekday(d: DateLike) -> int:
    """0=Sun..6=Sat."""
    return (to_jdn(d) + 1) % 7


def day_of_year(d: DateLike) -> int:
    """Day count since January 1, inclusive (Jan 1 = 1)."""
    c = as_civil(d)
    return to_jdn(c) - to_jdn(CivilDate(c.year, 1, 1)) + 1


def week_number(d: DateLike) -> int:
    """
    Sunday-based week of the year: ceil((days since Jan 1 + weekday(Jan 1) + 1) / 7).
    January 1 is always in week 1.
    """
    c = as_civil(d)
    jan1 = CivilDate(c.year, 1, 1)
    past = to_jdn(c) - to_jdn(jan1)
    return (past + weekday(jan1) + 1 + 6) // 7


def is_same_day(a: DateLike, b: DateLike) -> bool:
    """Compare year, month and day only."""
    return as_civil(a) == as_civil(b)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month) cursor by delta months; month is 1-based."""
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    total = year * 12 + (month - 1) + delta
    return total // 12, total % 12 + 1
