"""
tricalendar.engines.bengali
---------------------------
Gregorian -> Bengali (revised Bangladesh) solar calendar.

The year starts on a fixed Gregorian date: April 15 in a Gregorian leap year,
April 14 otherwise. This is a one-rule approximation, not the solar transit,
so labels near the year boundary can drift from official almanacs.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import DateLike, as_civil, is_leap_year, to_jdn
from ..core.types import BengaliDate, CivilDate

BENGALI_EPOCH_OFFSET = 593  # Gregorian year - Bengali year, after New Year

# Boishakh..Bhadro have 31 days, Ashwin..Chaitra 30.
BENGALI_MONTH_LENGTHS: Tuple[int, ...] = (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30, 30)

BENGALI_MONTHS: Tuple[str, ...] = (
    "বৈশাখ", "জ্যৈষ্ঠ", "আষাঢ়", "শ্রাবণ", "ভাদ্র", "আশ্বিন",
    "কার্তিক", "অগ্রহায়ণ", "পৌষ", "মাঘ", "ফাল্গুন", "চৈত্র",
)

# Six seasons of two months each, starting with summer (Grishmo).
BENGALI_SEASONS: Tuple[str, ...] = (
    "গ্রীষ্ম", "গ্রীষ্ম", "বর্ষা", "বর্ষা", "শরৎ", "শরৎ",
    "হেমন্ত", "হেমন্ত", "শীত", "শীত", "বসন্ত", "বসন্ত",
)

# Sunday first, matching weekday() in core.time.
BENGALI_WEEKDAYS: Tuple[str, ...] = ("রবি", "সোম", "মঙ্গল", "বুধ", "বৃহঃ", "শুক্র", "শনি")


def new_year_day_of_april(gregorian_year: int) -> int:
    return 15 if is_leap_year(gregorian_year) else 14


def bengali_new_year(gregorian_year: int) -> CivilDate:
    """Gregorian date on which Bengali year (gregorian_year - 593) begins."""
    return CivilDate(gregorian_year, 4, new_year_day_of_april(gregorian_year))


def gregorian_to_bangla(d: DateLike) -> BengaliDate:
    c = as_civil(d)
    new_year = bengali_new_year(c.year)

    year = c.year - BENGALI_EPOCH_OFFSET
    if c < new_year:
        year -= 1
        new_year = bengali_new_year(c.year - 1)

    days = to_jdn(c) - to_jdn(new_year)

    # Month walk. If the span outruns the table (366 days after a 14 April
    # anchor) the month stays at 0 and the leftover is the day.
    month = 0
    remaining = days
    for i, length in enumerate(BENGALI_MONTH_LENGTHS):
        if remaining < length:
            month = i
            break
        remaining -= length

    # The count above runs one day behind: New Year itself is day 0, and each
    # month's last day comes out as day 0 of the next. Both roll back to the
    # previous month's final day.
    day = remaining
    if day <= 0:
        month = (month - 1) % 12
        day = BENGALI_MONTH_LENGTHS[month]

    return BengaliDate(
        year=year,
        month=month,
        day=day,
        month_name=BENGALI_MONTHS[month],
        season=BENGALI_SEASONS[month],
    )
