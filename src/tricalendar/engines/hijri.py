"""
tricalendar.engines.hijri
-------------------------
Gregorian -> tabular (arithmetic) Islamic calendar.

Dates are bridged through the Julian Day Number. Years follow the mean
length of 10631/30 days (30-year cycle); months alternate 30/29 days.
This is an approximation of the observational calendar: local moon sighting
can move a month start by a day or more.
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.time import DateLike, from_jdn, to_jdn
from ..core.types import CivilDate, HijriDate

ISLAMIC_EPOCH_JDN = 1948440  # 1 Muharram 1 AH (Julian 622-07-16)
CYCLE_DAYS = 10631           # days per 30 Islamic years
CYCLE_YEARS = 30

HIJRI_MONTHS_ARABIC: Tuple[str, ...] = (
    "محرم", "صفر", "ربيع الأول", "ربيع الثاني", "جمادى الأولى", "جمادى الآخرة",
    "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
)

HIJRI_MONTHS_BENGALI: Tuple[str, ...] = (
    "মহররম", "সফর", "রবিউল আউয়াল", "রবিউস সানি", "জমাদিউল আউয়াল", "জমাদিউস সানি",
    "রজব", "শাবান", "রমজান", "শাওয়াল", "জিলকদ", "জিলহজ্জ",
)


def is_hijri_leap_year(year: int) -> bool:
    return (year * 11 + 14) % 30 < 11


def hijri_month_lengths(year: int) -> List[int]:
    lengths = [30 if i % 2 == 0 else 29 for i in range(12)]
    if is_hijri_leap_year(year):
        lengths[11] = 30
    return lengths


def hijri_year_start_jdn(year: int) -> int:
    """
    First JDN of the year: the first day on or after the mean-year boundary
    (year-1) * 10631/30, i.e. the first day the year estimate in
    gregorian_to_hijri assigns to this year.
    """
    return -((-(year - 1) * CYCLE_DAYS) // CYCLE_YEARS) + ISLAMIC_EPOCH_JDN


def hijri_new_year(year: int) -> CivilDate:
    """Gregorian date of 1 Muharram of the given Hijri year."""
    return from_jdn(hijri_year_start_jdn(year))


def gregorian_to_hijri(d: DateLike) -> HijriDate:
    jdn = to_jdn(d)
    days = jdn - ISLAMIC_EPOCH_JDN

    year = (days * CYCLE_YEARS) // CYCLE_DAYS + 1
    day = jdn - hijri_year_start_jdn(year) + 1

    # Dhu al-Hijja takes whatever the mean-year boundary leaves, which can
    # differ by a day from the leap-rule length.
    lengths = hijri_month_lengths(year)
    month = 0
    for length in lengths[:-1]:
        if day <= length:
            break
        day -= length
        month += 1

    return HijriDate(
        year=year,
        month=month,
        day=day,
        month_name=HIJRI_MONTHS_ARABIC[month],
        month_name_bengali=HIJRI_MONTHS_BENGALI[month],
    )
