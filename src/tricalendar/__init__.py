"""tricalendar public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    convert,
    day_info,
    info_bar,
    list_calendars,
    render_view,
    VIEWS,
)
from .core.errors import InvalidDateError, TriCalendarError, UnknownCalendarError
from .core.time import day_of_year, from_jdn, is_leap_year, is_same_day, shift_month, to_jdn, week_number
from .core.types import BengaliDate, CivilDate, DayInfo, HijriDate
from .engines.bengali import bengali_new_year, gregorian_to_bangla
from .engines.hijri import gregorian_to_hijri, hijri_month_lengths, hijri_new_year, is_hijri_leap_year
from .render.grid import month_grid
from .render.numerals import to_bengali_number

__all__ = [
    "convert",
    "day_info",
    "info_bar",
    "list_calendars",
    "render_view",
    "VIEWS",
    "gregorian_to_bangla",
    "gregorian_to_hijri",
    "bengali_new_year",
    "hijri_new_year",
    "hijri_month_lengths",
    "is_hijri_leap_year",
    "month_grid",
    "to_bengali_number",
    "CivilDate",
    "BengaliDate",
    "HijriDate",
    "DayInfo",
    "TriCalendarError",
    "InvalidDateError",
    "UnknownCalendarError",
    "day_of_year",
    "week_number",
    "is_same_day",
    "is_leap_year",
    "shift_month",
    "to_jdn",
    "from_jdn",
]
