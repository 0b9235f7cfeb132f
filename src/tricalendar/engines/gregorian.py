"""Display tables for the Gregorian side of the calendar."""

from __future__ import annotations

from typing import Tuple

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Sunday first, matching weekday() in core.time.
GREGORIAN_WEEKDAYS: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Indexed by 0-based Gregorian month.
GREGORIAN_SEASONS: Tuple[str, ...] = (
    "Winter", "Winter", "Spring", "Spring", "Summer", "Summer",
    "Autumn", "Autumn", "Autumn", "Winter", "Winter", "Winter",
)
