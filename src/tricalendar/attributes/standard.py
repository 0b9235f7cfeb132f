from __future__ import annotations
from typing import Any, Dict

from ..core import time as ct
from ..engines.gregorian import GREGORIAN_SEASONS
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # 0=Sun..6=Sat
    return {"weekday": ct.weekday(info.civil_date)}

def day_of_year(info) -> Dict[str, Any]:
    return {"day_of_year": ct.day_of_year(info.civil_date)}

def week_number(info) -> Dict[str, Any]:
    return {"week_number": ct.week_number(info.civil_date)}

def season(info) -> Dict[str, Any]:
    return {"season": GREGORIAN_SEASONS[info.civil_date.month - 1]}

def bengali_season(info) -> Dict[str, Any]:
    return {"bengali_season": info.bengali.season}

register_attribute("weekday", weekday)
register_attribute("day_of_year", day_of_year)
register_attribute("week_number", week_number)
register_attribute("season", season)
register_attribute("bengali_season", bengali_season)
