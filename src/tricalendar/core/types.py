from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

@dataclass(frozen=True, order=True)
class CivilDate:
    """Proleptic Gregorian date. Month is 1-based (1..12), like datetime.date."""
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class BengaliDate:
    year: int
    month: int  # 0..11, 0 = Boishakh
    day: int
    month_name: str
    season: str

@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int  # 0..11, 0 = Muharram
    day: int
    month_name: str           # Arabic script
    month_name_bengali: str   # Bengali script

@dataclass(frozen=True)
class DayInfo:
    civil_date: CivilDate
    bengali: BengaliDate
    hijri: HijriDate
    attributes: Optional[Dict[str, Any]] = None
