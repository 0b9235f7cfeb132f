"""
tricalendar.render.grid
-----------------------
Month grid model shared by every view: six Sunday-first weeks of seven cells,
padded with the tail of the previous month and the head of the next.
Each cell carries both conversions so renderers never call the engines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.time import DateLike, as_civil, days_in_month, from_jdn, to_jdn, weekday
from ..core.types import BengaliDate, CivilDate, HijriDate
from ..engines.bengali import gregorian_to_bangla
from ..engines.hijri import gregorian_to_hijri

logger = logging.getLogger(__name__)

GRID_WEEKS = 6
GRID_CELLS = 7 * GRID_WEEKS


@dataclass(frozen=True)
class GridCell:
    civil: CivilDate
    in_month: bool
    is_today: bool
    bengali: BengaliDate
    hijri: HijriDate

    @property
    def starts_bengali_month(self) -> bool:
        return self.bengali.day == 1

    @property
    def starts_hijri_month(self) -> bool:
        return self.hijri.day == 1


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int  # 1..12
    cells: Tuple[GridCell, ...]

    @property
    def weeks(self) -> List[Tuple[GridCell, ...]]:
        return [self.cells[i:i + 7] for i in range(0, GRID_CELLS, 7)]

    @property
    def first(self) -> CivilDate:
        return CivilDate(self.year, self.month, 1)

    def bengali_months(self) -> List[str]:
        """Distinct Bengali month names in view, in order of appearance."""
        return _distinct(c.bengali.month_name for c in self.cells)

    def hijri_months(self) -> List[str]:
        """Distinct Hijri month names (Bengali script) in view, in order of appearance."""
        return _distinct(c.hijri.month_name_bengali for c in self.cells)


def _distinct(names) -> List[str]:
    out: List[str] = []
    for n in names:
        if n not in out:
            out.append(n)
    return out


def month_range_label(names: List[str]) -> str:
    """'first - last' when a view spans several months, else the single name."""
    if len(names) > 1:
        return f"{names[0]} - {names[-1]}"
    return names[0] if names else ""


def month_grid(year: int, month: int, *, today: Optional[DateLike] = None) -> MonthGrid:
    first = as_civil((year, month, 1))
    today_c = as_civil(today) if today is not None else None

    lead = weekday(first)
    start_jdn = to_jdn(first) - lead
    n_days = days_in_month(year, month)

    cells = []
    for i in range(GRID_CELLS):
        c = from_jdn(start_jdn + i)
        in_month = lead <= i < lead + n_days
        cells.append(GridCell(
            civil=c,
            in_month=in_month,
            is_today=in_month and c == today_c,
            bengali=gregorian_to_bangla(c),
            hijri=gregorian_to_hijri(c),
        ))

    logger.debug("month_grid %04d-%02d: lead=%d days=%d today=%s", year, month, lead, n_days, today_c)
    return MonthGrid(year=year, month=month, cells=tuple(cells))
