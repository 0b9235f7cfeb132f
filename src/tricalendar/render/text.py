"""Plain-text month views."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.time import DateLike, as_civil
from ..core.types import CivilDate
from ..engines.bengali import BENGALI_WEEKDAYS, gregorian_to_bangla
from ..engines.gregorian import GREGORIAN_MONTHS, GREGORIAN_WEEKDAYS
from ..engines.hijri import gregorian_to_hijri
from .grid import GridCell, MonthGrid, month_range_label
from .numerals import to_bengali_number

CELL_WIDTH = 6


def cell(*lines: str, w: int = CELL_WIDTH) -> tuple[str, ...]:
    return tuple(s[:w].ljust(w) for s in lines)


def dow_header(names: Sequence[str], w: int = CELL_WIDTH) -> str:
    return " ".join(n[:w].ljust(w) for n in names).rstrip()


def format_grid(title: str, header: str, rows: List[List[tuple[str, ...]]], info: Sequence[str] = ()) -> str:
    out = [title, header, "-" * len(header)]
    for wk in rows:
        for k in range(len(wk[0])):
            out.append(" ".join(c[k] for c in wk).rstrip())
    out.extend(info)
    return "\n".join(out) + "\n"


def _mark(label: str, c: GridCell) -> str:
    if not c.in_month:
        return f"({label})"
    if c.is_today:
        return f"{label}*"
    return label


def reference_date(grid: MonthGrid, ref: Optional[DateLike]) -> CivilDate:
    """Date whose labels go into the header: ref when it falls in the grid's month, else the 1st."""
    if ref is not None:
        r = as_civil(ref)
        if (r.year, r.month) == (grid.year, grid.month):
            return r
    return grid.first


def render_english(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    rows = [[cell(_mark(str(c.civil.day), c)) for c in wk] for wk in grid.weeks]
    r = reference_date(grid, ref)
    title = f"{GREGORIAN_MONTHS[grid.month - 1]} {grid.year}  [{r.day}]"
    return format_grid(title, dow_header(GREGORIAN_WEEKDAYS), rows)


def render_bengali(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    rows = [[cell(_mark(to_bengali_number(c.bengali.day), c)) for c in wk] for wk in grid.weeks]
    b = gregorian_to_bangla(reference_date(grid, ref))
    title = f"{b.month_name} {to_bengali_number(b.year)}  [{to_bengali_number(b.day)}]"
    return format_grid(title, dow_header(BENGALI_WEEKDAYS), rows)


def render_hijri(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    rows = [[cell(_mark(to_bengali_number(c.hijri.day), c)) for c in wk] for wk in grid.weeks]
    h = gregorian_to_hijri(reference_date(grid, ref))
    title = f"{h.month_name_bengali} {to_bengali_number(h.year)} হিজরি  [{to_bengali_number(h.day)}]"
    return format_grid(title, dow_header(BENGALI_WEEKDAYS), rows)


def unified_info(grid: MonthGrid, ref: Optional[DateLike] = None) -> List[str]:
    r = reference_date(grid, ref)
    b = gregorian_to_bangla(r)
    h = gregorian_to_hijri(r)
    return [
        f"বাংলা: {month_range_label(grid.bengali_months())} ({to_bengali_number(b.year)})",
        f"আরবি: {month_range_label(grid.hijri_months())} ({to_bengali_number(h.year)} হিজরি)",
    ]


def render_unified(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    rows = []
    for wk in grid.weeks:
        row = []
        for c in wk:
            bn = to_bengali_number(c.bengali.day) + ("^" if c.starts_bengali_month and c.in_month else "")
            hj = str(c.hijri.day) + ("^" if c.starts_hijri_month and c.in_month else "")
            row.append(cell(_mark(str(c.civil.day), c), bn, hj))
        rows.append(row)
    title = f"{GREGORIAN_MONTHS[grid.month - 1]} {grid.year}  [{reference_date(grid, ref).day}]"
    return format_grid(title, dow_header(GREGORIAN_WEEKDAYS), rows, unified_info(grid, ref))
