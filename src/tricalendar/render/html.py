"""
HTML month views.

Markup follows the stylesheet class names of the web front end:
``day-header``, ``day-cell``, ``other-month``, ``today``, ``bengali-text``,
``month-indicator`` with ``bengali-month`` / ``arabic-month``.
"""

from __future__ import annotations

from html import escape
from typing import List, Optional, Sequence

from ..core.time import DateLike
from ..engines.bengali import BENGALI_WEEKDAYS, gregorian_to_bangla
from ..engines.gregorian import GREGORIAN_MONTHS, GREGORIAN_WEEKDAYS
from ..engines.hijri import gregorian_to_hijri
from .grid import GridCell, MonthGrid
from .numerals import to_bengali_number
from .text import reference_date, unified_info


def _headers(names: Sequence[str], extra: str = "") -> List[str]:
    cls = f"day-header {extra}".strip()
    return [f'<div class="{cls}">{escape(n)}</div>' for n in names]


def _cell_class(c: GridCell, extra: str = "") -> str:
    parts = ["day-cell"]
    if not c.in_month:
        parts.append("other-month")
    elif c.is_today:
        parts.append("today")
    if extra:
        parts.append(extra)
    return " ".join(parts)


def _card(view: str, title: str, body: List[str], info: Sequence[str] = ()) -> str:
    out = [f'<div class="calendar-card" id="{view}Card">',
           f'<div class="calendar-title" id="{view}Info">{escape(title)}</div>',
           f'<div class="calendar-grid" id="{view}Calendar">']
    out.extend(body)
    out.append("</div>")
    for i, line in enumerate(info):
        out.append(f'<div class="calendar-info" id="{view}Info{i}">{escape(line)}</div>')
    out.append("</div>")
    return "\n".join(out) + "\n"


def render_english(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    body = _headers(GREGORIAN_WEEKDAYS)
    body += [f'<div class="{_cell_class(c)}">{c.civil.day}</div>' for c in grid.cells]
    return _card("english", f"{GREGORIAN_MONTHS[grid.month - 1]} {grid.year}", body)


def render_bengali(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    body = _headers(BENGALI_WEEKDAYS, "bengali-text")
    body += [f'<div class="{_cell_class(c, "bengali-text")}">{to_bengali_number(c.bengali.day)}</div>'
             for c in grid.cells]
    b = gregorian_to_bangla(reference_date(grid, ref))
    return _card("bengali", f"{b.month_name} {to_bengali_number(b.year)}", body)


def render_hijri(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    body = _headers(BENGALI_WEEKDAYS, "bengali-text")
    body += [f'<div class="{_cell_class(c, "bengali-text")}">{to_bengali_number(c.hijri.day)}</div>'
             for c in grid.cells]
    h = gregorian_to_hijri(reference_date(grid, ref))
    return _card("arabic", f"{h.month_name_bengali} {to_bengali_number(h.year)} হিজরি", body)


def _indicators(c: GridCell) -> str:
    if not c.in_month:
        return ""
    out = ""
    if c.starts_bengali_month:
        out += f'<div class="month-indicator bengali-month" title="{escape(c.bengali.month_name)}"></div>'
    if c.starts_hijri_month:
        right = "10px" if c.starts_bengali_month else "2px"
        out += (f'<div class="month-indicator arabic-month" title="{escape(c.hijri.month_name_bengali)}"'
                f' style="right: {right};"></div>')
    return out


def render_unified(grid: MonthGrid, ref: Optional[DateLike] = None) -> str:
    body = _headers(GREGORIAN_WEEKDAYS)
    for c in grid.cells:
        body.append(
            f'<div class="{_cell_class(c)}">{_indicators(c)}'
            f'<div class="date-main">{c.civil.day}</div>'
            f'<div class="date-bengali">{to_bengali_number(c.bengali.day)}</div>'
            f'<div class="date-arabic">{c.hijri.day}</div></div>'
        )
    title = f"{GREGORIAN_MONTHS[grid.month - 1]} {grid.year}"
    return _card("unified", title, body, unified_info(grid, ref))
