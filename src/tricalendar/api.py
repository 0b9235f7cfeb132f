from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .attributes import standard as _standard  # noqa: F401  (registers built-in attributes)
from .attributes.registry import compute_attributes
from .core.errors import UnknownCalendarError
from .core.time import DateLike, as_civil
from .core.types import BengaliDate, DayInfo, HijriDate
from .engines.bengali import gregorian_to_bangla
from .engines.hijri import gregorian_to_hijri
from .render import html as _html
from .render import text as _text
from .render.grid import MonthGrid, month_grid

logger = logging.getLogger(__name__)

Converter = Callable[[DateLike], Union[BengaliDate, HijriDate]]

_CONVERTERS: Mapping[str, Converter] = {
    "bengali": gregorian_to_bangla,
    "hijri": gregorian_to_hijri,
}

_RENDERERS = {
    "text": {
        "unified": _text.render_unified,
        "english": _text.render_english,
        "bengali": _text.render_bengali,
        "hijri": _text.render_hijri,
    },
    "html": {
        "unified": _html.render_unified,
        "english": _html.render_english,
        "bengali": _html.render_bengali,
        "hijri": _html.render_hijri,
    },
}

# "all" shows the three single-calendar views side by side.
VIEWS = ("unified", "english", "bengali", "hijri", "all")
_ALL_VIEWS = ("bengali", "english", "hijri")

def list_calendars() -> List[str]:
    return sorted(_CONVERTERS)

def convert(d: DateLike, *, calendar: str = "bengali") -> Union[BengaliDate, HijriDate]:
    if calendar not in _CONVERTERS:
        raise UnknownCalendarError(f"Unknown calendar '{calendar}'. Available: {list_calendars()}")
    return _CONVERTERS[calendar](d)

def day_info(d: DateLike, *, attributes: Sequence[str] = ()) -> DayInfo:
    c = as_civil(d)
    info = DayInfo(civil_date=c, bengali=gregorian_to_bangla(c), hijri=gregorian_to_hijri(c))
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def info_bar(d: DateLike) -> Dict[str, Any]:
    """Season, Bengali season, day of year and week number for one date."""
    return day_info(d, attributes=("season", "bengali_season", "day_of_year", "week_number")).attributes

def render_view(
    view: str,
    year: int,
    month: int,
    *,
    today: Optional[DateLike] = None,
    ref: Optional[DateLike] = None,
    fmt: str = "text",
) -> str:
    """
    Render one month in the given view.

    The month cursor (year, month) and "today" are explicit; nothing is read
    from the clock here. ref selects the date shown in the header and defaults
    to today.
    """
    if fmt not in _RENDERERS:
        raise UnknownCalendarError(f"Unknown format '{fmt}'. Available: {sorted(_RENDERERS)}")
    if view not in VIEWS:
        raise UnknownCalendarError(f"Unknown view '{view}'. Available: {list(VIEWS)}")

    grid: MonthGrid = month_grid(year, month, today=today)
    ref = ref if ref is not None else today
    logger.debug("render_view view=%s fmt=%s %04d-%02d", view, fmt, year, month)

    table = _RENDERERS[fmt]
    if view == "all":
        sep = "\n" if fmt == "text" else ""
        return sep.join(table[v](grid, ref) for v in _ALL_VIEWS)
    return table[view](grid, ref)
