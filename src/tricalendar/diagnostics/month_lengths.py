#!/usr/bin/env python3
"""
Census of observed month lengths.

Walks every day of a Gregorian year range through both converters, cuts the
day labels into runs at each "day 1", and tabulates how long each month index
actually lasted. Runs cut short by the Bengali New Year rule show up as
unusually short Boishakh runs.
"""
from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple

from tricalendar.core.time import from_jdn, to_jdn
from tricalendar.core.types import CivilDate
from tricalendar.engines.bengali import BENGALI_MONTHS, gregorian_to_bangla
from tricalendar.engines.hijri import HIJRI_MONTHS_BENGALI, gregorian_to_hijri


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "tricalendar[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "tricalendar[diagnostics]"') from e


CONVERTERS = {
    "bengali": (gregorian_to_bangla, BENGALI_MONTHS),
    "hijri": (gregorian_to_hijri, HIJRI_MONTHS_BENGALI),
}


def build_labels(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """(month index, day) per consecutive day from Jan 1 of start_year to Dec 31 of end_year."""
    fn, _ = CONVERTERS[calendar]
    j0 = to_jdn(CivilDate(start_year, 1, 1))
    j1 = to_jdn(CivilDate(end_year, 12, 31))
    months = np.empty(j1 - j0 + 1, dtype=int)
    days = np.empty_like(months)
    for i, j in enumerate(range(j0, j1 + 1)):
        d = fn(from_jdn(j))
        months[i] = d.month
        days[i] = d.day
    return months, days


def run_lengths(np, months, days) -> Tuple["np.ndarray", "np.ndarray"]:
    """Month index and length of every complete run between two consecutive day-1 labels."""
    starts = np.flatnonzero(days == 1)
    if len(starts) < 2:
        return np.empty(0, dtype=int), np.empty(0, dtype=int)
    return months[starts[:-1]], np.diff(starts)


def census(np, month_idx, lengths) -> Dict[int, Dict[int, int]]:
    """month index -> {length: count}"""
    out: Dict[int, Dict[int, int]] = {}
    for m in range(12):
        vals, counts = np.unique(lengths[month_idx == m], return_counts=True)
        out[m] = {int(v): int(c) for v, c in zip(vals, counts)}
    return out


def print_census(calendar: str, table: Dict[int, Dict[int, int]]) -> None:
    _, names = CONVERTERS[calendar]
    print(f"{calendar} month lengths")
    print("-" * 40)
    for m in range(12):
        hist = "  ".join(f"{L}d x{c}" for L, c in sorted(table[m].items())) or "(none)"
        print(f"{m:2d}  {names[m]:<14} {hist}")
    print()


def plot_census(plt, tables: Dict[str, Dict[int, Dict[int, int]]], out: str) -> None:
    fig, axes = plt.subplots(1, len(tables), figsize=(5.0 * len(tables), 3.8), constrained_layout=True)
    if len(tables) == 1:
        axes = [axes]
    for ax, (calendar, table) in zip(axes, tables.items()):
        lengths = sorted({L for row in table.values() for L in row})
        bottom = [0] * 12
        for L in lengths:
            counts = [table[m].get(L, 0) for m in range(12)]
            ax.bar(range(1, 13), counts, bottom=bottom, label=f"{L} days")
            bottom = [b + c for b, c in zip(bottom, counts)]
        ax.set_title(calendar)
        ax.set_xlabel("month")
        ax.set_ylabel("occurrences")
        ax.set_xticks(range(1, 13))
        ax.legend(frameon=False, fontsize=8)
    fig.savefig(out, dpi=200)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Observed Bengali and Hijri month lengths over a Gregorian year range.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--calendar", choices=("bengali", "hijri", "both"), default="both")
    p.add_argument("--plot", default="", help="Write a stacked bar chart to this PNG path (needs matplotlib).")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    calendars = ["bengali", "hijri"] if args.calendar == "both" else [args.calendar]

    tables = {}
    for cal in calendars:
        months, days = build_labels(np, cal, args.from_year, args.to_year)
        tables[cal] = census(np, *run_lengths(np, months, days))
        print_census(cal, tables[cal])

    if args.plot:
        plt = _need_matplotlib()
        plot_census(plt, tables, args.plot)
        print(f"Saved: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
