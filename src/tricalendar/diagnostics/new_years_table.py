from __future__ import annotations

import argparse
from typing import List, Optional

from tricalendar.core.time import from_jdn, to_jdn
from tricalendar.core.types import CivilDate
from tricalendar.engines.bengali import BENGALI_EPOCH_OFFSET, bengali_new_year, gregorian_to_bangla
from tricalendar.engines.hijri import gregorian_to_hijri, hijri_new_year


def mmdd(d: CivilDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def first_boishakh(gregorian_year: int) -> CivilDate:
    """First date around the nominal New Year that converts to Boishakh 1."""
    j0 = to_jdn(bengali_new_year(gregorian_year))
    for j in range(j0 - 1, j0 + 3):
        d = from_jdn(j)
        b = gregorian_to_bangla(d)
        if b.month == 0 and b.day == 1:
            return d
    raise RuntimeError(f"No Boishakh 1 near {gregorian_year}-04-14")


def hijri_new_years_in(gregorian_year: int) -> List[tuple[int, CivilDate]]:
    """(Hijri year, 1 Muharram) pairs falling in a Gregorian year; one or two of them."""
    h0 = gregorian_to_hijri(CivilDate(gregorian_year, 1, 1)).year
    out = []
    for h in range(h0, h0 + 3):
        d = hijri_new_year(h)
        if d.year == gregorian_year:
            out.append((h, d))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Bengali (Pohela Boishakh) and Hijri (1 Muharram) New Year dates per Gregorian year."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: CivilDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else str(d)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Bangla", "New Year", "Boishakh 1", "Hijri New Year(s)"]
    colw = [5, 6, 10, 10, 0]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        hijri = ", ".join(f"{fmt(d)} ({h})" for h, d in hijri_new_years_in(Y))
        row = [
            str(Y).ljust(colw[0]),
            str(Y - BENGALI_EPOCH_OFFSET).ljust(colw[1]),
            fmt(bengali_new_year(Y)).ljust(colw[2]),
            fmt(first_boishakh(Y)).ljust(colw[3]),
            hijri,
        ]
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
