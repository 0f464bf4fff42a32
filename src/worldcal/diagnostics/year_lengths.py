#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from worldcal.config import load_calendar_file
from worldcal.core.calendar import CalendarDefinition, default_calendar


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "worldcal[diagnostics]"') from e


@dataclass(frozen=True)
class YearLengthStats:
    from_year: int
    to_year: int
    years: int
    leap_years: int
    mean_length: float
    target: float
    final_drift: float
    max_abs_drift: float

    @property
    def leap_fraction(self) -> float:
        return self.leap_years / self.years if self.years else 0.0


def year_numbers(np, from_year: int, to_year: int):
    """Years from_year..to_year inclusive, skipping 0."""
    ys = np.arange(from_year, to_year + 1, dtype=np.int64)
    return ys[ys != 0]


def year_lengths(np, cal: CalendarDefinition, years):
    return np.fromiter((cal.days_in_year(int(y)) for y in years), dtype=np.int64, count=len(years))


def year_length_stats(cal: CalendarDefinition, from_year: int, to_year: int, target: float) -> YearLengthStats:
    """
    Year-length summary over a range. Drift is the running sum of
    (length - target), i.e. how far the calendar wanders from a year of
    ``target`` days.
    """
    np = _need_numpy()
    years = year_numbers(np, from_year, to_year)
    if years.size == 0:
        raise ValueError("year range contains no years")
    lengths = year_lengths(np, cal, years)
    drift = np.cumsum(lengths - target)
    return YearLengthStats(
        from_year=from_year,
        to_year=to_year,
        years=int(years.size),
        leap_years=int(np.count_nonzero(lengths > cal.min_days_per_year())),
        mean_length=float(lengths.mean()),
        target=target,
        final_drift=float(drift[-1]),
        max_abs_drift=float(np.abs(drift).max()),
    )


def print_table(cal: CalendarDefinition, from_year: int, to_year: int) -> None:
    np = _need_numpy()
    years = year_numbers(np, from_year, to_year)
    lengths = year_lengths(np, cal, years)
    print(f"{'year':>8}  {'days':>5}  leap")
    for y, n in zip(years.tolist(), lengths.tolist()):
        print(f"{y:>8}  {n:>5}  {'*' if n > cal.min_days_per_year() else ''}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year-length statistics and drift against a target year length.")
    p.add_argument("--calendar", metavar="FILE", help="JSON calendar definition (default: built-in)")
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=400)
    p.add_argument("--target", type=float, default=365.2425, help="Target mean year length in days.")
    p.add_argument("--table", action="store_true", help="Also print one row per year.")
    args = p.parse_args(argv)

    cal = load_calendar_file(args.calendar) if args.calendar else default_calendar()
    if args.table:
        print_table(cal, args.from_year, args.to_year)
        print()

    s = year_length_stats(cal, args.from_year, args.to_year, args.target)
    print(f"years {s.from_year}..{s.to_year} ({s.years} years)")
    print(f"  leap years   = {s.leap_years} ({s.leap_fraction:.4%})")
    print(f"  mean length  = {s.mean_length:.6f} days")
    print(f"  target       = {s.target:.6f} days")
    print(f"  final drift  = {s.final_drift:+.4f} days")
    print(f"  max |drift|  = {s.max_abs_drift:.4f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
