from __future__ import annotations

import argparse
import random
from typing import List, Optional, Tuple

from worldcal.config import load_calendar_file
from worldcal.core.calendar import CalendarDefinition, default_calendar
from worldcal.core.date import SHORT_FORMAT, CalendarDate


def random_mdy(cal: CalendarDefinition, rng: random.Random, from_year: int, to_year: int) -> Tuple[int, int, int]:
    year = 0
    while year == 0:
        year = rng.randint(from_year, to_year)
    month = rng.randint(1, cal.month_count)
    day = rng.randint(1, cal.days_in_month(month, year))
    return month, day, year


def roundtrip_test(
    cal: CalendarDefinition,
    N: int,
    from_year: int,
    to_year: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        mdy = random_mdy(cal, rng, from_year, to_year)
        d = CalendarDate.from_mdy(cal, *mdy)

        back = CalendarDate(cal, d.days).mdy
        if back != mdy:
            failures += 1
            print("\nFAIL (mdy -> days -> mdy)")
            print("mdy:", mdy)
            print("days:", d.days)
            print("back:", back)
            if failures >= max_failures:
                return failures

        text = d.format(SHORT_FORMAT)
        reparsed = CalendarDate.parse(cal, text)
        if reparsed.days != d.days:
            failures += 1
            print("\nFAIL (days -> text -> days)")
            print("mdy:", mdy)
            print("text:", text)
            print("days:", d.days, "reparsed:", reparsed.days)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: month/day/year -> day count -> month/day/year, and through text.")
    p.add_argument("--calendar", metavar="FILE", help="JSON calendar definition (default: built-in)")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--from-year", type=int, default=-3000)
    p.add_argument("--to-year", type=int, default=3000)
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)
    if args.from_year > args.to_year or args.from_year == args.to_year == 0:
        p.error("--from-year..--to-year must contain at least one year other than 0")

    cal = load_calendar_file(args.calendar) if args.calendar else default_calendar()
    failures = roundtrip_test(
        cal, args.N, args.from_year, args.to_year, args.seed, max_failures=args.max_failures
    )
    print(f"{args.N} trials, years {args.from_year}..{args.to_year}: {failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
