#!/usr/bin/env python
"""Visual verification report for timecodec.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. Reference instant encoded by every codec in data/fixtures/codecs.json
  2. ISO-week decodings, Sunday-anchor vs canonical, one row per year start
  3. Step truncation for a range of steps
"""

from __future__ import annotations

import json
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"

sys.path.insert(0, str(ROOT / "src"))

from timecodec.debug import show_encodings
from timecodec.epoch import UnixMillisTimeCodec, UnixTimeCodec
from timecodec.isoweek import ISO_WEEK, ISO_WEEK_CANONICAL
from timecodec.loaders import load_codecs_json

with open(FIXTURES / "reference.json") as f:
    _ref = json.load(f)

INSTANT = datetime.fromisoformat(_ref["instant"])
DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        print(fmt.format(*row))


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
def section_codecs():
    banner("1. Reference instant through every configured codec")
    print()
    show_encodings(INSTANT, load_codecs_json(FIXTURES / "codecs.json"))


def section_iso_weeks():
    banner("2. ISO week 01 decoded, by weekday of January 1st")
    rows = []
    for year in range(2015, 2022):
        text = f"{year}-01"
        anchor = ISO_WEEK.unmarshal(text).date()
        canonical = ISO_WEEK_CANONICAL.unmarshal(text).date()
        rows.append([
            text,
            DAY_NAMES[date(year, 1, 1).weekday()],
            canonical.isoformat(),
            anchor.isoformat(),
            ISO_WEEK.marshal(ISO_WEEK.unmarshal(text)),
        ])
    table(["week", "jan 1", "canonical", "sunday anchor", "re-encoded"], rows)


def section_steps():
    banner("3. Step truncation of the reference instant")
    steps = [
        timedelta(0),
        timedelta(seconds=1),
        timedelta(minutes=1),
        timedelta(minutes=15),
        timedelta(hours=1),
        timedelta(days=1),
    ]
    rows = []
    for step in steps:
        unix = UnixTimeCodec(step)
        millis = UnixMillisTimeCodec(step)
        rows.append([
            str(step),
            unix.marshal(INSTANT),
            unix.unmarshal(unix.marshal(INSTANT)).isoformat(),
            millis.marshal(INSTANT),
        ])
    table(["step", "unix", "unix decoded", "unix millis"], rows)


def main():
    section_codecs()
    section_iso_weeks()
    section_steps()
    print()


if __name__ == "__main__":
    main()
