"""Plain-text month grid for an IFC year."""

from __future__ import annotations

from typing import List

from . import core

SEP = " |"
WEEKDAYS = "  S  M  T  W  T  F  S"
WEEKDAYS_RULE = " --------------------"


def _month_row(year: int, month: int) -> str:
    cells: List[str] = ["| ", core.month_name(month)[:3], SEP]
    for day in range(1, core.DAYS_IN_MONTH + 1):
        cells.append(f"{day:>3}")
        if day % core.DAYS_IN_WEEK == 0:
            cells.append(SEP)
    if core.days_in_month(year, month) == core.INTERCALARY_DAY:
        cells.append(f" {core.INTERCALARY_DAY} |")
    else:
        cells.append("    |")
    return "".join(cells)


def render_year(year: int) -> str:
    """Return a Markdown table with one row per month of ``year``.

    Four week columns run Sunday to Saturday; the last column holds day 29
    for Leap Day (June, leap years) and Year Day (December, every year).
    """

    weeks = core.DAYS_IN_MONTH // core.DAYS_IN_WEEK
    lines = [
        "|     |" + (WEEKDAYS + SEP) * weeks + "    |",
        "| --- |" + (WEEKDAYS_RULE + SEP) * weeks + " -- |",
    ]
    lines.extend(_month_row(year, m) for m in range(1, core.MONTHS_IN_YEAR + 1))
    return "\n".join(lines)
