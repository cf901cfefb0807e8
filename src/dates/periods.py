"""Calendar period windows.

A period window starts at a parsed date and lasts exactly one period. Windows are half-open UTC
intervals: `[start, start + 1 period)`. Month and year steps clamp to the end of the target month,
so `2020-01-31` + 1 month is `2020-02-29`.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from enum import StrEnum
from typing import Any

from dateutil.relativedelta import relativedelta

from src.dates.errors import UnsupportedPeriod
from src.dates.parsing import Interval, parse


class Period(StrEnum):
    """Supported period selectors."""

    day = "day"
    week = "week"
    month = "month"
    year = "year"


_PERIOD_STEPS: dict[Period, relativedelta] = {
    Period.day: relativedelta(days=1),
    Period.week: relativedelta(weeks=1),
    Period.month: relativedelta(months=1),
    Period.year: relativedelta(years=1),
}


def resolve_period(name: str | Period) -> Period:
    """Resolve a selector name (for example a request parameter) into a `Period`."""

    try:
        return Period(str(name or "").strip().lower())
    except ValueError as exc:
        raise UnsupportedPeriod(
            f"This period {name} does not exist. "
            "Only `day`, `week`, `month` and `year` are allowed"
        ) from exc


def period_window(
        value: Any,
        period: str | Period,
        fmt: str | None = None,
        *,
        relative_base: datetime | None = None,
        languages: Sequence[str] = ("en",),
) -> Interval:
    """Return the half-open window of one `period` starting at the parsed `value`.

    Parse failures propagate unchanged; an unknown period raises `UnsupportedPeriod`.
    """

    step = _PERIOD_STEPS[resolve_period(period)]
    start = parse(value, fmt, relative_base=relative_base, languages=languages)
    return Interval(start=start, end=start + step)
