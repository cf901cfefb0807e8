"""Tests for period windows (day, week, month, year)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.dates.errors import UnrecognizedDateFormat, UnsupportedPeriod
from src.dates.periods import Period, period_window, resolve_period


@pytest.mark.parametrize(
    ("period", "expected_end"),
    [
        (Period.day, datetime(2020, 5, 21, tzinfo=UTC)),
        (Period.week, datetime(2020, 5, 27, tzinfo=UTC)),
        (Period.month, datetime(2020, 6, 20, tzinfo=UTC)),
        (Period.year, datetime(2021, 5, 20, tzinfo=UTC)),
    ],
)
def test_period_window(period: Period, expected_end: datetime) -> None:
    start, end = period_window("2020-05-20", period)
    assert start == datetime(2020, 5, 20, tzinfo=UTC)
    assert end == expected_end


def test_month_window_clamps_to_end_of_month() -> None:
    _, end = period_window("2020-01-31", "month")
    assert end == datetime(2020, 2, 29, tzinfo=UTC)


def test_period_window_with_format() -> None:
    start, end = period_window("20052020", "day", "dmY")
    assert (start.day, end.day) == (20, 21)


def test_resolve_period_normalizes_names() -> None:
    assert resolve_period(" Week ") == Period.week
    assert resolve_period(Period.year) == Period.year


def test_unknown_period_is_rejected() -> None:
    with pytest.raises(UnsupportedPeriod, match="This period fortnight does not exist"):
        period_window("2020-05-20", "fortnight")


def test_period_window_propagates_parse_failures() -> None:
    with pytest.raises(UnrecognizedDateFormat):
        period_window("20052020", "day")


def test_resolve_period_rejects_non_string_names() -> None:
    with pytest.raises(UnsupportedPeriod):
        resolve_period(7)  # type: ignore[arg-type]


def test_period_window_with_relative_value() -> None:
    base = datetime(2020, 6, 12, 12, 0, tzinfo=UTC)
    start, end = period_window("hier", "day", "relative", relative_base=base, languages=["fr"])
    assert start.date() == datetime(2020, 6, 11).date()
    assert end - start == timedelta(days=1)
