"""Date parsing and interval validation (UTC).

Every successful parse returns a timezone-aware `datetime` in UTC, whatever the input form:
    - no format: the value must match one of the enumerated `AUTO_DETECT_FORMATS` (year first);
    - `"timestamp"`: the value is a Unix timestamp in seconds (sub-second precision allowed);
    - `"relative"`: the value is a relative expression ("yesterday", "2 days ago");
    - anything else: a compact explicit pattern such as `"dmY"` (see `src.dates.formats`).

Fields the input does not supply reset to the Unix epoch (time 00:00:00, year 1970, month/day 1).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from decimal import Decimal
from typing import Any, NamedTuple

import dateparser

from src.dates.errors import (
    DegenerateInterval,
    InvalidDateForFormat,
    InvalidIntervalOrder,
    UnrecognizedDateFormat,
)
from src.dates.formats import has_field, to_strptime

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "timestamp"
RELATIVE_FORMAT = "relative"

_EPOCH_YEAR = 1970

_AUTO_DETECT_DATE_PARTS: tuple[str, ...] = ("%Y-%m-%d", "%Y/%m/%d")
_AUTO_DETECT_TIME_PARTS: tuple[str, ...] = (
    "",
    " %H:%M",
    " %H:%M:%S",
    "T%H:%M",
    "T%H:%M:%S",
    "T%H:%M:%S.%f",
    "T%H:%M%z",
    "T%H:%M:%S%z",
    "T%H:%M:%S.%f%z",
)
AUTO_DETECT_FORMATS: tuple[str, ...] = tuple(
    date_part + time_part
    for date_part in _AUTO_DETECT_DATE_PARTS
    for time_part in _AUTO_DETECT_TIME_PARTS
)

_RELATIVE_SETTINGS: dict[str, Any] = {
    "TIMEZONE": "UTC",
    "TO_TIMEZONE": "UTC",
    "RETURN_AS_TIMEZONE_AWARE": True,
}


class Interval(NamedTuple):
    """An ordered pair of UTC datetimes with `start <= end`."""

    start: datetime
    end: datetime


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _parse_auto(value: Any) -> datetime:
    if isinstance(value, datetime):
        return _to_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if not isinstance(value, str):
        raise UnrecognizedDateFormat()

    text = value.strip()
    for pattern in AUTO_DETECT_FORMATS:
        try:
            parsed = datetime.strptime(text, pattern)
        except ValueError:
            continue
        logger.debug("auto-detected value=%r pattern=%s", text, pattern)
        return _to_utc(parsed)

    raise UnrecognizedDateFormat()


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise InvalidDateForFormat()

    try:
        seconds = float(value.strip() if isinstance(value, str) else value)
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDateForFormat() from exc


def _parse_relative(value: Any, *, base: datetime | None, languages: Sequence[str]) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateForFormat()

    # dateparser localizes a naive base into TIMEZONE itself.
    relative_base = _to_utc(base or datetime.now(UTC)).replace(tzinfo=None)
    parsed = dateparser.parse(
        value.strip(),
        languages=list(languages),
        settings={**_RELATIVE_SETTINGS, "RELATIVE_BASE": relative_base},
    )
    if parsed is None:
        raise InvalidDateForFormat()
    return _to_utc(parsed)


def _parse_with_pattern(value: Any, fmt: str) -> datetime:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidDateForFormat()

    pattern = to_strptime(fmt)
    try:
        parsed = datetime.strptime(str(value).strip(), pattern)
        if not has_field(fmt, "year"):
            parsed = parsed.replace(year=_EPOCH_YEAR)
    except ValueError as exc:
        raise InvalidDateForFormat() from exc
    return _to_utc(parsed)


def parse(
        value: Any,
        fmt: str | None = None,
        *,
        relative_base: datetime | None = None,
        languages: Sequence[str] = ("en",),
) -> datetime:
    """Parse a date value into a UTC-aware `datetime`.

    Args:
        value: A date string, a Unix timestamp (with `fmt="timestamp"`), or a `date`/`datetime`.
        fmt: `None` for auto-detection, `"timestamp"`, `"relative"`, or a compact pattern.
        relative_base: Reference point for `"relative"` values (defaults to now, UTC).
        languages: dateparser languages used for `"relative"` values.

    Raises:
        UnrecognizedDateFormat: If no format is given and the value matches no known pattern.
        InvalidDateForFormat: If the value does not match the given format.
    """

    if fmt is None:
        return _parse_auto(value)
    if fmt == TIMESTAMP_FORMAT:
        return _parse_timestamp(value)
    if fmt == RELATIVE_FORMAT:
        return _parse_relative(value, base=relative_base, languages=languages)
    return _parse_with_pattern(value, fmt)


def interval(
        start_value: Any,
        end_value: Any,
        start_fmt: str | None = None,
        end_fmt: str | None = None,
        allow_equal: bool = False,
        *,
        relative_base: datetime | None = None,
        languages: Sequence[str] = ("en",),
) -> Interval:
    """Parse and validate a two-date interval.

    Both endpoints share one reference point for `"relative"` values, so `"now"`/`"now"` is a
    degenerate interval. Parse failures of either endpoint propagate unchanged.

    Raises:
        InvalidIntervalOrder: If the end happens before the start.
        DegenerateInterval: If both endpoints are equal and `allow_equal` is false.
    """

    base = relative_base or datetime.now(UTC)
    start = parse(start_value, start_fmt, relative_base=base, languages=languages)
    end = parse(end_value, end_fmt, relative_base=base, languages=languages)

    if end < start:
        raise InvalidIntervalOrder()
    if end == start and not allow_equal:
        raise DegenerateInterval()

    logger.debug("interval start=%s end=%s", start.isoformat(), end.isoformat())
    return Interval(start=start, end=end)
