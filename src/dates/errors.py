"""Typed failures raised by the date parsing layer.

Every error carries a fixed default message so callers can surface it as-is (for example as an HTTP
4xx body) without formatting anything themselves.
"""

from __future__ import annotations


class DateParsingError(ValueError):
    """Base class for all date parsing and interval validation failures."""

    default_message = "The given date can not be parsed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class UnrecognizedDateFormat(DateParsingError):
    """Raised when no format was given and no auto-detected pattern matches."""

    default_message = (
        "The given date can not be parsed and recognized. "
        "Try using YYYY-mm-dd format date or give format in second argument"
    )


class InvalidDateForFormat(DateParsingError):
    """Raised when the value does not match the explicitly supplied format."""

    default_message = (
        "The given date can not be parsed and recognized. Try checking your format"
    )


class UnsupportedFormatCharacter(InvalidDateForFormat):
    """Raised when the explicit format pattern itself cannot be translated."""


class InvalidIntervalOrder(DateParsingError):
    """Raised when the end of an interval happens before its start."""

    default_message = "Incorrect interval, the second date must happen after the first one"


class DegenerateInterval(DateParsingError):
    """Raised when both interval endpoints are equal and equality is not allowed."""

    default_message = "An interval must contain two different dates"


class UnsupportedPeriod(DateParsingError):
    """Raised when a period selector name is not one of the known periods."""

    default_message = (
        "This period does not exist. Only `day`, `week`, `month` and `year` are allowed"
    )
