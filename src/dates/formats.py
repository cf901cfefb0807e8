"""Compact date-format patterns.

Request parameters describe explicit formats with one character per field (`"dmY"`,
`"Y-m-d H:i:s"`). This module translates them into strict `strptime` patterns:

    - Letters map to a single `strptime` directive (see `_DIRECTIVES`).
    - Any non-letter character is a literal; `%` is escaped.
    - A backslash makes the next character a literal, so `"Y\\Tm"` matches `"2020T05"`.
"""

from __future__ import annotations

from typing import Literal

from src.dates.errors import UnsupportedFormatCharacter

Field = Literal["year", "month", "day"]

_DIRECTIVES: dict[str, str] = {
    # Day
    "d": "%d",
    "j": "%d",
    "D": "%a",
    "l": "%A",
    # Month
    "m": "%m",
    "n": "%m",
    "M": "%b",
    "F": "%B",
    # Year
    "Y": "%Y",
    "y": "%y",
    # Time
    "H": "%H",
    "G": "%H",
    "h": "%I",
    "g": "%I",
    "A": "%p",
    "a": "%p",
    "i": "%M",
    "s": "%S",
    "u": "%f",
    # Offset
    "P": "%z",
    "O": "%z",
}

_FIELD_CHARS: dict[Field, frozenset[str]] = {
    "year": frozenset("Yy"),
    "month": frozenset("mnMF"),
    "day": frozenset("dj"),
}


def _tokens(pattern: str) -> list[tuple[str, bool]]:
    """Split a pattern into `(char, is_literal)` tokens, resolving backslash escapes."""

    tokens: list[tuple[str, bool]] = []
    escaped = False
    for char in pattern:
        if escaped:
            tokens.append((char, True))
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            tokens.append((char, not char.isalpha()))
    if escaped:
        # A trailing backslash escapes nothing.
        raise UnsupportedFormatCharacter()
    return tokens


def to_strptime(pattern: str) -> str:
    """Translate a compact date-format pattern into a `strptime` pattern.

    Raises:
        UnsupportedFormatCharacter: If the pattern is empty or uses an unknown field letter.
    """

    if not pattern:
        raise UnsupportedFormatCharacter()

    parts: list[str] = []
    for char, is_literal in _tokens(pattern):
        if is_literal:
            parts.append("%%" if char == "%" else char)
            continue
        directive = _DIRECTIVES.get(char)
        if directive is None:
            raise UnsupportedFormatCharacter()
        parts.append(directive)
    return "".join(parts)


def has_field(pattern: str, field: Field) -> bool:
    """Return whether the pattern supplies the given calendar field."""

    chars = _FIELD_CHARS[field]
    return any(not is_literal and char in chars for char, is_literal in _tokens(pattern))
