"""Tests for compact format pattern translation."""

from __future__ import annotations

import pytest

from src.dates.errors import UnsupportedFormatCharacter
from src.dates.formats import has_field, to_strptime


def test_to_strptime_field_letters() -> None:
    assert to_strptime("dmY") == "%d%m%Y"
    assert to_strptime("Y-m-d H:i:s") == "%Y-%m-%d %H:%M:%S"
    assert to_strptime("j F y, g:i A") == "%d %B %y, %I:%M %p"


def test_to_strptime_escapes_literals() -> None:
    assert to_strptime("Y\\Tm") == "%YT%m"
    assert to_strptime("d%m") == "%d%%%m"


@pytest.mark.parametrize("pattern", ["", "Y-m-Q", "Y\\"])
def test_to_strptime_rejects_unsupported_patterns(pattern: str) -> None:
    with pytest.raises(UnsupportedFormatCharacter):
        to_strptime(pattern)


def test_has_field() -> None:
    assert has_field("dmY", "year")
    assert has_field("d/m", "month")
    assert not has_field("d/m", "year")
    assert not has_field("\\Y-m", "year")
