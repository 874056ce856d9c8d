"""Unit tests for invocation count ranges."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from callspec.counts import CountRange, convert_count


@pytest.mark.parametrize(
    ("count", "inclusive", "expected"),
    [
        (0, True, 0),
        (3, True, 3),
        (3.9, True, 3),
        (Fraction(7, 2), True, 3),
        (Decimal(3), True, 3),
        (Decimal("3.7"), False, 2),
        (3, False, 2),
        (1, False, 0),
    ],
)
def test_convert_count(count: object, *, inclusive: bool, expected: int) -> None:
    """Counts are truncated and exclusive bounds lose one."""
    assert convert_count(count, inclusive=inclusive) == expected


@pytest.mark.parametrize("count", ["3", None, True, [1], 1j])
def test_convert_count_rejects_non_numbers(count: object) -> None:
    """Only real numbers are accepted as counts."""
    with pytest.raises(TypeError, match="must be a number"):
        convert_count(count)


@pytest.mark.parametrize(
    ("count", "inclusive"),
    [(-1, True), (0, False), (-0.5, False)],
)
def test_convert_count_rejects_negative(count: object, *, inclusive: bool) -> None:
    """Bounds that end up below zero are rejected."""
    with pytest.raises(ValueError, match=">= 0"):
        convert_count(count, inclusive=inclusive)


@pytest.mark.parametrize(
    "count", [math.inf, math.nan, Decimal("Infinity"), Decimal("NaN")]
)
def test_convert_count_rejects_non_finite(count: object) -> None:
    """Infinite and NaN counts cannot be truncated."""
    with pytest.raises(ValueError, match="finite"):
        convert_count(count)


def test_default_range_is_unbounded() -> None:
    """A fresh range admits any number of calls."""
    rng = CountRange()
    assert rng.min_count == 0
    assert rng.unbounded
    assert 0 in rng
    assert 10_000 in rng
    assert str(rng) == "[0, unbounded)"


def test_exact_range_bounds() -> None:
    """An exact range admits only its count."""
    rng = CountRange.exactly(2)
    assert rng == CountRange(2, 2)
    assert 1 not in rng
    assert 2 in rng
    assert 3 not in rng
    assert str(rng) == "[2, 2]"


def test_satisfied_and_exhausted() -> None:
    """Lower and upper bounds drive satisfaction and exhaustion."""
    rng = CountRange(1, 3)
    assert not rng.is_satisfied_by(0)
    assert rng.is_satisfied_by(1)
    assert not rng.is_exhausted_by(2)
    assert rng.is_exhausted_by(3)
    assert not CountRange().is_exhausted_by(1_000_000)


@pytest.mark.parametrize(("low", "high"), [(-1, None), (3, 2)])
def test_invalid_range_construction(low: int, high: int | None) -> None:
    """Direct construction validates the bounds."""
    with pytest.raises(ValueError, match="min_count"):
        CountRange(low, high)
