r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import math

import pytest

from abackoff.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.base == 2
    assert backoff.factor == 50
    assert backoff.max_value is None
    assert backoff.min_value is None
    assert backoff.calculate(0) == 50
    assert backoff.calculate(1) == 100


@pytest.mark.parametrize("attempt", range(10))
def test_exponential_backoff_powers_of_two(attempt: int) -> None:
    """Test that values are factor * 2 ** attempt."""
    assert ExponentialBackoff(base=2, factor=1).calculate(attempt) == 2**attempt


@pytest.mark.parametrize("attempt", range(10))
def test_exponential_backoff_custom_base(attempt: int) -> None:
    """Test that the passed in base is used."""
    assert ExponentialBackoff(base=3, factor=1).calculate(attempt) == 3**attempt


def test_exponential_backoff_with_max_value() -> None:
    """Test exponential backoff with a ceiling."""
    backoff = ExponentialBackoff(base=2, factor=1, max_value=32)
    assert [backoff.calculate(n) for n in range(10)] == [1, 2, 4, 8, 16, 32, 32, 32, 32, 32]


def test_exponential_backoff_with_min_value() -> None:
    """Test exponential backoff with a floor."""
    backoff = ExponentialBackoff(base=2, factor=1, min_value=10)
    assert [backoff.calculate(n) for n in range(6)] == [10, 10, 10, 10, 16, 32]


def test_exponential_backoff_max_wins_over_min() -> None:
    """Test that the ceiling wins when the floor is greater."""
    backoff = ExponentialBackoff(base=2, factor=1, max_value=8, min_value=20)
    assert [backoff.calculate(n) for n in range(6)] == [8, 8, 8, 8, 8, 8]


def test_exponential_backoff_base_one_is_constant() -> None:
    """Test that a base of 1 gives a constant delay."""
    backoff = ExponentialBackoff(base=1, factor=12)
    assert [backoff.calculate(n) for n in range(10)] == [12] * 10


def test_exponential_backoff_base_one_clamped() -> None:
    """Test that a constant delay is clamped."""
    assert ExponentialBackoff(base=1, factor=12, max_value=5).calculate(3) == 5
    assert ExponentialBackoff(base=1, factor=12, min_value=20).calculate(3) == 20


def test_exponential_backoff_zero_factor() -> None:
    """Test exponential backoff with zero factor."""
    backoff = ExponentialBackoff(factor=0)
    assert backoff.calculate(0) == 0
    assert backoff.calculate(5) == 0


def test_exponential_backoff_negative_factor_is_not_validated() -> None:
    """Test that degenerate values give degenerate arithmetic."""
    assert ExponentialBackoff(base=2, factor=-1).calculate(3) == -8


def test_exponential_backoff_repr() -> None:
    """Test the representation of the strategy."""
    assert repr(ExponentialBackoff(base=2, factor=1, max_value=32)) == (
        "ExponentialBackoff(base=2, factor=1, max_value=32, min_value=None)"
    )


def test_exponential_backoff_float_overflow_is_infinite() -> None:
    """Test that a float power beyond the float range is infinite."""
    assert ExponentialBackoff(base=1.5, factor=50).calculate(2000) == math.inf


def test_exponential_backoff_float_overflow_with_max_value() -> None:
    """Test that a float power beyond the float range is capped."""
    assert ExponentialBackoff(base=1.5, factor=50, max_value=30_000).calculate(2000) == 30_000


def test_exponential_backoff_float_overflow_zero_factor() -> None:
    """Test that a zero factor stays zero past the float range."""
    assert ExponentialBackoff(base=1.5, factor=0).calculate(2000) == 0
