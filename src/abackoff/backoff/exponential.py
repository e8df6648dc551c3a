r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from abackoff.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: factor * (base ** attempt), clamped to
    ``max_value`` and then to ``min_value``. When ``min_value`` is greater
    than ``max_value``, the ceiling wins.

    No validation is done on ``base`` and ``factor``: degenerate values
    produce degenerate but well-defined delays.

    Args:
        base: The exponent base (default: 2). A base of 1 gives a constant
            delay equal to ``factor``.
        factor: The multiplier applied to ``base ** attempt`` (default: 50).
        max_value: Optional ceiling applied to the delay.
        min_value: Optional floor applied to the delay after the ceiling.

    Example:
        ```pycon
        >>> from abackoff.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base=2, factor=50)
        >>> backoff.calculate(0)
        50
        >>> backoff.calculate(3)
        400
        >>> # With a ceiling
        >>> backoff = ExponentialBackoff(base=2, factor=1, max_value=32)
        >>> backoff.calculate(10)
        32
        >>> # The ceiling wins over a larger floor
        >>> backoff = ExponentialBackoff(base=2, factor=1, max_value=10, min_value=20)
        >>> backoff.calculate(0)
        10

        ```
    """

    def __init__(
        self,
        base: float = 2,
        factor: float = 50,
        max_value: float | None = None,
        min_value: float | None = None,
    ) -> None:
        self.base = base
        self.factor = factor
        self.max_value = max_value
        self.min_value = min_value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base={self.base}, factor={self.factor}, "
            f"max_value={self.max_value}, min_value={self.min_value})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The attempt index (0-indexed).

        Returns:
            The calculated delay: factor * (base ** attempt), capped at
            max_value and raised to min_value if set. A power beyond the
            float range counts as an infinite delay before clamping.
        """
        try:
            delay = self.factor * (self.base**attempt)
        except OverflowError:
            delay = math.copysign(math.inf, self.factor) if self.factor else 0.0
        if self.max_value is not None:
            delay = min(delay, self.max_value)
        if self.min_value is not None:
            floor = self.min_value
            if self.max_value is not None:
                floor = min(floor, self.max_value)
            delay = max(floor, delay)
        return delay
