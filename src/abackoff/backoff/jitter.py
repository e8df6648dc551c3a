r"""Jitter utilities for randomizing backoff delays.

Full jitter draws the delay uniformly from ``[0, value]``. Partial jitter
with a factor ``j`` draws it from ``[(1 - j) * value, value]``, so the
delay never exceeds the deterministic value.
"""

from __future__ import annotations

__all__ = ["apply_jitter", "round_half_up"]

import math
import random


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up.

    Unlike the built-in ``round``, halves never round to even.

    Example:
        ```pycon
        >>> from abackoff.backoff.jitter import round_half_up
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.4)
        2

        ```
    """
    return math.floor(value + 0.5)


def apply_jitter(value: float, jitter: bool | float | None) -> float:
    """Apply jitter to a deterministic delay.

    Args:
        value: The deterministic delay.
        jitter: ``True`` for full jitter, a float in ``[0, 1]`` for partial
            jitter, ``False`` or ``None`` to return ``value`` unchanged.

    Returns:
        ``value`` itself when jitter is disabled, when the jitter factor
        is 0, or when ``value`` does not fit in a float. Otherwise the
        jittered delay rounded to the nearest integer.

    Example:
        ```pycon
        >>> from abackoff.backoff.jitter import apply_jitter
        >>> apply_jitter(100, None)
        100
        >>> apply_jitter(0.5, 0.0)
        0.5
        >>> 0 <= apply_jitter(100, True) <= 100
        True
        >>> 50 <= apply_jitter(100, 0.5) <= 100
        True

        ```
    """
    if jitter is None or jitter is False or (jitter is not True and jitter == 0):
        return value
    try:
        upper = float(value)
    except OverflowError:
        return value
    if math.isinf(upper):
        return value
    low = 0.0 if jitter is True else (1 - jitter) * upper
    return round_half_up(random.uniform(low, upper))  # noqa: S311
