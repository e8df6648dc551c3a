r"""Parameter validation utilities for the retry options.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry loop.
The exponent base and the backoff factor are deliberately left
unchecked.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_jitter"]

from typing import Any


def validate_jitter(jitter: Any) -> None:
    """Validate the jitter parameter.

    Args:
        jitter: ``None``, a boolean, or a number in ``[0, 1]``.

    Raises:
        TypeError: If jitter is neither a boolean nor a number.
        ValueError: If a numeric jitter is outside ``[0, 1]``.

    Example:
        ```pycon
        >>> from abackoff.core.validation import validate_jitter
        >>> validate_jitter(None)
        >>> validate_jitter(True)
        >>> validate_jitter(0.5)
        >>> validate_jitter(1.5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: jitter must be a boolean or a number in [0, 1], got 1.5

        ```
    """
    if jitter is None or isinstance(jitter, bool):
        return
    if not isinstance(jitter, (int, float)):
        msg = f"jitter must be a boolean or a number in [0, 1], got {jitter!r}"
        raise TypeError(msg)
    if not 0 <= jitter <= 1:
        msg = f"jitter must be a boolean or a number in [0, 1], got {jitter}"
        raise ValueError(msg)


def validate_backoff_params(
    max_retries: int,
    max_delay_ms: float | None = None,
    min_delay_ms: float | None = None,
    jitter: bool | float | None = None,
    predicate: Any = None,
    sleep_function: Any = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Total number of permitted attempts. Must be >= 0.
            Both 0 and 1 mean a single attempt.
        max_delay_ms: Ceiling on the delay. Must be >= 0 if provided.
        min_delay_ms: Floor on the delay. Must be >= 0 if provided.
        jitter: Jitter setting, see ``validate_jitter``.
        predicate: Optional retry predicate. Must be callable if provided.
        sleep_function: Optional sleep function. Must be callable if provided.

    Raises:
        ValueError: If a numeric parameter is out of range.
        TypeError: If a parameter has the wrong type.

    Example:
        ```pycon
        >>> from abackoff.core import validate_backoff_params
        >>> validate_backoff_params(max_retries=3)
        >>> validate_backoff_params(max_retries=3, max_delay_ms=1000, jitter=0.2)
        >>> validate_backoff_params(max_retries=-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if max_delay_ms is not None and max_delay_ms < 0:
        msg = f"max_delay_ms must be >= 0, got {max_delay_ms}"
        raise ValueError(msg)
    if min_delay_ms is not None and min_delay_ms < 0:
        msg = f"min_delay_ms must be >= 0, got {min_delay_ms}"
        raise ValueError(msg)
    validate_jitter(jitter)
    if predicate is not None and not callable(predicate):
        msg = f"predicate must be callable, got {predicate!r}"
        raise TypeError(msg)
    if sleep_function is not None and not callable(sleep_function):
        msg = f"sleep_function must be callable, got {sleep_function!r}"
        raise TypeError(msg)
