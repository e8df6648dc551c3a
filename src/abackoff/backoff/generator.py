r"""Functional entry point to the exponential delay sequence."""

from __future__ import annotations

__all__ = ["exponential_generator"]

from typing import TYPE_CHECKING

from abackoff.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from collections.abc import Iterator


def exponential_generator(
    base: float = 2,
    factor: float = 50,
    max_value: float | None = None,
    min_value: float | None = None,
    jitter: bool | float | None = None,
) -> Iterator[float]:
    """Generate an infinite sequence of exponentially growing delays.

    The n-th value is ``factor * base ** n``, clamped to ``max_value``,
    then to ``min_value`` (the ceiling wins when the two contradict), then
    jittered. The sequence never terminates: the caller decides when to
    stop pulling.

    Args:
        base: The exponent base. 1 gives a constant sequence.
        factor: The multiplier applied to ``base ** n``.
        max_value: Optional ceiling on the pre-jitter value.
        min_value: Optional floor on the pre-jitter value.
        jitter: ``True`` for full jitter, a float in ``[0, 1]`` for partial
            jitter, ``False`` or ``None`` for none. Jittered values are
            rounded to the nearest integer.

    Returns:
        A lazy iterator over the delays.

    Example:
        ```pycon
        >>> from abackoff.backoff import exponential_generator
        >>> gen = exponential_generator(2, 1, 32, 0, False)
        >>> [next(gen) for _ in range(10)]
        [1, 2, 4, 8, 16, 32, 32, 32, 32, 32]
        >>> gen = exponential_generator(1, 12)
        >>> [next(gen) for _ in range(3)]
        [12, 12, 12]

        ```
    """
    return ExponentialBackoff(
        base=base, factor=factor, max_value=max_value, min_value=min_value
    ).delays(jitter)
