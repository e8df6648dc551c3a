r"""Configuration dataclass and defaults for the retry loop.

This module provides the configuration constants and the immutable
options object read once at the start of every retry loop.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_BASE",
    "DEFAULT_MAX_RETRIES",
    "BackoffOptions",
    "OptionsLike",
    "Predicate",
    "SleepFunction",
    "resolve_options",
]

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from abackoff.core.validation import validate_backoff_params
from abackoff.utils.sleep import sleep_ms

Predicate = Callable[[Exception, tuple[Any, ...]], bool]
SleepFunction = Callable[[float], Awaitable[Any]]

# Default exponent base: delays double after every failure
DEFAULT_BASE = 2

# Default multiplier in milliseconds
# Delay = backoff_factor * (base ** attempt)
# With 50: 1st retry waits 50ms, 2nd waits 100ms, 3rd waits 200ms
DEFAULT_BACKOFF_FACTOR = 50

# Default number of attempts, including the first one
# With 1 the operation is called once and never retried
DEFAULT_MAX_RETRIES = 1


@dataclass(frozen=True)
class BackoffOptions:
    """Options controlling one retry loop.

    Args:
        base: The exponent base. 1 gives a constant delay.
        backoff_factor: The multiplier applied to ``base ** attempt``, in
            milliseconds.
        max_delay_ms: Optional ceiling on the pre-jitter delay.
        min_delay_ms: Optional floor on the pre-jitter delay. When greater
            than ``max_delay_ms``, the ceiling wins.
        max_retries: Total number of permitted attempts, the first one
            included. 1 means no retry at all.
        predicate: Optional function called as ``predicate(error, args)``
            that returns ``True`` when the failure should be retried.
            Without a predicate no failure is ever retried.
        jitter: ``True`` for full jitter, a float in ``[0, 1]`` for partial
            jitter, ``False`` or ``None`` for none.
        sleep_function: Async function awaited with the delay in
            milliseconds between attempts.

    Example:
        ```pycon
        >>> from abackoff.options import BackoffOptions
        >>> options = BackoffOptions()
        >>> options.max_retries
        1
        >>> options = BackoffOptions(max_retries=5, jitter=True)
        >>> options.merge(max_retries=10).max_retries
        10
        >>> options.max_retries
        5

        ```
    """

    base: float = DEFAULT_BASE
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    max_delay_ms: float | None = None
    min_delay_ms: float | None = None
    max_retries: int = DEFAULT_MAX_RETRIES
    predicate: Predicate | None = None
    jitter: bool | float | None = None
    sleep_function: SleepFunction = sleep_ms

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If a numeric parameter is out of range.
            TypeError: If a parameter has the wrong type.
        """
        validate_backoff_params(
            max_retries=self.max_retries,
            max_delay_ms=self.max_delay_ms,
            min_delay_ms=self.min_delay_ms,
            jitter=self.jitter,
            predicate=self.predicate,
            sleep_function=self.sleep_function,
        )

    def merge(self, **overrides: Any) -> BackoffOptions:
        """Create new options with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new BackoffOptions instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the options to a dictionary.

        Returns:
            Dictionary mapping each option name to its value.
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


OptionsLike = BackoffOptions | Mapping[str, Any] | None


def resolve_options(options: OptionsLike) -> BackoffOptions:
    """Resolve user-supplied options into a ``BackoffOptions``.

    Args:
        options: ``None`` for the defaults, a mapping of option names to
            values, or a ``BackoffOptions`` instance returned unchanged.

    Returns:
        The resolved options.

    Raises:
        TypeError: If ``options`` has an unsupported type or the mapping
            contains unknown option names.

    Example:
        ```pycon
        >>> from abackoff.options import resolve_options
        >>> resolve_options({"max_retries": 3}).max_retries
        3
        >>> resolve_options(None).backoff_factor
        50

        ```
    """
    if options is None:
        return BackoffOptions()
    if isinstance(options, BackoffOptions):
        return options
    if isinstance(options, Mapping):
        known = {f.name for f in fields(BackoffOptions)}
        unknown = sorted(set(options) - known)
        if unknown:
            msg = f"Unknown backoff option(s): {', '.join(map(str, unknown))}"
            raise TypeError(msg)
        return BackoffOptions(**options)
    msg = f"options must be a BackoffOptions, a mapping or None, got {type(options).__name__}"
    raise TypeError(msg)
