r"""abackoff - Exponential backoff retries for asynchronous operations.

This package retries async operations that fail transiently. Delays
between attempts follow an exponential curve, optionally clamped and
randomized, and a caller-supplied predicate decides which failures are
worth another attempt.

Key Features:
    - Lazy, infinite exponential delay sequence with ceiling and floor
    - Full and partial jitter
    - Predicate-driven retries: nothing is retried without approval
    - Original errors propagate unchanged, even when attempts run out
    - ``"retries"`` and ``"throttle"`` notifications to an optional emitter
    - Decorators for functions and methods
    - Pluggable sleep function for deterministic tests

Example:
    ```pycon
    >>> import asyncio
    >>> from abackoff import retry
    >>> from abackoff.predicates import retry_on_exceptions
    >>> async def fetch():
    ...     return "data"
    ...
    >>> asyncio.run(
    ...     retry({"max_retries": 5, "predicate": retry_on_exceptions(ConnectionError)}, fetch)
    ... )
    'data'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_BASE",
    "DEFAULT_MAX_RETRIES",
    "RETRIES_EVENT",
    "THROTTLE_EVENT",
    "BackoffOptions",
    "EventEmitter",
    "Notifiable",
    "__version__",
    "backoff",
    "backoff_with",
    "exponential_generator",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from abackoff.backoff import exponential_generator
from abackoff.decorators import backoff, backoff_with
from abackoff.events import RETRIES_EVENT, THROTTLE_EVENT, EventEmitter, Notifiable
from abackoff.options import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_BASE,
    DEFAULT_MAX_RETRIES,
    BackoffOptions,
)
from abackoff.retry_async import retry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
