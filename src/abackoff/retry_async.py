r"""Implement the asynchronous retry entry point.

This module provides ``retry``, which calls an async operation and
retries it with exponential backoff while a predicate approves the
failures.
"""

from __future__ import annotations

__all__ = ["retry"]

from typing import TYPE_CHECKING, Any

from abackoff.executor.executor_async import AsyncRetryExecutor
from abackoff.options import resolve_options

if TYPE_CHECKING:
    from collections.abc import Callable

    from abackoff.events import Notifiable
    from abackoff.options import OptionsLike


async def retry(
    options: OptionsLike,
    operation: Callable[..., Any],
    *args: Any,
    emitter: Notifiable | None = None,
    **kwargs: Any,
) -> Any:
    """Call an async operation, retrying it with exponential backoff.

    The options are resolved once, before the first attempt. The delay
    before the n-th retry is ``backoff_factor * base ** (n - 1)``
    milliseconds, clamped and jittered as configured. A failure is
    retried only if ``options.predicate(error, args)`` returns ``True``
    and fewer than ``options.max_retries`` attempts have been made.
    Otherwise the failure is re-raised unchanged.

    Args:
        options: ``None``, a mapping of option names, or a
            ``BackoffOptions``. See ``BackoffOptions`` for the fields.
        operation: The async callable to invoke. Use a bound method to
            call it on an object.
        *args: Positional arguments passed to ``operation``. They are
            also passed to the predicate and carried by the events.
        emitter: Optional object with an ``emit(event, *payload)``
            method receiving the ``"retries"`` and ``"throttle"`` events.
        **kwargs: Keyword arguments passed to ``operation``. The name
            ``emitter`` is reserved by ``retry`` and never reaches
            ``operation``; bind such an argument with
            ``functools.partial`` instead.

    Returns:
        The result of the first successful call of ``operation``.

    Raises:
        Exception: The error raised by the last attempt, unchanged.
        ValueError: If the options are invalid.
        TypeError: If the options have an unsupported type.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff import retry
        >>> async def add(a, b):
        ...     return a + b
        ...
        >>> asyncio.run(retry({}, add, 2, 6))
        8

        ```
    """
    executor = AsyncRetryExecutor(resolve_options(options), emitter=emitter)
    return await executor.execute(operation, *args, **kwargs)
