r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that drives an
operation through the retry loop: attempt, classify the failure, wait,
and attempt again.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import inspect
import logging
from typing import TYPE_CHECKING, Any

from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.executor.decider import RetryDecider
from abackoff.executor.notifier import EventNotifier
from abackoff.executor.state import RetryAttemptState
from abackoff.utils.naming import describe_operation

if TYPE_CHECKING:
    from collections.abc import Callable

    from abackoff.events import Notifiable
    from abackoff.options import BackoffOptions

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async operation with exponential backoff retries.

    The executor orchestrates the following components:
    - ExponentialBackoff: Produces the delay sequence
    - RetryDecider: Classifies failures with the user predicate
    - EventNotifier: Signals ``"retries"`` and ``"throttle"`` events

    One executor can run many loops: all the per-call state lives in a
    fresh ``RetryAttemptState`` and a fresh delay iterator.

    Attributes:
        options: The options controlling the loop.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        notifier: Forwarder of lifecycle events.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff.executor import AsyncRetryExecutor
        >>> from abackoff.options import BackoffOptions
        >>> async def add(a, b):
        ...     return a + b
        ...
        >>> executor = AsyncRetryExecutor(BackoffOptions())
        >>> asyncio.run(executor.execute(add, 2, 6))
        8

        ```
    """

    def __init__(self, options: BackoffOptions, emitter: Notifiable | None = None) -> None:
        self.options = options
        self.strategy: ExponentialBackoff = ExponentialBackoff(
            base=options.base,
            factor=options.backoff_factor,
            max_value=options.max_delay_ms,
            min_value=options.min_delay_ms,
        )
        self.decider: RetryDecider = RetryDecider(options.predicate)
        self.notifier: EventNotifier = EventNotifier(emitter)

    async def execute(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call ``operation`` until it succeeds or must not be retried.

        The loop pulls one delay per iteration from the backoff strategy
        and has three exits:
        - Success: emits ``"retries"`` and returns the result
        - Failure not approved by the predicate: re-raises it unchanged
        - Failure approved but attempts exhausted: re-raises it unchanged

        Otherwise it emits ``"throttle"`` and awaits the sleep function
        before the next attempt. Exceptions that are not ``Exception``
        subclasses, like ``asyncio.CancelledError``, always propagate.

        Args:
            operation: The callable to invoke. Its result is awaited when
                it is awaitable.
            *args: Positional arguments passed to ``operation`` and to the
                predicate.
            **kwargs: Keyword arguments passed to ``operation``.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The error of the last attempt, as raised by
                ``operation``.
        """
        name = describe_operation(operation)
        state = RetryAttemptState()
        for delay in self.strategy.delays(self.options.jitter):
            try:
                result = operation(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                state.record_failure(exc)
                logger.debug(
                    f"{name} failed on attempt {state.attempts}/{self.options.max_retries}: "
                    f"{type(exc).__name__}: {exc}"
                )
                if not self.decider.should_retry(exc, args):
                    raise
                state.advance()
                if state.is_exhausted(self.options.max_retries):
                    logger.debug(f"{name} exhausted {self.options.max_retries} attempt(s)")
                    raise
            else:
                logger.debug(f"{name} succeeded on attempt {state.attempts}")
                self.notifier.on_success(name, args, state.attempts)
                return result

            self.notifier.on_throttle(name, args, delay)
            logger.debug(f"Waiting {delay}ms before attempt {state.attempts} of {name}")
            await self.options.sleep_function(delay)
        return None  # pragma: no cover
