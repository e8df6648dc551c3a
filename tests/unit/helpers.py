r"""Shared helpers for the retry loop tests."""

from __future__ import annotations

__all__ = ["Flaky", "take"]

from itertools import islice
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


def take(iterator: Iterator[Any], n: int) -> list[Any]:
    """Pull the first ``n`` values of an iterator."""
    return list(islice(iterator, n))


class Flaky:
    """Async callable failing a fixed number of times before succeeding.

    Args:
        failures: Number of calls raising ``error`` before succeeding.
        result: The value returned once the failures are consumed.
        error: The exception type raised on failure.
    """

    def __init__(self, failures: int, result: Any = "ok", error: type[Exception] = ConnectionError):
        self.failures = failures
        self.result = result
        self.error = error
        self.calls: list[tuple[Any, ...]] = []
        self.raised: list[Exception] = []
        self.__name__ = "flaky"

    async def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if len(self.calls) <= self.failures:
            exc = self.error(f"failure {len(self.calls)}")
            self.raised.append(exc)
            raise exc
        return self.result
