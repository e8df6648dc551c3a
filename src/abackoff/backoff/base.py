r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from itertools import count
from typing import TYPE_CHECKING

from abackoff.backoff.jitter import apply_jitter

if TYPE_CHECKING:
    from collections.abc import Iterator


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed call based on the attempt number. The deterministic delay is
    given by ``calculate`` and ``delays`` turns it into the lazy, infinite
    sequence consumed by the retry loop.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given attempt index.

        Args:
            attempt: The attempt index (0-indexed). attempt=0 is the delay
                used after the first failure, attempt=1 after the second, etc.

        Returns:
            The deterministic (pre-jitter) delay in milliseconds.
        """

    def delays(self, jitter: bool | float | None = None) -> Iterator[float]:
        """Iterate over the delays of this strategy.

        Each pull advances the attempt index by exactly one. Jitter is
        applied independently per pull and never feeds back into the
        deterministic value.

        Args:
            jitter: ``True`` for full jitter, a float in ``[0, 1]`` for
                partial jitter, ``False`` or ``None`` for no jitter.

        Yields:
            The delay in milliseconds for attempt 0, 1, 2, ...

        Example:
            ```pycon
            >>> from abackoff.backoff import ExponentialBackoff
            >>> delays = ExponentialBackoff(base=2, factor=10).delays()
            >>> [next(delays) for _ in range(4)]
            [10, 20, 40, 80]

            ```
        """
        for attempt in count():
            yield apply_jitter(self.calculate(attempt), jitter)
