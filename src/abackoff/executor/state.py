r"""Per-invocation state of the retry loop."""

from __future__ import annotations

__all__ = ["RetryAttemptState"]

from dataclasses import dataclass


@dataclass
class RetryAttemptState:
    """Counters scoped to one retry loop execution.

    Attributes:
        attempts: The attempt about to be made or just made (1-indexed).
        last_error: The most recently observed error, if any.
    """

    attempts: int = 1
    last_error: Exception | None = None

    def record_failure(self, error: Exception) -> None:
        """Record the error of the attempt that just failed."""
        self.last_error = error

    def advance(self) -> int:
        """Move to the next attempt and return its number."""
        self.attempts += 1
        return self.attempts

    def is_exhausted(self, max_retries: int) -> bool:
        """Indicate if the current attempt exceeds the attempt budget."""
        return self.attempts > max_retries
