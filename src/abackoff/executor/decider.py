r"""Retry decision logic for failed attempts.

This module provides the RetryDecider class that classifies a failure
with the user predicate. Without a predicate nothing is retried.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from abackoff.options import Predicate

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        predicate: Optional function called as ``predicate(error, args)``.
            Errors raised by the predicate propagate.
    """

    def __init__(self, predicate: Predicate | None) -> None:
        self.predicate = predicate

    def should_retry(self, error: Exception, args: tuple[Any, ...]) -> bool:
        """Determine if the error should trigger a retry.

        Args:
            error: The error raised by the operation.
            args: The positional arguments of the operation.

        Returns:
            ``True`` only if a predicate is set and approves the retry.
        """
        if self.predicate is None:
            logger.debug(f"No retry predicate, not retrying {type(error).__name__}")
            return False
        if not self.predicate(error, args):
            logger.debug(f"Retry predicate declined {type(error).__name__}: {error}")
            return False
        return True
