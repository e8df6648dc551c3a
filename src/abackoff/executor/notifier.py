r"""Event notifier for retry lifecycle events.

This module provides the EventNotifier class that forwards the
``"retries"`` and ``"throttle"`` events to an optional emitter.
"""

from __future__ import annotations

__all__ = ["EventNotifier"]

from typing import TYPE_CHECKING, Any

from abackoff.events import RETRIES_EVENT, THROTTLE_EVENT

if TYPE_CHECKING:
    from abackoff.events import Notifiable


class EventNotifier:
    """Signals retry lifecycle events to an optional emitter.

    When no emitter is given, every notification is a no-op.

    Attributes:
        emitter: The object receiving the events, or ``None``.
    """

    def __init__(self, emitter: Notifiable | None = None) -> None:
        self.emitter = emitter

    def on_success(self, name: str, args: tuple[Any, ...], attempts: int) -> None:
        """Signal that the operation succeeded.

        Args:
            name: The operation name.
            args: The positional arguments of the operation.
            attempts: Number of attempts taken (1-indexed).
        """
        if self.emitter is not None:
            self.emitter.emit(RETRIES_EVENT, name, args, attempts)

    def on_throttle(self, name: str, args: tuple[Any, ...], delay: float) -> None:
        """Signal that the loop is about to sleep before a retry.

        Args:
            name: The operation name.
            args: The positional arguments of the operation.
            delay: The upcoming delay in milliseconds.
        """
        if self.emitter is not None:
            self.emitter.emit(THROTTLE_EVENT, name, args, delay)
