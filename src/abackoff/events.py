r"""Notification capability for retry lifecycle events.

The retry loop signals two events to an optional emitter:

- ``"retries"``: emitted once on success with
  ``(operation_name, args, attempts)``
- ``"throttle"``: emitted before every sleep with
  ``(operation_name, args, delay_ms)``

Any object with an ``emit(event, *payload)`` method satisfies the
``Notifiable`` protocol. ``EventEmitter`` is a small listener registry
that can be used directly or as a base class.

Example:
    ```pycon
    >>> from abackoff.events import EventEmitter, THROTTLE_EVENT
    >>> emitter = EventEmitter()
    >>> seen = []
    >>> emitter.on(THROTTLE_EVENT, lambda name, args, delay: seen.append(delay))
    >>> emitter.emit(THROTTLE_EVENT, "fetch", (), 50)
    True
    >>> seen
    [50]

    ```
"""

from __future__ import annotations

__all__ = ["RETRIES_EVENT", "THROTTLE_EVENT", "EventEmitter", "Notifiable"]

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

RETRIES_EVENT = "retries"
THROTTLE_EVENT = "throttle"


@runtime_checkable
class Notifiable(Protocol):
    """Protocol for objects able to receive lifecycle events."""

    def emit(self, event: str, *payload: Any) -> Any:
        """Emit ``event`` with the given payload."""


class EventEmitter:
    """Registry of event listeners.

    Listeners are called synchronously, in registration order. Errors
    raised by a listener propagate to the caller of ``emit``.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: str, listener: Callable[..., Any]) -> None:
        """Register a listener for an event.

        Args:
            event: The event name.
            listener: Callable invoked with the event payload.
        """
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Callable[..., Any]) -> None:
        """Unregister a listener.

        Args:
            event: The event name.
            listener: The listener to remove.

        Raises:
            ValueError: If the listener is not registered for ``event``.
        """
        listeners = self._listeners.get(event, [])
        if listener not in listeners:
            msg = f"listener {listener!r} is not registered for event {event!r}"
            raise ValueError(msg)
        listeners.remove(listener)

    def listener_count(self, event: str) -> int:
        """Return the number of listeners registered for ``event``."""
        return len(self._listeners.get(event, []))

    def emit(self, event: str, *payload: Any) -> bool:
        """Call every listener registered for ``event``.

        Args:
            event: The event name.
            *payload: Positional arguments passed to each listener.

        Returns:
            ``True`` if at least one listener was called.
        """
        listeners = list(self._listeners.get(event, []))
        logger.debug(f"Emitting {event!r} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(*payload)
        return bool(listeners)
