r"""Default time source for the retry loop."""

from __future__ import annotations

__all__ = ["sleep_ms"]

import asyncio
import math


async def sleep_ms(delay_ms: float) -> None:
    """Suspend the current task for ``delay_ms`` milliseconds.

    This yields control to the event loop, so other tasks keep running
    while a retry loop waits.

    Args:
        delay_ms: The delay in milliseconds. Non-positive values only
            yield to the event loop. A delay too large for a float
            sleeps forever.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff.utils.sleep import sleep_ms
        >>> asyncio.run(sleep_ms(1))

        ```
    """
    try:
        seconds = max(delay_ms, 0) / 1000
    except OverflowError:
        seconds = math.inf
    await asyncio.sleep(seconds)
