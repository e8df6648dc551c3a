r"""Retry loop implemented by composition.

Public API:
    - AsyncRetryExecutor: Asynchronous retry executor
    - EventNotifier: Forwarder of lifecycle events
    - RetryAttemptState: Per-invocation counters
    - RetryDecider: Logic for deciding whether to retry
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "EventNotifier", "RetryAttemptState", "RetryDecider"]

from abackoff.executor.decider import RetryDecider
from abackoff.executor.executor_async import AsyncRetryExecutor
from abackoff.executor.notifier import EventNotifier
from abackoff.executor.state import RetryAttemptState
