r"""Backoff strategies and delay sequence generation.

This package provides the exponential backoff strategy, the jitter
helpers and the lazy delay sequence consumed by the retry loop.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ExponentialBackoff",
    "apply_jitter",
    "exponential_generator",
]

from abackoff.backoff.base import BaseBackoffStrategy
from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.backoff.generator import exponential_generator
from abackoff.backoff.jitter import apply_jitter
