r"""Utility functions shared by the retry loop."""

from __future__ import annotations

__all__ = ["describe_operation", "sleep_ms"]

from abackoff.utils.naming import describe_operation
from abackoff.utils.sleep import sleep_ms
