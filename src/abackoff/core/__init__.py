r"""Core shared logic: option validation."""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_jitter"]

from abackoff.core.validation import validate_backoff_params, validate_jitter
