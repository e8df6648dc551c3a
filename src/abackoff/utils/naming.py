r"""Helpers to name the operations driven by the retry loop."""

from __future__ import annotations

__all__ = ["describe_operation"]

from typing import Any


def describe_operation(operation: Any) -> str:
    """Return a human-readable name for a callable.

    Args:
        operation: The callable to describe.

    Returns:
        The ``__qualname__`` of the callable, or its ``__name__``, or its
        ``repr`` when it has neither (e.g. ``functools.partial``).

    Example:
        ```pycon
        >>> from abackoff.utils.naming import describe_operation
        >>> async def fetch(): ...
        >>> describe_operation(fetch)
        'fetch'

        ```
    """
    name = getattr(operation, "__qualname__", None) or getattr(operation, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(operation)
