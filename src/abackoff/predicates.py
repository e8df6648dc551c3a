r"""Ready-made retry predicates.

A predicate is called as ``predicate(error, args)`` and returns ``True``
when the failure should be retried. This module provides predicates for
common transient failures, including the ones raised by ``httpx``, and
combinators to compose them.

Example:
    ```pycon
    >>> from abackoff.predicates import any_of, retry_on_exceptions, retry_on_http_errors
    >>> predicate = any_of(retry_on_exceptions(ConnectionError), retry_on_http_errors())
    >>> predicate(ConnectionResetError(), ())
    True
    >>> predicate(KeyError("x"), ())
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "all_of",
    "any_of",
    "retry_on_exceptions",
    "retry_on_http_errors",
]

from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from abackoff.options import Predicate

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def retry_on_exceptions(*exception_types: type[BaseException]) -> Predicate:
    """Create a predicate retrying errors of the given types.

    Args:
        *exception_types: The exception types to retry. Subclasses match.

    Returns:
        The predicate.

    Raises:
        ValueError: If no exception type is given.
    """
    if not exception_types:
        msg = "retry_on_exceptions requires at least one exception type"
        raise ValueError(msg)

    def predicate(error: Exception, args: tuple[Any, ...]) -> bool:  # noqa: ARG001
        return isinstance(error, exception_types)

    return predicate


def retry_on_http_errors(status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES) -> Predicate:
    """Create a predicate retrying transient ``httpx`` failures.

    The following errors are retried:
    - ``httpx.TimeoutException`` (connect, read, write and pool timeouts)
    - ``httpx.TransportError`` (connection and network errors)
    - ``httpx.HTTPStatusError`` whose status code is in ``status_forcelist``,
      as raised by ``response.raise_for_status()``

    Args:
        status_forcelist: The HTTP status codes to retry.

    Returns:
        The predicate.

    Example:
        ```pycon
        >>> import httpx
        >>> from abackoff.predicates import retry_on_http_errors
        >>> predicate = retry_on_http_errors()
        >>> request = httpx.Request("GET", "https://api.example.com")
        >>> error = httpx.HTTPStatusError(
        ...     "boom", request=request, response=httpx.Response(503, request=request)
        ... )
        >>> predicate(error, ())
        True
        >>> predicate(httpx.ConnectTimeout("timeout"), ())
        True

        ```
    """

    def predicate(error: Exception, args: tuple[Any, ...]) -> bool:  # noqa: ARG001
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in status_forcelist
        return isinstance(error, (httpx.TimeoutException, httpx.TransportError))

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Create a predicate approving a retry when any predicate does."""

    def predicate(error: Exception, args: tuple[Any, ...]) -> bool:
        return any(p(error, args) for p in predicates)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Create a predicate approving a retry when every predicate does."""

    def predicate(error: Exception, args: tuple[Any, ...]) -> bool:
        return all(p(error, args) for p in predicates)

    return predicate
