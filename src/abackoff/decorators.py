r"""Decorators composing the retry loop onto functions and methods.

Example:
    ```pycon
    >>> import asyncio
    >>> from abackoff import backoff, backoff_with
    >>> class Client:
    ...     backoff_options = {"max_retries": 3}
    ...
    ...     @backoff_with({"max_retries": 2})
    ...     async def ping(self):
    ...         return "pong"
    ...
    ...     @backoff
    ...     async def fetch(self, key):
    ...         return key.upper()
    ...
    >>> client = Client()
    >>> asyncio.run(client.ping())
    'pong'
    >>> asyncio.run(client.fetch("a"))
    'A'

    ```
"""

from __future__ import annotations

__all__ = ["BackoffWrapper", "backoff", "backoff_with"]

import functools
from typing import TYPE_CHECKING, Any

from abackoff.events import Notifiable
from abackoff.retry_async import retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from abackoff.options import OptionsLike

DEFAULT_OPTIONS_ATTRIBUTE = "backoff_options"


class BackoffWrapper:
    """Descriptor routing calls of an async callable through ``retry``.

    Called directly, the wrapped function is retried with the fixed
    options. Accessed through an instance, the wrapped function is bound
    to it, the instance is used as emitter when it is ``Notifiable``, and
    the options are read from ``options_attribute`` on the instance when
    that attribute name is set.

    Args:
        func: The async callable to wrap.
        options: The fixed options, ignored when ``options_attribute``
            is set.
        options_attribute: Optional name of the instance attribute holding
            the options, read at every call.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        options: OptionsLike = None,
        options_attribute: str | None = None,
    ) -> None:
        functools.update_wrapper(self, func)
        self.func = func
        self.options = options
        self.options_attribute = options_attribute

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.func!r})"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self

        @functools.wraps(self.func)
        async def bound(*args: Any, **kwargs: Any) -> Any:
            return await self.call_bound(instance, *args, **kwargs)

        return bound

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.options_attribute is not None:
            msg = (
                f"{self.func.__qualname__} reads its options from "
                f"'{self.options_attribute}' and must be called on an instance"
            )
            raise TypeError(msg)
        return await retry(self.options, self.func, *args, **kwargs)

    async def call_bound(self, instance: Any, *args: Any, **kwargs: Any) -> Any:
        """Call the wrapped function as a method of ``instance``.

        Args:
            instance: The receiver of the call.
            *args: Positional arguments passed to the method.
            **kwargs: Keyword arguments passed to the method.

        Returns:
            The result of the first successful call.
        """
        if self.options_attribute is not None:
            options = getattr(instance, self.options_attribute)
        else:
            options = self.options
        emitter = instance if isinstance(instance, Notifiable) else None
        method = self.func.__get__(instance, type(instance))
        return await retry(options, method, *args, emitter=emitter, **kwargs)


def backoff_with(options: OptionsLike = None) -> Callable[[Callable[..., Any]], BackoffWrapper]:
    """Decorate an async function or method with fixed retry options.

    Args:
        options: ``None``, a mapping of option names, or a
            ``BackoffOptions``. Validated at every call.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff import backoff_with
        >>> @backoff_with({"max_retries": 3, "predicate": lambda exc, args: True})
        ... async def add(a, b):
        ...     return a + b
        ...
        >>> asyncio.run(add(1, 2))
        3

        ```
    """

    def decorator(func: Callable[..., Any]) -> BackoffWrapper:
        return BackoffWrapper(func, options=options)

    return decorator


def backoff(
    func: Callable[..., Any] | None = None, *, attribute: str = DEFAULT_OPTIONS_ATTRIBUTE
) -> Any:
    """Decorate an async method reading its options from its instance.

    The options are read from ``getattr(instance, attribute)`` at every
    call, so they may change between calls. The decorator can be used
    bare (``@backoff``) or with a custom attribute name
    (``@backoff(attribute="retry_options")``).

    Args:
        func: The method to decorate, when used bare.
        attribute: The name of the instance attribute holding the options.

    Returns:
        The wrapped method, or a decorator when ``func`` is ``None``.
    """

    def decorator(method: Callable[..., Any]) -> BackoffWrapper:
        return BackoffWrapper(method, options_attribute=attribute)

    if func is None:
        return decorator
    return decorator(func)
