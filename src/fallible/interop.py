"""Bridges from exception-raising code into Results."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, overload

from fallible.result import Result, make_failure, make_success

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)

ExceptionTypes = tuple[type[BaseException], ...]


def attempt[T](
    fn: Callable[..., T],
    /,
    *args: Any,
    catch: ExceptionTypes = (Exception,),
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call ``fn(*args, **kwargs)`` and capture the outcome as a Result.

    Only exceptions matching *catch* become Failures; anything else
    propagates unchanged.

    Example:
        attempt(int, "42")        # Success(42)
        attempt(int, "forty-two")  # Failure(ValueError(...))
    """
    if not catch:
        raise ValueError("catch must name at least one exception type")
    try:
        value = fn(*args, **kwargs)
    except catch as exc:
        log.debug(
            "attempt(%s) captured %s: %s",
            getattr(fn, "__qualname__", fn),
            type(exc).__name__,
            exc,
        )
        return make_failure(exc)
    return make_success(value)


@overload
def safe[T](
    fn: Callable[..., T], /
) -> Callable[..., Result[T, BaseException]]: ...


@overload
def safe[T](
    fn: None = None, /, *, catch: ExceptionTypes = ...
) -> Callable[[Callable[..., T]], Callable[..., Result[T, BaseException]]]: ...


def safe(
    fn: Callable[..., Any] | None = None,
    /,
    *,
    catch: ExceptionTypes = (Exception,),
) -> Any:
    """Decorate *fn* so it returns a Result instead of raising.

    Usable bare (``@safe``) or with arguments (``@safe(catch=(KeyError,))``).
    """

    def decorate(
        func: Callable[..., Any],
    ) -> Callable[..., Result[Any, BaseException]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, BaseException]:
            return attempt(func, *args, catch=catch, **kwargs)

        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)
