"""attempt, with_attempt and friends: turn raising code into Result values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fallible._internal.utils import is_awaitable, to_error
from fallible._logging import get_logger
from fallible.async_.result import AsyncResult
from fallible.types.result import Err, Ok, Result

__all__ = ['attempt', 'from_awaitable', 'from_throwable', 'with_attempt']

logger = get_logger(__name__)

type ErrorMapper[E] = Callable[[BaseException], E]


def _caught[E](exc: BaseException, mapper: ErrorMapper[E]) -> Err[E]:
    logger.debug('attempt.caught', error_type=type(exc).__name__)
    return Err(mapper(exc))


async def _settle[T, E](
    awaitable: Awaitable[T],
    mapper: ErrorMapper[E],
    catch: tuple[type[BaseException], ...],
) -> Result[T, E]:
    try:
        return Ok(await awaitable)
    except catch as e:
        return _caught(e, mapper)


@overload
def attempt[T](
    fn: Callable[[], Awaitable[T]],
    error_mapper: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> AsyncResult[T, BaseException]: ...


@overload
def attempt[T, E](
    fn: Callable[[], Awaitable[T]],
    error_mapper: ErrorMapper[E],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> AsyncResult[T, E]: ...


@overload
def attempt[T](
    fn: Callable[[], T],
    error_mapper: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]: ...


@overload
def attempt[T, E](
    fn: Callable[[], T],
    error_mapper: ErrorMapper[E],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, E]: ...


def attempt(
    fn: Callable[[], Any],
    error_mapper: ErrorMapper[Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[Any, Any] | AsyncResult[Any, Any]:
    """Call fn once and capture its outcome as a Result.

    Whether fn is asynchronous is decided from its return value: an
    awaitable return is awaited inside the returned AsyncResult, anything
    else is wrapped in Ok right away. A raised exception (or a rejected
    awaitable) becomes Err(error_mapper(exception)). Nothing is retried and
    nothing caught is re-raised.

    Args:
        fn: Zero-argument callable to invoke.
        error_mapper: Maps the caught exception to the Err payload. Defaults
            to `to_error`, which keeps exceptions as they are.
        exceptions: Exception types to capture. Defaults to (Exception,), so
            KeyboardInterrupt and task cancellation still propagate.

    Returns:
        A Result for synchronous work, an AsyncResult for awaitable work.

    Example:
        ```python
        attempt(lambda: int('5'))
        # Ok(5)
        attempt(lambda: int('five'))
        # Err(ValueError("invalid literal for int() with base 10: 'five'"))
        await attempt(fetch_page)
        # Ok('<html>...')
        ```
    """
    mapper = error_mapper if error_mapper is not None else to_error
    catch = exceptions if exceptions is not None else (Exception,)

    try:
        value = fn()
    except catch as e:
        return _caught(e, mapper)

    if is_awaitable(value):
        return AsyncResult(_settle(value, mapper, catch))
    return Ok(value)


def with_attempt(
    func: Callable[..., Any] | None = None,
    error_mapper: ErrorMapper[Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Wrap a function so every call goes through `attempt`.

    The wrapper accepts the same arguments as func and forwards them
    unchanged. Can be used directly or as a decorator, with or without
    arguments:
        safe_parse = with_attempt(json.loads)

        @with_attempt
        def risky(): ...

        @with_attempt(error_mapper=str)
        async def fetch(url): ...

    Args:
        func: The function to wrap (when used without parentheses).
        error_mapper: Maps a caught exception to the Err payload.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped function returning Result (or AsyncResult for async work).
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any] | AsyncResult[Any, Any]:
        return attempt(lambda: wrapped(*args, **kwargs), error_mapper, exceptions=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper


def from_throwable[**P, T](
    fn: Callable[P, T],
    error_mapper: ErrorMapper[Any] | None = None,
) -> Callable[P, Result[T, Any]]:
    """Turn a raising function into one that returns a Result.

    Equivalent to ``with_attempt(fn, error_mapper)`` for synchronous
    functions.
    """
    return with_attempt(fn, error_mapper)


def from_awaitable[T, E](
    awaitable: Awaitable[T],
    error_mapper: ErrorMapper[E] | None = None,
) -> AsyncResult[T, E]:
    """Await an already started operation and capture its outcome.

    Resolves to Ok(value) on completion, or Err(error_mapper(exc)) when the
    awaitable raises.

    Example:
        ```python
        task = asyncio.create_task(download(url))
        result = await from_awaitable(task, error_mapper=str)
        ```
    """
    mapper = error_mapper if error_mapper is not None else to_error
    return AsyncResult(_settle(awaitable, mapper, (Exception,)))
