"""AsyncResult: a Result wrapped in a single-shot awaitable.

AsyncResult wraps an Awaitable[Result[T, E]] and provides async-aware
transformation methods that compose cleanly in async contexts. It is what
`attempt`, `from_awaitable` and `try_` hand back for asynchronous work.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    # Chain async operations
    result = await (
        AsyncResult(fetch_user(1))
        .aand_then(validate_user)
        .amap(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from fallible.types.option import Nothing, Option, Some
from fallible.types.result import Err, Ok, Result

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    AsyncResult holds an Awaitable[Result[T, E]] and provides methods
    for transforming and chaining async operations that produce Results.

    Unlike regular Result, AsyncResult methods return new AsyncResult
    instances, allowing you to build up a chain of async operations
    that only execute when awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        multiple times will raise RuntimeError. Wrap a Task/Future for
        multi-await scenarios.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await AsyncResult(get_data()).amap(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value.

        If the underlying Result is Ok, applies f to the value.
        If Err, returns the same Err unchanged.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(5).amap(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            return (await self._awaitable).map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value.

        If the underlying Result is Ok, awaits f(value).
        If Err, returns the Err unchanged and f is never called.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(await f(result.value))
            return result

        return AsyncResult(_mapped())

    def amap_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Err value."""

        async def _mapped() -> Result[T, F]:
            return (await self._awaitable).map_err(f)

        return AsyncResult(_mapped())

    def aand_then[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain with a sync function that returns a Result.

        If Ok, calls f(value) and returns its result.
        If Err, returns the Err unchanged.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                result = await AsyncResult.from_ok(5).aand_then(validate)
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E]:
            return (await self._awaitable).and_then(f)

        return AsyncResult(_chained())

    def aand_then_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result."""

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return await f(result.value)
            return result

        return AsyncResult(_chained())

    def aor_else[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Recover from an Err with a sync function.

        If Err, calls f(error) and returns its result.
        If Ok, returns the Ok unchanged.
        """

        async def _recovered() -> Result[T, F]:
            return (await self._awaitable).or_else(f)

        return AsyncResult(_recovered())

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Ok value or the default.
        """

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or(default)

        return _unwrap()

    def aunwrap_or_else(self, f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Unwrap with a function to compute the default from the error."""

        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or_else(f)

        return _unwrap()

    def aok(self) -> Coroutine[Any, Any, Option[T]]:
        """Convert to Option, returning Some(value) for Ok."""

        async def _ok() -> Option[T]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Some(result.value)
            return Nothing

        return _ok()

    def aerr(self) -> Coroutine[Any, Any, Option[E]]:
        """Convert to Option, returning Some(error) for Err."""

        async def _err() -> Option[E]:
            result = await self._awaitable
            if isinstance(result, Err):
                return Some(result.error)
            return Nothing

        return _err()

    def amatch[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> Coroutine[Any, Any, U]:
        """Await the Result and dispatch to exactly one handler."""

        async def _matched() -> U:
            return (await self._awaitable).match(ok=ok, err=err)

        return _matched()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
