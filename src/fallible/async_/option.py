"""AsyncOption: an Option wrapped in a single-shot awaitable."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from fallible.async_.result import AsyncResult
from fallible.types.option import Nothing, Option, Some
from fallible.types.result import Result

__all__ = ['AsyncOption']


class AsyncOption[T]:
    """Async-aware Option wrapper, the Option counterpart of AsyncResult.

    Methods return new AsyncOption instances (or coroutines for the
    terminal operations), so nothing runs until the chain is awaited.
    Single-shot when wrapping a coroutine object, like AsyncResult.

    Example:
        ```python
        async def find(key: str) -> Option[int]:
            return from_nullable(cache.get(key))

        doubled = await AsyncOption(find('a')).amap(lambda x: x * 2)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_some(cls, value: T) -> AsyncOption[T]:
        async def _some() -> Option[T]:
            return Some(value)

        return cls(_some())

    @classmethod
    def from_nothing(cls) -> AsyncOption[T]:
        async def _nothing() -> Option[T]:
            return Nothing

        return cls(_nothing())

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        async def _option() -> Option[T]:
            return option

        return cls(_option())

    def amap[U](self, f: Callable[[T], U]) -> AsyncOption[U]:
        """Apply a sync function to the Some value; Nothing passes through."""

        async def _mapped() -> Option[U]:
            return (await self._awaitable).map(f)

        return AsyncOption(_mapped())

    def aand_then[U](self, f: Callable[[T], Option[U]]) -> AsyncOption[U]:
        """Chain with a sync function that returns an Option."""

        async def _chained() -> Option[U]:
            return (await self._awaitable).and_then(f)

        return AsyncOption(_chained())

    def aor_else(self, f: Callable[[], Option[T]]) -> AsyncOption[T]:
        """Recover from Nothing with a sync function; Some is kept as is."""

        async def _recovered() -> Option[T]:
            return (await self._awaitable).or_else(f)

        return AsyncOption(_recovered())

    def afilter(self, predicate: Callable[[T], bool]) -> AsyncOption[T]:
        async def _filtered() -> Option[T]:
            return (await self._awaitable).filter(predicate)

        return AsyncOption(_filtered())

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        async def _unwrap() -> T:
            return (await self._awaitable).unwrap_or(default)

        return _unwrap()

    def aok_or[E](self, error: E) -> AsyncResult[T, E]:
        """Convert to an AsyncResult, using error for Nothing."""

        async def _converted() -> Result[T, E]:
            return (await self._awaitable).ok_or(error)

        return AsyncResult(_converted())

    def amatch[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> Coroutine[Any, Any, U]:
        """Await the Option and dispatch to exactly one handler."""

        async def _matched() -> U:
            return (await self._awaitable).match(some=some, none=none)

        return _matched()

    def __repr__(self) -> str:
        return f'AsyncOption({self._awaitable!r})'
