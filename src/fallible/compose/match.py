"""match: free-function form of Result.match / Option.match."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from fallible.types.option import Option
from fallible.types.result import Result

__all__ = ['match']


@overload
def match[T, E, U](value: Result[T, E], *, ok: Callable[[T], U], err: Callable[[E], U]) -> U: ...


@overload
def match[T, U](value: Option[T], *, some: Callable[[T], U], none: Callable[[], U]) -> U: ...


def match(value: Any, **handlers: Callable[..., Any]) -> Any:
    """Dispatch a Result or Option to exactly one handler.

    Results take ``ok``/``err`` handlers, Options take ``some``/``none``.
    Both handlers of the pair are required.

    Example:
        ```python
        match(
            sum_numeric('12', '12'),
            ok=lambda total: print(f'Sum is {total}'),
            err=lambda error: print(f'Failed to calculate sum: {error}'),
        )
        ```
    """
    return value.match(**handlers)
