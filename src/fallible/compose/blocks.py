"""try_ and maybe: generator blocks that return early on the first failure.

Each ``yield`` inside the block is an unwrap step. Yielding an Ok/Some
resumes the block with the contained value; yielding an Err/Nothing stops
the block for good and that failure becomes the block's result. A block
that runs to the end produces its own final Result/Option, which is handed
back untouched.

Example:
    ```python
    def sum_numeric(x: str, y: str) -> Result[int, ParseError]:
        def body():
            a = yield parse_number(x)
            b = yield parse_number(y)
            return ok(a + b)

        return try_(body)
    ```

Async blocks are async generator functions. Python async generators cannot
``return`` a value, so the block's result is the last value it yielded:

    ```python
    async def body():
        user = yield fetch_user(user_id)  # awaitables are awaited first
        yield ok(user.name)

    name = await try_(body)
    ```

An exception raised while awaiting a step is thrown back into the body at
that `yield`, the same as an `await` written inside the body.

Exceptions raised inside a block are not converted; they propagate to the
caller. Wrap uncontrolled code in `attempt` to get an Err instead.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncGenerator, Callable, Generator
from dataclasses import dataclass
from typing import Any, overload

from fallible._internal.utils import is_awaitable
from fallible._logging import get_logger
from fallible.async_.option import AsyncOption
from fallible.async_.result import AsyncResult
from fallible.errors import FallibleError, OptionError, ResultError
from fallible.types.option import NothingType, Option, Some
from fallible.types.result import Err, Ok, Result

__all__ = ['maybe', 'try_']

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class _Block:
    """What a block unwraps and how it reports misuse."""

    name: str
    event: str
    success: type
    failure: type
    misuse: type[FallibleError]
    expected: str

    def accepts(self, value: object) -> bool:
        return isinstance(value, self.success | self.failure)

    def misuse_error(self, value: object, what: str) -> FallibleError:
        return self.misuse(f'{self.name} {what} must be {self.expected}, got {type(value).__name__}')


_TRY = _Block('try_', 'try.short_circuit', Ok, Err, ResultError, 'a Result')
_MAYBE = _Block('maybe', 'maybe.short_circuit', Some, NothingType, OptionError, 'an Option')


def _drive(block: _Block, steps: Generator[Any, Any, Any]) -> Any:
    index = 0
    try:
        step = next(steps)
        while True:
            if not block.accepts(step):
                steps.close()
                raise block.misuse_error(step, 'step')
            if isinstance(step, block.failure):
                logger.debug(block.event, step=index)
                steps.close()
                return step
            index += 1
            step = steps.send(step.value)
    except StopIteration as stop:
        if not block.accepts(stop.value):
            raise block.misuse_error(stop.value, 'return value') from None
        return stop.value


async def _drive_async(block: _Block, steps: AsyncGenerator[Any, Any]) -> Any:
    index = 0
    last: Any = None
    try:
        step = await steps.asend(None)
        while True:
            if is_awaitable(step):
                try:
                    step = await step
                except BaseException as exc:
                    # Surface the failure at the body's yield
                    step = await steps.athrow(exc)
                    continue
            if not block.accepts(step):
                await steps.aclose()
                raise block.misuse_error(step, 'step')
            if isinstance(step, block.failure):
                logger.debug(block.event, step=index)
                await steps.aclose()
                return step
            last = step
            index += 1
            step = await steps.asend(step.value)
    except StopAsyncIteration:
        if last is None:
            msg = f'{block.name} async body finished without yielding {block.expected}'
            raise block.misuse(msg) from None
        return last


def _start(block: _Block, body: Callable[[], Any]) -> Any:
    steps = body()
    if inspect.isasyncgen(steps):
        return _drive_async(block, steps)
    if inspect.isgenerator(steps):
        return _drive(block, steps)
    msg = f'{block.name} body must be a generator function, got {type(steps).__name__}'
    raise block.misuse(msg)


@overload
def try_[T, E](body: Callable[[], Generator[Result[Any, E], Any, Result[T, E]]]) -> Result[T, E]: ...


@overload
def try_[T, E](body: Callable[[], AsyncGenerator[Any, Any]]) -> AsyncResult[T, E]: ...


def try_(body: Callable[[], Any]) -> Any:
    """Run a Result block, stopping at the first Err.

    Args:
        body: Zero-argument generator function (or async generator function)
            whose ``yield`` expressions unwrap Results.

    Returns:
        The first Err yielded, or else the block's final Result. For an
        async body, an AsyncResult resolving to the same.

    Raises:
        ResultError: If body is not a generator function, or it yields or
            produces something that is not a Result.
    """
    outcome = _start(_TRY, body)
    if inspect.iscoroutine(outcome):
        return AsyncResult(outcome)
    return outcome


@overload
def maybe[T](body: Callable[[], Generator[Option[Any], Any, Option[T]]]) -> Option[T]: ...


@overload
def maybe[T](body: Callable[[], AsyncGenerator[Any, Any]]) -> AsyncOption[T]: ...


def maybe(body: Callable[[], Any]) -> Any:
    """Run an Option block, stopping at the first Nothing.

    Args:
        body: Zero-argument generator function (or async generator function)
            whose ``yield`` expressions unwrap Options.

    Returns:
        Nothing if any step was Nothing, or else the block's final Option.
        For an async body, an AsyncOption resolving to the same.

    Raises:
        OptionError: If body is not a generator function, or it yields or
            produces something that is not an Option.
    """
    outcome = _start(_MAYBE, body)
    if inspect.iscoroutine(outcome):
        return AsyncOption(outcome)
    return outcome
