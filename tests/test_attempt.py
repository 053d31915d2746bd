"""Tests for exception bridging: attempt, with_attempt, from_throwable, from_awaitable."""

import asyncio
import json

import pytest

from fallible import (
    AsyncResult,
    Err,
    Ok,
    UnknownError,
    attempt,
    from_awaitable,
    from_throwable,
    with_attempt,
)
from fallible._internal.utils import to_error


class TestAttemptSync:
    """Tests for attempt with synchronous callables."""

    def test_success_is_ok(self):
        """A normal return is wrapped in Ok."""
        assert attempt(lambda: int('5')) == Ok(5)

    def test_exception_is_err(self):
        """A raised exception becomes Err holding that exception."""
        res = attempt(lambda: int('five'))
        assert res.is_err()
        assert isinstance(res.error, ValueError)

    def test_same_exception_instance(self):
        """The default mapper keeps the exception instance as-is."""
        boom = RuntimeError('boom')

        def fail():
            raise boom

        assert attempt(fail).unwrap_err() is boom

    def test_fn_called_once(self, calls):
        """attempt never retries."""

        def fail():
            calls.append('call')
            raise ValueError('nope')

        attempt(fail)
        assert calls == ['call']

    def test_error_mapper(self):
        """error_mapper shapes the Err payload."""
        res = attempt(lambda: 1 / 0, lambda e: f'math: {type(e).__name__}')
        assert res == Err('math: ZeroDivisionError')

    def test_exceptions_limits_what_is_caught(self):
        """Exceptions outside the configured set propagate."""

        def fail():
            raise KeyError('k')

        assert attempt(fail, exceptions=(KeyError,)).is_err()
        with pytest.raises(KeyError):
            attempt(fail, exceptions=(ValueError,))

    def test_base_exceptions_propagate_by_default(self):
        """KeyboardInterrupt is not swallowed."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            attempt(interrupt)


class TestAttemptAsync:
    """Tests for attempt with awaitable-returning callables."""

    @pytest.mark.asyncio
    async def test_returns_async_result(self):
        """An awaitable return produces an AsyncResult."""

        async def fetch():
            return 'page'

        res = attempt(fetch)
        assert isinstance(res, AsyncResult)
        assert await res == Ok('page')

    @pytest.mark.asyncio
    async def test_rejection_is_err(self):
        """An exception raised while awaiting becomes Err."""

        async def fetch():
            await asyncio.sleep(0)
            raise ConnectionError('refused')

        res = await attempt(fetch)
        assert res.is_err()
        assert isinstance(res.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_rejection_uses_error_mapper(self):
        """The mapper also applies to async failures."""

        async def fetch():
            raise TimeoutError('slow')

        assert await attempt(fetch, str) == Err('slow')

    @pytest.mark.asyncio
    async def test_rejection_outside_exceptions_propagates(self):
        """Uncaught async exception types surface when awaited."""

        async def fetch():
            raise KeyError('k')

        with pytest.raises(KeyError):
            await attempt(fetch, exceptions=(ValueError,))


class TestWithAttempt:
    """Tests for with_attempt and from_throwable."""

    def test_wrap_function(self):
        """with_attempt wraps an existing function."""
        safe_loads = with_attempt(json.loads)
        assert safe_loads('{"a": 1}') == Ok({'a': 1})
        assert isinstance(safe_loads('{').error, json.JSONDecodeError)

    def test_decorator_without_arguments(self):
        """@with_attempt forwards positional and keyword arguments."""

        @with_attempt
        def divide(a: int, b: int = 1) -> float:
            return a / b

        assert divide(10, b=2) == Ok(5.0)
        assert isinstance(divide(1, 0).error, ZeroDivisionError)

    def test_decorator_with_arguments(self):
        """@with_attempt(...) accepts a mapper and exception set."""

        @with_attempt(error_mapper=str, exceptions=(ValueError,))
        def parse(s: str) -> int:
            if s == 'type':
                raise TypeError('not handled')
            return int(s)

        assert parse('3') == Ok(3)
        assert parse('x') == Err("invalid literal for int() with base 10: 'x'")
        with pytest.raises(TypeError):
            parse('type')

    def test_preserves_function_metadata(self):
        """The wrapper keeps the wrapped function's name and docstring."""

        @with_attempt
        def my_function():
            """Docstring."""

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'Docstring.'

    def test_wraps_methods(self):
        """Bound methods are forwarded with their instance."""

        class Account:
            def __init__(self, balance: int) -> None:
                self.balance = balance

            @with_attempt
            def withdraw(self, amount: int) -> int:
                if amount > self.balance:
                    raise ValueError('insufficient funds')
                self.balance -= amount
                return self.balance

        account = Account(10)
        assert account.withdraw(3) == Ok(7)
        assert str(account.withdraw(100).error) == 'insufficient funds'

    @pytest.mark.asyncio
    async def test_wrap_async_function(self):
        """Wrapping a coroutine function yields AsyncResults."""

        @with_attempt
        async def fetch(url: str) -> str:
            if not url:
                raise ValueError('empty url')
            return f'<{url}>'

        assert await fetch('a') == Ok('<a>')
        assert (await fetch('')).is_err()

    def test_from_throwable(self):
        """from_throwable turns a raising function into a Result function."""

        def parse_int(s: str) -> int:
            return int(s)

        safe_int = from_throwable(parse_int, lambda e: 'bad int')
        assert safe_int('7') == Ok(7)
        assert safe_int('seven') == Err('bad int')


class TestFromAwaitable:
    """Tests for from_awaitable."""

    @pytest.mark.asyncio
    async def test_resolved(self):
        """A completed awaitable becomes Ok."""

        async def work():
            return 3

        assert await from_awaitable(work()) == Ok(3)

    @pytest.mark.asyncio
    async def test_task(self):
        """An already scheduled task is captured."""

        async def work():
            await asyncio.sleep(0)
            raise OSError('disk')

        task = asyncio.ensure_future(work())
        res = await from_awaitable(task, error_mapper=str)
        assert res == Err('disk')

    @pytest.mark.asyncio
    async def test_default_mapper_keeps_exception(self):
        """The default mapper keeps exceptions intact."""
        failure = LookupError('missing')

        async def work():
            raise failure

        assert (await from_awaitable(work())).unwrap_err() is failure


class TestToError:
    """Tests for the default error mapper."""

    def test_exception_identity(self):
        """Exceptions pass through unchanged."""
        exc = ValueError('x')
        assert to_error(exc) is exc

    def test_wraps_non_exception(self):
        """Other values are wrapped in UnknownError."""
        wrapped = to_error(13)
        assert isinstance(wrapped, UnknownError)
        assert wrapped.value == 13
        assert str(wrapped) == '13'

    def test_mapper_receiving_non_exception_payload(self):
        """A mapper may return a non-exception payload that to_error wraps."""
        res = attempt(lambda: 1 / 0, lambda e: to_error(13))
        assert isinstance(res.error, UnknownError)
        assert res.error.value == 13
