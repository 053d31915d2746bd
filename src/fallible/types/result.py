"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, NoReturn, TypeIs

import msgspec

from fallible._internal.utils import is_nullable, stringify
from fallible.errors import ResultError
from fallible.types.option import Nothing, NothingType, Some

if TYPE_CHECKING:
    from fallible.types.protocols import IntoResult

__all__ = ['Err', 'Ok', 'Result', 'err', 'ok', 'result_from']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> res = Ok(42)
        >>> res.unwrap()
        42
        >>> res.map(lambda x: x * 2)
        Ok(84)
        >>> str(res)
        'Ok(42)'
    """

    value: T

    _tag: ClassVar[str] = 'Ok'

    def __bool__(self) -> NoReturn:
        raise TypeError('Result has no truth value; use .is_ok() / .is_err().')

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies the predicate."""
        return predicate(self.value)

    def is_err_and(self, _predicate: Callable[[object], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value).

        ``Ok(None).ok()`` is ``Some(None)``: a successful None is still a
        success value.
        """
        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        return Nothing

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to unwrap.

        Raises:
            ResultError: Always, describing this Ok.
        """
        raise ResultError(f'Unwrapping error value on {self}')

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[object], T]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message followed by the Ok payload.

        Raises:
            ResultError: Always, as ``"<msg>: <value>"``.
        """
        raise ResultError(f'{msg}: {stringify(self.value)}')

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[object], U], f: Callable[[T], U]) -> U:
        return f(self.value)

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def or_else[F](self, _f: Callable[[object], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def transpose(self) -> Some[Ok[T]] | NothingType:
        """Drop an Ok holding None.

        Returns Nothing for ``Ok(None)``, otherwise ``Some(self)``. Only
        None counts as absent; ``Ok(0)`` and ``Ok('')`` are kept.
        """
        if is_nullable(self.value):
            return Nothing
        return Some(self)

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[object], U]) -> U:
        """Call the `ok` handler with the contained value."""
        return ok(self.value)

    def into_option(self) -> Some[T]:
        return Some(self.value)

    def __str__(self) -> str:
        return f'{self._tag}({stringify(self.value)})'

    def __repr__(self) -> str:
        return f'{self._tag}({self.value!r})'


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated. The error
    does not have to be an exception.

    Examples:
        >>> res = Err('something went wrong')
        >>> res.is_err()
        True
        >>> res.unwrap_or(0)
        0
        >>> str(res)
        'Err("something went wrong")'
    """

    error: E

    _tag: ClassVar[str] = 'Err'

    def __bool__(self) -> NoReturn:
        raise TypeError('Result has no truth value; use .is_ok() / .is_err().')

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _predicate: Callable[[object], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if the error satisfies the predicate."""
        return predicate(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        return Some(self.error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        When the error is itself an exception it is chained as the cause.

        Raises:
            ResultError: Always, since Err has no Ok value to unwrap.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ResultError(f'Unwrapping value on {self}') from cause

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the error.

        Args:
            f: Function receiving the error and returning a replacement value.
        """
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            ResultError: Always, as ``"<msg>: <error>"``.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ResultError(f'{msg}: {stringify(self.error)}') from cause

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        return default

    def map_or_else[T, U](self, default_fn: Callable[[E], U], _f: Callable[[T], U]) -> U:
        return default_fn(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def transpose(self) -> Some[Err[E]]:
        """Return Some(self); an Err is never dropped."""
        return Some(self)

    def match[U](self, *, ok: Callable[[object], U], err: Callable[[E], U]) -> U:
        """Call the `err` handler with the contained error."""
        return err(self.error)

    def into_option(self) -> NothingType:
        return Nothing

    def __str__(self) -> str:
        return f'{self._tag}({stringify(self.error)})'

    def __repr__(self) -> str:
        return f'{self._tag}({self.error!r})'


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Create an Ok result wrapping the value."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Create an Err result wrapping the error."""
    return Err(error)


def result_from[T, E](convertible: IntoResult[T, E]) -> Result[T, E]:
    """Delegate to the value's own `into_result()` conversion.

    Examples:
        >>> result_from(Some(1))
        Ok(1)
    """
    return convertible.into_result()

