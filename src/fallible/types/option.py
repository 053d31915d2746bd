"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar, NoReturn, TypeIs

import msgspec

from fallible._internal.utils import is_nullable, stringify
from fallible.errors import NoValueError, OptionError

if TYPE_CHECKING:
    from fallible.types.protocols import IntoOption
    from fallible.types.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'from_nullable',
    'from_predicate',
    'none',
    'option_from',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> opt = Some(42)
        >>> opt.unwrap()
        42
        >>> opt.map(lambda x: x * 2)
        Some(84)
        >>> str(opt)
        'Some(42)'
    """

    value: T

    _tag: ClassVar[str] = 'Some'

    def __bool__(self) -> NoReturn:
        raise TypeError('Option has no truth value; use .is_some() / .is_none().')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies the predicate."""
        return predicate(self.value)

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate's verdict on the contained value."""
        return predicate(self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the contained value, never calling the default factory."""
        return f(self.value)

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _err: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from fallible.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _f: Ignored error factory function.

        Returns:
            Ok containing the value.
        """
        from fallible.types.result import Ok

        return Ok(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            This same Some if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call the `some` handler with the contained value.

        Both handlers are required so every call site stays exhaustive.
        """
        return some(self.value)

    def into_result(self) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from fallible.types.result import Ok

        return Ok(self.value)

    def __str__(self) -> str:
        return f'{self._tag}({stringify(self.value)})'

    def __repr__(self) -> str:
        return f'{self._tag}({self.value!r})'


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value, and callbacks handed to
    them are never invoked.

    This is a singleton - use the `Nothing` constant (or `none()`) instead
    of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
        >>> str(Nothing)
        'None'
    """

    _tag: ClassVar[str] = 'None'

    def __bool__(self) -> NoReturn:
        raise TypeError('Option has no truth value; use .is_some() / .is_none().')

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and[T](self, _predicate: Callable[[T], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_none_or[T](self, _predicate: Callable[[T], bool]) -> bool:
        """Return True without calling the predicate."""
        return True

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message, used verbatim.

        Raises:
            OptionError: Always, carrying msg.
        """
        raise OptionError(msg)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            OptionError: Always, since Nothing has no value to unwrap.
        """
        raise OptionError('Unwrap called on None')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        return default

    def map_or_else[T, U](self, default_fn: Callable[[], U], _f: Callable[[T], U]) -> U:
        return default_fn()

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from fallible.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from fallible.types.result import Err

        return Err(f())

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def and_[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def match[T, U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Call the `none` handler."""
        return none()

    def into_result(self) -> Err[NoValueError]:
        """Convert to Result, returning Err(NoValueError('No value'))."""
        from fallible.types.result import Err

        return Err(NoValueError())

    def __str__(self) -> str:
        return self._tag

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Create a Some containing the given value."""
    return Some(value)


def none() -> NothingType:
    """Return the shared Nothing instance."""
    return Nothing


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable value into an Option.

    Only ``None`` maps to Nothing; falsy values such as ``0`` or ``''``
    become Some.

    Examples:
        >>> from_nullable(None)
        Nothing
        >>> from_nullable(0)
        Some(0)
    """
    if is_nullable(value):
        return Nothing
    return Some(value)


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Option[T]:
    """Return Some(value) if predicate(value) holds, else Nothing."""
    if predicate(value):
        return Some(value)
    return Nothing


def option_from[T](convertible: IntoOption[T]) -> Option[T]:
    """Delegate to the value's own `into_option()` conversion."""
    return convertible.into_option()
