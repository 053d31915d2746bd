"""Internal helpers shared by the Option and Result variants."""

from __future__ import annotations

import inspect
from typing import Any, TypeIs

import msgspec

from fallible.errors import UnknownError

__all__ = ['NON_SERIALIZABLE', 'is_awaitable', 'is_nullable', 'stringify', 'to_error']

NON_SERIALIZABLE = '<non-serializable>'

_ENCODER = msgspec.json.Encoder()


def is_nullable(value: object) -> TypeIs[None]:
    return value is None


def is_awaitable(value: object) -> bool:
    return inspect.isawaitable(value)


def to_error(value: Any) -> BaseException:
    """Default error mapper: keep exceptions, wrap anything else.

    Examples:
        >>> err = ValueError('boom')
        >>> to_error(err) is err
        True
        >>> to_error(13)
        UnknownError('13')
    """
    if isinstance(value, BaseException):
        return value
    return UnknownError(value)


def stringify(value: object) -> str:
    """Render a payload for `__str__`, never raising.

    Exceptions render as ``<TypeName>: <message>``, nested variants use their
    own string form, and everything else is JSON-encoded with msgspec.
    Payloads msgspec refuses (functions, cycles, arbitrary objects) render
    as ``<non-serializable>``.
    """
    if isinstance(value, BaseException):
        return f'{type(value).__name__}: {value}'
    if getattr(type(value), '_tag', None) is not None and isinstance(value, msgspec.Struct):
        return str(value)
    try:
        if type(value) is int:
            # msgspec only encodes 64-bit ints
            return str(value)
        return _ENCODER.encode(value).decode()
    except (TypeError, ValueError, OverflowError, RecursionError, msgspec.EncodeError):
        return NON_SERIALIZABLE
