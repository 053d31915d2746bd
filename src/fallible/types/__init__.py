"""Core types: Result, Ok, Err, Option, Some, Nothing, and conversion protocols."""

from fallible.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    from_predicate,
    none,
    option_from,
    some,
)
from fallible.types.protocols import IntoOption, IntoResult
from fallible.types.result import Err, Ok, Result, err, ok, result_from

__all__ = [
    'Err',
    'IntoOption',
    'IntoResult',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'err',
    'from_nullable',
    'from_predicate',
    'none',
    'ok',
    'option_from',
    'result_from',
    'some',
]
