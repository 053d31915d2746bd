"""fallible: Result and Option types for Python 3.13+.

Explicit, type-distinguished handling of fallible and optional values,
plus utilities that turn exceptions into values and compose chains of
Results without manual branching.

Flat imports (preferred):
    from fallible import Result, Ok, Err, Option, Some, Nothing
    from fallible import ok, err, some, none, attempt, try_, maybe, match

Submodule imports (for organization):
    from fallible.types import Result, Option
    from fallible.decorators import attempt, with_attempt
    from fallible.compose import try_, maybe, match
    from fallible.async_ import AsyncResult, AsyncOption
"""

# Configuration
from fallible._config import FallibleConfig, get_config, init

# Async
from fallible.async_ import AsyncOption, AsyncResult

# Composition
from fallible.compose import match, maybe, try_

# Exception bridging
from fallible.decorators import attempt, from_awaitable, from_throwable, with_attempt

# Errors
from fallible.errors import FallibleError, NoValueError, OptionError, ResultError, UnknownError

# Types
from fallible.types import (
    Err,
    IntoOption,
    IntoResult,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    err,
    from_nullable,
    from_predicate,
    none,
    ok,
    option_from,
    result_from,
    some,
)

__all__ = [
    # Async
    'AsyncOption',
    'AsyncResult',
    # Result types
    'Err',
    # Configuration
    'FallibleConfig',
    # Errors
    'FallibleError',
    # Protocols
    'IntoOption',
    'IntoResult',
    'NoValueError',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionError',
    'Result',
    'ResultError',
    'Some',
    'UnknownError',
    # Exception bridging
    'attempt',
    # Factories
    'err',
    'from_awaitable',
    'from_nullable',
    'from_predicate',
    'from_throwable',
    'get_config',
    'init',
    # Composition
    'match',
    'maybe',
    'none',
    'ok',
    'option_from',
    'result_from',
    'some',
    'try_',
    'with_attempt',
]
