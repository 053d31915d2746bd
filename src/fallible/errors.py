"""Error types: library misuse errors and the domain errors fallible produces.

Misuse errors (`OptionError`, `ResultError`) are raised when an accessor is
called on the wrong variant. `NoValueError` and `UnknownError` are never
raised by the library; they are only carried inside `Err`.
"""

from __future__ import annotations

from typing import Any, TypeIs

__all__ = [
    'FallibleError',
    'NoValueError',
    'OptionError',
    'ResultError',
    'UnknownError',
]


class FallibleError(Exception):
    """Base exception class for fallible errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from fallible import FallibleError, none

        try:
            none().unwrap()
        except FallibleError as e:
            print(f'misuse: {e}')
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class OptionError(FallibleError):
    """Raised by `expect`/`unwrap` on `Nothing`."""

    @staticmethod
    def is_option_error(value: object) -> TypeIs[OptionError]:
        return isinstance(value, OptionError)


class ResultError(FallibleError):
    """Raised by `unwrap`/`expect` on `Err` and `unwrap_err`/`expect_err` on `Ok`."""

    @staticmethod
    def is_result_error(value: object) -> TypeIs[ResultError]:
        return isinstance(value, ResultError)


class NoValueError(FallibleError):
    """Error carried by the `Err` produced from `Nothing.into_result()`."""

    def __init__(self, message: str = 'No value', code: str | None = None) -> None:
        super().__init__(message, code)


class UnknownError(FallibleError):
    """Wraps a failure value that is not an exception.

    Attributes:
        value: The original, unwrapped failure value.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(str(value))
        self.value = value
