"""Conversion protocols: IntoResult and IntoOption capability contracts.

Host-defined types implement these to describe how they turn into a Result or
an Option, which lets `result_from` / `option_from` accept them directly.

Uses PEP 695 type parameter syntax, so variance is inferred by type checkers.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fallible.types.option import Option
    from fallible.types.result import Result

__all__ = ['IntoOption', 'IntoResult']


@runtime_checkable
class IntoResult[T, E](Protocol):
    """Protocol for values that can convert themselves into a Result.

    Example:
        ```python
        class NumberParsingError(Exception):
            def into_result(self) -> Result[Never, NumberParsingError]:
                return err(self)

        result_from(NumberParsingError('bad input'))
        # Err(NumberParsingError('bad input'))
        ```
    """

    @abstractmethod
    def into_result(self) -> Result[T, E]:
        """Convert this value into a Result."""
        ...


@runtime_checkable
class IntoOption[T](Protocol):
    """Protocol for values that can convert themselves into an Option."""

    @abstractmethod
    def into_option(self) -> Option[T]:
        """Convert this value into an Option."""
        ...
