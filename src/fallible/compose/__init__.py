"""Composition: try_/maybe short-circuit blocks and the match function."""

from fallible.compose.blocks import maybe, try_
from fallible.compose.match import match

__all__ = ['match', 'maybe', 'try_']
