"""Exception bridging: attempt, with_attempt, from_throwable, from_awaitable."""

from fallible.decorators.attempt import attempt, from_awaitable, from_throwable, with_attempt

__all__ = [
    'attempt',
    'from_awaitable',
    'from_throwable',
    'with_attempt',
]
