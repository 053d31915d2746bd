"""Library configuration: FallibleConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    'FallibleConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'FALLIBLE_LOG_LEVEL'
LOG_FORMAT_ENV = 'FALLIBLE_LOG_FORMAT'


@dataclass(frozen=True)
class FallibleConfig:
    """Configuration for fallible.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs if True, console-rendered logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: FallibleConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FALLIBLE_LOG_LEVEL, None when unset or empty."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Detect log format from FALLIBLE_LOG_FORMAT ("json" or "console").

    Unknown values fall back to JSON.
    """
    fmt = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, fmt)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> FallibleConfig:
    """Initialize fallible with the specified configuration.

    Unset arguments are resolved from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = read
            FALLIBLE_LOG_LEVEL, silent when that is unset too.
        json_logs: JSON or console output. None = read FALLIBLE_LOG_FORMAT.

    Returns:
        The FallibleConfig that was set.

    Example:
        ```python
        from fallible import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = FallibleConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FallibleConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fallible not initialized. Call fallible.init() first.'
        raise RuntimeError(msg)
    return _config
