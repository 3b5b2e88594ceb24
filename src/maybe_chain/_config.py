"""Library configuration: OptionConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from maybe_chain._logging import configure_logging

__all__ = [
    'LOG_LEVEL_ENV_VAR',
    'OptionConfig',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV_VAR = 'MAYBE_CHAIN_LOG_LEVEL'

_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class OptionConfig:
    """Process-wide settings for maybe-chain.

    Only observability is configurable. Container semantics, including the
    concurrency of ``assign`` and ``filter_map``, never depend on it.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when logging is configured.
    """

    log_level: str | None = None
    json_logs: bool = True


_DEFAULT = OptionConfig()

# Global configuration (set by init())
_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MAYBE_CHAIN_LOG_LEVEL.

    Empty or unset means silent. Unknown level names are ignored with a
    warning.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, '').strip()
    if not raw:
        return None
    level = raw.upper()
    if level not in _LEVELS:
        logging.warning("Invalid %s value '%s', ignoring", LOG_LEVEL_ENV_VAR, raw)
        return None
    return level


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> OptionConfig:
    """Initialize maybe-chain with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            MAYBE_CHAIN_LOG_LEVEL if None; None there too means silent.
        json_logs: JSON (True) or console (False) log rendering.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from maybe_chain import init

        init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = OptionConfig(log_level=resolved_level, json_logs=json_logs)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Returns:
        The OptionConfig set by init(), or the defaults if init() was never
        called.
    """
    if _config is None:
        return _DEFAULT
    return _config


def reset() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
