"""Structured logging for maybe-chain.

Library loggers are structlog loggers wrapping stdlib loggers under the
``maybe_chain`` namespace, with their processor chain bound at creation.
Nothing global is configured on import: the stdlib level of ``maybe_chain``
decides what is emitted, so the library stays silent until the application
either calls ``configure_logging`` or raises that logger's level itself.

Events are rendered through ``structlog.stdlib.ProcessorFormatter``, which
``configure_logging`` installs on a stderr handler attached to the
``maybe_chain`` logger only. The root logger and the process-wide structlog
configuration are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

PACKAGE_LOGGER = 'maybe_chain'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# Handler installed by configure_logging(), replaced on reconfiguration
_handler: logging.Handler | None = None


def add_log_hook(hook: LogHook) -> None:
    """Register a hook to be called with a copy of every emitted event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            pass  # A broken hook must not break the caller's pipeline
    return event_dict


def _processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger for a module of this package.

    Args:
        name: Dotted logger name, normally ``__name__``. Defaults to the
            package logger.

    Returns:
        A ``structlog.stdlib.BoundLogger``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Emit maybe-chain's events on stderr at the given level.

    Only the ``maybe_chain`` stdlib logger is changed: it gets its level, a
    single stderr handler rendering through ``ProcessorFormatter``, and
    ``propagate = False`` so events are not printed twice by root handlers.
    Calling it again replaces the handler it installed before.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output,
            colored when stderr is a terminal.
    """
    global _handler  # noqa: PLW0603

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt='iso'),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _handler = handler
