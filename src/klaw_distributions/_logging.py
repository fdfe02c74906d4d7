"""Structured logging for klaw-distributions.

The library only logs at construction time (rejected ranges, newly seeded bit
sources) and never inside sampling loops. Loggers wrap stdlib loggers, so
nothing is printed until the host application configures logging, either
through its own handlers or through ``configure_logging`` here.

Hooks receive a copy of every structlog event dict and are meant for tests
and for forwarding construction failures elsewhere.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    type LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_log_hooks: list[LogHook] = []
_handler: logging.Handler | None = None


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of each event dict logged through structlog."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:
            pass  # a broken hook must not break the caller's logging
    return event_dict


def _pre_chain() -> list[Any]:
    # Shared by structlog events and foreign stdlib records.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_log_hooks,
    ]


def configure_logging(level: str | int = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Calling this again replaces the handler installed by the previous call
    and leaves any other root handlers alone.

    Args:
        level: Root logger level, as a name ("DEBUG", "INFO", ...) or number.
        json_output: Render JSON lines when True, console output otherwise.
    """
    global _handler

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    _handler = handler

    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    root.setLevel(level)


def get_logger(name: str | None = None) -> Any:
    """Return a structlog BoundLogger over the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
