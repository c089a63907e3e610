"""structlog setup for the engine's ``autoscript.*`` loggers.

Engine modules only emit DEBUG lifecycle events; hosts raise the level or
call :func:`setup_logging` themselves to see them.
"""

import logging
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

ROOT_LOGGER = "autoscript"

_configured = False


def _processors(structured: bool, add_timestamp: bool) -> list[Any]:
    chain: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso"))
    chain += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
        if structured
        else structlog.dev.ConsoleRenderer(colors=False),
    ]
    return chain


def _handlers(console: bool, log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers or [logging.NullHandler()]


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    structured: bool = False,
    console: bool = True,
    add_timestamp: bool = True,
) -> None:
    """Route structlog events through the ``autoscript`` stdlib logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Log level name, e.g. "DEBUG"
        log_file: Also write events to this file
        structured: Render JSON lines instead of console text
        console: Write to stderr
        add_timestamp: Add an ISO timestamp to each event
    """
    global _configured

    structlog.configure(
        processors=_processors(structured, add_timestamp),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = _handlers(console, log_file)
    root.setLevel(logging.getLevelName(level.upper()))
    root.propagate = False
    _configured = True


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger, configuring logging from settings on first use."""
    if not _configured:
        settings = get_settings()
        setup_logging(level=settings.log_level, structured=settings.structured_logging)
    return cast(structlog.BoundLogger, structlog.get_logger(name))
