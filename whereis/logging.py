"""
# Logging

Structured logging via `structlog`, rendered through the stdlib `logging`
machinery so that log lines of this library integrate with the host
application.

Example:
    ```python
    from whereis.logging import configure_logging, get_logger

    configure_logging(level="debug")
    log = get_logger(__name__)
    log.info("Searching ...", root="/tmp")
    ```
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer, set_exc_info
from structlog.processors import (
    JSONRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)

from whereis.settings import Settings

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_log_level(level: int | str | None = None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = Settings().log_level
    try:
        return LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Invalid log level: `{level}`")


def configure_logging(
    level: int | str | None = None, json: bool | None = None
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name or number, defaults to `WHEREIS_LOG_LEVEL`
        json: Render json lines instead of console output, defaults to
            `WHEREIS_LOG_JSON`
    """
    settings = Settings()
    log_level = get_log_level(level or settings.log_level)
    if json is None:
        json = settings.log_json

    shared_processors: list[Any] = [
        add_log_level,
        add_logger_name,
        set_exc_info,
        merge_contextvars,
        TimeStamper(fmt="iso"),
        UnicodeDecoder(),
    ]
    if json:
        shared_processors.append(format_exc_info)

    structlog.configure(
        processors=[filter_by_level]
        + shared_processors
        + [ProcessorFormatter.wrap_for_formatter],
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = JSONRenderer() if json else ConsoleRenderer()
    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[ProcessorFormatter.remove_processors_meta, renderer],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str, **kwargs) -> BoundLogger:
    # bound to a stdlib logger: the application's levels and handlers apply,
    # global structlog configuration is left to `configure_logging`
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=BoundLogger, **kwargs
    )
