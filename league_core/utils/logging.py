"""
Logging utilities using structlog.

Request URLs carry the API key as a query parameter, so every event passes
through a processor that masks it before rendering, and the HTTP client
libraries are kept quiet below WARNING.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from structlog.typing import Processor

from league_core.utils.helpers import redact_api_key

# httpx logs every request URL at INFO
_HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def redact_api_keys(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor masking api_key query values in string fields."""
    for field, value in event_dict.items():
        if isinstance(value, str) and "api_key=" in value:
            event_dict[field] = redact_api_key(value)
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Set up logging for the client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Render events as JSON lines
        log_file: Optional file path that also receives the events
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        stream=sys.stdout,
    )
    for name in _HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_api_keys,
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger for a league_core module."""
    return structlog.get_logger(name)
