"""
Centralized Logging.

structlog on top of the standard library logging module. All records go to
a single stderr handler so that stdout only carries the rendered response.

Usage:
    from httpie_lite.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", format_type="console")
    logger = get_logger(__name__)
    logger.debug("HTTP request", method="GET", url=url)
"""

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS = {"console", "json"}


def _get_logging_config() -> dict[str, Any]:
    """Get the logging section of the application configuration."""
    from httpie_lite.core.config import get_app_config

    return get_app_config().logging


def _build_renderer(format_type: str) -> Any:
    if format_type == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Log level name. If None, reads logging.level from configuration.
        format_type: "console" or "json". If None, reads logging.format from configuration.

    Raises:
        ValueError: If format_type is not a known format
    """
    config = _get_logging_config()

    level = (level or config.get("level", "WARNING")).upper()
    format_type = format_type or config.get("format", "console")

    if format_type not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {format_type}")

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _build_renderer(format_type),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx and httpcore log every request at INFO/DEBUG
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(logging.getLevelName(level), logging.WARNING))


def get_logger(name: str) -> Any:
    """
    Get a structlog logger.

    Args:
        name: Logger name, usually __name__

    Returns:
        A structlog bound logger
    """
    return structlog.get_logger(name)
