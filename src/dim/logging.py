"""Structured logging configuration using structlog."""

import logging
import os
from collections.abc import Mapping

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import add_log_level, TimeStamper, JSONRenderer
from structlog.dev import ConsoleRenderer

_log_level = "INFO"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _filter_by_level(logger, method_name, event_dict):
    """Drop events below the configured level."""
    configured_level = _LEVELS.get(_log_level, logging.INFO)
    method_level = _LEVELS.get(method_name.upper(), logging.INFO)
    if method_level >= configured_level:
        return event_dict
    raise structlog.DropEvent()


def configure_logging(json_output: bool = False, level: str = "INFO"):
    """Configure structlog for the vectorizer.

    Args:
        json_output: If True, render JSON lines. Otherwise use the console renderer.
        level: Minimum level as a string ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
    """
    global _log_level
    _log_level = level.upper()

    processors = [
        merge_contextvars,
        _filter_by_level,
        add_log_level,
        TimeStamper(fmt="iso"),
        JSONRenderer() if json_output else ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_env(env: Mapping[str, str] | None = None):
    """Configure logging from DIM_LOG_LEVEL and DIM_LOG_JSON."""
    env = os.environ if env is None else env
    json_output = env.get("DIM_LOG_JSON", "").lower() in ("1", "true", "yes")
    configure_logging(json_output=json_output, level=env.get("DIM_LOG_LEVEL", "INFO"))


def get_logger(name: str):
    """Get a bound logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of calling module).

    Returns:
        A structlog bound logger instance.
    """
    return structlog.get_logger(name)
