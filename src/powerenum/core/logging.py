"""Structured logging configuration with JSON output."""

import logging
import logging.config
import os

import structlog


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog for applications using powerenum.

    Falls back to POWERENUM_LOG_LEVEL (default INFO) and
    POWERENUM_LOG_FORMAT ("json" or "console", default "json").
    """
    if level is None:
        level = os.getenv("POWERENUM_LOG_LEVEL", "INFO")
    level = level.upper()

    if json_output is None:
        json_output = os.getenv("POWERENUM_LOG_FORMAT", "json").lower() != "console"

    renderer = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            # Request-scoped context bound via structlog.contextvars
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route stdlib logging through the same renderer
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                },
            },
            "handlers": {
                "default": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": True,
                }
            },
        }
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger for the given module."""
    return structlog.get_logger(name)
