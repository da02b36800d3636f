"""Structured logging configuration.

JSON logs with automatic context binding. Uses structlog with stdlib integration.
Request-scoped context (the trace_id bound by TraceIDMiddleware) is included
in all logs via structlog.contextvars, which is how a client-visible error
envelope is matched to the server-side log line.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger

from server.errors.capability import ResponseError


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add ISO 8601 UTC timestamp with timezone offset."""
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def configure_logging(settings: LoggingSettings) -> None:
    """Configure structlog with JSON output to stdout.

    Call once at application startup. After this, all loggers created via
    get_logger() will output JSON with automatic context binding.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.processors.JSONRenderer(),
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": settings.log_level,
                    "propagate": True,
                },
            },
        }
    )


_settings = LoggingSettings()
configure_logging(_settings)


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger.

    Example:
        logger = get_logger(__name__)
        logger.error("template_get_failed", template_id="abc", **error_fields(err))
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def error_fields(err: ResponseError) -> dict[str, Any]:
    """Log fields describing ``err`` for operators.

    Includes the technical description, which never goes to end users
    other than through the error envelope.
    """
    return {
        "error": str(err),
        "code": str(err.error_code()),
        "status": int(err.status_code()),
        "description": err.technical_description(),
    }
