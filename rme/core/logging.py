"""Logging setup: structlog rendering for both structlog and stdlib loggers."""

from __future__ import annotations

import logging.config
import os

import structlog

# Third-party loggers that are noisy at INFO.
_QUIET_LOGGERS = ("uvicorn.access", "asyncpg", "aiosqlite", "botocore", "boto3", "s3transfer")


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False if log_format == "plain" else True)


def setup_logging() -> None:
    """Configure structlog and route stdlib records through the same processors.

    Environment:
        RME_LOG_LEVEL   level for the ``rme`` loggers (default INFO)
        RME_LOG_FORMAT  console | plain | json (default console)
        RME_LOG_SQL     "1" to log every SQL statement
    """
    level = os.environ.get("RME_LOG_LEVEL", "INFO").upper()
    log_format = os.environ.get("RME_LOG_FORMAT", "console").lower()
    log_sql = os.environ.get("RME_LOG_SQL", "0") == "1"

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, dict] = {name: {"level": "WARNING"} for name in _QUIET_LOGGERS}
    loggers["rme"] = {"level": level}
    loggers["uvicorn.error"] = {"level": "INFO"}
    loggers["sqlalchemy.engine"] = {"level": "INFO" if log_sql else "WARNING"}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {"handlers": ["stdout"], "level": "WARNING"},
            "loggers": loggers,
        }
    )
