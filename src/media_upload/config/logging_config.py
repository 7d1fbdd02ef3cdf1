"""Logging setup for the media upload service.

Everything goes through the standard ``logging`` module, configured once at
startup from ``LOG_LEVEL``, ``LOG_VERBOSITY`` and ``LOG_FORMAT``. Every
record emitted while a request is being served carries that request's
``request_id``, read from ``request_id_var`` (set by the request logging
middleware).
"""

import logging
import logging.config
import os
from contextvars import ContextVar
from enum import Enum
from typing import Any, Dict


class LogVerbosity(str, Enum):
    """Presets used when LOG_LEVEL is not set."""
    QUIET = "QUIET"      # errors only
    NORMAL = "NORMAL"
    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    """Log line layouts."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "INFO",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamp records with the ID of the request being served, or ``-``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True


class LoggingConfig:
    """Builds and applies the ``dictConfig`` for the service."""

    # Third-party loggers held at ERROR; multipart logs every parsed part
    QUIET_MODULES = [
        "multipart",
        "python_multipart",
        "httpx",
        "httpcore",
        "asyncio",
    ]

    FORMATS = {
        LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
        LogFormat.DETAILED: (
            "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] "
            "[%(filename)s:%(lineno)d] - %(message)s"
        ),
        LogFormat.JSON: (
            '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s",'
            '"request_id":"%(request_id)s","message":"%(message)s"}'
        ),
    }

    @staticmethod
    def resolve_level() -> str:
        """LOG_LEVEL if valid, otherwise the LOG_VERBOSITY preset (NORMAL)."""
        explicit = os.getenv("LOG_LEVEL", "").upper()
        if explicit in VALID_LEVELS:
            return explicit

        try:
            verbosity = LogVerbosity(os.getenv("LOG_VERBOSITY", "NORMAL").upper())
        except ValueError:
            verbosity = LogVerbosity.NORMAL
        return VERBOSITY_LEVELS[verbosity]

    @classmethod
    def resolve_format(cls) -> str:
        try:
            log_format = LogFormat(os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower())
        except ValueError:
            log_format = LogFormat.SIMPLE
        return cls.FORMATS[log_format]

    @classmethod
    def build(cls) -> Dict[str, Any]:
        """Build the ``dictConfig`` mapping from the environment."""
        level = cls.resolve_level()

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "request_id": {"()": RequestIdFilter},
            },
            "formatters": {
                "default": {
                    "format": cls.resolve_format(),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "filters": ["request_id"],
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {
                module: {"level": "ERROR", "handlers": ["console"], "propagate": False}
                for module in cls.QUIET_MODULES
            },
        }

    @classmethod
    def configure(cls) -> None:
        """Apply the logging configuration. Call once at startup."""
        logging.config.dictConfig(cls.build())
        logging.getLogger(__name__).debug(f"Logging configured at {cls.resolve_level()}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        return logging.getLogger(name)
