"""
Logging setup.

Console output is coloured in development; when ``LOG_TO_FILE`` is on,
plain-text, error-only and JSON copies are written to rotating files
under ``LOG_DIR``. Sentry is wired in only when a DSN is configured.
"""

import logging
import logging.config
import os
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger.json import JsonFormatter

from hostelmate.config.settings import settings

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROTATE_BYTES = 10 * 1024 * 1024
ROTATE_BACKUPS = 10

# Attributes request middleware may attach via ``extra=``
CONTEXT_ATTRS = ("request_id", "user_id", "complaint_id")


class HostelJsonFormatter(JsonFormatter):
    """One JSON object per record, with environment and request context."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)
        log_record.update(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            environment=settings.ENVIRONMENT,
        )
        for attr in CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value is not None:
                log_record[attr] = value
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            log_record["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }


def _rotating(path: str, level: str, formatter: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": path,
        "level": level,
        "formatter": formatter,
        "maxBytes": ROTATE_BYTES,
        "backupCount": ROTATE_BACKUPS,
        "encoding": "utf8",
    }


def _logger(handlers: List[str], level: str) -> Dict[str, Any]:
    return {"handlers": handlers, "level": level, "propagate": False}


def build_logging_config(log_dir: str, to_file: bool) -> Dict[str, Any]:
    """dictConfig for the current settings."""
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG" if settings.DEBUG else "INFO",
            "formatter": "colored" if settings.is_development() else "plain",
        },
    }
    if to_file:
        handlers["file"] = _rotating(os.path.join(log_dir, "hostelmate.log"), "INFO", "plain")
        handlers["errors"] = _rotating(os.path.join(log_dir, "errors.log"), "ERROR", "plain")
        handlers["json"] = _rotating(os.path.join(log_dir, "hostelmate.json.log"), "INFO", "json")

    everything = list(handlers)
    text_only = [name for name in ("console", "file") if name in handlers]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": PLAIN_FORMAT},
            "json": {
                "()": HostelJsonFormatter,
                "format": "%(timestamp)s %(level)s %(logger)s %(message)s",
            },
            "colored": {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s" + PLAIN_FORMAT,
                "log_colors": {
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            },
        },
        "handlers": handlers,
        "root": {"handlers": everything, "level": settings.LOG_LEVEL},
        "loggers": {
            "hostelmate": _logger(everything, settings.LOG_LEVEL),
            "sqlalchemy.engine": _logger(text_only, "INFO" if settings.DATABASE_ECHO else "WARNING"),
            "uvicorn": _logger(text_only, "INFO"),
            "uvicorn.access": _logger(["console"], "INFO"),
        },
    }


def init_sentry() -> None:
    """Forward ERROR records to Sentry as events and keep INFO+ as breadcrumbs."""
    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
        traces_sample_rate=0.2,
        send_default_pii=False,
    )


def setup_logging() -> logging.Logger:
    """Apply the logging config and return the application logger."""
    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)

    logging.config.dictConfig(build_logging_config(settings.LOG_DIR, settings.LOG_TO_FILE))

    if settings.SENTRY_DSN:
        init_sentry()

    logger = logging.getLogger("hostelmate")
    logger.info(f"Logging configured at {settings.LOG_LEVEL}")
    return logger
