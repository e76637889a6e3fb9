"""
bundlekit Structured Logger

Thin wrapper around the standard ``logging`` module that emits one JSON
object per record. Every bundlekit module creates its logger once at import:

    from bundlekit_common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Expanded export paths", jobs=3)

Context can be attached without mutating the parent logger:

    job_logger = logger.with_context(export_name="./sub")
    job_logger.debug("Resolved source", source="src/sub.ts")

Records go to stderr so that commands printing machine-readable output on
stdout stay parseable.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

_HANDLER_FLAG = "_bundlekit_handler"


class JsonFormatter(logging.Formatter):
    """Render a log record (plus its structured fields) as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "fields", {}))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _default_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()


class BundlekitLogger:
    """
    Structured logger bound to a service name and optional context.

    Keyword arguments passed to the log methods are merged with the bound
    context and emitted as top-level JSON fields.
    """

    def __init__(
        self,
        service_name: str,
        log_level: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.service_name = service_name
        self.context: Dict[str, Any] = dict(context or {})
        self._logger = logging.getLogger(service_name)

        if not getattr(self._logger, _HANDLER_FLAG, False):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(JsonFormatter())
            self._logger.addHandler(handler)
            self._logger.propagate = False
            setattr(self._logger, _HANDLER_FLAG, True)

        if log_level or not self._logger.level:
            self._logger.setLevel((log_level or _default_level()).upper())

    def with_context(self, **kwargs: Any) -> "BundlekitLogger":
        """Return a child logger with ``kwargs`` merged into the context."""
        merged = {**self.context, **kwargs}
        return BundlekitLogger(self.service_name, context=merged)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = {**self.context, **kwargs}
        self._logger.log(level, message, exc_info=exc_info, extra={"fields": fields})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    warn = warning

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)


def get_logger(service_name: str, log_level: Optional[str] = None) -> BundlekitLogger:
    """
    Get a structured logger for a module or service.

    Args:
        service_name: Logger name, usually ``__name__``
        log_level: Optional level override (defaults to ``BUNDLEKIT_LOG_LEVEL`` or INFO)

    Returns:
        BundlekitLogger instance
    """
    return BundlekitLogger(service_name, log_level=log_level)


def configure_logging(service_name: str, log_level: str = DEFAULT_LOG_LEVEL) -> BundlekitLogger:
    """Configure the level for ``service_name`` and return its logger."""
    logger = get_logger(service_name, log_level=log_level)
    logger.info("Logging configured", log_level=log_level.upper())
    return logger
