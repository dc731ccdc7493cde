"""
Logging utilities for the Portfolio Backend.

Every record is written to stdout as a single JSON object, so the service can
be run under any process manager that collects stdout.

Logger names follow portfolio_backend.structured.{logger_name}.{scope_id}. The
scope_id is normally a short id shared by all lines of one request or import,
and is copied into each JSON line as "scope_id". Structured events add an "event"
name with an "event_data" payload; structured errors add "error_type" and
"error_context".
"""

import logging
import os
import sys
import json
from typing import Optional, Dict, Any
from datetime import datetime

LOGGER_ROOT_NAME = "portfolio_backend"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = [
    'multipart',
    'python_multipart',
    'uvicorn.access',
]


def json_serializer(obj):
    """Fallback for json.dumps: dates as ISO strings, models as dicts, anything else as str."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    if hasattr(obj, 'model_dump'):
        return obj.model_dump(mode='json')
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    return str(obj)


def _scope_from_name(logger_name: str) -> Optional[str]:
    parts = logger_name.split('.')
    if len(parts) >= 3 and parts[0] == LOGGER_ROOT_NAME:
        return parts[-1]
    return None


class JSONFormatter(logging.Formatter):
    """Render a log record as one compact JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        scope_id = _scope_from_name(record.name)
        if scope_id:
            entry["scope_id"] = scope_id

        extra_json = getattr(record, 'extra_json', None)
        if isinstance(extra_json, dict):
            entry.update(extra_json)

        if record.exc_info:
            entry["severity"] = "ERROR"
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, separators=(',', ':'), default=json_serializer)


def _resolve_level(log_level: Optional[str]) -> int:
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _build_logger(full_logger_name: str, log_level: Optional[str]) -> logging.Logger:
    """Create a stdout JSON logger once per name; later calls reuse it."""
    scoped_logger = logging.getLogger(full_logger_name)
    if scoped_logger.handlers:
        return scoped_logger

    level = _resolve_level(log_level)
    scoped_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    scoped_logger.addHandler(handler)

    # Lines would otherwise be printed twice by the root logger
    scoped_logger.propagate = False
    return scoped_logger


def get_structured_logger(scope_id: str, logger_name: str = 'structured',
                          log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a scope-bound logger for structured events.

    Use it with log_structured_event and log_structured_error.

    Returns:
        Logger named portfolio_backend.structured.{logger_name}.{scope_id}
    """
    return _build_logger(f"{LOGGER_ROOT_NAME}.structured.{logger_name}.{scope_id}", log_level)


def setup_root_logger(level: int = logging.WARNING) -> None:
    """Set the root level and quiet the third-party loggers in NOISY_LOGGERS."""
    logging.getLogger().setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_structured_event(logger: logging.Logger, event_type: str,
                         event_data: Optional[Dict[str, Any]] = None,
                         message: str = "") -> None:
    """
    Log a named event at INFO.

    Args:
        logger: Logger from get_structured_logger
        event_type: Event name (e.g., 'import_started', 'section_updated')
        event_data: Event payload
        message: Human-readable text; defaults to "Event: {event_type}"
    """
    logger.info(
        message or f"Event: {event_type}",
        extra={"extra_json": {"event": event_type, "event_data": event_data or {}}}
    )


def log_structured_error(logger: logging.Logger, error_type: str, error_message: str,
                         error_context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log a named failure at ERROR.

    Args:
        logger: Logger from get_structured_logger
        error_type: Failure name (e.g., 'csv_parse_failed', 'section_write_failed')
        error_message: Human-readable text
        error_context: Values needed to diagnose the failure
    """
    logger.error(
        error_message,
        extra={"extra_json": {"error_type": error_type, "error_context": error_context or {}}}
    )
