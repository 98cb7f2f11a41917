# ============================================================================
# src/medication_schedule/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the medication schedule engine.

Log records may carry parse and course context through ``extra=``
(see CONTEXT_FIELDS); the JSON formatter emits those fields when present.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..config.logging_config import LoggingSettings, logging_settings

# Record attributes copied into JSON output when set via extra=
CONTEXT_FIELDS = (
    "course_id",
    "medication_count",
    "segment_count",
    "slot_count",
)

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        format_json: Whether to use JSON format
    """
    log_level = getattr(logging, level.upper())

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # stdout is reserved for the CLI's JSON result
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def configure_logging(
    settings: Optional[LoggingSettings] = None,
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
) -> None:
    """
    Setup logging from LoggingSettings.

    Explicit arguments win over the settings, so a CLI flag can override
    the environment.
    """
    settings = settings or logging_settings
    setup_logging(
        level=level or settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        format_json=settings.LOG_JSON if format_json is None else format_json,
    )


class JsonFormatter(logging.Formatter):
    """JSON log formatter; Cyrillic stays readable."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def log_performance(logger: logging.Logger, operation: str, level: int = logging.DEBUG):
    """
    Decorator to log operation performance.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Level for the success message
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(f"{operation} failed after {duration:.3f}s: {e}")
                raise

            duration = time.perf_counter() - start_time
            logger.log(level, f"{operation} completed in {duration:.3f}s")
            return result

        return wrapper
    return decorator
