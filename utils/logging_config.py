"""
Structured JSON Logging Configuration for the UA document utilities API.

Provides JSON-formatted logs with:
- timestamp (ISO 8601)
- level
- message
- logger name
- Extra context (request_id, endpoint, latency_ms, etc.)
"""
import inspect
import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict

from utils.date_utils import calc_elapsed_time


EXTRA_FIELDS = ["request_id", "endpoint", "latency_ms", "elapsed", "status_code", "method", "path"]


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs JSON-structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via logging.info(..., extra={...})
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, use JSON formatting; else use plain text
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper(), logging.INFO))

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_execution_time(func):
    """
    Decorator to log function execution time.

    Logs at INFO level with the function name, the duration in milliseconds
    and the same duration rendered by format_duration.
    Works with both synchronous and asynchronous functions.

    Usage:
        @log_execution_time
        def my_function():
            ...

        @log_execution_time
        async def my_async_function():
            ...
    """
    logger = logging.getLogger(func.__module__)

    def _log(start_ns: int) -> None:
        elapsed_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.info(
            f"{func.__name__} completed in {elapsed_ms:.2f}ms",
            extra={"latency_ms": round(elapsed_ms, 2), "elapsed": calc_elapsed_time(start_ns)}
        )

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_ns = time.perf_counter_ns()
        try:
            return func(*args, **kwargs)
        finally:
            _log(start_ns)

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_ns = time.perf_counter_ns()
        try:
            return await func(*args, **kwargs)
        finally:
            _log(start_ns)

    if inspect.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper
