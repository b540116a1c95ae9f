"""
Structured logging configuration for the application.
Provides consistent logging across all modules.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path

from app.config import settings


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    # Extra attributes copied into the JSON document when present
    EXTRA_FIELDS = ("path", "method", "status_code", "collection", "operation", "doc_id", "duration_ms")

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string of log record
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Custom text formatter for human-readable logs."""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def setup_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Setup application logging based on configuration.
    Called once at application startup.
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_format = (log_format or settings.LOG_FORMAT).lower()
    log_file = log_file or settings.LOG_FILE
    numeric_level = getattr(logging, level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Third-party loggers
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info(f"Logging configured: level={level}, format={log_format}")


def log_database_operation(logger: logging.Logger, operation: str, collection: str, doc_id: str = None):
    """Log database operation."""
    msg = f"DB {operation}: {collection}"
    if doc_id:
        msg += f" (id={doc_id})"
    logger.debug(msg, extra={"operation": operation, "collection": collection, "doc_id": doc_id})


def log_api_response(logger: logging.Logger, method: str, path: str, status_code: int, duration_ms: float):
    """Log API response."""
    logger.info(
        f"API Response: {method} {path} - {status_code} ({duration_ms:.1f}ms)",
        extra={"method": method, "path": path, "status_code": status_code, "duration_ms": duration_ms}
    )
