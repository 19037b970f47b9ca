"""
Logging configuration for the design pattern exercises.

This module provides:
- Human-readable colored output for development
- JSON-formatted output when ENV=production
- A single stdout handler on the root logger

Usage:
    from designpatterns.logging_config import setup_logging
    setup_logging()  # Call once at startup
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from designpatterns.settings import LoggingSettings, settings


# ==============================================================================
# JSON Log Formatter
# ==============================================================================


class JSONFormatter(logging.Formatter):
    """
    Format log records as one JSON object per line.

    Output includes timestamp, level, logger, message, module, function,
    line, exception (if any) and any extra fields passed to the log call.
    """

    # Standard LogRecord attributes, excluded from 'extra'
    RESERVED_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


# ==============================================================================
# Human-Readable Formatter (for development)
# ==============================================================================


class ColoredFormatter(logging.Formatter):
    """
    Human-readable colored formatter for development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""
        formatted = super().format(record)
        return f"{color}{formatted}{reset}"


# ==============================================================================
# Setup Function
# ==============================================================================


def setup_logging(config: Optional[LoggingSettings] = None) -> None:
    """
    Configure logging based on environment.

    - Production (ENV=production): JSON format to stdout
    - Development: Colored human-readable format to stdout

    Args:
        config: Logging settings (defaults to the global settings)
    """
    config = config or settings.logging
    log_level = config.level

    # Clear any existing handlers (important for testing)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if config.env == "production":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured: level={log_level}, format={'JSON' if config.env == 'production' else 'colored'}"
    )
