"""Logging configuration for the pattern demonstration harness."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional
import json
from datetime import datetime

# Attributes every LogRecord carries; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, separators=(",", ":"), default=str)


def _rotating_handler(path: Path, level: int, max_file_size_mb: int, backup_count: int):
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_file_size_mb * 1024 * 1024,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
    json_format: Optional[bool] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; defaults to PATTERN_DEMOS_LOG_LEVEL or WARNING
        log_dir: When given, also write pattern_demos.log and
            pattern_demos_errors.log there
        json_format: Structured records; defaults to True when
            PATTERN_DEMOS_ENVIRONMENT is "production"
        max_file_size_mb: Maximum size per log file in MB
        backup_count: Number of rotated files to keep
    """
    level_no = getattr(logging, (level or os.getenv("PATTERN_DEMOS_LOG_LEVEL", "WARNING")).upper())
    if json_format is None:
        json_format = os.getenv("PATTERN_DEMOS_ENVIRONMENT", "").lower() == "production"
    formatter = JsonFormatter() if json_format else logging.Formatter(LOG_FORMAT)

    # stdout carries the report, so the console handler uses stderr
    handlers = [logging.StreamHandler(sys.stderr)]
    handlers[0].setLevel(level_no)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _rotating_handler(log_path / "pattern_demos.log", level_no, max_file_size_mb, backup_count)
        )
        handlers.append(
            _rotating_handler(log_path / "pattern_demos_errors.log", logging.ERROR, max_file_size_mb, backup_count)
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level_no)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for specific module."""
    if not name.startswith("pattern_demos."):
        name = f"pattern_demos.{name}"
    return logging.getLogger(name)
