#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
Logging setup for NoGAL.

User-facing progress lines are printed by the CLI; this module configures the
diagnostic log stream behind them:
- Level-specific text format, colored on terminals
- Optional structured JSON records (one object per line)
- Optional rotating log files (main log plus a warnings-and-up log)
"""

import logging
import logging.handlers
import os
import sys
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any

# =====================================================================================================
# Formatters
# =====================================================================================================

class FastFormatter(logging.Formatter):
    """Level-specific text formatter with optional ANSI colors."""

    _FORMATS = {
        logging.ERROR: "[{asctime}] ERROR   [{name}] {message}",
        logging.WARNING: "[{asctime}] WARNING [{name}] {message}",
        logging.INFO: "[{asctime}] INFO    {message}",
        logging.DEBUG: "[{asctime}] DEBUG   {name}:{lineno} - {message}"
    }

    _COLORS = {
        logging.ERROR: '\033[91m',     # Red
        logging.WARNING: '\033[93m',   # Yellow
        logging.INFO: '\033[92m',      # Green
        logging.DEBUG: '\033[94m',     # Blue
    }
    _RESET = '\033[0m'

    def __init__(self, enable_colors: bool = False):
        super().__init__()
        self.enable_colors = enable_colors
        self._formatters = {
            level: logging.Formatter(fmt, style='{', datefmt='%H:%M:%S')
            for level, fmt in self._FORMATS.items()
        }

    def format(self, record):
        level = record.levelno if record.levelno in self._formatters else logging.INFO
        if record.levelno >= logging.ERROR:
            level = logging.ERROR
        text = self._formatters[level].format(record)
        if self.enable_colors:
            return f"{self._COLORS[level]}{text}{self._RESET}"
        return text


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "thread": record.threadName,
            "process": record.process,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

# =====================================================================================================
# Main Setup Function
# =====================================================================================================

def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    enable_file_logging: bool = False,
    enable_console_logging: bool = False,
    max_log_size: str = "10MB",
    backup_count: int = 3,
    structured_json: Optional[bool] = None
) -> Dict[str, Any]:
    """
    Configure the root logger for a NoGAL run.

    Console records go to stderr so they never mix with the listing on stdout.
    Without any handler enabled a NullHandler keeps library logging silent.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    use_json = structured_json if structured_json is not None else _env_bool("NOGAL_LOG_JSON")

    log_dir_path: Optional[Path] = None
    if enable_file_logging:
        # Raises OSError before any existing handler is touched.
        log_dir_path = Path(log_dir) if log_dir else Path("logs")
        log_dir_path.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handlers: Dict[str, logging.Handler] = {}

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        enable_colors = (hasattr(sys.stderr, 'isatty') and
                         sys.stderr.isatty() and
                         os.environ.get('TERM') != 'dumb')
        console_handler.setFormatter(JsonFormatter() if use_json else FastFormatter(enable_colors=enable_colors))
        root_logger.addHandler(console_handler)
        handlers['console'] = console_handler

    if log_dir_path is not None:
        size_bytes = _parse_size_string(max_log_size)

        main_handler = logging.handlers.RotatingFileHandler(
            str(log_dir_path / "nogal.log"),
            maxBytes=size_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        main_handler.setLevel(numeric_level)
        main_handler.setFormatter(JsonFormatter() if use_json else FastFormatter())
        root_logger.addHandler(main_handler)
        handlers['main_file'] = main_handler

        error_handler = logging.handlers.RotatingFileHandler(
            str(log_dir_path / "errors.log"),
            maxBytes=size_bytes // 2,
            backupCount=backup_count,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(JsonFormatter() if use_json else FastFormatter())
        root_logger.addHandler(error_handler)
        handlers['error_file'] = error_handler

    if not handlers:
        null_handler = logging.NullHandler()
        root_logger.addHandler(null_handler)
        handlers['null'] = null_handler

    logging.getLogger('nogal').debug(
        "Logging initialized (level=%s, file=%s, console=%s, json=%s)",
        log_level, enable_file_logging, enable_console_logging, use_json
    )

    return {
        'handlers': handlers,
        'log_dir': log_dir_path
    }

# =====================================================================================================
# Utility functions
# =====================================================================================================

def _parse_size_string(size_str: str) -> int:
    """Parse size string into bytes."""
    size_str = size_str.upper().strip()

    multipliers = {
        'KB': 1024,
        'MB': 1024 ** 2,
        'GB': 1024 ** 3,
        'B': 1,
    }

    for suffix, multiplier in multipliers.items():
        if size_str.endswith(suffix):
            try:
                return int(float(size_str[:-len(suffix)].strip()) * multiplier)
            except ValueError:
                continue

    try:
        return int(float(size_str))
    except ValueError:
        return 10 * 1024 * 1024


def cleanup_logging():
    """Close and detach all root handlers."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
