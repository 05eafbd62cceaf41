"""
Logging configuration for the post content parser.

Provides console/file logging with a standard, detailed or JSON format.
Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed by applications (the CLI) through ``LoggingManager``.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormat(Enum):
    """Log format types."""
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


class JSONFormatter(logging.Formatter):
    """Formats records as one JSON object per line, including ``extra`` fields."""

    STANDARD_ATTRS = frozenset({
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
        'filename', 'module', 'lineno', 'funcName', 'created',
        'msecs', 'relativeCreated', 'thread', 'threadName',
        'processName', 'process', 'exc_info', 'exc_text',
        'stack_info', 'message', 'taskName',
    })

    def _extract_extra_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        return {
            name: value
            for name, value in record.__dict__.items()
            if not name.startswith('_')
            and name not in self.STANDARD_ATTRS
            and not callable(value)
        }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "logger": record.name,
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        extra_data = self._extract_extra_fields(record)
        if extra_data:
            log_data.update(extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


def create_formatter(log_format: LogFormat) -> logging.Formatter:
    """Create the formatter for a log format."""
    if log_format is LogFormat.JSON:
        return JSONFormatter()
    if log_format is LogFormat.DETAILED:
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        )
    return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')


class LoggingManager:
    """
    Installs handlers on the package logger.

    Attributes:
        log_level: Level applied to the logger and its handlers
        log_format: Format of file (and plain console) output
        log_file: Optional file receiving log records
        console_handler: Handler used for console output; a plain
            StreamHandler when not given
    """

    LOGGER_NAME = "post_content_parser"

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.STANDARD,
        log_file: Optional[Path] = None,
        enable_console: bool = True,
        console_handler: Optional[logging.Handler] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.console_handler = console_handler
        self.handlers: List[logging.Handler] = []
        self._setup_logger()

    def _setup_logger(self) -> None:
        logger = logging.getLogger(self.LOGGER_NAME)
        logger.setLevel(self.log_level.value)

        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        if self.enable_console:
            handler = self.console_handler
            if handler is None:
                handler = logging.StreamHandler()
                handler.setFormatter(create_formatter(self.log_format))
            handler.setLevel(self.log_level.value)
            self.handlers.append(handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setLevel(self.log_level.value)
            file_handler.setFormatter(create_formatter(self.log_format))
            self.handlers.append(file_handler)

        for handler in self.handlers:
            logger.addHandler(handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger below the package logger."""
        if name == self.LOGGER_NAME or name.startswith(self.LOGGER_NAME + "."):
            return logging.getLogger(name)
        return logging.getLogger(f"{self.LOGGER_NAME}.{name}")

    def close(self) -> None:
        """Detach and close the installed handlers."""
        logger = logging.getLogger(self.LOGGER_NAME)
        for handler in self.handlers:
            logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
