"""
Utilities package for the post content parser.

Configuration management and logging setup used by the command line tool.
"""

from .config import ConfigManager, ConfigPaths
from .logging_config import LoggingManager, LogLevel, LogFormat

__all__ = [
    "ConfigManager",
    "ConfigPaths",
    "LoggingManager",
    "LogLevel",
    "LogFormat",
]
