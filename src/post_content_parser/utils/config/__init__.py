"""Configuration management package.

This package provides the configuration system of the command line tool:
- JSON schema validation
- Environment variable overrides (``POST_CONTENT_*``, ``.env`` support)
- Default value resolution
- Path management and file operations

Usage:
    from post_content_parser.utils.config import ConfigManager

    config = ConfigManager()
    threshold = config.get("parser.paragraph_break_threshold", 2)
"""

from .manager import ConfigManager, DEFAULT_CONFIG
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator, CONFIG_SCHEMA
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'CONFIG_SCHEMA',
    'EnvironmentHandler',
]
