"""
Main configuration manager for the post content parser.

This module provides the ConfigManager class that loads the optional JSON
configuration file, merges it over the defaults, applies environment
variable overrides and validates the result.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ...core.content_parser.paragraphs import DEFAULT_PARAGRAPH_BREAK_THRESHOLD
from ...exceptions.config_exceptions import ConfigurationError
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "0.1.0",
    "syntax_file": None,
    "parser": {
        "paragraph_break_threshold": DEFAULT_PARAGRAPH_BREAK_THRESHOLD,
        "strict": False,
    },
    "logging": {
        "level": "INFO",
        "format": "standard",
        "file": None,
    },
}


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


class ConfigManager:
    """
    Configuration manager for the post content parser.

    Handles loading, validation, and merging of configuration from:
    - Built-in defaults
    - The configuration file (optional unless given explicitly)
    - Environment variables (``POST_CONTENT_*``, also read from ``.env``)
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to configuration file. When omitted the default
                file is used if it exists, otherwise only defaults apply.
            project_root: Directory relative paths are resolved against
                (default: current working directory)
            load_env: Whether to load environment variables from a .env file
            environ: Environment mapping used for overrides (default: os.environ)
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.paths = ConfigPaths()
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE
        self.config_file_required = config_file is not None

        self._config: Dict[str, Any] = {}
        self._loaded = False

        self.logger = logger

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator()
        self.env_handler = EnvironmentHandler(environ)

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._loaded

    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            force_reload: Force reloading even if already loaded

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationFileNotFoundError: If an explicitly given file is missing
            ConfigurationValidationError: If the merged configuration is invalid
            ConfigurationError: If the file cannot be read
        """
        if self._loaded and not force_reload:
            self.logger.debug("Configuration already loaded, returning cached version")
            return deepcopy(self._config)

        config_path = self.file_ops.resolve_path(self.config_file)
        if config_path.exists() or self.config_file_required:
            self.logger.info(f"Loading configuration from {config_path}")
            file_config = self.file_ops.load_json_file(config_path)
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a JSON object",
                    str(config_path)
                )
        else:
            self.logger.debug(f"No configuration file at {config_path}, using defaults")
            file_config = {}

        merged = merge_configs(DEFAULT_CONFIG, file_config)
        merged = self.env_handler.apply_environment_overrides(merged)
        self.schema_validator.validate_config(merged, str(config_path))

        self._config = merged
        self._loaded = True
        self.logger.debug("Configuration loaded successfully")
        return deepcopy(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.

        Args:
            key: Configuration key (supports dot notation like 'parser.strict')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        config = self.config
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    def has(self, key: str) -> bool:
        """Check if a configuration key exists."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve a path from the configuration against the project root."""
        return self.file_ops.resolve_path(path)

    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False
