"""
Environment variable handling for configuration management.

This module maps ``POST_CONTENT_*`` environment variables onto configuration
keys and converts their string values to the expected types.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError
from .paths import ConfigPaths


logger = logging.getLogger(__name__)


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.

    Handles environment variable overrides and type conversion.
    """

    # env var name -> (config key in dot notation, target type)
    ENV_MAPPING: Dict[str, Tuple[str, str]] = {
        'POST_CONTENT_SYNTAX_FILE': ('syntax_file', 'string'),
        'POST_CONTENT_PARAGRAPH_BREAK_THRESHOLD': ('parser.paragraph_break_threshold', 'integer'),
        'POST_CONTENT_STRICT': ('parser.strict', 'boolean'),
        'POST_CONTENT_LOG_LEVEL': ('logging.level', 'string'),
        'POST_CONTENT_LOG_FORMAT': ('logging.format', 'string'),
    }

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ConfigPaths.ENV_PREFIX
    ) -> None:
        """
        Initialize environment handler.

        Args:
            environ: Environment to read, ``os.environ`` by default
            prefix: Prefix of the variables this handler owns
        """
        self.environ = environ
        self.prefix = prefix
        self.logger = logger

    def convert_env_value(self, name: str, value: str, target_type: str = 'string') -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            name: Environment variable name (for error reporting)
            value: Environment variable value (always string)
            target_type: Target type ('string', 'boolean', 'integer')

        Returns:
            Converted value

        Raises:
            EnvironmentVariableError: If conversion fails
        """
        if target_type == 'boolean':
            return value.strip().lower() in ('true', '1', 'yes', 'on', 'enabled')
        if target_type == 'integer':
            try:
                return int(value)
            except ValueError as e:
                raise EnvironmentVariableError(
                    f"Failed to convert environment variable {name}='{value}' to integer",
                    name
                ) from e
        return value

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config: Base configuration dictionary

        Returns:
            Configuration with environment overrides applied
        """
        environ = os.environ if self.environ is None else self.environ
        result = deepcopy(config)

        for env_var, (config_key, target_type) in self.ENV_MAPPING.items():
            env_value = environ.get(env_var)
            if env_value is None or env_value == '':
                continue

            converted = self.convert_env_value(env_var, env_value, target_type)
            self._set_nested_value(result, config_key, converted)
            self.logger.debug(f"Applied environment override {env_var} -> {config_key}")

        for env_var in sorted(environ):
            if env_var.startswith(self.prefix) and env_var not in self.ENV_MAPPING:
                self.logger.warning(f"Ignoring unknown environment variable {env_var}")

        return result

    def _set_nested_value(self, config: Dict[str, Any], key: str, value: Any) -> None:
        keys = key.split('.')
        current = config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value
