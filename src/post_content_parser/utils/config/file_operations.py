"""
File access for the configuration system.

Everything the configuration manager reads from disk goes through
``FileOperations``: the optional ``.env`` file and the JSON configuration
file, both located relative to the project root.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """
    Reads configuration inputs below a project root.

    Attributes:
        project_root: Directory relative paths are resolved against
        env_file: Name of the dotenv file inside the project root
    """

    def __init__(self, project_root: Path, env_file: str) -> None:
        self.project_root = project_root
        self.env_file = env_file
        self.logger = logger

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Return ``path`` unchanged when absolute, else anchored at the project root."""
        path = Path(path)
        if path.is_absolute():
            return path
        return (self.project_root / path).resolve()

    def load_environment_variables(self) -> bool:
        """
        Export the variables of the dotenv file into ``os.environ``.

        Variables that are already set keep their value. A missing file is
        not an error.

        Returns:
            True if the file existed and was loaded
        """
        env_path = self.resolve_path(self.env_file)
        if not env_path.is_file():
            self.logger.debug(f"No {self.env_file} file in {self.project_root}")
            return False

        loaded = load_dotenv(env_path, override=False)
        self.logger.debug(f"Loaded environment variables from {env_path}")
        return loaded

    def load_json_file(self, file_path: Union[str, Path]) -> Any:
        """
        Parse a JSON file.

        Raises:
            ConfigurationFileNotFoundError: If the file does not exist
            ConfigurationError: If the file is unreadable or not JSON
        """
        path = self.resolve_path(file_path)
        if not path.is_file():
            raise ConfigurationFileNotFoundError(
                f"Configuration file not found: {path}",
                str(path),
                searched_paths=[str(self.project_root)]
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
                str(path)
            ) from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}", str(path)) from e

        self.logger.debug(f"Read configuration file {path}")
        return data
