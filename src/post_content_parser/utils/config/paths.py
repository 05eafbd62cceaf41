"""
File names and prefixes the configuration system looks for.
"""

from dataclasses import dataclass


@dataclass
class ConfigPaths:
    """Default file names, relative to the project root, and the env var prefix."""

    DEFAULT_CONFIG_FILE: str = "postcontent.config.json"
    ENV_FILE: str = ".env"
    ENV_PREFIX: str = "POST_CONTENT_"
