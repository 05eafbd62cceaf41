"""
Post Content Parser CLI Package.

Command-line interface for parsing post markup files with a declarative
JSON syntax.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
