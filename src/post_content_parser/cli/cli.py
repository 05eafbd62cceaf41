"""
Post Content Parser CLI Application.

Main entry point for the ``post-content`` command-line interface: parses
post markup files with a declarative JSON syntax and prints the resulting
content as JSON, together with any diagnostics found on the way.
"""

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..core.content_parser import (
    CollectingDiagnosticSink,
    HtmlContentParser,
    ParserConfig,
    SyntaxLoader,
)
from ..exceptions.config_exceptions import ConfigurationError
from ..exceptions.parser_exceptions import ContentParserError
from ..utils.config import ConfigManager
from ..utils.logging_config import LoggingManager, LogFormat, LogLevel

# Parsed content goes to stdout, everything else to stderr
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="post-content",
    help="Parse forum post markup into structured content",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Global state
_config_manager: Optional[ConfigManager] = None
_config_path: Optional[str] = None
_logger: Optional[logging.Logger] = None
_logging_manager: Optional[LoggingManager] = None


def setup_logging(
    verbose: bool = False,
    level: str = "INFO",
    log_format: str = "standard",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging, overrides ``level``
        level: Configured log level name
        log_format: Configured format of the log file
        log_file: Optional file receiving log records as well

    Returns:
        Configured logger instance
    """
    global _logging_manager

    if _logging_manager is not None:
        _logging_manager.close()

    log_level = LogLevel.DEBUG if verbose else LogLevel.from_name(level)

    rich_handler = RichHandler(
        console=err_console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    _logging_manager = LoggingManager(
        log_level=log_level,
        log_format=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        console_handler=rich_handler,
    )
    return _logging_manager.get_logger("cli")


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create the global configuration manager.

    Args:
        config_path: Optional path to configuration file

    Returns:
        ConfigManager instance

    Raises:
        typer.Exit: If configuration loading fails
    """
    global _config_manager

    if _config_manager is None or config_path:
        try:
            _config_manager = ConfigManager(
                config_file=config_path or _config_path,
                load_env=True
            )
            _config_manager.load_config()
        except ConfigurationError as e:
            rprint(f"[red]Configuration Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    return _config_manager


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: postcontent.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    Post Content Parser CLI - structured content from forum post markup.

    The parser turns the HTML of a post into paragraphs of text, line breaks
    and elements described by a syntax of element type rules.

    Common workflows:
    • Parse a post: post-content parse post.html --syntax syntax.json
    • Validate a syntax file: post-content check-syntax syntax.json

    For detailed help on any command, use: post-content <command> --help
    """
    global _config_manager, _config_path, _logger

    _config_manager = None
    _config_path = config_path
    _logger = setup_logging(verbose)

    config_manager = get_config_manager()
    logging_config = config_manager.get("logging", {})
    _logger = setup_logging(
        verbose,
        level=logging_config.get("level", "INFO"),
        log_format=logging_config.get("format", "standard"),
        log_file=logging_config.get("file"),
    )

    ctx.obj = {
        "config_path": config_path,
        "verbose": verbose,
        "config_manager": config_manager,
        "logger": _logger,
    }


def _json_default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


def _resolve_syntax_path(syntax_path: Optional[Path], config_manager: ConfigManager) -> Path:
    if syntax_path is not None:
        return syntax_path
    configured = config_manager.get("syntax_file")
    if configured:
        return config_manager.resolve_path(configured)
    rprint("[red]Error:[/red] No syntax given. Use --syntax or set syntax_file in the configuration.")
    raise typer.Exit(1)


def _read_markup(input_file: str) -> str:
    if input_file == "-":
        return sys.stdin.read()
    path = Path(input_file)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _diagnostics_table(sink: CollectingDiagnosticSink) -> Table:
    table = Table(title=f"Diagnostics ({len(sink)})")
    table.add_column("Code", style="yellow")
    table.add_column("Message")
    table.add_column("Markup", style="dim", overflow="fold")
    for diagnostic in sink:
        markup = diagnostic.markup or ""
        if len(markup) > 80:
            markup = markup[:77] + "..."
        table.add_row(str(diagnostic.code), escape(diagnostic.message), escape(markup))
    return table


@app.command()
def parse(
    input_file: str = typer.Argument(..., help="Markup file to parse, '-' reads standard input"),
    syntax_path: Optional[Path] = typer.Option(
        None,
        "--syntax",
        "-s",
        help="JSON syntax file (default: syntax_file from the configuration)",
        metavar="PATH",
    ),
    context_json: Optional[str] = typer.Option(
        None,
        "--context-json",
        help="JSON value passed as context to every created element",
    ),
    threshold: Optional[int] = typer.Option(
        None,
        "--threshold",
        min=1,
        help="Adjacent line breaks that separate paragraphs",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Exit with status 1 when any diagnostic is reported",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON result to a file instead of standard output",
        metavar="PATH",
    ),
) -> None:
    """Parse post markup and print the content as JSON."""
    logger = get_logger()
    config_manager = get_config_manager()

    try:
        context = json.loads(context_json) if context_json is not None else None
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--context-json")

    if threshold is None:
        threshold = config_manager.get("parser.paragraph_break_threshold")
    if strict is None:
        strict = bool(config_manager.get("parser.strict", False))

    try:
        rules = SyntaxLoader().load_file(_resolve_syntax_path(syntax_path, config_manager))
        sink = CollectingDiagnosticSink()
        parser = HtmlContentParser(
            ParserConfig(
                syntax=rules,
                context=context,
                diagnostics=sink,
                paragraph_break_threshold=threshold,
            )
        )
        result = parser.parse(_read_markup(input_file))
    except (ConfigurationError, ContentParserError, FileNotFoundError) as e:
        handle_cli_error(e)
        raise typer.Exit(1)

    rendered = json.dumps(result, indent=2, ensure_ascii=False, default=_json_default)
    if output is not None:
        output.write_text(rendered + "\n", encoding="utf-8")
        logger.info(f"Wrote parsed content to {output}")
    else:
        typer.echo(rendered)

    if len(sink):
        err_console.print(_diagnostics_table(sink))
        if strict:
            err_console.print(f"[red]{len(sink)} diagnostics reported in strict mode[/red]")
            raise typer.Exit(1)


@app.command("check-syntax")
def check_syntax(
    syntax_path: Path = typer.Argument(..., help="JSON syntax file to validate"),
) -> None:
    """Validate a syntax file and list its rules in matching order."""
    try:
        rules = SyntaxLoader().load_file(syntax_path)
    except (ConfigurationError, ContentParserError) as e:
        handle_cli_error(e)
        raise typer.Exit(1)

    table = Table(title=f"Syntax rules ({len(rules)})")
    table.add_column("#", justify="right")
    table.add_column("Tag")
    table.add_column("Attributes")
    table.add_column("Flags", style="cyan")
    for index, rule in enumerate(rules):
        flags: List[str] = []
        if rule.block:
            flags.append("block")
        if not rule.expects_content:
            flags.append("no content")
        if rule.convert_content_to_text:
            flags.append("text")
        if rule.is_code:
            flags.append("code")
        conditions = " ".join(matcher.describe() for matcher in rule.attributes)
        table.add_row(str(index), rule.tag, escape(conditions), ", ".join(flags))
    console.print(table)
    rprint(f"[green]✓ Valid syntax:[/green] {escape(str(syntax_path))}")


@app.command()
def info() -> None:
    """Show configuration status."""
    config_manager = get_config_manager()
    config = config_manager.config

    info_text = Text()
    info_text.append("Post Content Parser Information\n\n", style="bold blue")
    info_text.append(f"Version: {__version__}\n")
    info_text.append(f"Config file: {config_manager.config_file}\n")
    info_text.append(f"Project root: {config_manager.project_root}\n")
    info_text.append(f"Loaded: {'✓' if config_manager.is_loaded else '✗'}\n\n")

    info_text.append("Configuration:\n", style="bold")
    info_text.append(f"• Syntax file: {config.get('syntax_file') or 'not set'}\n")
    info_text.append(f"• Paragraph break threshold: {config['parser']['paragraph_break_threshold']}\n")
    info_text.append(f"• Strict: {config['parser']['strict']}\n")
    info_text.append(f"• Log level: {config['logging']['level']}\n")

    console.print(Panel(info_text, title="System Information", border_style="blue"))


@app.command()
def version() -> None:
    """Show version information."""
    rprint(f"Post Content Parser [blue]v{__version__}[/blue]")


def handle_cli_error(error: Exception) -> None:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
    """
    logger = get_logger()

    if isinstance(error, ConfigurationError):
        rprint(f"[red]Configuration Error:[/red] {escape(str(error))}")
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, ContentParserError):
        rprint(f"[red]Syntax Error:[/red] {escape(str(error))}")
        logger.debug("Parser error details", exc_info=True)
    elif isinstance(error, FileNotFoundError):
        rprint(f"[red]File Not Found:[/red] {escape(str(error))}")
        logger.debug("File not found details", exc_info=True)
    else:
        rprint(f"[red]Error:[/red] {escape(str(error))}")
        logger.debug("Unexpected error details", exc_info=True)


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        rprint("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_main()
