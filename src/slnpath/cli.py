"""CLI interface for slnpath using Typer framework."""

import builtins
import io
import json as jsonlib
import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slnpath import __description__, __version__
from slnpath.config import LogLevel, SlnpathConfig, load_config
from slnpath.diagnostics import classify_failure
from slnpath.diagnostics import exceptions as slnpath_exceptions
from slnpath.utils.paths import normalize_path_no_throw
from slnpath.validation import PathValidator, ValidationStatus

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="slnpath",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


# --log-level given on the command line; wins over the config file
_log_level_override: LogLevel | None = None


def configure_logging(level: LogLevel) -> None:
    """Route log records to stderr at the requested level."""
    logging.basicConfig(
        level=_LOG_LEVELS[LogLevel(level)],
        format="%(levelname)s: %(message)s",
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"slnpath version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="Logging level (default: logging.level from config, else warn)")
    ] = None,
) -> None:
    """slnpath - Path normalization and validation for solution-file ingestion."""
    global _log_level_override
    _log_level_override = log_level
    configure_logging(log_level or LogLevel.WARN)


def _load_config_or_exit(config: Path | None) -> SlnpathConfig:
    try:
        slnpath_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if _log_level_override is None:
        configure_logging(slnpath_config.logging.level)
    return slnpath_config


def _shown(path: str) -> str:
    """Printable form of a path that may contain control characters."""
    if path.isprintable():
        return escape(path)
    return escape(repr(path))


@app.command()
def check(
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to validate, as they appear in the solution file")
    ],
    json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON")
    ] = False,
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .slnpath.json)")
    ] = None,
) -> None:
    """Validate paths against the invalid path and file name characters.

    Exits with code 1 when any path is invalid and failOnInvalid is set.
    """
    slnpath_config = _load_config_or_exit(config)
    result = PathValidator(slnpath_config).validate(paths)

    if json:
        print(jsonlib.dumps(result.to_dict(), indent=2))
        raise typer.Exit(result.exit_code)

    issues_by_path = {issue.path: issue for issue in result.issues}

    table = Table(title=f"Paths ({len(paths)} checked)")
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Problem", style="dim")

    for path in paths:
        issue = issues_by_path.get(path)
        if issue is None:
            table.add_row(_shown(path), "[green]valid[/green]", "")
        else:
            table.add_row(_shown(path), "[red]invalid[/red]", escape(issue.message))

    console.print(table)

    if result.status == ValidationStatus.PASS:
        console.print("[green]All paths are valid[/green]")
    else:
        invalid = result.counters.get("paths_invalid", 0)
        console.print(f"[yellow]{invalid} invalid path(s)[/yellow]")

    raise typer.Exit(result.exit_code)


@app.command()
def normalize(
    paths: Annotated[
        list[str],
        typer.Argument(help="Paths to normalize")
    ],
    json: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON")
    ] = False,
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .slnpath.json)")
    ] = None,
) -> None:
    """Print the absolute canonical form of each path.

    Paths that cannot be resolved are printed unchanged.
    """
    slnpath_config = _load_config_or_exit(config)
    normalized = [
        {"path": path, "normalized": normalize_path_no_throw(path, slnpath_config.paths)}
        for path in paths
    ]

    if json:
        print(jsonlib.dumps({"paths": normalized, "total": len(normalized)}, indent=2))
        return

    for entry in normalized:
        console.print(_shown(entry["normalized"]), soft_wrap=True)


def _exception_types() -> dict[str, type[BaseException]]:
    types = {
        name: value
        for name, value in vars(builtins).items()
        if isinstance(value, type) and issubclass(value, BaseException)
    }
    for name, value in vars(slnpath_exceptions).items():
        if isinstance(value, type) and issubclass(value, BaseException):
            types[name] = value
    types["UnsupportedOperation"] = io.UnsupportedOperation
    return types


def _instantiate(exc_type: type[BaseException], errno_value: int | None) -> BaseException:
    if errno_value is not None:
        return exc_type(errno_value, os.strerror(errno_value))
    # Skip __init__: some exceptions require constructor arguments
    return exc_type.__new__(exc_type)


@app.command()
def classify(
    name: Annotated[
        str,
        typer.Argument(help="Exception class name, e.g. PermissionError")
    ],
    errno_value: Annotated[
        int,
        typer.Option("--errno", help="errno for OSError subclasses")
    ] = None,
) -> None:
    """Show how an exception type is classified during path resolution."""
    exc_type = _exception_types().get(name)
    if exc_type is None:
        console.print(f"[red]Error:[/red] Unknown exception type '{escape(name)}'")
        raise typer.Exit(1)

    if errno_value is not None and not issubclass(exc_type, OSError):
        console.print(f"[red]Error:[/red] --errno only applies to OSError subclasses, not '{escape(name)}'")
        raise typer.Exit(1)

    try:
        error = _instantiate(exc_type, errno_value)
    except TypeError as e:
        # Exception groups cannot be built without a message and members
        console.print(f"[red]Error:[/red] Cannot instantiate '{escape(name)}': {escape(str(e))}")
        raise typer.Exit(1)

    failure = classify_failure(error)
    logger.debug(f"{name} classified as {failure}")

    suppressed = "[green]yes[/green]" if failure.is_io_related else "[red]no[/red]"
    console.print(f"{name}: {failure}")
    console.print(f"I/O related (suppressed during normalization): {suppressed}")
