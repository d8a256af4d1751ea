"""CLI interface for dcvalidate using Typer framework."""

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dcvalidate import __description__, __version__
from dcvalidate.actions import config_from_inputs, error_command, set_output
from dcvalidate.config import LogLevel, ValidatorConfig, load_config
from dcvalidate.parser import strip_json_comments
from dcvalidate.validation import ValidationFramework, ValidationResult

app = typer.Typer(
    name="dcvalidate",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console(soft_wrap=True)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def configure_logging(level: LogLevel | str) -> None:
    """Send log records to stderr at the given level."""
    numeric_level = _LOG_LEVELS[LogLevel(level).value]
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("dcvalidate").setLevel(numeric_level)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"dcvalidate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """dcvalidate - Validate devcontainer.json extensions, tasks and features."""


def _load_config_or_exit(config: Path | None) -> ValidatorConfig:
    try:
        return load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _run(config: ValidatorConfig) -> ValidationResult:
    framework = ValidationFramework(config.requirements)
    framework.create_default_rules()
    return framework.validate(config.devcontainer_path)


def _print_result(result: ValidationResult) -> None:
    if result.passed:
        console.print(f"[green]✓[/green] {escape(result.message)}")
        console.print(f"[dim]{escape(result.path or '')}[/dim]")
        return

    console.print(f"[red]Error:[/red] {escape(result.message)}")

    if result.missing:
        missing_table = Table()
        missing_table.add_column("Missing", style="cyan")
        missing_table.add_column("Rule", style="dim")
        for item in result.missing:
            missing_table.add_row(escape(item), result.rule or "")
        console.print(missing_table)


@app.command()
def validate(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Path to devcontainer.json (default: .devcontainer/devcontainer.json)")
    ] = None,
    extensions: Annotated[
        Optional[str],
        typer.Option("--extensions", "-e", help="Comma-separated list of required VS Code extensions")
    ] = None,
    features: Annotated[
        Optional[str],
        typer.Option("--features", "-f", help="Comma-separated list of required devcontainer features")
    ] = None,
    validate_tasks: Annotated[
        Optional[bool],
        typer.Option("--validate-tasks/--no-validate-tasks", help="Require build, test and run tasks")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .dcvalidate.json)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", help="Output format: table, json (default: table)")
    ] = "table",
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level: error, warn, info, debug")
    ] = None,
) -> None:
    """Validate a devcontainer.json against required extensions, tasks and features."""
    valid_formats = ["table", "json"]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    if log_level is not None and log_level not in _LOG_LEVELS:
        console.print(f"[red]Error:[/red] Invalid log level '{log_level}'. Must be one of: {', '.join(_LOG_LEVELS)}")
        raise typer.Exit(1)

    validator_config = _load_config_or_exit(config).with_overrides(
        devcontainer_path=path,
        extensions=extensions,
        features=features,
        validate_tasks=validate_tasks,
        log_level=log_level,
    )
    configure_logging(validator_config.logging.level)

    result = _run(validator_config)

    if format == "json":
        typer.echo(jsonlib.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result)

    raise typer.Exit(result.exit_code)


@app.command()
def action(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .dcvalidate.json)")
    ] = None,
) -> None:
    """Run as a GitHub Actions step, reading INPUT_* environment variables."""
    validator_config = config_from_inputs(_load_config_or_exit(config))
    configure_logging(validator_config.logging.level)

    result = _run(validator_config)
    set_output("valid", "true" if result.passed else "false")

    if result.passed:
        typer.echo(result.message)
    else:
        typer.echo(error_command(result.message))

    raise typer.Exit(result.exit_code)


@app.command()
def strip(
    file: Annotated[
        Path,
        typer.Argument(help="File to print with // comments removed")
    ],
) -> None:
    """Print a file with // comments removed, as the validator sees it."""
    if not file.exists():
        console.print(f"[red]Error:[/red] File not found: {escape(str(file))}")
        raise typer.Exit(1)

    typer.echo(strip_json_comments(file.read_text(encoding="utf-8", errors="replace")), nl=False)


if __name__ == "__main__":
    app()
