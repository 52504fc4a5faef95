"""CLI interface for jsonrules using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsonrules import __description__, __version__
from jsonrules.config import JsonRulesConfig, LogLevel, OutputFormat, load_config
from jsonrules.exceptions import InvalidRuleError
from jsonrules.loader import load_json, load_rules
from jsonrules.registry import CheckerRegistry
from jsonrules.rules import check_rule_tree
from jsonrules.validator import Validator

EXIT_INVALID_DATA = 1
EXIT_USAGE = 2

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

app = typer.Typer(
    name="jsonrules",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"jsonrules version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """jsonrules - Declarative rule-tree validation for JSON-shaped data."""


def _load_settings(config: Path | None, verbose: bool) -> JsonRulesConfig:
    try:
        settings = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)

    level = logging.DEBUG if verbose else _LOG_LEVELS[settings.logging.level]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _render_table(errors: dict[str, list[str]]) -> None:
    table = Table(title="Validation Errors")
    table.add_column("Path", style="cyan")
    table.add_column("Message", style="red")

    for path, messages in errors.items():
        for message in messages:
            table.add_row(escape(path), escape(message))

    console.print(table)


@app.command()
def check(
    rules: Annotated[
        Path,
        typer.Argument(help="Path to the JSON rule set")
    ],
    data: Annotated[
        Path,
        typer.Argument(help="Path to the JSON document to validate")
    ],
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format: table, json (default: from config, else table)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .jsonrules.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a JSON document against a rule set."""
    settings = _load_settings(config, verbose)
    output_format = format.value if format else settings.output.format

    try:
        rule_set = load_rules(rules)
        document = load_json(data)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)

    validator = Validator(config=settings.validator)
    try:
        valid = validator.is_valid(rule_set, document)
    except InvalidRuleError as e:
        console.print(f"[red]Invalid rules:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)

    errors = validator.errors
    if output_format == OutputFormat.JSON.value:
        console.print_json(jsonlib.dumps(validator.accumulator.to_dict()))
    elif valid:
        console.print(f"[green]✓ {data.name} is valid[/green]")
    else:
        _render_table(errors)
        console.print(f"[red]✗ {data.name} has {validator.accumulator.count()} error(s)[/red]")

    if not valid:
        raise typer.Exit(EXIT_INVALID_DATA)


@app.command()
def lint(
    rules: Annotated[
        Path,
        typer.Argument(help="Path to the JSON rule set")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .jsonrules.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Check that a rule set is well formed, without any data."""
    _load_settings(config, verbose)

    try:
        rule_set = load_rules(rules)
        check_rule_tree(rule_set, CheckerRegistry())
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)
    except InvalidRuleError as e:
        console.print(f"[red]Invalid rules:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)

    console.print(f"[green]✓ {rules.name} is well formed[/green]")


if __name__ == "__main__":
    app()
