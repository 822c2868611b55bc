"""CLI interface using Typer."""

import logging
import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cylint import __version__
from cylint.config import ConfigurationError, load_config
from cylint.lint import FileError, run_lint
from cylint.models import Severity
from cylint.output import get_formatter
from cylint.rules import RuleRegistry
from cylint.rules.registry import get_rule_specs

app = typer.Typer(
  name="cylint",
  help="Structural lint rules for Cypress page objects and specs",
  no_args_is_help=True,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("CYLINT_DEBUG", "").lower() in ("1", "true", "yes")


def _configure_logging(debug: bool) -> None:
  logging.basicConfig(
    level=logging.DEBUG if debug else logging.WARNING,
    format="%(levelname)s %(name)s: %(message)s",
  )


def version_callback(value: bool) -> None:
  if value:
    console.print(f"cylint {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Lint ESTree JSON trees of Cypress test sources."""


@app.command()
def lint(
  files: list[str] = typer.Argument(
    ...,
    help="Tree files, directories or glob patterns (e.g., trees/**/*.json)",
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  rule: Optional[list[str]] = typer.Option(
    None, "--rule", "-r", help="Only run this rule (id or name); repeatable"
  ),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, markdown, github"
  ),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and tracebacks"),
) -> None:
  """Lint syntax trees and report rule violations.

  Exits with status 1 when an error-level problem is found or a file
  could not be analysed.
  """
  show_traceback = debug or _is_debug()
  _configure_logging(show_traceback)

  try:
    formatter = get_formatter(format_type)
    result = run_lint(files, config_path=config, only=rule or None)
  except (ConfigurationError, FileError, ValueError) as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  output = formatter.format(result)
  if output:
    console.print(output, markup=False, highlight=False, soft_wrap=True)

  if result.has_errors:
    raise typer.Exit(1)


@app.command("rules")
def list_rules_command(
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
  """List the available rules and their configured levels."""
  try:
    settings = load_config(config)
  except ConfigurationError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None

  RuleRegistry.load_all()
  specs = get_rule_specs()
  rules = [spec.factory(settings, Severity.ERROR) for spec in specs]

  table = Table(show_header=True, header_style="bold")
  table.add_column("ID", width=8)
  table.add_column("Name", width=28)
  table.add_column("Level", width=6)
  table.add_column("Description", min_width=40)

  for spec, instance in zip(specs, rules):
    table.add_row(
      spec.rule_id,
      spec.name,
      settings.level_for(spec.rule_id, spec.name),
      instance.description,
    )

  console.print(table)


if __name__ == "__main__":
  app()
