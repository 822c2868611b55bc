"""Output formatting for lint results."""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cylint.models import Diagnostic, FileReport, LintResult, Severity


def _location(path: str, diagnostic: Diagnostic) -> str:
  location = path
  if diagnostic.line is not None:
    location += f":{diagnostic.line}"
    if diagnostic.column is not None:
      location += f":{diagnostic.column + 1}"
  return location


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, result: LintResult) -> str:
    """Format lint result for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: LintResult) -> str:
    self._print_failures(result)
    self._print_diagnostics(result)
    self._print_summary(result)
    return ""

  def _print_summary(self, result: LintResult) -> None:
    self.console.print()
    self.console.print(Panel(
      result.summary,
      title="[bold]cylint[/bold]",
      border_style="red" if result.has_errors else "green",
    ))

  def _print_failures(self, result: LintResult) -> None:
    for report in result.failed_files:
      self.console.print(f"[red]Could not analyse {report.path}:[/red] {report.error}")

  def _print_diagnostics(self, result: LintResult) -> None:
    if not result.diagnostics:
      if not result.failed_files:
        self.console.print("\n[green]No problems found.[/green]")
      return

    for report in result.files:
      if report.diagnostics:
        self._print_file(report)

  def _print_file(self, report: FileReport) -> None:
    table = Table(
      title=self._make_file_link(report.path),
      title_justify="left",
      show_header=True,
      header_style="bold",
    )
    table.add_column("Line", width=8, justify="right")
    table.add_column("Severity", width=8)
    table.add_column("Problem", min_width=40)
    table.add_column("Rule", width=28)

    for diagnostic in report.diagnostics:
      style = self.SEVERITY_STYLES.get(diagnostic.severity, "")
      position = "-"
      if diagnostic.line is not None:
        position = f"{diagnostic.line}:{(diagnostic.column or 0) + 1}"
      table.add_row(
        position,
        Text(diagnostic.severity.value, style=style),
        Text(diagnostic.message),
        f"[dim]{diagnostic.rule_id} {diagnostic.rule_name}[/dim]",
      )

    self.console.print()
    self.console.print(table)

  def _make_file_link(self, file_path: str) -> str:
    """Create a clickable file link for terminals that support hyperlinks."""
    url = Path(file_path).resolve().as_uri()
    return f"[link={url}]{file_path}[/link]"


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: LintResult) -> str:
    data = {
      "summary": result.summary,
      "errorCount": result.error_count,
      "warningCount": result.warning_count,
      "files": [
        {
          "path": report.path,
          "error": report.error,
          "diagnostics": [
            {
              "ruleId": d.rule_id,
              "rule": d.rule_name,
              "kind": d.kind.value,
              "severity": d.severity.value,
              "line": d.line,
              "column": d.column,
              "start": d.node.span.start,
              "end": d.node.span.end,
              "message": d.message,
            }
            for d in report.diagnostics
          ],
        }
        for report in result.files
      ],
    }
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, result: LintResult) -> str:
    lines = [
      "# Lint Report",
      "",
      "## Summary",
      "",
      result.summary,
      "",
    ]

    if result.failed_files:
      lines.extend(["## Failed Files", ""])
      for report in result.failed_files:
        lines.append(f"- `{report.path}`: {report.error}")
      lines.append("")

    lines.extend(["## Problems", ""])
    if not result.diagnostics:
      lines.extend(["No problems found.", ""])

    for report in result.files:
      for diagnostic in report.diagnostics:
        severity = diagnostic.severity.value.upper()
        lines.append(f"### [{severity}] {_location(report.path, diagnostic)}")
        lines.append("")
        lines.append(f"{diagnostic.message} (`{diagnostic.rule_name}`)")
        lines.append("")

    return "\n".join(lines)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  def format(self, result: LintResult) -> str:
    lines = []
    for report in result.files:
      if report.error:
        lines.append(f"::error file={report.path}::{self._escape(report.error)}")
      for diagnostic in report.diagnostics:
        level = "error" if diagnostic.severity == Severity.ERROR else "warning"
        location = f"file={report.path}"
        if diagnostic.line is not None:
          location += f",line={diagnostic.line}"
          if diagnostic.column is not None:
            location += f",col={diagnostic.column + 1}"
        message = self._escape(f"[{diagnostic.rule_name}] {diagnostic.message}")
        lines.append(f"::{level} {location}::{message}")
    return "\n".join(lines)

  def _escape(self, message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
