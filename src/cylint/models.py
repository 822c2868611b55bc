"""Core domain models for lint results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from cylint.tree.node import SyntaxNode


class Severity(Enum):
  """Diagnostic severity levels."""

  ERROR = "error"
  WARNING = "warn"


class DiagnosticKind(Enum):
  """The violation a diagnostic reports."""

  MISSING_SINGLETON = "missing-singleton"
  MISSING_TEARDOWN = "missing-teardown"
  MISSING_CLEAR_BEFORE_TYPE = "missing-clear-before-type"


@dataclass(frozen=True)
class Diagnostic:
  """A single rule violation anchored at a syntax node."""

  node: SyntaxNode
  kind: DiagnosticKind
  message: str
  rule_id: str
  rule_name: str
  severity: Severity = Severity.ERROR

  @property
  def line(self) -> int | None:
    return self.node.span.line

  @property
  def column(self) -> int | None:
    return self.node.span.column


@dataclass(frozen=True)
class FileReport:
  """Outcome of linting one file.

  A file whose tree could not be analysed carries ``error`` and no
  diagnostics; other files in the same run are unaffected.
  """

  path: str
  diagnostics: Sequence[Diagnostic] = field(default_factory=tuple)
  error: str | None = None

  @property
  def failed(self) -> bool:
    return self.error is not None


@dataclass(frozen=True)
class LintResult:
  """Result of linting a set of files."""

  files: Sequence[FileReport]
  summary: str

  @property
  def diagnostics(self) -> list[Diagnostic]:
    """All diagnostics, in file order."""
    return [d for report in self.files for d in report.diagnostics]

  @property
  def failed_files(self) -> list[FileReport]:
    return [report for report in self.files if report.failed]

  @property
  def error_count(self) -> int:
    return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

  @property
  def warning_count(self) -> int:
    return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

  @property
  def has_errors(self) -> bool:
    """Check if the run found error-severity diagnostics or failed files."""
    return self.error_count > 0 or bool(self.failed_files)
