"""Rule abstractions for tree-based linting."""

from typing import Callable, Mapping, Protocol, Sequence

from cylint.models import Diagnostic, DiagnosticKind, Severity
from cylint.tree.node import NodeKind, SyntaxNode

NodeCallback = Callable[[SyntaxNode], None]


class Reporter:
  """Collects diagnostics for one rule during one traversal.

  Diagnostics keep emission order. Rules hand findings to the reporter
  and never print them.
  """

  def __init__(self, rule_id: str, rule_name: str, severity: Severity = Severity.ERROR):
    self._rule_id = rule_id
    self._rule_name = rule_name
    self._severity = severity
    self._diagnostics: list[Diagnostic] = []

  def report(self, node: SyntaxNode, kind: DiagnosticKind, message: str) -> None:
    self._diagnostics.append(Diagnostic(
      node=node,
      kind=kind,
      message=message,
      rule_id=self._rule_id,
      rule_name=self._rule_name,
      severity=self._severity,
    ))

  @property
  def diagnostics(self) -> tuple[Diagnostic, ...]:
    return tuple(self._diagnostics)


class Rule(Protocol):
  """Protocol for tree-based lint rules.

  A rule instance analyses exactly one file: the engine builds a fresh
  instance per file, so any state a rule keeps is per-file state.

  Example:
    class NoAlertRule:
      id = "EX001"
      name = "no-alert"
      description = "Disallow alert()"

      def __init__(self):
        self._reporter = Reporter(self.id, self.name)

      def listeners(self):
        return {NodeKind.CALL_EXPR: self._check_call}

      def on_traversal_end(self) -> None:
        pass

      def diagnostics(self):
        return self._reporter.diagnostics
  """

  @property
  def id(self) -> str:
    """Unique identifier for this rule (e.g., 'CY001')."""
    ...

  @property
  def name(self) -> str:
    """Human-readable rule name (e.g., 'require-after-with-before')."""
    ...

  @property
  def description(self) -> str:
    """One-line description shown by ``cylint rules``."""
    ...

  def listeners(self) -> Mapping[NodeKind, NodeCallback]:
    """Node kinds this rule inspects, with the callback for each."""
    ...

  def on_traversal_end(self) -> None:
    """Called once after the whole tree has been visited."""
    ...

  def diagnostics(self) -> Sequence[Diagnostic]:
    """Diagnostics reported so far, in emission order."""
    ...
