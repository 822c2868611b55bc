"""Rule engine that drives rules over syntax trees."""

import logging
from typing import Iterable

from cylint.config.settings import Settings
from cylint.models import Diagnostic, FileReport, LintResult, Severity
from cylint.rules.base import Rule
from cylint.rules.registry import RuleRegistry, RuleSpec, build_rules, get_enabled_rules
from cylint.tree.dispatcher import Dispatcher
from cylint.tree.node import MalformedTreeError, SyntaxNode

log = logging.getLogger(__name__)

# Diagnostics without a source line sort after positioned ones
_UNKNOWN_POSITION = 10**9


class RuleEngine:
  """Orchestrates rule execution and result aggregation.

  Every file gets its own Dispatcher and freshly built rule instances,
  so no rule state crosses file boundaries and the same tree always
  yields the same diagnostics.

  Example:
    engine = RuleEngine(Settings())
    result = engine.lint([("cypress/e2e/login.cy.ts", tree)])
  """

  def __init__(
    self,
    settings: Settings | None = None,
    rules: list[RuleSpec] | None = None,
    only: list[str] | None = None,
  ):
    """Initialize the rule engine.

    Args:
      settings: Rule options and levels. Defaults to Settings().
      rules: Optional rule specs to run. If None, enabled rules are
             loaded from the registry.
      only: Optional rule ids or names restricting registry rules.

    Raises:
      ConfigurationError: If settings or ``only`` name unknown rules.
    """
    self._settings = settings or Settings()
    if rules is None:
      RuleRegistry.load_all()
      rules = get_enabled_rules(self._settings, only)
    self._specs = rules

  @property
  def rule_ids(self) -> list[str]:
    return [spec.rule_id for spec in self._specs]

  def check_tree(self, root: SyntaxNode) -> list[Diagnostic]:
    """Run all rules over one tree.

    Raises:
      MalformedTreeError: If the tree violates the node contract.
    """
    rules = build_rules(self._settings, self._specs)
    dispatcher = Dispatcher()
    for rule in rules:
      for kind, callback in rule.listeners().items():
        dispatcher.on_enter(kind, callback)
      dispatcher.on_end(rule.on_traversal_end)

    dispatcher.run(root)
    return self._collect(rules)

  def lint_tree(self, path: str, root: SyntaxNode) -> FileReport:
    """Lint one file, turning a malformed tree into a failed report."""
    log.debug("Linting %s with rules %s", path, ", ".join(self.rule_ids))
    try:
      diagnostics = self.check_tree(root)
    except MalformedTreeError as e:
      log.warning("Skipping %s: %s", path, e)
      return FileReport(path=path, error=str(e))
    return FileReport(path=path, diagnostics=tuple(diagnostics))

  def lint(self, trees: Iterable[tuple[str, SyntaxNode]]) -> LintResult:
    """Lint a sequence of (path, tree) pairs.

    A malformed tree fails only its own file; the others are still
    analysed.
    """
    reports = [self.lint_tree(path, root) for path, root in trees]
    return LintResult(files=reports, summary=self.summarize(reports))

  def _collect(self, rules: list[Rule]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for rule in rules:
      diagnostics.extend(rule.diagnostics())
    # Stable: diagnostics at the same position keep rule order
    return sorted(diagnostics, key=_position_key)

  def summarize(self, reports: list[FileReport]) -> str:
    """Generate a summary of the run.

    Args:
      reports: Per-file reports, including failed files.

    Returns:
      Human-readable summary string.
    """
    diagnostics = [d for report in reports for d in report.diagnostics]
    failed = sum(1 for report in reports if report.failed)

    if not diagnostics and not failed:
      return "No problems found."

    parts = []
    for severity, label in ((Severity.ERROR, "error"), (Severity.WARNING, "warning")):
      count = sum(1 for d in diagnostics if d.severity == severity)
      if count:
        parts.append(f"{count} {label}{'s' if count != 1 else ''}")

    total = len(diagnostics)
    summary = f"Found {total} problem{'s' if total != 1 else ''}"
    if parts:
      summary += f" ({', '.join(parts)})"
    summary += f" in {len(reports)} file{'s' if len(reports) != 1 else ''}."

    if failed:
      summary += f" {failed} file{'s' if failed != 1 else ''} could not be analysed."

    return summary


def _position_key(diagnostic: Diagnostic) -> tuple[int, int]:
  span = diagnostic.node.span
  if span.line is not None:
    return (span.line, span.column or 0)
  return (_UNKNOWN_POSITION, 0)
