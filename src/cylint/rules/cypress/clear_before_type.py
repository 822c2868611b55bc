"""CY002: Detection of .type() calls not chained directly after .clear()."""

from typing import Mapping, Sequence

from cylint.config.settings import Settings
from cylint.models import Diagnostic, DiagnosticKind, Severity
from cylint.rules.base import NodeCallback, Reporter
from cylint.rules.registry import register_rule
from cylint.tree.node import NodeKind, SyntaxNode


def _method_call_name(node: SyntaxNode) -> str | None:
  """Name of the method invoked by ``<receiver>.<name>(...)``, if any.

  Computed access such as ``obj["type"](...)`` has no method name.
  """
  if node.kind != NodeKind.CALL_EXPR:
    return None
  callee = node.require_callee()
  if callee.kind != NodeKind.MEMBER_EXPR or callee.modifiers.computed:
    return None
  member = callee.require_member()
  return member.name if member.is_identifier() else None


class ClearBeforeTypeRule:
  """Requires ``.clear()`` immediately before every ``.type(...)``.

  Compliant:
    cy.get("#email").clear().type("me@example.com")

  Reported:
    cy.get("#email").type("me@example.com")
    cy.get("#email").focus().type("me@example.com")

  Only the direct receiver of ``.type()`` is inspected. Values bound to
  variables first are not followed.
  """

  MESSAGE = "Call '.clear()' directly before '.type(...)' so the input starts empty."

  def __init__(self, severity: Severity = Severity.ERROR):
    self._reporter = Reporter(self.id, self.name, severity)

  @property
  def id(self) -> str:
    return "CY002"

  @property
  def name(self) -> str:
    return "require-clear-before-type"

  @property
  def description(self) -> str:
    return "Require .clear() directly before .type(...) in a Cypress chain"

  def listeners(self) -> Mapping[NodeKind, NodeCallback]:
    return {NodeKind.CALL_EXPR: self._check_call}

  def on_traversal_end(self) -> None:
    pass

  def diagnostics(self) -> Sequence[Diagnostic]:
    return self._reporter.diagnostics

  def _check_call(self, node: SyntaxNode) -> None:
    if _method_call_name(node) != "type":
      return

    receiver = node.require_callee().receiver
    if receiver is not None and _method_call_name(receiver) == "clear":
      return

    self._reporter.report(node, DiagnosticKind.MISSING_CLEAR_BEFORE_TYPE, self.MESSAGE)


def _create_clear_before_type(settings: Settings, severity: Severity) -> ClearBeforeTypeRule:
  return ClearBeforeTypeRule(severity=severity)


register_rule("CY002", "require-clear-before-type", _create_clear_before_type)
