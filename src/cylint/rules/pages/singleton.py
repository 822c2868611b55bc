"""PAGE001: Page classes must expose a singleton INSTANCE field."""

from typing import Mapping, Sequence

from cylint.config.settings import Settings
from cylint.models import Diagnostic, DiagnosticKind, Severity
from cylint.rules.base import NodeCallback, Reporter
from cylint.rules.registry import register_rule
from cylint.tree.node import NodeKind, SyntaxNode


class PageSingletonRule:
  """Requires a canonical singleton on default-constructible page classes.

  Applies to non-abstract class declarations whose name ends with the
  page suffix and whose constructor is missing or takes no parameters.
  Such a class must declare, directly in its body:

    public static readonly INSTANCE = new ClassName();

  A near miss (wrong modifiers, wrong class, constructor arguments) is
  reported the same way as a missing field.
  """

  MESSAGE = "Class '{class_name}' must declare: public static readonly {field} = new {class_name}();"

  def __init__(
    self,
    page_suffix: str = "Page",
    field_name: str = "INSTANCE",
    severity: Severity = Severity.ERROR,
  ):
    self._page_suffix = page_suffix
    self._field_name = field_name
    self._reporter = Reporter(self.id, self.name, severity)

  @property
  def id(self) -> str:
    return "PAGE001"

  @property
  def name(self) -> str:
    return "enforce-page-singleton"

  @property
  def description(self) -> str:
    return (
      f"Non-abstract '*{self._page_suffix}' classes with a zero-arg (or missing) "
      f"constructor must declare public static readonly {self._field_name}"
    )

  def listeners(self) -> Mapping[NodeKind, NodeCallback]:
    return {NodeKind.CLASS_DECL: self._check_class}

  def on_traversal_end(self) -> None:
    pass

  def diagnostics(self) -> Sequence[Diagnostic]:
    return self._reporter.diagnostics

  def _check_class(self, node: SyntaxNode) -> None:
    class_name = node.name
    if not class_name or not class_name.endswith(self._page_suffix):
      return
    if node.modifiers.abstract:
      return
    if not self._is_default_constructible(node):
      return

    if not any(self._is_singleton_field(member, class_name) for member in node.body):
      self._reporter.report(
        node,
        DiagnosticKind.MISSING_SINGLETON,
        self.MESSAGE.format(class_name=class_name, field=self._field_name),
      )

  def _is_default_constructible(self, node: SyntaxNode) -> bool:
    """True when the constructor is missing or takes no parameters."""
    constructor = next(
      (
        member for member in node.body
        if member.kind == NodeKind.METHOD_DEF and member.method_kind == "constructor"
      ),
      None,
    )
    if constructor is None:
      return True
    function = constructor.value
    return function is None or len(function.params) == 0

  def _is_singleton_field(self, member: SyntaxNode, class_name: str) -> bool:
    if member.kind != NodeKind.PROPERTY_DEF:
      return False

    modifiers = member.modifiers
    if not modifiers.static or modifiers.computed or member.name != self._field_name:
      return False
    if not modifiers.readonly or modifiers.accessibility != "public":
      return False

    initializer = member.value
    if initializer is None or initializer.kind != NodeKind.NEW_EXPR:
      return False
    return initializer.require_callee().is_identifier(class_name) and not initializer.arguments


def _create_page_singleton(settings: Settings, severity: Severity) -> PageSingletonRule:
  return PageSingletonRule(
    page_suffix=settings.page_suffix,
    field_name=settings.required_field_name,
    severity=severity,
  )


register_rule("PAGE001", "enforce-page-singleton", _create_page_singleton)
