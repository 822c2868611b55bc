"""CY001: Detection of setup hooks without a matching teardown hook."""

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from cylint.config.settings import Settings
from cylint.models import Diagnostic, DiagnosticKind, Severity
from cylint.rules.base import NodeCallback, Reporter
from cylint.rules.registry import register_rule
from cylint.tree.node import NodeKind, SyntaxNode


@dataclass
class HookPairState:
  """Per-file state for one (setup, teardown) hook pair."""

  setup: str
  teardown: str
  setup_calls: list[SyntaxNode] = field(default_factory=list)
  teardown_seen: bool = False

  @property
  def missing_teardown(self) -> bool:
    return bool(self.setup_calls) and not self.teardown_seen


class HookPairingRule:
  """Requires a teardown hook in every file that uses its setup hook.

  Only calls like ``before(() => { ... })`` count: the callee must be a
  bare identifier and the first argument an inline function. Calls
  anywhere in the file count, nested or not.

  Absence can only be decided once the whole file has been seen, so
  the check runs in on_traversal_end() and reports at most once per
  hook pair, at the first setup call.
  """

  MESSAGE = (
    "Found a '{setup}(...)' function but no '{teardown}(...)' function within current file. "
    "Add '{teardown}(() => {{ ... }})' or disable a rule."
  )

  def __init__(
    self,
    hook_pairs: Sequence[tuple[str, str]] = (("before", "after"),),
    severity: Severity = Severity.ERROR,
  ):
    self._pairs = [HookPairState(setup, teardown) for setup, teardown in hook_pairs]
    self._reporter = Reporter(self.id, self.name, severity)

  @property
  def id(self) -> str:
    return "CY001"

  @property
  def name(self) -> str:
    return "require-after-with-before"

  @property
  def description(self) -> str:
    return "Require an after(() => { ... }) hook whenever before(() => { ... }) is used"

  def listeners(self) -> Mapping[NodeKind, NodeCallback]:
    return {NodeKind.CALL_EXPR: self._check_call}

  def on_traversal_end(self) -> None:
    for pair in self._pairs:
      if pair.missing_teardown:
        self._reporter.report(
          pair.setup_calls[0],
          DiagnosticKind.MISSING_TEARDOWN,
          self.MESSAGE.format(setup=pair.setup, teardown=pair.teardown),
        )

  def diagnostics(self) -> Sequence[Diagnostic]:
    return self._reporter.diagnostics

  def _check_call(self, node: SyntaxNode) -> None:
    callee = node.require_callee()
    if not callee.is_identifier() or not self._has_function_callback(node):
      return

    for pair in self._pairs:
      if callee.name == pair.setup:
        pair.setup_calls.append(node)
      if callee.name == pair.teardown:
        pair.teardown_seen = True

  def _has_function_callback(self, node: SyntaxNode) -> bool:
    return bool(node.arguments) and node.arguments[0].is_function()


def _create_hook_pairing(settings: Settings, severity: Severity) -> HookPairingRule:
  return HookPairingRule(hook_pairs=settings.hook_pairs, severity=severity)


register_rule("CY001", "require-after-with-before", _create_hook_pairing)
