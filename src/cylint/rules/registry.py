"""Rule registration and discovery."""

from dataclasses import dataclass
from typing import Callable

from cylint.config.settings import ConfigurationError, Settings
from cylint.models import Severity
from cylint.rules.base import Rule

RuleFactory = Callable[[Settings, Severity], Rule]


@dataclass(frozen=True)
class RuleSpec:
  """A registered rule: its identity and how to build it."""

  rule_id: str
  name: str
  factory: RuleFactory


_rules: dict[str, RuleSpec] = {}


def register_rule(rule_id: str, name: str, factory: RuleFactory) -> None:
  """Register a rule factory.

  Args:
    rule_id: Unique identifier for the rule (e.g., 'CY001').
    name: Human-readable rule name (e.g., 'require-after-with-before').
    factory: Callable building a Rule from settings and a severity.
  """
  _rules[rule_id] = RuleSpec(rule_id=rule_id, name=name, factory=factory)


def resolve_rule(key: str) -> RuleSpec:
  """Look up a registered rule by id or name.

  Raises:
    ConfigurationError: If no rule has that id or name.
  """
  if key in _rules:
    return _rules[key]
  for spec in _rules.values():
    if spec.name == key:
      return spec
  available = ", ".join(_rules) or "none"
  raise ConfigurationError(f"Unknown rule '{key}'. Available: {available}")


def get_enabled_rules(
  settings: Settings,
  only: list[str] | None = None,
) -> list[RuleSpec]:
  """Get registered rules that are not switched off.

  Args:
    settings: Settings carrying per-rule levels.
    only: Optional rule ids or names to restrict the selection to.

  Raises:
    ConfigurationError: If settings or ``only`` name an unknown rule.
  """
  for key in settings.rules:
    resolve_rule(key)

  selected = get_rule_specs()
  if only:
    wanted = {resolve_rule(key).rule_id for key in only}
    selected = [spec for spec in selected if spec.rule_id in wanted]

  return [
    spec for spec in selected
    if settings.level_for(spec.rule_id, spec.name) != "off"
  ]


def build_rules(settings: Settings, specs: list[RuleSpec]) -> list[Rule]:
  """Build fresh rule instances for one file."""
  rules = []
  for spec in specs:
    severity = Severity(settings.level_for(spec.rule_id, spec.name))
    rules.append(spec.factory(settings, severity))
  return rules


def list_rules() -> list[str]:
  """List all registered rule IDs."""
  return list(_rules.keys())


def get_rule_specs() -> list[RuleSpec]:
  """All registered rules, ordered by id."""
  return sorted(_rules.values(), key=lambda spec: spec.rule_id)


class RuleRegistry:
  """Registry for lazy rule loading."""

  @staticmethod
  def load_all() -> None:
    """Load all rule modules to trigger registration.

    Call this before using get_enabled_rules() to ensure all rules are
    registered.
    """
    # Each module registers its rules at import time
    from cylint.rules.pages import singleton  # noqa: F401
    from cylint.rules.cypress import (
      hooks,  # noqa: F401
      clear_before_type,  # noqa: F401
    )
