"""Tree-based lint rules and the engine that runs them."""

from cylint.rules.base import Reporter, Rule
from cylint.rules.engine import RuleEngine
from cylint.rules.registry import (
  RuleRegistry,
  RuleSpec,
  get_enabled_rules,
  list_rules,
  register_rule,
  resolve_rule,
)

__all__ = [
  "Reporter",
  "Rule",
  "RuleEngine",
  "RuleRegistry",
  "RuleSpec",
  "get_enabled_rules",
  "list_rules",
  "register_rule",
  "resolve_rule",
]
