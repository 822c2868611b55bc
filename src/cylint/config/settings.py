"""Application settings."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

RuleLevel = Literal["error", "warn", "off"]

_IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")


class ConfigurationError(ValueError):
  """Configuration has an unsupported shape or value."""


class Settings(BaseModel):
  """Lint configuration.

  ``rules`` maps a rule id or name to its level; rules not listed run at
  ``error`` level.
  """

  model_config = ConfigDict(extra="forbid", frozen=True)

  hook_pairs: list[tuple[str, str]] = Field(default_factory=lambda: [("before", "after")])
  page_suffix: str = "Page"
  required_field_name: str = "INSTANCE"
  rules: dict[str, RuleLevel] = Field(default_factory=dict)

  @field_validator("hook_pairs")
  @classmethod
  def _check_hook_pairs(cls, pairs: list[tuple[str, str]]) -> list[tuple[str, str]]:
    for setup, teardown in pairs:
      for name in (setup, teardown):
        if not _IDENTIFIER.fullmatch(name):
          raise ValueError(f"hook name {name!r} is not an identifier")
      if setup == teardown:
        raise ValueError(f"setup and teardown hooks must differ, got {setup!r} twice")
    return pairs

  @field_validator("page_suffix")
  @classmethod
  def _check_page_suffix(cls, suffix: str) -> str:
    if not suffix:
      raise ValueError("page_suffix must not be empty")
    return suffix

  @field_validator("required_field_name")
  @classmethod
  def _check_field_name(cls, name: str) -> str:
    if not _IDENTIFIER.fullmatch(name):
      raise ValueError(f"required_field_name {name!r} is not an identifier")
    return name

  def level_for(self, rule_id: str, rule_name: str) -> RuleLevel:
    """Configured level for a rule, looked up by id first, then name."""
    if rule_id in self.rules:
      return self.rules[rule_id]
    return self.rules.get(rule_name, "error")
