"""Cypress spec rules."""

from cylint.rules.cypress.hooks import HookPairingRule
from cylint.rules.cypress.clear_before_type import ClearBeforeTypeRule

__all__ = [
  "ClearBeforeTypeRule",
  "HookPairingRule",
]
