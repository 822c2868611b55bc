"""cylint: structural lint rules for Cypress page objects and specs."""

__version__ = "0.1.0"
