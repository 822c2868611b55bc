"""Page object rules."""

from cylint.rules.pages.singleton import PageSingletonRule

__all__ = ["PageSingletonRule"]
