"""Configuration management."""

from cylint.config.loader import load_config, parse_config
from cylint.config.settings import ConfigurationError, RuleLevel, Settings

__all__ = ["ConfigurationError", "RuleLevel", "Settings", "load_config", "parse_config"]
