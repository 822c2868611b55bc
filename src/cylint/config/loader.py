"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cylint.config.settings import ConfigurationError, Settings

CONFIG_FILENAMES = [".cylint.yaml", ".cylint.yml", "cylint.yaml", "cylint.yml"]


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path is not None:
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  if not path.exists():
    raise ConfigurationError(f"Config file not found: {path}")

  with open(path) as f:
    try:
      data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
      raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

  return parse_config(data)


def parse_config(data: Any) -> Settings:
  """Parse a config mapping into Settings.

  Raises:
    ConfigurationError: If the mapping has unknown keys or bad values.
  """
  if not isinstance(data, dict):
    raise ConfigurationError(
      f"Configuration must be a mapping, got {type(data).__name__}"
    )

  try:
    return Settings.model_validate(data)
  except ValidationError as e:
    problems = "; ".join(
      f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
      for err in e.errors()
    )
    raise ConfigurationError(f"Invalid configuration: {problems}") from e
