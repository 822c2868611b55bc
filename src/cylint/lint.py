"""Core lint orchestration."""

import glob as globmod
import logging
from pathlib import Path

from cylint.config import Settings, load_config
from cylint.models import FileReport, LintResult
from cylint.rules import RuleEngine
from cylint.tree import MalformedTreeError, SyntaxNode, TreeLoadError, load_tree

log = logging.getLogger(__name__)

TREE_SUFFIX = ".json"


class FileError(Exception):
  """No tree files could be resolved."""


class LintOrchestrator:
  """Loads tree files and runs the rule engine over them."""

  def __init__(self, settings: Settings | None = None, only: list[str] | None = None):
    self.settings = settings or Settings()
    self.engine = RuleEngine(self.settings, only=only)

  def lint_files(self, patterns: list[str], cwd: Path | None = None) -> LintResult:
    """Lint the tree files matched by the given paths or glob patterns.

    A file whose tree cannot be loaded fails on its own; the remaining
    files are still analysed.

    Raises:
      FileError: If no tree files match.
    """
    base_path = cwd or Path.cwd()
    paths = resolve_tree_files(patterns, base_path)

    reports: list[FileReport] = []
    for path in paths:
      rel_path = _relative(path, base_path)
      try:
        root = load_tree(path)
      except (MalformedTreeError, TreeLoadError) as e:
        log.warning("Skipping %s: %s", rel_path, e)
        reports.append(FileReport(path=rel_path, error=str(e)))
        continue
      reports.append(self.engine.lint_tree(rel_path, root))

    return LintResult(files=reports, summary=self.engine.summarize(reports))

  def lint_trees(self, trees: list[tuple[str, SyntaxNode]]) -> LintResult:
    """Lint trees the caller has already built."""
    return self.engine.lint(trees)


def resolve_tree_files(patterns: list[str], base_path: Path) -> list[Path]:
  """Expand paths, directories and glob patterns to unique tree files.

  Directories are searched recursively for ``*.json`` files.

  Raises:
    FileError: If nothing matches.
  """
  seen: set[Path] = set()
  result: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path):
      if path not in seen and path.is_file():
        seen.add(path)
        result.append(path)

  if not result:
    raise FileError(
      f"No tree files matched: {', '.join(patterns)}\n"
      "Pass ESTree JSON files, directories, or patterns like 'trees/**/*.json'"
    )

  return result


def _expand_pattern(pattern: str, base_path: Path) -> list[Path]:
  """Expand a single pattern to matching paths."""
  p = Path(pattern)
  full_path = p if p.is_absolute() else base_path / p

  if full_path.is_dir():
    return sorted(full_path.glob(f"**/*{TREE_SUFFIX}"))
  if any(c in pattern for c in "*?["):
    return [Path(match) for match in sorted(globmod.glob(str(full_path), recursive=True))]
  return [full_path]


def _relative(path: Path, base_path: Path) -> str:
  try:
    return str(path.relative_to(base_path))
  except ValueError:
    return str(path)


def run_lint(
  files: list[str],
  config_path: Path | None = None,
  only: list[str] | None = None,
  cwd: Path | None = None,
) -> LintResult:
  """Run a lint with the given options."""
  settings = load_config(config_path)
  orchestrator = LintOrchestrator(settings, only=only)
  return orchestrator.lint_files(files, cwd=cwd)
