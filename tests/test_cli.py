"""Tests for the command line interface."""

import json

from cylint import __version__
from cylint.cli import app
from typer.testing import CliRunner

runner = CliRunner()


class TestLintCommand:
  def test_exit_1_on_errors(self, write_tree, dirty_spec: dict) -> None:
    path = write_tree("dirty.json", dirty_spec)

    result = runner.invoke(app, ["lint", str(path)])

    assert result.exit_code == 1
    assert "Found 3 problems" in result.output

  def test_exit_0_when_clean(self, write_tree, clean_spec: dict) -> None:
    path = write_tree("clean.json", clean_spec)

    result = runner.invoke(app, ["lint", str(path)])

    assert result.exit_code == 0
    assert "No problems found." in result.output

  def test_exit_0_with_only_warnings(self, write_tree, tmp_path, dirty_spec: dict) -> None:
    path = write_tree("dirty.json", dirty_spec)
    config = tmp_path / "cylint.yaml"
    config.write_text("rules:\n  PAGE001: warn\n  CY001: warn\n  CY002: warn\n")

    result = runner.invoke(app, ["lint", str(path), "--config", str(config)])

    assert result.exit_code == 0

  def test_exit_1_on_malformed_tree(self, write_tree) -> None:
    path = write_tree("broken.json", {"type": "Program", "body": [{"type": "CallExpression"}]})

    result = runner.invoke(app, ["lint", str(path)])

    assert result.exit_code == 1
    assert "could not be analysed" in result.output

  def test_json_format(self, write_tree, dirty_spec: dict) -> None:
    path = write_tree("dirty.json", dirty_spec)

    result = runner.invoke(app, ["lint", str(path), "--format", "json"])

    data = json.loads(result.stdout)
    assert data["errorCount"] == 3
    assert result.exit_code == 1

  def test_rule_filter(self, write_tree, dirty_spec: dict) -> None:
    path = write_tree("dirty.json", dirty_spec)

    result = runner.invoke(app, ["lint", str(path), "--format", "json", "--rule", "CY002"])

    data = json.loads(result.stdout)
    assert [d["ruleId"] for d in data["files"][0]["diagnostics"]] == ["CY002"]

  def test_unknown_rule(self, write_tree, clean_spec: dict) -> None:
    path = write_tree("clean.json", clean_spec)

    result = runner.invoke(app, ["lint", str(path), "--rule", "no-such-rule"])

    assert result.exit_code == 1
    assert "Unknown rule 'no-such-rule'" in result.output

  def test_invalid_config(self, write_tree, tmp_path, clean_spec: dict) -> None:
    path = write_tree("clean.json", clean_spec)
    config = tmp_path / "cylint.yaml"
    config.write_text("pageSuffix: Page\n")

    result = runner.invoke(app, ["lint", str(path), "--config", str(config)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output

  def test_no_files_matched(self, tmp_path) -> None:
    result = runner.invoke(app, ["lint", str(tmp_path / "missing" / "*.json")])

    assert result.exit_code == 1
    assert "No tree files matched" in result.output

  def test_unknown_format(self, write_tree, clean_spec: dict) -> None:
    path = write_tree("clean.json", clean_spec)

    result = runner.invoke(app, ["lint", str(path), "--format", "xml"])

    assert result.exit_code == 1
    assert "Unknown format" in result.output


class TestRulesCommand:
  def test_lists_rules_with_levels(self, tmp_path) -> None:
    config = tmp_path / "cylint.yaml"
    config.write_text("rules:\n  CY002: 'off'\n")

    result = runner.invoke(app, ["rules", "--config", str(config)])

    assert result.exit_code == 0
    for rule_id in ("PAGE001", "CY001", "CY002"):
      assert rule_id in result.output
    assert "off" in result.output


class TestVersion:
  def test_version(self) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
