"""Pytest fixtures."""

import json
from pathlib import Path

import pytest
from builders import (
  arrow,
  at,
  call,
  class_decl,
  ident,
  literal,
  method_call,
  program,
  singleton,
  stmt,
)
from cylint.config import Settings
from cylint.rules import RuleEngine
from cylint.tree import build_tree


@pytest.fixture
def settings() -> Settings:
  return Settings()


@pytest.fixture
def engine(settings: Settings) -> RuleEngine:
  return RuleEngine(settings)


@pytest.fixture
def clean_spec() -> dict:
  """A spec file with paired hooks, a cleared input and a proper page class."""
  return program(
    class_decl("LoginPage", singleton("LoginPage")),
    stmt(call("before", arrow(stmt(call(ident("visit")))))),
    stmt(call("after", arrow())),
    stmt(method_call(method_call(method_call("cy", "get", literal("#user")), "clear"), "type", literal("me"))),
  )


@pytest.fixture
def dirty_spec() -> dict:
  """A spec file breaking every rule once."""
  return program(
    at(class_decl("LoginPage"), line=1),
    at(stmt(at(call("before", arrow()), line=5)), line=5),
    at(stmt(at(method_call(method_call("cy", "get", literal("#user")), "type", literal("me")), line=9)), line=9),
  )


@pytest.fixture
def write_tree(tmp_path: Path):
  """Write an ESTree document to a JSON file under tmp_path."""

  def _write(name: str, document: object) -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path

  return _write


@pytest.fixture
def dirty_result(engine: RuleEngine, dirty_spec: dict):
  """LintResult for dirty_spec, reported as cypress/e2e/login.cy.ts."""
  return engine.lint([("cypress/e2e/login.cy.ts", build_tree(dirty_spec))])
