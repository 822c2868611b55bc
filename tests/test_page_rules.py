"""Tests for page object rules."""

import pytest
from builders import (
  arrow,
  class_decl,
  constructor,
  ident,
  literal,
  method,
  new,
  program,
  prop_def,
  singleton,
)
from cylint.models import DiagnosticKind, Severity
from cylint.rules.pages.singleton import PageSingletonRule
from cylint.tree import Dispatcher, build_tree


def run_rule(rule: PageSingletonRule, document: dict) -> list:
  dispatcher = Dispatcher()
  for kind, callback in rule.listeners().items():
    dispatcher.on_enter(kind, callback)
  dispatcher.on_end(rule.on_traversal_end)
  dispatcher.run(build_tree(document))
  return list(rule.diagnostics())


class TestPageSingletonRule:
  @pytest.fixture
  def rule(self) -> PageSingletonRule:
    return PageSingletonRule()

  def test_properties(self, rule: PageSingletonRule) -> None:
    assert rule.id == "PAGE001"
    assert rule.name == "enforce-page-singleton"
    assert "INSTANCE" in rule.description

  def test_canonical_singleton_passes(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("LoginPage", singleton("LoginPage")))

    assert run_rule(rule, document) == []

  def test_singleton_with_empty_constructor_passes(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("LoginPage", constructor(), singleton("LoginPage")))

    assert run_rule(rule, document) == []

  def test_missing_singleton(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("LoginPage", method("open")))

    diagnostics = run_rule(rule, document)

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.kind == DiagnosticKind.MISSING_SINGLETON
    assert diagnostic.message == (
      "Class 'LoginPage' must declare: public static readonly INSTANCE = new LoginPage();"
    )
    assert diagnostic.node.name == "LoginPage"
    assert diagnostic.rule_id == "PAGE001"
    assert diagnostic.severity == Severity.ERROR

  def test_missing_singleton_with_empty_constructor(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("LoginPage", constructor()))

    assert len(run_rule(rule, document)) == 1

  @pytest.mark.parametrize(
    "field",
    [
      prop_def("INSTANCE", new("LoginPage"), static=True, accessibility="public"),
      prop_def("INSTANCE", new("LoginPage"), static=True, readonly=True),
      prop_def("INSTANCE", new("LoginPage"), static=True, readonly=True, accessibility="private"),
      prop_def("INSTANCE", new("LoginPage"), readonly=True, accessibility="public"),
      prop_def("INSTANCE", new("OtherPage"), static=True, readonly=True, accessibility="public"),
      prop_def(
        "INSTANCE", new("LoginPage", literal(1)), static=True, readonly=True, accessibility="public"
      ),
      prop_def("INSTANCE", None, static=True, readonly=True, accessibility="public"),
      prop_def("INSTANCE", ident("LoginPage"), static=True, readonly=True, accessibility="public"),
      prop_def("Instance", new("LoginPage"), static=True, readonly=True, accessibility="public"),
      prop_def(
        "INSTANCE",
        new("LoginPage"),
        static=True,
        readonly=True,
        accessibility="public",
        computed=True,
      ),
    ],
    ids=[
      "not-readonly",
      "no-accessibility",
      "private",
      "not-static",
      "wrong-class",
      "with-arguments",
      "no-initializer",
      "not-new",
      "wrong-name",
      "computed-key",
    ],
  )
  def test_near_misses_are_reported_once(self, rule: PageSingletonRule, field: dict) -> None:
    document = program(class_decl("LoginPage", field))

    diagnostics = run_rule(rule, document)

    assert len(diagnostics) == 1
    assert "'LoginPage'" in diagnostics[0].message

  def test_several_near_misses_yield_one_diagnostic(self, rule: PageSingletonRule) -> None:
    document = program(class_decl(
      "LoginPage",
      prop_def("INSTANCE", new("LoginPage"), static=True),
      prop_def("INSTANCE", new("HomePage"), static=True, readonly=True, accessibility="public"),
    ))

    assert len(run_rule(rule, document)) == 1

  def test_any_matching_member_satisfies(self, rule: PageSingletonRule) -> None:
    document = program(class_decl(
      "LoginPage",
      prop_def("INSTANCE", new("LoginPage"), static=True),
      singleton("LoginPage"),
    ))

    assert run_rule(rule, document) == []

  def test_abstract_class_is_exempt(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("BasePage", abstract=True))

    assert run_rule(rule, document) == []

  def test_parameterised_constructor_is_exempt(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("ItemPage", constructor(ident("id"))))

    assert run_rule(rule, document) == []

  def test_non_page_class_is_ignored(self, rule: PageSingletonRule) -> None:
    document = program(class_decl("Pager"), class_decl("PageHelper"))

    assert run_rule(rule, document) == []

  def test_anonymous_class_is_ignored(self, rule: PageSingletonRule) -> None:
    document = program(class_decl(None))

    assert run_rule(rule, document) == []

  def test_nested_class_is_checked(self, rule: PageSingletonRule) -> None:
    document = program({
      "type": "ExpressionStatement",
      "expression": arrow(class_decl("InnerPage")),
    })

    diagnostics = run_rule(rule, document)

    assert [d.node.name for d in diagnostics] == ["InnerPage"]

  def test_one_diagnostic_per_class_in_source_order(self, rule: PageSingletonRule) -> None:
    document = program(
      class_decl("LoginPage"),
      class_decl("HomePage", singleton("HomePage")),
      class_decl("CartPage"),
    )

    diagnostics = run_rule(rule, document)

    assert [d.node.name for d in diagnostics] == ["LoginPage", "CartPage"]

  def test_only_direct_members_count(self, rule: PageSingletonRule) -> None:
    inner = class_decl("LoginPage", singleton("LoginPage"))
    document = program(class_decl(
      "LoginPage",
      prop_def("helper", arrow(inner)),
    ))

    diagnostics = run_rule(rule, document)

    # The outer class has no singleton of its own; the inner one does.
    assert len(diagnostics) == 1

  def test_custom_suffix_and_field(self) -> None:
    rule = PageSingletonRule(page_suffix="Screen", field_name="shared", severity=Severity.WARNING)
    document = program(
      class_decl("LoginScreen"),
      class_decl("LoginPage"),
    )

    diagnostics = run_rule(rule, document)

    assert len(diagnostics) == 1
    assert diagnostics[0].message == (
      "Class 'LoginScreen' must declare: public static readonly shared = new LoginScreen();"
    )
    assert diagnostics[0].severity == Severity.WARNING
