"""Read-only syntax node model consumed by the rules."""

from dataclasses import dataclass, field
from enum import Enum


class MalformedTreeError(ValueError):
  """Syntax tree violates the node contract."""


class NodeKind(Enum):
  """Node kinds the rules distinguish.

  Every construct the rules never inspect is OTHER; its children are
  still visited.
  """

  PROGRAM = "Program"
  CLASS_DECL = "ClassDeclaration"
  CLASS_BODY = "ClassBody"
  METHOD_DEF = "MethodDefinition"
  PROPERTY_DEF = "PropertyDefinition"
  CALL_EXPR = "CallExpression"
  MEMBER_EXPR = "MemberExpression"
  IDENTIFIER = "Identifier"
  FUNCTION_EXPR = "FunctionExpression"
  ARROW_EXPR = "ArrowFunctionExpression"
  NEW_EXPR = "NewExpression"
  OTHER = "Other"


FUNCTION_KINDS = frozenset([NodeKind.FUNCTION_EXPR, NodeKind.ARROW_EXPR])


@dataclass(frozen=True)
class Span:
  """Source location of a node.

  Offsets are character offsets into the source; line is 1-based and
  column 0-based. Any of them may be unknown.
  """

  start: int | None = None
  end: int | None = None
  line: int | None = None
  column: int | None = None


@dataclass(frozen=True)
class Modifiers:
  """Declaration modifiers attached to classes and class members."""

  abstract: bool = False
  static: bool = False
  readonly: bool = False
  accessibility: str | None = None
  computed: bool = False


@dataclass(frozen=True, eq=False)
class SyntaxNode:
  """Immutable handle into a host-supplied syntax tree.

  Named accessors point at nodes that also appear in ``children``, which
  lists every child in source order. Nodes compare by identity.

  Accessors by kind:
    CLASS_DECL: ``id``, ``body`` (members), ``name``
    METHOD_DEF: ``name`` (key), ``method_kind``, ``value`` (function)
    PROPERTY_DEF: ``name`` (key), ``value`` (initializer)
    CALL_EXPR / NEW_EXPR: ``callee``, ``arguments``
    MEMBER_EXPR: ``receiver``, ``member``
    FUNCTION_EXPR / ARROW_EXPR: ``params``, ``body``
    IDENTIFIER: ``name``
  """

  kind: NodeKind
  name: str | None = None
  method_kind: str | None = None
  modifiers: Modifiers = field(default_factory=Modifiers)
  span: Span = field(default_factory=Span)
  id: "SyntaxNode | None" = None
  body: tuple["SyntaxNode", ...] = ()
  params: tuple["SyntaxNode", ...] = ()
  arguments: tuple["SyntaxNode", ...] = ()
  callee: "SyntaxNode | None" = None
  receiver: "SyntaxNode | None" = None
  member: "SyntaxNode | None" = None
  value: "SyntaxNode | None" = None
  children: tuple["SyntaxNode", ...] = ()

  def is_identifier(self, name: str | None = None) -> bool:
    """Check if this node is an identifier, optionally with a given name."""
    if self.kind != NodeKind.IDENTIFIER:
      return False
    return name is None or self.name == name

  def is_function(self) -> bool:
    """Check if this node is an inline function value."""
    return self.kind in FUNCTION_KINDS

  def require_callee(self) -> "SyntaxNode":
    """Return the callee of a call or new expression."""
    if self.callee is None:
      raise MalformedTreeError(f"{self.kind.value} node has no callee")
    return self.callee

  def require_member(self) -> "SyntaxNode":
    """Return the accessed property of a member expression."""
    if self.member is None or self.receiver is None:
      raise MalformedTreeError("MemberExpression node needs an object and a property")
    return self.member
