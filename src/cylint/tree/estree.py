"""Build syntax trees from ESTree JSON documents.

The documents are produced by an external parser such as
``@typescript-eslint/typescript-estree`` with ``loc`` and ``range``
enabled. Node types the rules never inspect are kept as OTHER nodes so
their descendants are still visited.
"""

import json
from pathlib import Path
from typing import Any

from cylint.tree.node import MalformedTreeError, Modifiers, NodeKind, Span, SyntaxNode


class TreeLoadError(Exception):
  """Tree document could not be read."""


_KIND_BY_TYPE: dict[str, NodeKind] = {
  "Program": NodeKind.PROGRAM,
  "ClassDeclaration": NodeKind.CLASS_DECL,
  "ClassBody": NodeKind.CLASS_BODY,
  "MethodDefinition": NodeKind.METHOD_DEF,
  "PropertyDefinition": NodeKind.PROPERTY_DEF,
  # Older parser releases
  "ClassProperty": NodeKind.PROPERTY_DEF,
  "CallExpression": NodeKind.CALL_EXPR,
  "MemberExpression": NodeKind.MEMBER_EXPR,
  "Identifier": NodeKind.IDENTIFIER,
  "FunctionExpression": NodeKind.FUNCTION_EXPR,
  "ArrowFunctionExpression": NodeKind.ARROW_EXPR,
  "NewExpression": NodeKind.NEW_EXPR,
}

# Keys holding location data or back references rather than child nodes
_SKIP_KEYS = frozenset(["type", "loc", "range", "start", "end", "parent", "tokens", "comments"])


def load_tree(path: Path) -> SyntaxNode:
  """Load an ESTree JSON file and build its syntax tree.

  Raises:
    TreeLoadError: If the file is missing, not valid JSON, or nested
      deeper than the JSON decoder allows.
    MalformedTreeError: If the document is not a well-formed tree.
  """
  try:
    text = path.read_text(encoding="utf-8")
  except OSError as e:
    raise TreeLoadError(f"Cannot read tree file {path}: {e.strerror or e}") from e

  try:
    document = json.loads(text)
  except json.JSONDecodeError as e:
    raise TreeLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e
  except RecursionError as e:
    raise TreeLoadError(f"Tree in {path} is nested too deeply to decode") from e

  return build_tree(document)


def build_tree(document: Any) -> SyntaxNode:
  """Build a SyntaxNode tree from a parsed ESTree document."""
  if not _is_node(document):
    raise MalformedTreeError("Tree document must be an object with a 'type' field")
  return _build(document)


def _is_node(value: Any) -> bool:
  return isinstance(value, dict) and isinstance(value.get("type"), str)


def _build(root: dict[str, Any]) -> SyntaxNode:
  """Build bottom-up with an explicit stack so deep documents do not recurse."""
  # Keyed by id(): every document dict stays alive until the build finishes
  built: dict[int, SyntaxNode] = {}
  stack: list[tuple[dict[str, Any], bool]] = [(root, False)]

  while stack:
    doc, ready = stack.pop()
    if id(doc) in built:
      continue
    if ready:
      built[id(doc)] = _make_node(doc, built)
      continue
    stack.append((doc, True))
    stack.extend((child, False) for child in _child_documents(doc))

  return built[id(root)]


def _child_documents(doc: dict[str, Any]) -> list[dict[str, Any]]:
  documents = []
  for key, value in doc.items():
    if key in _SKIP_KEYS or value is None:
      continue
    if _is_node(value):
      documents.append(value)
    elif isinstance(value, list):
      documents.extend(item for item in value if _is_node(item))
  return documents


def _make_node(doc: dict[str, Any], built: dict[int, SyntaxNode]) -> SyntaxNode:
  kind = _KIND_BY_TYPE.get(doc["type"], NodeKind.OTHER)

  fields: dict[str, SyntaxNode | tuple[SyntaxNode, ...]] = {}
  children: list[SyntaxNode] = []

  for key, value in doc.items():
    if key in _SKIP_KEYS or value is None:
      continue
    if _is_node(value):
      node = built[id(value)]
      fields[key] = node
      children.append(node)
    elif isinstance(value, list):
      nodes = tuple(built[id(item)] for item in value if _is_node(item))
      fields[key] = nodes
      children.extend(nodes)

  return SyntaxNode(
    kind=kind,
    name=_name_of(kind, doc, fields),
    method_kind=doc.get("kind") if kind == NodeKind.METHOD_DEF else None,
    modifiers=_modifiers_of(doc),
    span=_span_of(doc),
    id=_single(fields, "id"),
    body=_body_of(kind, fields),
    params=_many(fields, "params"),
    arguments=_arguments_of(kind, doc, fields),
    callee=_callee_of(kind, fields),
    receiver=_single(fields, "object"),
    member=_member_of(kind, fields),
    value=_single(fields, "value") or _single(fields, "initializer"),
    children=_source_order(children),
  )


def _single(fields: dict[str, Any], key: str) -> SyntaxNode | None:
  value = fields.get(key)
  return value if isinstance(value, SyntaxNode) else None


def _many(fields: dict[str, Any], key: str) -> tuple[SyntaxNode, ...]:
  value = fields.get(key)
  if isinstance(value, tuple):
    return value
  if isinstance(value, SyntaxNode):
    return (value,)
  return ()


def _name_of(kind: NodeKind, doc: dict[str, Any], fields: dict[str, Any]) -> str | None:
  if kind == NodeKind.IDENTIFIER:
    name = doc.get("name")
    if not isinstance(name, str):
      raise MalformedTreeError("Identifier node has no name")
    return name
  if kind == NodeKind.CLASS_DECL:
    class_id = _single(fields, "id")
    return class_id.name if class_id is not None and class_id.is_identifier() else None
  if kind in (NodeKind.METHOD_DEF, NodeKind.PROPERTY_DEF):
    key = _single(fields, "key")
    return key.name if key is not None and key.is_identifier() else None
  return None


def _body_of(kind: NodeKind, fields: dict[str, Any]) -> tuple[SyntaxNode, ...]:
  if kind == NodeKind.CLASS_DECL:
    class_body = _single(fields, "body")
    return class_body.body if class_body is not None else ()
  return _many(fields, "body")


def _arguments_of(
  kind: NodeKind,
  doc: dict[str, Any],
  fields: dict[str, Any],
) -> tuple[SyntaxNode, ...]:
  if kind in (NodeKind.CALL_EXPR, NodeKind.NEW_EXPR):
    if not isinstance(doc.get("arguments", []), list):
      raise MalformedTreeError(f"{doc['type']} arguments must be a list")
  return _many(fields, "arguments")


def _callee_of(kind: NodeKind, fields: dict[str, Any]) -> SyntaxNode | None:
  callee = _single(fields, "callee")
  if kind in (NodeKind.CALL_EXPR, NodeKind.NEW_EXPR) and callee is None:
    raise MalformedTreeError(f"{kind.value} node has no callee")
  return callee


def _member_of(kind: NodeKind, fields: dict[str, Any]) -> SyntaxNode | None:
  member = _single(fields, "property")
  if kind == NodeKind.MEMBER_EXPR and (member is None or _single(fields, "object") is None):
    raise MalformedTreeError("MemberExpression node needs an object and a property")
  return member


def _modifiers_of(doc: dict[str, Any]) -> Modifiers:
  accessibility = doc.get("accessibility")
  return Modifiers(
    abstract=doc.get("abstract") is True,
    static=doc.get("static") is True,
    readonly=doc.get("readonly") is True,
    accessibility=accessibility if isinstance(accessibility, str) else None,
    computed=doc.get("computed") is True,
  )


def _span_of(doc: dict[str, Any]) -> Span:
  start = end = line = column = None

  source_range = doc.get("range")
  if isinstance(source_range, list) and len(source_range) == 2:
    start, end = source_range
  else:
    if isinstance(doc.get("start"), int):
      start = doc["start"]
    if isinstance(doc.get("end"), int):
      end = doc["end"]

  loc = doc.get("loc")
  if isinstance(loc, dict) and isinstance(loc.get("start"), dict):
    line = loc["start"].get("line")
    column = loc["start"].get("column")

  return Span(start=start, end=end, line=line, column=column)


def _source_order(children: list[SyntaxNode]) -> tuple[SyntaxNode, ...]:
  """Order children by source offset when every child has one."""
  if all(child.span.start is not None for child in children):
    children = sorted(children, key=lambda child: child.span.start)
  return tuple(children)
