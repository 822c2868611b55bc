"""Depth-first traversal with per-kind callbacks."""

from typing import Callable

from cylint.tree.node import MalformedTreeError, NodeKind, SyntaxNode

NodeCallback = Callable[[SyntaxNode], None]
EndCallback = Callable[[], None]

# Stack markers: visit a node, or run its exit callbacks.
_ENTER = 0
_EXIT = 1


class Dispatcher:
  """Walks one tree and fans node events out to registered callbacks.

  Enter callbacks for a node run, in registration order, before any of
  its children are visited; exit callbacks run after the last child.
  End callbacks run once after the whole tree has been visited.

  Example:
    dispatcher = Dispatcher()
    dispatcher.on_enter(NodeKind.CALL_EXPR, rule.check_call)
    dispatcher.on_end(rule.on_traversal_end)
    dispatcher.run(root)
  """

  def __init__(self) -> None:
    self._enter: dict[NodeKind, list[NodeCallback]] = {}
    self._exit: dict[NodeKind, list[NodeCallback]] = {}
    self._end: list[EndCallback] = []

  def on_enter(self, kind: NodeKind, callback: NodeCallback) -> None:
    self._enter.setdefault(kind, []).append(callback)

  def on_exit(self, kind: NodeKind, callback: NodeCallback) -> None:
    self._exit.setdefault(kind, []).append(callback)

  def on_end(self, callback: EndCallback) -> None:
    self._end.append(callback)

  def run(self, root: SyntaxNode) -> None:
    """Visit every node of ``root`` once, then fire the end callbacks.

    Raises:
      MalformedTreeError: If a node or child is not a SyntaxNode.
    """
    if not isinstance(root, SyntaxNode):
      raise MalformedTreeError(f"Tree root must be a SyntaxNode, got {type(root).__name__}")

    stack: list[tuple[int, SyntaxNode]] = [(_ENTER, root)]
    while stack:
      action, node = stack.pop()

      if action == _EXIT:
        for callback in self._exit.get(node.kind, ()):
          callback(node)
        continue

      for callback in self._enter.get(node.kind, ()):
        callback(node)

      stack.append((_EXIT, node))
      # Reversed so the first child is popped first.
      for child in reversed(self._children_of(node)):
        stack.append((_ENTER, child))

    for end_callback in self._end:
      end_callback()

  def _children_of(self, node: SyntaxNode) -> tuple[SyntaxNode, ...]:
    children = node.children
    if not isinstance(children, tuple):
      raise MalformedTreeError(f"{node.kind.value} node children must be a tuple")
    for child in children:
      if not isinstance(child, SyntaxNode):
        raise MalformedTreeError(
          f"{node.kind.value} node has a child of type {type(child).__name__}"
        )
    return children
