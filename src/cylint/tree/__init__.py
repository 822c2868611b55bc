"""Syntax tree model, ESTree loading and traversal."""

from cylint.tree.dispatcher import Dispatcher
from cylint.tree.estree import TreeLoadError, build_tree, load_tree
from cylint.tree.node import MalformedTreeError, Modifiers, NodeKind, Span, SyntaxNode

__all__ = [
  "Dispatcher",
  "MalformedTreeError",
  "Modifiers",
  "NodeKind",
  "Span",
  "SyntaxNode",
  "TreeLoadError",
  "build_tree",
  "load_tree",
]
