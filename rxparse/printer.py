# rxparse/printer.py
"""Canonical printer: AST -> pattern text.

The output re-parses to an equal AST. Parentheses are emitted only where the
tree shape needs them:
  - a quantified Seq/Or       -> (ab)*  (a|b)?
  - a Seq/Or inside a Seq     -> (a|b)c  (ab)c
  - an Or as left operand     -> (a|b)|c
Recursive, so very deep trees are bounded by sys.getrecursionlimit().
"""

from __future__ import annotations
from .ast import Node, Char, Plus, Star, Question, Or, Seq

# metacharacters that must be escaped to stay literal
_META = frozenset("\\()|+*")

_SUFFIX = {Plus: "+", Star: "*", Question: "?"}


def _char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"Char must hold exactly one character, got {ch!r}")
    if ch == "?":
        # '?' is not escapable, so no pattern produces a literal '?'
        raise ValueError("literal '?' has no pattern representation")
    if ch in _META:
        return "\\" + ch
    return ch


def _grouped(node: Node) -> str:
    if isinstance(node, (Or, Seq)):
        return f"({to_pattern(node)})"
    return to_pattern(node)


def to_pattern(node: Node) -> str:
    if isinstance(node, Char):
        return _char(node.ch)
    if isinstance(node, (Plus, Star, Question)):
        return _grouped(node.node) + _SUFFIX[type(node)]
    if isinstance(node, Or):
        left = _grouped(node.left) if isinstance(node.left, Or) else to_pattern(node.left)
        return f"{left}|{to_pattern(node.right)}"
    if isinstance(node, Seq):
        return "".join(_grouped(it) for it in node.items)
    raise AssertionError(f"unknown node: {node!r}")
