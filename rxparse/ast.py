# rxparse/ast.py
"""Pattern AST

- Char: one literal character
- Plus/Star/Question: postfix quantifiers (+, *, ?) over one child
- Or: binary alternation, right-leaning when folded from `a|b|c`
- Seq: two or more children in match order
"""

from __future__     import annotations
from dataclasses    import dataclass
from typing         import List, Tuple, Union

# ---- node definitions ----

@dataclass(frozen=True)
class Char:
    ch: str

@dataclass(frozen=True)
class Plus:
    node: "Node"

@dataclass(frozen=True)
class Star:
    node: "Node"

@dataclass(frozen=True)
class Question:
    node: "Node"

@dataclass(frozen=True)
class Or:
    left: "Node"
    right: "Node"

@dataclass(frozen=True)
class Seq:
    items: Tuple["Node", ...]

Node = Union[Char, Plus, Star, Question, Or, Seq]

# quantifier symbol -> node class
POSTFIX = {
    "+": Plus,
    "*": Star,
    "?": Question,
}


def children(node: Node) -> Tuple[Node, ...]:
    """Direct children of `node`, left to right."""
    if isinstance(node, Char):
        return ()
    if isinstance(node, (Plus, Star, Question)):
        return (node.node,)
    if isinstance(node, Or):
        return (node.left, node.right)
    if isinstance(node, Seq):
        return node.items
    raise AssertionError(f"unknown node: {node!r}")


def node_count(node: Node) -> int:
    n = 0
    work: List[Node] = [node]
    while work:
        cur = work.pop()
        n += 1
        work.extend(children(cur))
    return n


def depth(node: Node) -> int:
    """Height of the tree; a lone Char has depth 1."""
    best = 0
    work: List[Tuple[Node, int]] = [(node, 1)]
    while work:
        cur, d = work.pop()
        if d > best:
            best = d
        for c in children(cur):
            work.append((c, d + 1))
    return best
