# rxparse/parser.py
"""Pattern parser: text in, AST out.

Grammar:
    expr       := branch ('|' branch)*
    branch     := quantified*
    quantified := atom ('+' | '*' | '?')*
    atom       := CHAR | '\\' ESC | '(' expr ')'

Groups are tracked with an explicit stack of (sequence, alternatives) pairs
instead of recursion, so nesting depth is limited only by memory.
Positions are character indices into the pattern string.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from .ast import Node, Char, Or, Seq, POSTFIX
from .errors import (
    ParseError, InvalidEscape, NoPrev, NoRightParen, Empty, NoLeftParen,
    DanglingEscape,
)
from .scan import scan, POSTFIX_KINDS

# characters allowed after a backslash
ESCAPABLE = frozenset("\\()|+*_")


def parse_escape(pos: int, ch: str) -> Char:
    """`ch` follows a backslash; `pos` is the index of `ch`."""
    if ch in ESCAPABLE:
        return Char(ch)
    raise InvalidEscape(pos, ch)


def fold_or(alts: List[Node]) -> Optional[Node]:
    """[a, b, c, d] -> Or(a, Or(b, Or(c, d))). The input list is left untouched."""
    if len(alts) > 1:
        work = list(alts)
        node = work.pop()
        work.reverse()
        for a in work:
            node = Or(a, node)
        return node
    return alts[0] if alts else None


def fold_seq(items: List[Node]) -> Node:
    if not items:
        raise Empty()
    if len(items) == 1:
        return items[0]
    return Seq(tuple(items))


def apply_postfix(seq: List[Node], sym: str, pos: int) -> None:
    """Wrap the last atom of `seq` in the quantifier `sym` (in place)."""
    if not seq:
        raise NoPrev(pos)
    seq.append(POSTFIX[sym](seq.pop()))


def _close_branches(seq: List[Node], alts: List[Node]) -> Node:
    alts.append(fold_seq(seq))
    node = fold_or(alts)
    assert node is not None
    return node


def parse(pattern: str) -> Node:
    """Parse `pattern` into an AST. Raises a ParseError subclass on the first fault."""
    seq: List[Node] = []
    alts: List[Node] = []
    stack: List[Tuple[List[Node], List[Node]]] = []

    for tok in scan(pattern):
        kind = tok.kind
        if kind == "ESCAPE":
            seq.append(parse_escape(tok.pos + 1, tok.lexeme[1]))
        elif kind == "DANGLING":
            raise DanglingEscape(tok.pos)
        elif kind == "LPAREN":
            stack.append((seq, alts))
            seq, alts = [], []
        elif kind == "RPAREN":
            if not stack:
                raise NoLeftParen(tok.pos)
            group = _close_branches(seq, alts)
            seq, alts = stack.pop()
            seq.append(group)
        elif kind == "OR":
            alts.append(fold_seq(seq))
            seq = []
        elif kind in POSTFIX_KINDS:
            apply_postfix(seq, POSTFIX_KINDS[kind], tok.pos)
        else:
            seq.append(Char(tok.lexeme))

    if stack:
        raise NoRightParen()
    return _close_branches(seq, alts)


def try_parse(pattern: str) -> Tuple[Optional[Node], Optional[ParseError]]:
    """Like parse(), but hands the error back instead of raising it."""
    try:
        return parse(pattern), None
    except ParseError as e:
        return None, e
