# rxparse/scan.py
"""Character-level scanner for patterns.

Every token covers exactly one pattern character, except ESCAPE which covers
the backslash and the character after it. Nothing is rejected here; the
parser decides what an escape or a stray parenthesis means.
"""

from __future__ import annotations
import regex as re
from dataclasses import dataclass
from typing import List

# ---- token kinds ----
_TOKEN_SPEC = [
    ("ESCAPE",   r"\\."),
    ("DANGLING", r"\\\Z"),
    ("LPAREN",   r"\("),
    ("RPAREN",   r"\)"),
    ("OR",       r"\|"),
    ("PLUS",     r"\+"),
    ("STAR",     r"\*"),
    ("QMARK",    r"\?"),
    ("CHAR",     r"."),
]
MASTER_RE = re.compile("|".join(f"(?P<{n}>{p})" for n, p in _TOKEN_SPEC), re.S)

# quantifier token kind -> symbol
POSTFIX_KINDS = {
    "PLUS": "+",
    "STAR": "*",
    "QMARK": "?",
}

@dataclass(frozen=True)
class Tok:
    kind: str
    lexeme: str
    pos: int     # index of the first character of the lexeme


def scan(pattern: str) -> List[Tok]:
    toks: List[Tok] = []
    i = 0
    n = len(pattern)
    while i < n:
        m = MASTER_RE.match(pattern, i)
        assert m is not None, f"no token at {i}"  # CHAR matches anything
        toks.append(Tok(m.lastgroup or "", m.group(0), i))
        i = m.end()
    return toks
