"""rxparse: regular-expression pattern parser.

This package provides:
- AST nodes for the pattern language (Char, Plus, Star, Question, Or, Seq)
- A stack-based parser from pattern text to AST, with positioned errors
- A canonical printer from AST back to pattern text

Compiling the AST into an automaton is left to the caller.
"""

from .ast import (
    Char, Plus, Star, Question, Or, Seq, Node, node_count, depth,
)
from .errors import (
    ParseError, InvalidEscape, NoPrev, NoRightParen, Empty, NoLeftParen,
    DanglingEscape, format_error,
)
from .scan import Tok, scan
from .parser import parse, try_parse
from .printer import to_pattern

__version__ = "0.1.0"
