# rxparse/errors.py
"""Parse errors

Every malformed pattern is reported as a ParseError (a SyntaxError).
`pos` is the zero-based character index where the fault was detected,
or None when the fault belongs to the pattern as a whole.
"""

from __future__ import annotations
from typing import Optional, Tuple


class ParseError(SyntaxError):
    fields: Tuple[str, ...] = ()

    def __init__(self, pos: Optional[int] = None):
        self.pos = pos
        super().__init__(self.describe())

    def describe(self) -> str:
        raise NotImplementedError

    def _values(self) -> tuple:
        return tuple(getattr(self, f) for f in self.fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._values())

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._values())
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return f"ParseError: {self.describe()}"

    def __reduce__(self):
        return (type(self), self._values())


class InvalidEscape(ParseError):
    """`ch` follows a backslash but is not escapable. `pos` points at `ch`."""
    fields = ("pos", "ch")

    def __init__(self, pos: int, ch: str):
        self.ch = ch
        super().__init__(pos)

    def describe(self) -> str:
        return f"Invalid escape sequence at position {self.pos}: {self.ch}"


class NoPrev(ParseError):
    """Quantifier with nothing before it in the current branch."""
    fields = ("pos",)

    def __init__(self, pos: int):
        super().__init__(pos)

    def describe(self) -> str:
        return f"No previous character at position {self.pos}"


class NoRightParen(ParseError):
    def __init__(self):
        super().__init__(None)

    def describe(self) -> str:
        return "No right parenthesis"


class Empty(ParseError):
    """Pattern, group or alternation branch without a single atom."""
    def __init__(self):
        super().__init__(None)

    def describe(self) -> str:
        return "Empty expression"


class NoLeftParen(ParseError):
    fields = ("pos",)

    def __init__(self, pos: int):
        super().__init__(pos)

    def describe(self) -> str:
        return f"No left parenthesis at position {self.pos}"


class DanglingEscape(ParseError):
    """Backslash as the last character. `pos` points at the backslash."""
    fields = ("pos",)

    def __init__(self, pos: int):
        super().__init__(pos)

    def describe(self) -> str:
        return f"Dangling escape at position {self.pos}"


# ---------- error rendering ----------

def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """[start, end) of the line holding `pos`."""
    start = src.rfind("\n", 0, pos)
    if start == -1:
        start = 0
    else:
        start += 1
    end = src.find("\n", pos)
    if end == -1:
        end = len(src)
    return start, end


def snippet_caret_at_pos(src: str, pos: int) -> str:
    start, end = _line_bounds(src, pos)
    line_text = src[start:end]
    caret = " " * (pos - start) + "^"
    return f"{line_text}\n{caret}"


def format_error(pattern: str, err: ParseError) -> str:
    """Message plus the offending pattern line with a caret under the fault.
    Position-less errors put the caret just past the end of the pattern."""
    pos = err.pos if err.pos is not None else len(pattern)
    return f"{err}\n{snippet_caret_at_pos(pattern, pos)}"
