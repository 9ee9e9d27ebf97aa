import pickle

import pytest

from rxparse.errors import (
    ParseError, InvalidEscape, NoPrev, NoRightParen, Empty, NoLeftParen,
    DanglingEscape, format_error,
)
from rxparse.parser import parse


def test_messages():
    assert str(InvalidEscape(1, "q")) == "ParseError: Invalid escape sequence at position 1: q"
    assert str(NoPrev(0)) == "ParseError: No previous character at position 0"
    assert str(NoRightParen()) == "ParseError: No right parenthesis"
    assert str(Empty()) == "ParseError: Empty expression"
    assert str(NoLeftParen(4)) == "ParseError: No left parenthesis at position 4"
    assert str(DanglingEscape(2)) == "ParseError: Dangling escape at position 2"


def test_all_are_syntax_errors():
    for err in (InvalidEscape(0, "x"), NoPrev(0), NoRightParen(), Empty(),
                NoLeftParen(0), DanglingEscape(0)):
        assert isinstance(err, ParseError)
        assert isinstance(err, SyntaxError)


def test_equality_by_class_and_fields():
    assert InvalidEscape(1, "q") == InvalidEscape(1, "q")
    assert InvalidEscape(1, "q") != InvalidEscape(2, "q")
    assert NoPrev(3) != NoLeftParen(3)
    assert Empty() == Empty()
    assert len({NoPrev(1), NoPrev(1), NoPrev(2)}) == 2


def test_positionless_errors():
    assert NoRightParen().pos is None
    assert Empty().pos is None


def test_repr():
    assert repr(InvalidEscape(1, "q")) == "InvalidEscape(1, 'q')"
    assert repr(NoRightParen()) == "NoRightParen()"


def test_pickle_round_trip():
    err = InvalidEscape(5, "d")
    assert pickle.loads(pickle.dumps(err)) == err
    assert pickle.loads(pickle.dumps(Empty())) == Empty()


def test_format_error_caret_under_fault():
    pat = "ab\\qc"
    with pytest.raises(ParseError) as ei:
        parse(pat)
    assert format_error(pat, ei.value) == (
        "ParseError: Invalid escape sequence at position 3: q\n"
        "ab\\qc\n"
        "   ^"
    )


def test_format_error_positionless_points_past_end():
    assert format_error("(ab", NoRightParen()) == (
        "ParseError: No right parenthesis\n"
        "(ab\n"
        "   ^"
    )


def test_format_error_multiline_pattern():
    pat = "ab\n|*c"
    with pytest.raises(NoPrev) as ei:
        parse(pat)
    assert ei.value == NoPrev(4)
    assert format_error(pat, ei.value) == (
        "ParseError: No previous character at position 4\n"
        "|*c\n"
        " ^"
    )
