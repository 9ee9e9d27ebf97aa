# rxparse/rxc.py
"""rxc – rxparse CLI

Examples)
    $ python -m rxparse.rxc check "(a|b)*c" -D
    $ python -m rxparse.rxc check --input patterns.txt
    $ python -m rxparse.rxc tokens "a\\+b"
    $ python -m rxparse.rxc fmt "((a))|(b)c"

Commands
--------
- check  : parse each pattern and print a one-line summary
- tokens : dump the scanner's token stream
- fmt    : print the canonical form of each pattern

With -D/--debug, check also prints the AST to stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _patterns(args) -> List[str]:
    if args.pattern is not None:
        return [args.pattern]
    from .loader import load_patterns
    return load_patterns(args.input)


def _run(args, handler) -> int:
    """Apply `handler` to every pattern; stop at the first error."""
    from .errors import ParseError, format_error
    try:
        patterns = _patterns(args)
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    if getattr(args, "debug", False):
        _eprint("[DEBUG] patterns=%d" % len(patterns))

    for pat in patterns:
        try:
            handler(pat, args)
        except ParseError as e:
            _eprint("[SYNTAX ERROR]")
            _eprint(format_error(pat, e))
            return 2
        except Exception as e:
            _eprint("[ERROR]", type(e).__name__, str(e))
            return 2
    return 0

# ------------------------------
# commands
# ------------------------------

def _check_one(pat: str, args) -> None:
    from .parser import parse
    from .ast import node_count, depth
    node = parse(pat)
    if args.debug:
        _eprint(f"\n[AST] {pat!r}\n" + repr(node))
    print(f"[CHECK OK] {pat!r} nodes={node_count(node)} depth={depth(node)}")


def _tokens_one(pat: str, args) -> None:
    from .scan import scan
    for i, tok in enumerate(scan(pat)):
        print(f"{i:03d}: {tok.kind:<8} {tok.lexeme!r}  @{tok.pos}")


def _fmt_one(pat: str, args) -> None:
    from .parser import parse
    from .printer import to_pattern
    print(to_pattern(parse(pat)))


def cmd_check(args) -> int:
    return _run(args, _check_one)


def cmd_tokens(args) -> int:
    return _run(args, _tokens_one)


def cmd_fmt(args) -> int:
    return _run(args, _fmt_one)

# ------------------------------
# entry point
# ------------------------------

def _add_source(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("pattern", nargs="?", help="pattern text")
    src_group.add_argument("--input", help="file with one pattern per line")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="rxc", description="rxparse pattern parser CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="parse patterns and report AST size")
    _add_source(p_check)
    p_check.add_argument("-D", "--debug", action="store_true", help="print the AST to stderr")
    p_check.set_defaults(func=cmd_check)

    p_tokens = sub.add_parser("tokens", help="dump the token stream of each pattern")
    _add_source(p_tokens)
    p_tokens.set_defaults(func=cmd_tokens)

    p_fmt = sub.add_parser("fmt", help="print the canonical form of each pattern")
    _add_source(p_fmt)
    p_fmt.set_defaults(func=cmd_fmt)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
