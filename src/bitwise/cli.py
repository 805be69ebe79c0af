"""bitwise CLI entry point.

Usage:
    bitwise <query>                 Evaluate and show the result in hex, dec, oct and bin
    bitwise --json <query>          Same, as a script-filter JSON document
    bitwise tokenize <query>        Display the token stream (debug)
    bitwise postfix <query>         Display the postfix token order (debug)

Options:
    -v, --verbose                   Log pipeline stages to stderr
    -h, --help                      Show this message
    --version                       Show the version
"""

from __future__ import annotations

import json
import logging
import sys

from bitwise.errors import EvaluationError
from bitwise.evaluator.evaluator import evaluate
from bitwise.lexer.lexer import Lexer
from bitwise.parser.postfix import to_postfix

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# (subtitle, format spec) for each rendering of a result
RENDERINGS: list[tuple[str, str]] = [
    ("Hexadecimal", "x"),
    ("Decimal", "d"),
    ("Octal", "o"),
    ("Binary", "b"),
]


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    verbose = False
    as_json = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        flag = args.pop(0)
        if flag in ("--help", "-h"):
            print(__doc__.strip())
            return 0
        if flag == "--version":
            from bitwise import __version__
            print(f"bitwise {__version__}")
            return 0
        if flag in ("-v", "--verbose"):
            verbose = True
        elif flag == "--json":
            as_json = True
        else:
            print(f"Error: unknown option '{flag}'", file=sys.stderr)
            print(__doc__.strip(), file=sys.stderr)
            return 1

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if not args:
        print(__doc__.strip())
        return 1

    command = args[0]
    if command == "tokenize":
        return _cmd_tokenize(" ".join(args[1:]))
    elif command == "postfix":
        return _cmd_postfix(" ".join(args[1:]))
    else:
        return _cmd_evaluate(" ".join(args), as_json)


def _cmd_evaluate(query: str, as_json: bool) -> int:
    """Evaluate the query and print every rendering of the result."""
    try:
        result = evaluate(query)
    except EvaluationError as e:
        _print_error(str(e), as_json)
        return 1

    if result is None:
        logger.debug("empty query, nothing to compute")
        return 0

    if as_json:
        print(json.dumps(build_script_filter(result)))
    else:
        for subtitle, value in render(result):
            print(f"{subtitle:<12} {value}")
    return 0


def _cmd_tokenize(query: str) -> int:
    """Display the token stream."""
    try:
        tokens = Lexer(query).tokenize()
    except EvaluationError as e:
        _print_error(str(e), False)
        return 1

    for tok in tokens:
        print(repr(tok))
    return 0


def _cmd_postfix(query: str) -> int:
    """Display the tokens in postfix order."""
    try:
        postfix = to_postfix(Lexer(query).tokenize())
    except EvaluationError as e:
        _print_error(str(e), False)
        return 1

    print(" ".join(str(tok) for tok in postfix))
    return 0


def render(value: int) -> list[tuple[str, str]]:
    """Return ``(subtitle, text)`` pairs for each base a result is shown in."""
    return [(subtitle, format(value, spec)) for subtitle, spec in RENDERINGS]


def build_script_filter(value: int) -> dict:
    """Build the launcher script-filter document for a result."""
    return {"items": [_item(text, subtitle) for subtitle, text in render(value)]}


def _item(title: str, subtitle: str) -> dict:
    return {
        "title": title,
        "subtitle": subtitle,
        "arg": title,
        "icon": {"path": ""},
    }


def _print_error(message: str, as_json: bool) -> None:
    print(f"Error: {message}", file=sys.stderr)
    if as_json:
        print(json.dumps({"items": [_item(message, "Error")]}))


if __name__ == "__main__":
    sys.exit(main())
