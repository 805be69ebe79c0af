"""Stack evaluation of postfix token lists and the `evaluate` entry point.

Values are unsigned 64-bit integers. Python ints are unbounded, so every
result is kept inside ``[0, U64_MAX]`` explicitly:

- literals above ``U64_MAX`` are rejected,
- ``<<`` drops the bits shifted past bit 63, like a native 64-bit shift,
- shift amounts of ``WORD_BITS`` or more are rejected instead of wrapping.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable

from bitwise.errors import NumberFormatError, ShiftOverflowError, StackImbalanceError
from bitwise.lexer.lexer import Lexer
from bitwise.lexer.tokens import Token, TokenType
from bitwise.parser.postfix import to_postfix

logger = logging.getLogger(__name__)

WORD_BITS = 64
U64_MAX = (1 << WORD_BITS) - 1


def _shift_left(value: int, amount: int) -> int:
    _check_shift(amount)
    return (value << amount) & U64_MAX


def _shift_right(value: int, amount: int) -> int:
    _check_shift(amount)
    return value >> amount


def _check_shift(amount: int) -> None:
    if amount >= WORD_BITS:
        raise ShiftOverflowError(amount, WORD_BITS)


OPERATIONS: dict[TokenType, Callable[[int, int], int]] = {
    TokenType.AND: operator.and_,
    TokenType.XOR: operator.xor,
    TokenType.OR: operator.or_,
    TokenType.LSHIFT: _shift_left,
    TokenType.RSHIFT: _shift_right,
}


def literal_value(token: Token) -> int:
    """Convert a literal token to its unsigned 64-bit value."""
    try:
        value = int(token.value, token.radix)
    except ValueError as e:
        raise NumberFormatError("invalid digit found in literal", token) from e
    if value > U64_MAX:
        raise NumberFormatError("number too large to fit in 64 bits", token)
    return value


def evaluate_postfix(tokens: list[Token]) -> int:
    """Evaluate a postfix token list and return the single resulting value.

    Each binary operator pops ``v1`` (the most recent value) and then ``v2``
    and pushes ``v2 OP v1``. Parentheses are ignored and an EOF token ends
    the evaluation early.

    Raises:
        NumberFormatError: a literal does not fit in 64 bits.
        ShiftOverflowError: a shift amount is 64 or more.
        StackImbalanceError: an operator is missing operands, or more than
            one value is left when the input is exhausted.
    """
    stack: list[int] = []

    for token in tokens:
        if token.type is TokenType.EOF:
            break
        if token.type is TokenType.LITERAL:
            stack.append(literal_value(token))
        elif token.type in (TokenType.LPAREN, TokenType.RPAREN):
            continue
        else:
            if len(stack) < 2:
                raise StackImbalanceError(
                    len(stack),
                    f"operator {token} at position {token.position} needs 2 operands, "
                    f"got {len(stack)}",
                )
            v1 = stack.pop()
            v2 = stack.pop()
            stack.append(OPERATIONS[token.type](v2, v1))

    if len(stack) != 1:
        raise StackImbalanceError(len(stack))

    return stack[0]


def evaluate(query: str) -> int | None:
    """Evaluate a bitwise query string.

    Returns ``None`` when the query is empty or holds only whitespace, which
    means there is nothing to compute. Any other failure is raised as an
    `EvaluationError` subclass.
    """
    if all(ch in Lexer.WHITESPACE for ch in query):
        return None

    tokens = Lexer(query).tokenize()
    result = evaluate_postfix(to_postfix(tokens))
    logger.debug("%r evaluated to %d", query, result)
    return result
