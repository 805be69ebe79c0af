"""Precedence resolver: shunting-yard conversion from infix to postfix.

Operator ranks (higher binds tighter)::

    |  <  ^  <  &  <  << == >>

Operators of equal rank are left-associative: a pending operator whose rank
is greater than or equal to the incoming one is flushed before the incoming
operator is pushed, so ``a & b & c`` becomes ``a b & c &``.
"""

from __future__ import annotations

import logging

from bitwise.errors import ParseError
from bitwise.lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)

UNBALANCED_PARENS = "incorrect pair of parentheses"


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder an infix token list into postfix (Reverse Polish) order.

    Parentheses never reach the output. Consumption stops at the first EOF
    token, which is not copied either.

    Raises:
        ParseError: a ``)`` without a matching ``(``, or a ``(`` that is
            never closed.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.type is TokenType.EOF:
            break

        if token.type is TokenType.LITERAL:
            output.append(token)
        elif token.type is TokenType.LPAREN:
            stack.append(token)
        elif token.type is TokenType.RPAREN:
            _close_group(token, stack, output)
        else:
            while stack and stack[-1].is_operator and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)

    while stack:
        pending = stack.pop()
        if pending.type is TokenType.LPAREN:
            raise ParseError(UNBALANCED_PARENS, pending)
        output.append(pending)

    logger.debug("postfix order: %s", " ".join(str(t) for t in output))
    return output


def _close_group(rparen: Token, stack: list[Token], output: list[Token]) -> None:
    """Pop operators to the output until the matching ``(`` is discarded."""
    while stack:
        pending = stack.pop()
        if pending.type is TokenType.LPAREN:
            return
        output.append(pending)
    raise ParseError(UNBALANCED_PARENS, rparen)
