"""Error hierarchy shared by every stage of the bitwise pipeline.

All failures raised by the lexer, the precedence resolver and the evaluator
derive from `EvaluationError`, so callers can handle a query with a single
``except`` clause and still inspect the specific kind when they need to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bitwise.lexer.tokens import Token


class EvaluationError(Exception):
    """Base class for every error raised while evaluating a query."""


class LexerError(EvaluationError):
    """Raised on lexical errors with the offset of the offending character."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Invalid query: {message} (position {position})")


class CursorPositionError(EvaluationError):
    """Raised when the cursor is moved back past the start of the input."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"cursor cannot go back ahead of the leader (position {position})")


class ParseError(EvaluationError):
    """Raised when parentheses do not pair up."""

    def __init__(self, message: str, token: Token | None = None):
        self.message = message
        self.token = token
        if token is None:
            super().__init__(f"Invalid query: {message}")
        else:
            super().__init__(f"Invalid query: {message} (position {token.position})")


class NumberFormatError(EvaluationError):
    """Raised when a literal does not fit in 64 bits or its digits are invalid."""

    def __init__(self, message: str, token: Token):
        self.token = token
        self.radix = token.radix
        self.digits = token.value
        super().__init__(f"{message}: {token.value!r} (radix {token.radix})")


class ShiftOverflowError(EvaluationError):
    """Raised when a shift amount is at or beyond the operand width."""

    def __init__(self, amount: int, width: int):
        self.amount = amount
        self.width = width
        super().__init__(f"shift amount {amount} is out of range for a {width}-bit value")


class StackImbalanceError(EvaluationError):
    """Raised when the value stack does not hold the expected number of operands."""

    def __init__(self, found: int, message: str | None = None):
        self.found = found
        super().__init__(message or f"value stack must hold exactly 1 value, got {found}")
