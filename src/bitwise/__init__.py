"""bitwise — evaluate bitwise expressions over unsigned 64-bit integers.

Pipeline:
    - lexer: query text -> tokens (multi-radix literals, operators)
    - parser: tokens -> postfix order (shunting-yard)
    - evaluator: postfix tokens -> unsigned 64-bit result
"""

from bitwise.errors import (
    CursorPositionError,
    EvaluationError,
    LexerError,
    NumberFormatError,
    ParseError,
    ShiftOverflowError,
    StackImbalanceError,
)
from bitwise.evaluator import evaluate

__version__ = "0.1.0"

__all__ = [
    "CursorPositionError",
    "EvaluationError",
    "LexerError",
    "NumberFormatError",
    "ParseError",
    "ShiftOverflowError",
    "StackImbalanceError",
    "evaluate",
]
