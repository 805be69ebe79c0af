"""bitwise precedence resolver — infix to postfix conversion."""

from bitwise.parser.postfix import to_postfix

__all__ = ["to_postfix"]
