"""Token types and Token dataclass for the bitwise lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the bitwise lexer can produce."""

    # Structure
    EOF = auto()

    # Literals
    LITERAL = auto()

    # Grouping
    LPAREN = auto()
    RPAREN = auto()

    # Binary operators
    LSHIFT = auto()         # <<
    RSHIFT = auto()         # >>
    AND = auto()            # &
    XOR = auto()            # ^
    OR = auto()             # |


# Binding strength of the binary operators; higher binds tighter.
# Parentheses are structural and deliberately absent.
PRECEDENCE: dict[TokenType, int] = {
    TokenType.OR: 1,
    TokenType.XOR: 2,
    TokenType.AND: 3,
    TokenType.LSHIFT: 4,
    TokenType.RSHIFT: 4,
}

BINARY_OPERATORS: frozenset[TokenType] = frozenset(PRECEDENCE)

# Single-character operator symbols
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "&": TokenType.AND,
    "|": TokenType.OR,
    "^": TokenType.XOR,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

SHIFT_TOKENS: dict[str, TokenType] = {
    "<": TokenType.LSHIFT,
    ">": TokenType.RSHIFT,
}

SYMBOLS: dict[TokenType, str] = {
    **{v: k for k, v in SINGLE_CHAR_TOKENS.items()},
    TokenType.LSHIFT: "<<",
    TokenType.RSHIFT: ">>",
}

# ASCII digit alphabet per radix
RADIX_DIGITS: dict[int, frozenset[str]] = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

# Prefix letter after a leading 0 -> radix
RADIX_PREFIXES: dict[str, int] = {
    "x": 16,
    "d": 10,
    "b": 2,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    Literal tokens carry their digits in ``value`` (without any prefix) and
    the radix they are written in. The digits are validated against the
    radix on construction, so later stages can trust them.
    """

    type: TokenType
    value: str = ""
    radix: int = 10
    position: int = 0

    def __post_init__(self) -> None:
        if self.type is not TokenType.LITERAL:
            return
        digits = RADIX_DIGITS.get(self.radix)
        if digits is None:
            raise ValueError(f"unsupported radix: {self.radix}")
        if not self.value:
            raise ValueError("literal token requires at least one digit")
        if not all(ch in digits for ch in self.value):
            raise ValueError(f"{self.value!r} is not a valid radix-{self.radix} literal")

    @property
    def is_operator(self) -> bool:
        return self.type in BINARY_OPERATORS

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.type]

    def __str__(self) -> str:
        if self.type is TokenType.LITERAL:
            if self.radix == 10 and self.value.startswith("0"):
                return "0d" + self.value
            return _LITERAL_PREFIXES[self.radix] + self.value
        if self.type is TokenType.EOF:
            return "<eof>"
        return SYMBOLS[self.type]

    def __repr__(self) -> str:
        if self.type is TokenType.EOF:
            return f"Token(EOF, {self.position})"
        if self.type is TokenType.LITERAL:
            return f"Token(LITERAL, {self.value!r}, radix={self.radix}, {self.position})"
        return f"Token({self.type.name}, {self.position})"


_LITERAL_PREFIXES: dict[int, str] = {2: "0b", 8: "0", 10: "", 16: "0x"}
