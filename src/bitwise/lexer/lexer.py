"""bitwise lexer — hand-written tokenizer for single-line bitwise queries.

Design decisions:
- Spaces and tabs between tokens are insignificant.
- Literals are recognized by prefix: 0x (hex), 0d (decimal), 0b (binary),
  0 followed by an octal digit (octal), 1-9 (decimal).
- One character of lookahead is emulated by reading past a literal and
  pushing the extra character back onto the cursor.
- The token list always ends with exactly one EOF token.
"""

from __future__ import annotations

import logging

from bitwise.errors import LexerError
from bitwise.lexer.cursor import EOL, Cursor
from bitwise.lexer.tokens import (
    RADIX_DIGITS,
    RADIX_PREFIXES,
    SHIFT_TOKENS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Tokenizes a bitwise query into a list of `Token` objects.

    Usage::

        lexer = Lexer("(0xab & 123) >> 2")
        tokens = lexer.tokenize()
    """

    WHITESPACE = frozenset(" \t")

    def __init__(self, source: str) -> None:
        self.source = source
        self.cursor = Cursor(source)
        self.tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.cursor = Cursor(self.source)
        self.tokens = []

        while True:
            start = self.cursor.position
            ch = self.cursor.get()

            if ch == EOL:
                self.tokens.append(Token(TokenType.EOF, position=start))
                break
            if ch in self.WHITESPACE:
                continue
            self._scan_token(ch, start)

        logger.debug("tokenized %r into %s", self.source, self.tokens)
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self, ch: str, start: int) -> None:
        """Scan a single token whose first character has been consumed."""
        if ch == "0":
            self._scan_prefixed_literal(start)
            return

        if ch in RADIX_DIGITS[10]:
            self._scan_literal(ch, 10, start)
            return

        if ch in SINGLE_CHAR_TOKENS:
            self.tokens.append(Token(SINGLE_CHAR_TOKENS[ch], ch, position=start))
            return

        if ch in SHIFT_TOKENS:
            self._scan_shift(ch, start)
            return

        raise LexerError(f"unexpected character: {ch}", start)

    def _scan_prefixed_literal(self, start: int) -> None:
        """Scan a literal that starts with ``0``: 0x.., 0d.., 0b.. or octal."""
        prefix = self.cursor.get()

        if prefix in RADIX_DIGITS[8]:
            self._scan_literal(prefix, 8, start)
            return

        radix = RADIX_PREFIXES.get(prefix)
        if radix is None:
            raise LexerError(f'"0{prefix}" is not supported', start)

        digits = self._read_run("", radix)
        if not digits:
            raise LexerError("empty value", start)

        self.tokens.append(Token(TokenType.LITERAL, digits, radix, start))

    def _scan_literal(self, first: str, radix: int, start: int) -> None:
        """Scan an unprefixed literal whose first digit has been consumed."""
        digits = self._read_run(first, radix)
        self.tokens.append(Token(TokenType.LITERAL, digits, radix, start))

    def _scan_shift(self, first: str, start: int) -> None:
        """Scan ``<<`` or ``>>``; the second character must repeat the first."""
        second = self.cursor.get()
        if second != first:
            raise LexerError(f"unexpected token: {first}{second}", start)
        self.tokens.append(Token(SHIFT_TOKENS[first], first * 2, position=start))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read_run(self, first: str, radix: int) -> str:
        """Consume the longest run of digits valid in *radix*.

        The first character that does not belong to the run is pushed back
        so it is scanned again as the start of the next token.
        """
        alphabet = RADIX_DIGITS[radix]
        chars: list[str] = [first] if first else []

        while True:
            ch = self.cursor.get()
            if ch == EOL:
                break
            if ch not in alphabet:
                self.cursor.unget()
                break
            chars.append(ch)

        return "".join(chars)


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* with a fresh `Lexer`."""
    return Lexer(source).tokenize()
