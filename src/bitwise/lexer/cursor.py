"""Scanning cursor over a single query string."""

from __future__ import annotations

from bitwise.errors import CursorPositionError

# Returned by `Cursor.get` once the input is exhausted. It is not part of
# any literal or operator alphabet.
EOL = ""


class Cursor:
    """A forward/backward read position over an immutable string.

    The position always stays within ``[0, len(text)]``. A cursor is
    single-use: the lexer creates a fresh one for every scan.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._pos

    def get(self) -> str:
        """Return the current character and advance, or `EOL` at the end."""
        if self.at_end():
            return EOL
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def unget(self) -> None:
        """Step back one character."""
        if self._pos == 0:
            raise CursorPositionError(self._pos)
        self._pos -= 1

    def at_end(self) -> bool:
        return self._pos >= len(self._text)
