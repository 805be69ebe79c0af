"""bitwise lexer — cursor-driven tokenizer for bitwise queries."""

from bitwise.lexer.cursor import EOL, Cursor
from bitwise.lexer.tokens import Token, TokenType
from bitwise.lexer.lexer import Lexer, tokenize

__all__ = ["EOL", "Cursor", "Token", "TokenType", "Lexer", "tokenize"]
