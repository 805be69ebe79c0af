"""Tests for the bitwise lexer/tokenizer."""

import pytest

from bitwise.errors import LexerError
from bitwise.lexer.lexer import Lexer, tokenize
from bitwise.lexer.tokens import Token, TokenType


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def token_types(source: str) -> list[TokenType]:
    """Return just the token types, including the trailing EOF."""
    return [t.type for t in Lexer(source).tokenize()]


def literals(source: str) -> list[tuple[str, int]]:
    """Return (digits, radix) pairs for every literal token."""
    return [(t.value, t.radix) for t in Lexer(source).tokenize() if t.type == TokenType.LITERAL]


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

class TestLiterals:
    def test_empty_source(self):
        tokens = Lexer("").tokenize()
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_decimal(self):
        tokens = Lexer("123").tokenize()
        assert tokens == [
            Token(TokenType.LITERAL, "123", 10, 0),
            Token(TokenType.EOF, position=3),
        ]

    def test_hexadecimal(self):
        assert literals("0x1ac") == [("1ac", 16)]

    def test_hexadecimal_upper_case_digits(self):
        assert literals("0xDeadBEEF") == [("DeadBEEF", 16)]

    def test_octal(self):
        assert literals("0456") == [("456", 8)]

    def test_octal_zero(self):
        assert literals("00") == [("0", 8)]

    def test_binary(self):
        assert literals("0b101") == [("101", 2)]

    def test_prefixed_decimal(self):
        assert literals("0d789") == [("789", 10)]

    def test_prefixed_decimal_keeps_leading_zeros(self):
        assert literals("0d0012") == [("0012", 10)]

    def test_mixed_radix_expression(self):
        source = "(0xab & 123) >> 2 | 0b11001010 & 0456 ^ 0d789"
        assert literals(source) == [
            ("ab", 16),
            ("123", 10),
            ("2", 10),
            ("11001010", 2),
            ("456", 8),
            ("789", 10),
        ]


# ---------------------------------------------------------------------------
# Operators and whitespace
# ---------------------------------------------------------------------------

class TestOperators:
    def test_single_char_operators(self):
        assert token_types("& | ^ ( )") == [
            TokenType.AND,
            TokenType.OR,
            TokenType.XOR,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.EOF,
        ]

    def test_shift_operators(self):
        assert token_types("<< >>") == [TokenType.LSHIFT, TokenType.RSHIFT, TokenType.EOF]

    def test_grouped_expression(self):
        assert token_types("(123 & 456) >> 2") == [
            TokenType.LPAREN,
            TokenType.LITERAL,
            TokenType.AND,
            TokenType.LITERAL,
            TokenType.RPAREN,
            TokenType.RSHIFT,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_no_whitespace_needed(self):
        assert token_types("12&3") == [
            TokenType.LITERAL,
            TokenType.AND,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_tabs_are_skipped(self):
        assert token_types("1\t|\t2") == [
            TokenType.LITERAL,
            TokenType.OR,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_positions(self):
        tokens = Lexer("1 << 0x2").tokenize()
        assert [t.position for t in tokens] == [0, 2, 5, 8]

    def test_eof_is_last_and_unique(self):
        tokens = Lexer("1 | 2 ").tokenize()
        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1


# ---------------------------------------------------------------------------
# Lookahead pushback
# ---------------------------------------------------------------------------

class TestPushback:
    def test_digit_outside_radix_starts_next_token(self):
        tokens = Lexer("0b102").tokenize()
        assert tokens[:2] == [
            Token(TokenType.LITERAL, "10", 2, 0),
            Token(TokenType.LITERAL, "2", 10, 4),
        ]

    def test_operator_after_literal_is_rescanned(self):
        assert token_types("0x1f|7") == [
            TokenType.LITERAL,
            TokenType.OR,
            TokenType.LITERAL,
            TokenType.EOF,
        ]

    def test_octal_stops_at_eight(self):
        assert literals("0178") == [("17", 8), ("8", 10)]


# ---------------------------------------------------------------------------
# Lexer reuse
# ---------------------------------------------------------------------------

class TestReuse:
    def test_tokenize_twice_gives_same_tokens(self):
        lexer = Lexer("(1 & 2) << 3")
        assert lexer.tokenize() == lexer.tokenize()

    def test_module_level_tokenize(self):
        assert tokenize("0b1 ^ 2") == Lexer("0b1 ^ 2").tokenize()


# ---------------------------------------------------------------------------
# Token construction
# ---------------------------------------------------------------------------

class TestTokenValidation:
    def test_digit_outside_radix_rejected(self):
        with pytest.raises(ValueError, match="not a valid radix-2 literal"):
            Token(TokenType.LITERAL, "12", 2)

    def test_empty_literal_rejected(self):
        with pytest.raises(ValueError, match="at least one digit"):
            Token(TokenType.LITERAL, "", 10)

    def test_unsupported_radix_rejected(self):
        with pytest.raises(ValueError, match="unsupported radix"):
            Token(TokenType.LITERAL, "1", 3)

    def test_str_round_trips_prefix(self):
        assert [str(t) for t in Lexer("0x1f 017 0b1 0d09 9").tokenize()[:-1]] == [
            "0x1f", "017", "0b1", "0d09", "9",
        ]


# ---------------------------------------------------------------------------
# Error cases
# ---------------------------------------------------------------------------

class TestErrors:
    def test_lone_zero_is_not_supported(self):
        with pytest.raises(LexerError, match='"0" is not supported'):
            Lexer("0").tokenize()

    def test_unknown_prefix(self):
        with pytest.raises(LexerError, match='"0z" is not supported'):
            Lexer("0z1").tokenize()

    def test_upper_case_prefix_not_supported(self):
        with pytest.raises(LexerError, match='"0X" is not supported'):
            Lexer("0X1").tokenize()

    def test_non_octal_digit_after_zero(self):
        with pytest.raises(LexerError, match='"09" is not supported'):
            Lexer("09").tokenize()

    def test_empty_value_at_end(self):
        with pytest.raises(LexerError, match="empty value"):
            Lexer("0x").tokenize()

    def test_empty_value_before_operator(self):
        with pytest.raises(LexerError, match="empty value"):
            Lexer("0b & 1").tokenize()

    def test_malformed_shift(self):
        with pytest.raises(LexerError, match="unexpected token: <>"):
            Lexer("1 <> 2").tokenize()

    def test_shift_at_end_of_input(self):
        with pytest.raises(LexerError, match="unexpected token: >"):
            Lexer("1 >").tokenize()

    def test_unexpected_character(self):
        with pytest.raises(LexerError, match="unexpected character") as exc_info:
            Lexer("1 + 2").tokenize()
        assert exc_info.value.position == 2

    def test_identifiers_rejected(self):
        with pytest.raises(LexerError, match="unexpected character: a"):
            Lexer("a & 1").tokenize()

    def test_non_ascii_digit_rejected(self):
        with pytest.raises(LexerError, match="unexpected character"):
            Lexer("١").tokenize()

    def test_message_prefix(self):
        with pytest.raises(LexerError) as exc_info:
            Lexer("1 ~ 2").tokenize()
        assert str(exc_info.value) == "Invalid query: unexpected character: ~ (position 2)"
