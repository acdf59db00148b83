# tests/expression_tests/test_lexer_tokens.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Test suite for boolean expression lexer tokenization

"""Test suite for boolean expression lexer tokenization.

Covers token types and values for every symbol of the notation, whitespace
handling, and rejection of characters outside the alphabet.
"""

import pytest
from expression.lexer import BooleanLexer
from expression.exceptions import UnexpectedTokenError
from utils.logger import get_logger


def _tokens(text):
    return [(tok.type, tok.value) for tok in BooleanLexer().tokenize(text)]


class TestBooleanLexer:
    """Test cases for the boolean expression lexer."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    TOKEN_CASES = [
        ("A", [("VAR", "A")]),
        ("0", [("CONST", 0)]),
        ("1", [("CONST", 1)]),
        ("!A", [("NOT", "!"), ("VAR", "A")]),
        ("A'", [("VAR", "A"), ("PRIME", "'")]),
        ("A*B", [("VAR", "A"), ("AND", "*"), ("VAR", "B")]),
        ("A+B", [("VAR", "A"), ("OR", "+"), ("VAR", "B")]),
        ("(A)", [("LPAREN", "("), ("VAR", "A"), ("RPAREN", ")")]),
        # Adjacent letters are separate variables
        ("AB", [("VAR", "A"), ("VAR", "B")]),
        ("10", [("CONST", 1), ("CONST", 0)]),
        # Whitespace is ignored
        ("  A \t+\n B ", [("VAR", "A"), ("OR", "+"), ("VAR", "B")]),
    ]

    @pytest.mark.parametrize("text,expected", TOKEN_CASES)
    def test_token_stream(self, text, expected):
        """Test token types and values for each notation symbol."""
        self.logger.debug(f"Tokenizing: {text!r}")
        assert _tokens(text) == expected

    def test_empty_input_has_no_tokens(self):
        assert _tokens("") == []
        assert _tokens("   ") == []

    ILLEGAL_CASES = [
        ("a", 0),
        ("A&B", 1),
        ("A|B", 1),
        ("A+2", 2),
        ("A + b", 4),
        ("~A", 0),
    ]

    @pytest.mark.parametrize("text,position", ILLEGAL_CASES)
    def test_illegal_character_reports_position(self, text, position):
        """Test that characters outside the alphabet are rejected with position."""
        with pytest.raises(UnexpectedTokenError) as exc_info:
            _tokens(text)

        self.logger.debug(f"Error for {text!r}: {exc_info.value}")
        assert exc_info.value.position == position
        assert exc_info.value.kind == "unexpected_token"
