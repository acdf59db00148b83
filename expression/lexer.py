# expression/lexer.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Lexical analyzer for boolean expression tokenization using SLY

"""Lexical analyzer for boolean expression strings.

This module implements tokenization of boolean algebra expressions, breaking
input strings into tokens for parser consumption. Any character outside the
accepted alphabet is reported as an unexpected token with its position.

Supported Tokens:
- Variables: single uppercase letters A-Z (``AB`` is two variables)
- Constants: 0 and 1
- Operators: prefix !, postfix ', *, +, (, )
- Whitespace: ignored during tokenization
"""

from sly import Lexer

from .exceptions import UnexpectedTokenError
from utils.logger import get_logger


class BooleanLexer(Lexer):
    """SLY-based lexer for boolean expression tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "CONST",
        "NOT",
        "PRIME",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    VAR = r"[A-Z]"

    @_(r"[01]")
    def CONST(self, t):
        t.value = int(t.value)
        return t

    NOT = r"!"
    PRIME = r"'"
    AND = r"\*"
    OR = r"\+"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            UnexpectedTokenError: Always raised with character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise UnexpectedTokenError(
            f"Unexpected character '{illegal_char}' at position {error_pos}",
            position=error_pos,
        )
