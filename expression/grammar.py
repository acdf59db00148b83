# expression/grammar.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for two-valued boolean
algebra expressions. The parser constructs Abstract Syntax Trees from token
streams provided by the lexer. Precedence is encoded in the grammar levels
rather than in a precedence table, because conjunction may be written by
adjacency (``AB``) and has no operator token to attach precedence to.

Grammar (lowest to highest binding):
    expr        : disjunction
    disjunction : disjunction OR term | term
    term        : product
    product     : product AND factor | product factor | factor
    factor      : NOT factor | postfix
    postfix     : postfix PRIME | atom
    atom        : VAR | CONST | LPAREN expr RPAREN

Operator chains collect into one n-ary node: ``A*B*C`` is a single And with
three operands, while ``(A*B)*C`` keeps the parenthesized group as its own
node.
"""

from sly import Parser

from .lexer import BooleanLexer
from .ast_nodes import Expr, Variable, Constant, Not, conjoin, disjoin
from .exceptions import (
    ParseError,
    EmptyOperandError,
    UnbalancedParensError,
    UnexpectedTokenError,
)
from utils.logger import get_logger

# Tokens that cannot start an operand; meeting one where an operand is
# expected means an operator or group is missing its operand.
_OPERAND_MISSING_TOKENS = {"AND", "OR", "PRIME", "RPAREN"}


class _BooleanParser(Parser):
    """SLY-based LALR(1) parser for boolean expressions.

    Attributes:
        tokens: Token types from BooleanLexer
    """

    tokens = BooleanLexer.tokens

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete input is a single expression."""
        return p.expr

    @_("disjunction")
    def expr(self, p) -> Expr:
        """Build a disjunction node from the collected terms."""
        return disjoin(p.disjunction)

    @_("disjunction OR term")
    def disjunction(self, p) -> list:
        return p.disjunction + [p.term]

    @_("term")
    def disjunction(self, p) -> list:
        return [p.term]

    @_("product")
    def term(self, p) -> Expr:
        """Build a conjunction node from the collected factors."""
        return conjoin(p.product)

    @_("product AND factor")
    def product(self, p) -> list:
        return p.product + [p.factor]

    @_("product factor")
    def product(self, p) -> list:
        """Implicit conjunction by adjacency."""
        return p.product + [p.factor]

    @_("factor")
    def product(self, p) -> list:
        return [p.factor]

    @_("NOT factor")
    def factor(self, p) -> Expr:
        """Prefix negation."""
        return Not(p.factor)

    @_("postfix")
    def factor(self, p) -> Expr:
        return p.postfix

    @_("postfix PRIME")
    def postfix(self, p) -> Expr:
        """Postfix negation."""
        return Not(p.postfix)

    @_("atom")
    def postfix(self, p) -> Expr:
        return p.atom

    @_("VAR")
    def atom(self, p) -> Expr:
        return Variable(p.VAR)

    @_("CONST")
    def atom(self, p) -> Expr:
        return Constant(p.CONST)

    @_("LPAREN expr RPAREN")
    def atom(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    def parse(self, text: str) -> Expr:
        """Parse expression text into AST.

        Tokenizes the whole input first so that illegal characters and
        unbalanced parentheses are reported before any grammar error.

        Args:
            text: Boolean expression string to parse

        Returns:
            Root AST node representing the parsed expression

        Raises:
            ParseError: If the input is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        try:
            token_list = list(BooleanLexer().tokenize(text))

            if not token_list:
                raise EmptyOperandError("Input expression is empty.")

            _check_parentheses(token_list)

            ast_result = super().parse(iter(token_list))

            if ast_result is None:
                raise ParseError("Failed to parse expression (syntax error).")

            logger.debug(
                f"Successfully parsed expression into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises the specific subclass for the failure
        """
        if token is None:
            raise EmptyOperandError(
                "Unexpected end of expression: an operator is missing its operand"
            )

        if token.type in _OPERAND_MISSING_TOKENS:
            raise EmptyOperandError(
                f"Missing operand before '{token.value}' at position {token.index}",
                position=token.index,
            )

        raise UnexpectedTokenError(
            f"Unexpected token '{token.value}' (type: {token.type}) "
            f"at position {token.index}",
            position=token.index,
        )


def _check_parentheses(token_list) -> None:
    """Verify that every group opens and closes.

    Raises:
        UnbalancedParensError: On a stray ')' or an unclosed '('
    """
    open_positions = []
    for token in token_list:
        if token.type == "LPAREN":
            open_positions.append(token.index)
        elif token.type == "RPAREN":
            if not open_positions:
                raise UnbalancedParensError(
                    f"Unmatched ')' at position {token.index}", position=token.index
                )
            open_positions.pop()

    if open_positions:
        position = open_positions[-1]
        raise UnbalancedParensError(
            f"Unclosed '(' opened at position {position}", position=position
        )
