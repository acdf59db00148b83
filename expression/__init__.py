# expression/__init__.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Expression model, parsing and printing components

"""Boolean expression model, parsing and printing.

This package provides the expression tree used by the simplification engine,
the parser that builds it from canonical textual notation, and the printers
that render it back. Input written in LaTeX is first translated by
``simplifier.latex`` into the notation accepted here.

Core Functions:
    parse: Converts expression strings into Abstract Syntax Trees
    to_string: Renders trees in canonical notation
    to_latex: Renders trees as LaTeX markup

Notation:
    - Variables A-Z, constants 0 and 1
    - Negation: prefix ``!`` or postfix ``'``
    - Conjunction: ``*`` or adjacency (``AB``)
    - Disjunction: ``+``
    - Parenthetical grouping

Example:
    >>> from expression import parse, to_string
    >>> to_string(parse("A(B + C')"))
    'A*(B+!C)'
"""

from .exceptions import (
    ParseError,
    UnexpectedTokenError,
    UnbalancedParensError,
    EmptyOperandError,
    InvariantViolation,
)
from .ast_nodes import Expr, Variable, Constant, Not, And, Or, ZERO, ONE
from .grammar import _BooleanParser
from .printer import to_string, to_latex
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a boolean expression string into Abstract Syntax Tree form.

    Uses a fresh parser instance for each invocation so that parsing is
    stateless and safe to run from concurrent requests.

    Args:
        source: Expression in canonical notation

    Returns:
        Root AST node representing the parsed expression

    Raises:
        UnexpectedTokenError: A character outside the accepted alphabet
        UnbalancedParensError: A group does not close or was never opened
        EmptyOperandError: An operator or group lacks an operand

    Example:
        >>> parse("A*!B")
        And(operands=(Variable(name='A'), Not(operand=Variable(name='B'))))
    """
    logger = get_logger()
    logger.debug(f"Parsing expression: {source}")

    parser = _BooleanParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Expression parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "to_string",
    "to_latex",
    "Expr",
    "Variable",
    "Constant",
    "Not",
    "And",
    "Or",
    "ZERO",
    "ONE",
    "ParseError",
    "UnexpectedTokenError",
    "UnbalancedParensError",
    "EmptyOperandError",
    "InvariantViolation",
]
