# expression/exceptions.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Custom exceptions for expression parsing and rewriting

"""Domain-specific exceptions for boolean expression processing.

This module defines the exceptions raised while parsing textual boolean
expressions and while rewriting expression trees. Parse errors are
recoverable by asking the user to correct the input; an invariant violation
signals a programming error in a law or in the parser itself.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails due to syntax errors.

    Indicates that the input does not conform to the boolean expression
    grammar. Concrete subclasses name the specific failure so that callers
    can present a targeted message.

    Attributes:
        position: Index of the offending character in the input, or None
            when the failure was detected at the end of the input
    """

    kind = "syntax"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnexpectedTokenError(ParseError):
    """A character outside the accepted alphabet was found."""

    kind = "unexpected_token"


class UnbalancedParensError(ParseError):
    """A group was opened without closing, or closed without opening."""

    kind = "unbalanced_parens"


class EmptyOperandError(ParseError):
    """An operator, group or the whole input is missing an operand."""

    kind = "empty_operand"


class InvariantViolation(RuntimeError):
    """Internal fault: an expression node broke a structural invariant.

    Raised for empty And/Or nodes, invalid variable names or constant values,
    and failed post-simplification verification. Never caused by user input.
    """

    pass
