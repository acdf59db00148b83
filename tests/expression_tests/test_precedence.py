# tests/expression_tests/test_precedence.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Test suite for parser operator precedence and grouping

"""Test suite for parser operator precedence and grouping.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ' - postfix negation
3. ! - prefix negation
4. * or adjacency - conjunction
5. + - disjunction

Chains of one connective collect into a single n-ary node, while a
parenthesized group stays a separate node.
"""

import pytest
from expression import parse
from expression.ast_nodes import And, Or, Not, Variable, Constant
from utils.logger import get_logger

A, B, C, D = (Variable(name) for name in "ABCD")


class TestPrecedence:
    """Test cases for operator precedence and n-ary grouping."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_TEST_CASES = [
        # AND binds tighter than OR
        ("A+B*C", Or((A, And((B, C))))),
        ("A*B+C", Or((And((A, B)), C))),
        ("A+B*C+D", Or((A, And((B, C)), D))),
        # Adjacency is conjunction
        ("AB", And((A, B))),
        ("AB+C", Or((And((A, B)), C))),
        ("A(B+C)", And((A, Or((B, C))))),
        ("(A+B)(C+D)", And((Or((A, B)), Or((C, D))))),
        ("A B", And((A, B))),
        # Negation binds tighter than AND
        ("!A*B", And((Not(A), B))),
        ("!AB", And((Not(A), B))),
        ("A'B", And((Not(A), B))),
        ("!(A+B)", Not(Or((A, B)))),
        ("(A*B)'", Not(And((A, B)))),
        ("!!A", Not(Not(A))),
        ("A''", Not(Not(A))),
        ("!A'", Not(Not(A))),
        # Chains flatten, groups stay nested
        ("A*B*C", And((A, B, C))),
        ("A+B+C", Or((A, B, C))),
        ("(A*B)*C", And((And((A, B)), C))),
        ("A+(B+C)", Or((A, Or((B, C))))),
        # Redundant parentheses around a single operand vanish
        ("((A))", A),
        ("(A)*B", And((A, B))),
        # Constants
        ("A*1", And((A, Constant(1)))),
        ("0+A", Or((Constant(0), A))),
    ]

    @pytest.mark.parametrize("text,expected", PRECEDENCE_TEST_CASES)
    def test_precedence(self, text, expected):
        """Test that expressions parse into the expected tree."""
        result = parse(text)
        self.logger.debug(f"{text} -> {result!r}")
        assert result == expected

    def test_variable_and_constant(self):
        assert parse("Z") == Variable("Z")
        assert parse("1") == Constant(1)
