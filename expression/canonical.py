# expression/canonical.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Canonical ordering and size metrics for expression trees

"""Canonical ordering and size metrics for expression trees.

The commutative laws sort operands with ``canonical_key``, a total order over
distinct expressions: constants come first, then every other node ordered by
the variable letters it mentions, then by how many negations it carries, and
finally by its printed text. Because printing is injective on trees, the last
component breaks every remaining tie.

The distributive laws compare candidates by ``literal_count``, the number of
variable occurrences in a tree.
"""

from __future__ import annotations
from typing import Tuple

from . import ast_nodes as ast
from .printer import to_string


def canonical_key(expr: ast.Expr) -> Tuple[int, str, int, str]:
    """Sort key placing constants first and variables in letter order.

    Args:
        expr: Expression to rank

    Returns:
        Tuple usable with ``sorted``
    """
    text = to_string(expr)
    if isinstance(expr, ast.Constant):
        return (0, "", 0, text)
    letters = "".join(ch for ch in text if ch.isalpha())
    return (1, letters, text.count("!"), text)


def is_sorted(operands: Tuple[ast.Expr, ...]) -> bool:
    """Check whether operands already follow the canonical order."""
    keys = [canonical_key(operand) for operand in operands]
    return all(left <= right for left, right in zip(keys, keys[1:]))


def literal_count(expr: ast.Expr) -> int:
    """Count variable occurrences in an expression."""
    if isinstance(expr, ast.Variable):
        return 1
    if isinstance(expr, ast.Constant):
        return 0
    if isinstance(expr, ast.Not):
        return literal_count(expr.operand)
    return sum(literal_count(operand) for operand in expr.operands)


def node_count(expr: ast.Expr) -> int:
    """Count every node of an expression tree."""
    if isinstance(expr, (ast.Variable, ast.Constant)):
        return 1
    if isinstance(expr, ast.Not):
        return 1 + node_count(expr.operand)
    return 1 + sum(node_count(operand) for operand in expr.operands)
