# simplifier/evaluator.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Evaluation, truth tables and equivalence checking

"""Evaluate expressions and compare them by truth table.

Truth-table comparison is the most reliable way to confirm that a
simplification preserved meaning: two expressions are equivalent exactly when
they agree under every assignment of the variables appearing in either one.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from expression import ast_nodes as ast

# Exhaustive comparison above this many variables is refused.
MAX_TABLE_VARIABLES = 16


class _Evaluator(ast.Visitor):
    """Visitor computing the truth value of an expression."""

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return bool(self.assignment[n.name])
        except KeyError:
            raise ValueError(f"No value assigned to variable '{n.name}'") from None

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value == 1

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return all(operand.accept(self) for operand in n.operands)

    def visit_or(self, n: ast.Or) -> bool:
        return any(operand.accept(self) for operand in n.operands)


def evaluate(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate an expression under a variable assignment.

    Args:
        expr: Expression to evaluate
        assignment: Truth value for every variable in ``expr``

    Returns:
        Truth value of the expression

    Raises:
        ValueError: A variable of ``expr`` has no assigned value
    """
    return expr.accept(_Evaluator(assignment))


def variables(*exprs: ast.Expr) -> List[str]:
    """Sorted names of all variables appearing in the given expressions."""
    names = set()
    stack = list(exprs)
    while stack:
        node = stack.pop()
        if isinstance(node, ast.Variable):
            names.add(node.name)
        elif isinstance(node, ast.Not):
            stack.append(node.operand)
        elif isinstance(node, (ast.And, ast.Or)):
            stack.extend(node.operands)
    return sorted(names)


def assignments(names: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of the named variables, all-false first."""
    for values in itertools.product((False, True), repeat=len(names)):
        yield dict(zip(names, values))


@dataclass(frozen=True)
class TruthTableRow:
    assignment: Dict[str, bool]
    value: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of one expression.

    Attributes:
        variables: Column order of the assignment
        rows: One row per assignment, in binary counting order
    """

    variables: List[str]
    rows: List[TruthTableRow]

    @property
    def minterms(self) -> List[int]:
        """Row indices (binary counting order) where the expression is true."""
        return [index for index, row in enumerate(self.rows) if row.value]


def _check_table_size(names: Sequence[str]) -> None:
    if len(names) > MAX_TABLE_VARIABLES:
        raise ValueError(
            f"Truth table over {len(names)} variables exceeds the limit of "
            f"{MAX_TABLE_VARIABLES}"
        )


def truth_table(expr: ast.Expr, names: Optional[Sequence[str]] = None) -> TruthTable:
    """Generate the truth table of an expression.

    Args:
        expr: Expression to tabulate
        names: Variables to enumerate; defaults to those appearing in ``expr``

    Returns:
        TruthTable with one row per assignment

    Raises:
        ValueError: More than MAX_TABLE_VARIABLES variables
    """
    names = list(names) if names is not None else variables(expr)
    _check_table_size(names)
    rows = [
        TruthTableRow(assignment, evaluate(expr, assignment))
        for assignment in assignments(names)
    ]
    return TruthTable(names, rows)


def equivalent(left: ast.Expr, right: ast.Expr) -> bool:
    """Check logical equivalence by exhaustive evaluation.

    Raises:
        ValueError: More than MAX_TABLE_VARIABLES distinct variables
    """
    names = variables(left, right)
    _check_table_size(names)
    return all(
        evaluate(left, assignment) == evaluate(right, assignment)
        for assignment in assignments(names)
    )
