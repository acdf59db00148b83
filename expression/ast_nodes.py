# expression/ast_nodes.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Abstract Syntax Tree node classes for boolean expression representation

"""AST node classes for representing parsed boolean expressions.

This module defines immutable and hashable node classes used to construct tree
representations of two-valued boolean algebra expressions. Because nodes are
frozen, rewritten trees freely share substructure with their inputs.

Node Types:
    Variable: Single uppercase letter A-Z
    Constant: Boolean constants 0 and 1
    Not: Negation with exactly one operand
    And, Or: n-ary connectives with at least one operand

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple

from .exceptions import InvariantViolation


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in boolean expressions.

    Provides the foundation for immutable expression trees with visitor pattern
    support. String conversion delegates to the canonical printer so that
    ``str(expr)`` always yields text accepted by the parser.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        from .printer import to_string

        return to_string(self)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Boolean variable named by a single uppercase letter.

    Attributes:
        name: The variable letter, A through Z
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or len(self.name) != 1 or not (
            "A" <= self.name <= "Z"
        ):
            raise InvariantViolation(f"Invalid variable name: {self.name!r}")

    def accept(self, v: Visitor):
        return v.visit_variable(self)


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant, 0 (false) or 1 (true).

    Attributes:
        value: Either 0 or 1
    """

    value: int

    def __post_init__(self):
        if self.value not in (0, 1):
            raise InvariantViolation(f"Invalid constant value: {self.value!r}")
        object.__setattr__(self, "value", int(self.value))

    def accept(self, v: Visitor):
        return v.visit_constant(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def __post_init__(self):
        if not isinstance(self.operand, Expr):
            raise InvariantViolation(
                f"Not requires exactly one expression operand, got {self.operand!r}"
            )

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction over an ordered sequence of operands.

    The operand order is kept as parsed or rewritten; the commutative law
    reorders it into canonical order for matching and printing.

    Attributes:
        operands: Tuple of at least one conjoined expression
    """

    operands: Tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, "operands", _checked_operands("And", self.operands))

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction over an ordered sequence of operands.

    Attributes:
        operands: Tuple of at least one disjoined expression
    """

    operands: Tuple[Expr, ...]

    def __post_init__(self):
        object.__setattr__(self, "operands", _checked_operands("Or", self.operands))

    def accept(self, v: Visitor):
        return v.visit_or(self)


def _checked_operands(kind: str, operands: Iterable[Expr]) -> Tuple[Expr, ...]:
    operands = tuple(operands)
    if not operands:
        raise InvariantViolation(f"{kind} node requires at least one operand")
    for operand in operands:
        if not isinstance(operand, Expr):
            raise InvariantViolation(f"{kind} operand is not an expression: {operand!r}")
    return operands


# Shared constants
ZERO = Constant(0)
ONE = Constant(1)


def conjoin(operands: Iterable[Expr]) -> Expr:
    """Build a conjunction from operands.

    Args:
        operands: Expressions to conjoin

    Returns:
        Constant 1 if empty, the operand itself if single, otherwise an And
    """
    operands = tuple(operands)
    if not operands:
        return ONE
    if len(operands) == 1:
        return operands[0]
    return And(operands)


def disjoin(operands: Iterable[Expr]) -> Expr:
    """Build a disjunction from operands.

    Args:
        operands: Expressions to disjoin

    Returns:
        Constant 0 if empty, the operand itself if single, otherwise an Or
    """
    operands = tuple(operands)
    if not operands:
        return ZERO
    if len(operands) == 1:
        return operands[0]
    return Or(operands)


def negate(expr: Expr) -> Expr:
    """Return the complement of an expression without stacking negations.

    ``negate(Not(X))`` is ``X``; constants are flipped; anything else is
    wrapped in a Not.
    """
    if isinstance(expr, Not):
        return expr.operand
    if isinstance(expr, Constant):
        return ONE if expr.value == 0 else ZERO
    return Not(expr)


def is_complement(a: Expr, b: Expr) -> bool:
    """Check whether one expression is the direct negation of the other."""
    return (isinstance(a, Not) and a.operand == b) or (
        isinstance(b, Not) and b.operand == a
    )
