# simplifier/generator.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Random and patterned expression generation

"""Generate boolean expressions for exercises and property tests.

Random expressions nest up to a requested complexity level; patterned
expressions are built so that one particular law family simplifies them.
Every generator instance owns its own ``random.Random`` so that a seed
reproduces the same sequence of expressions.
"""

import random
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from expression import ast_nodes as ast
from expression.printer import to_latex, to_string


class OutputFormat(Enum):
    STANDARD = "standard"
    LATEX = "latex"


class ExpressionPattern(Enum):
    """Expression shapes aimed at one law family."""

    DE_MORGAN = "deMorgan"
    ABSORPTION = "absorption"
    IDEMPOTENT = "idempotent"
    DISTRIBUTIVE = "distributive"
    COMPLEMENT = "complement"


@dataclass
class GeneratorOptions:
    """Options for random expression generation.

    Attributes:
        variables: Variable names to draw from
        negation_probability: Chance of negating a leaf variable
        nested_probability: Chance of nesting a subexpression as an operand
        expression_negation_probability: Chance of negating a whole subexpression
        include_constants: Allow 0 and 1 leaves
        constant_probability: Chance of a constant leaf when constants are allowed
    """

    variables: List[str] = field(default_factory=lambda: list("ABCDE"))
    negation_probability: float = 0.3
    nested_probability: float = 0.4
    expression_negation_probability: float = 0.2
    include_constants: bool = False
    constant_probability: float = 0.1

    def __post_init__(self):
        if not self.variables:
            raise ValueError("At least one variable is required")
        for name in self.variables:
            if len(name) != 1 or name not in string.ascii_uppercase:
                raise ValueError(f"Invalid variable name: {name!r}")
        for attr in (
            "negation_probability",
            "nested_probability",
            "expression_negation_probability",
            "constant_probability",
        ):
            value = getattr(self, attr)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{attr} must be between 0 and 1, got {value}")


class ExpressionGenerator:
    """Seedable generator of expression trees."""

    def __init__(self, options: Optional[GeneratorOptions] = None, seed: Optional[int] = None):
        self.options = options or GeneratorOptions()
        self._random = random.Random(seed)

    def generate(self, complexity: int = 3) -> ast.Expr:
        """Generate a random expression.

        Args:
            complexity: Nesting level from 1 upwards; also widens the pool of
                variables used (``2 + complexity`` at most)

        Returns:
            Expression tree with at least one binary operator
        """
        if complexity < 1:
            raise ValueError(f"complexity must be at least 1, got {complexity}")
        limit = min(2 + complexity, len(self.options.variables))
        pool = self.options.variables[:limit]
        return self._term(complexity, pool, force_operation=True)

    def generate_text(self, complexity: int = 3, output_format: OutputFormat = OutputFormat.STANDARD) -> str:
        """Generate a random expression rendered as text."""
        expr = self.generate(complexity)
        return to_latex(expr) if output_format is OutputFormat.LATEX else to_string(expr)

    def generate_patterned(self, pattern: ExpressionPattern) -> ast.Expr:
        """Generate an expression that the given law family simplifies."""
        x, y = self._distinct_variables(2)
        if pattern is ExpressionPattern.DE_MORGAN:
            inner = ast.And((x, y)) if self._random.random() < 0.5 else ast.Or((x, y))
            return ast.Not(inner)
        if pattern is ExpressionPattern.ABSORPTION:
            if self._random.random() < 0.5:
                return ast.And((x, ast.Or((x, y))))
            return ast.Or((x, ast.And((x, y))))
        if pattern is ExpressionPattern.IDEMPOTENT:
            node_type = ast.And if self._random.random() < 0.5 else ast.Or
            return node_type((x, x))
        if pattern is ExpressionPattern.DISTRIBUTIVE:
            return ast.Or((ast.And((x, y)), ast.And((x, ast.Not(y)))))
        if pattern is ExpressionPattern.COMPLEMENT:
            node_type = ast.And if self._random.random() < 0.5 else ast.Or
            return node_type((x, ast.Not(x)))
        raise ValueError(f"Unknown pattern: {pattern}")

    def _distinct_variables(self, count: int) -> List[ast.Variable]:
        names = self.options.variables
        if len(names) >= count:
            chosen = self._random.sample(names, count)
        else:
            chosen = [self._random.choice(names) for _ in range(count)]
        return [ast.Variable(name) for name in chosen]

    def _leaf(self, pool: List[str]) -> ast.Expr:
        opts = self.options
        if opts.include_constants and self._random.random() < opts.constant_probability:
            return ast.Constant(self._random.randint(0, 1))
        variable = ast.Variable(self._random.choice(pool))
        if self._random.random() < opts.negation_probability:
            return ast.Not(variable)
        return variable

    def _term(self, level: int, pool: List[str], force_operation: bool = False) -> ast.Expr:
        if level <= 1 and not force_operation:
            return self._leaf(pool)

        node_type = ast.And if self._random.random() < 0.5 else ast.Or
        operands = []
        for _ in range(2):
            if level > 1 and self._random.random() < self.options.nested_probability:
                operands.append(self._term(level - 1, pool))
            else:
                operands.append(self._leaf(pool))
        expr = node_type(tuple(operands))

        if self._random.random() < self.options.expression_negation_probability:
            return ast.Not(expr)
        return expr
