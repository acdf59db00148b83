# simplifier/engine.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Bounded fixpoint rewriting of boolean expressions

"""Rewrite engine driving the law library to a fixpoint.

One iteration is a single bottom-up pass over the tree. Children are rewritten
before their parent; at each node the structural laws are tried in library
order and the first one that matches replaces the node, after which the law
list is restarted for the new node. A node stops being rewritten when no law
matches or when the per-node rewrite limit is reached, and the pass moves on
to the parent.

Passes repeat until the canonical text of the tree is unchanged by a pass
(fixpoint) or the iteration cap runs out. Running out of iterations is not an
error: the best-effort result is returned with ``Trace.converged`` False.

The engine never mutates its input; every rewrite builds new nodes.
"""

from __future__ import annotations

from typing import Optional, Tuple

from expression import ast_nodes as ast
from expression.exceptions import InvariantViolation
from expression.printer import to_string
from utils.logger import get_logger
from .config import SimplifierConfig
from .evaluator import MAX_TABLE_VARIABLES, equivalent, variables
from .laws import LawLibrary, build_law_library
from .trace import Trace, TraceStep


class _RewritePass(ast.Visitor):
    """One bottom-up application of the structural laws.

    Attributes:
        rewrites: Number of law applications made during this pass
    """

    def __init__(self, library: LawLibrary, config: SimplifierConfig, trace: Trace, iteration: int):
        self.library = library
        self.config = config
        self.trace = trace
        self.iteration = iteration
        self.rewrites = 0

    def run(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return self._rewrite(n)

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return self._rewrite(n)

    def visit_not(self, n: ast.Not) -> ast.Expr:
        operand = n.operand.accept(self)
        node = n if operand is n.operand else ast.Not(operand)
        return self._rewrite(node)

    def visit_and(self, n: ast.And) -> ast.Expr:
        return self._rewrite(self._rebuild(n, ast.And))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return self._rewrite(self._rebuild(n, ast.Or))

    def _rebuild(self, n, node_type):
        operands = tuple(operand.accept(self) for operand in n.operands)
        if all(new is old for new, old in zip(operands, n.operands)):
            return n
        return node_type(operands)

    def _rewrite(self, node: ast.Expr) -> ast.Expr:
        """Apply laws at this node until none matches or the limit is hit."""
        logger = get_logger()

        for _ in range(self.config.max_node_rewrites):
            for law in self.library.structural_laws:
                result = law.try_apply(node)
                if result is None:
                    continue
                if not isinstance(result, ast.Expr):
                    raise InvariantViolation(
                        f"Law '{law.name}' produced {type(result).__name__}, not an expression"
                    )
                logger.law_applied(law.name, to_string(node), to_string(result))
                if self.config.record_trace:
                    self.trace.record(
                        TraceStep(law.name, law.formula, law.category, node, result, self.iteration)
                    )
                self.rewrites += 1
                node = result
                break
            else:
                # No law matched: the node is stable for this pass
                return node
        return node


class RewriteEngine:
    """Simplifies expressions by bounded fixpoint rewriting.

    Engines hold no per-request state, so one instance may serve any number
    of simplifications.

    Attributes:
        config: Limits and switches in effect
        library: Law library used for rewriting
    """

    def __init__(self, config: Optional[SimplifierConfig] = None, library: Optional[LawLibrary] = None):
        self.config = config or SimplifierConfig()
        self.library = library if library is not None else build_law_library(self.config.expansion_limit)

    def simplify(self, expr: ast.Expr, max_iterations: Optional[int] = None) -> Tuple[ast.Expr, Trace]:
        """Rewrite an expression until a fixpoint or the iteration cap.

        Args:
            expr: Expression to simplify; left untouched
            max_iterations: Override of the configured pass limit

        Returns:
            Tuple of (simplified expression, trace of law applications)

        Raises:
            ValueError: max_iterations is not positive
            InvariantViolation: A law produced an invalid tree, or
                verification found the result not equivalent to the input
        """
        logger = get_logger()
        limit = self.config.max_iterations if max_iterations is None else max_iterations
        if limit < 1:
            raise ValueError(f"max_iterations must be positive, got {limit}")

        trace = Trace()
        current = expr
        current_text = to_string(current)
        logger.debug(f"Rewriting {current_text} (at most {limit} passes)")

        for iteration in range(1, limit + 1):
            rewrite_pass = _RewritePass(self.library, self.config, trace, iteration)
            rewritten = rewrite_pass.run(current)
            rewritten_text = to_string(rewritten)
            trace.iterations = iteration
            logger.pass_complete(iteration, rewritten_text, rewrite_pass.rewrites)

            if rewritten_text == current_text:
                logger.fixpoint_reached(iteration, rewritten_text)
                current = rewritten
                break
            current, current_text = rewritten, rewritten_text
        else:
            trace.converged = False
            logger.non_convergence(limit, current_text)

        if self.config.verify:
            self._verify(expr, current)

        return current, trace

    def _verify(self, original: ast.Expr, result: ast.Expr) -> None:
        logger = get_logger()
        count = len(variables(original, result))
        if count > MAX_TABLE_VARIABLES:
            logger.warning(
                f"Skipping verification: {count} variables exceed the truth table "
                f"limit of {MAX_TABLE_VARIABLES}"
            )
            return
        if not equivalent(original, result):
            logger.validation_result(
                False, f"{to_string(result)} is not equivalent to {to_string(original)}"
            )
            raise InvariantViolation(
                f"Simplification changed meaning: {to_string(original)} "
                f"became {to_string(result)}"
            )
        logger.validation_result(True, "Result is equivalent to the input")


def simplify(expr: ast.Expr, max_iterations: Optional[int] = None) -> Tuple[ast.Expr, Trace]:
    """Simplify with the default configuration.

    Args:
        expr: Expression to simplify
        max_iterations: Optional pass limit (default 50)

    Returns:
        Tuple of (simplified expression, trace)
    """
    return RewriteEngine().simplify(expr, max_iterations)
