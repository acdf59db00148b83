# simplifier/trace.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Record of law applications produced during simplification

"""Rewrite trace records.

A trace is the ordered, append-only list of law applications made while
simplifying one expression, consumed by step-by-step presentations. Each
step records the node that was rewritten, not the whole tree. The trace also
reports whether a fixpoint was reached within the iteration cap.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from expression.ast_nodes import Expr
from expression.printer import to_string, to_latex
from .laws import LawCategory


@dataclass(frozen=True)
class TraceStep:
    """One law application.

    Attributes:
        law_name: Name of the law that fired
        formula: Documentation formula of the law
        category: Category of the law
        before: Node before the rewrite
        after: Node after the rewrite
        iteration: 1-based pass number in which the rewrite happened
    """

    law_name: str
    formula: str
    category: LawCategory
    before: Expr
    after: Expr
    iteration: int

    @property
    def before_text(self) -> str:
        return to_string(self.before)

    @property
    def after_text(self) -> str:
        return to_string(self.after)

    @property
    def before_latex(self) -> str:
        return to_latex(self.before)

    @property
    def after_latex(self) -> str:
        return to_latex(self.after)

    def __str__(self) -> str:
        return f"{self.law_name}: {self.before_text} → {self.after_text}"


@dataclass
class Trace:
    """Ordered record of a simplification run.

    Attributes:
        steps: Law applications in the order they happened
        converged: False when the iteration cap ran out before a fixpoint
        iterations: Number of bottom-up passes executed
    """

    steps: List[TraceStep] = field(default_factory=list)
    converged: bool = True
    iterations: int = 0

    def record(self, step: TraceStep) -> None:
        self.steps.append(step)

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def laws_applied(self) -> List[str]:
        """Law names in application order."""
        return [step.law_name for step in self.steps]
