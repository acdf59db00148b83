# simplifier/__init__.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Simplification engine components and text-level entry point

"""Boolean algebra simplification.

This package holds the law library, the fixpoint rewrite engine, the LaTeX
input normalizer and the helpers used to check results.

Core Functions:
    simplify_expression: Text in, SimplificationReport out
    simplify: Simplify an expression tree, returning (tree, trace)
    normalize_latex: Translate LaTeX markup into canonical notation

Example:
    >>> report = simplify_expression("A*(A+B)")
    >>> report.simplified
    'A'
"""

from dataclasses import dataclass
from typing import List, Optional

from expression import parse
from expression.printer import to_latex, to_string
from utils.logger import get_logger
from .config import SimplifierConfig
from .engine import RewriteEngine, simplify
from .evaluator import equivalent, evaluate, truth_table, variables
from .generator import ExpressionGenerator, ExpressionPattern, GeneratorOptions
from .laws import LAW_LIBRARY, Law, LawCategory, LawLibrary, build_law_library
from .latex import is_latex, normalize_latex, parse_latex
from .trace import Trace, TraceStep

INPUT_FORMATS = ("auto", "latex", "plain")

FULLY_SIMPLIFIED = "Expression fully simplified"
NOT_CONVERGED = "Simplification stopped at the iteration limit; result may not be minimal"


@dataclass(frozen=True)
class SimplificationReport:
    """Outcome of simplifying one textual expression.

    Attributes:
        original: Input text as given
        normalized: Canonical-notation text that was parsed
        simplified: Simplified expression in canonical notation
        simplified_latex: Simplified expression as LaTeX
        steps: Law applications in order
        converged: False if the iteration limit stopped simplification
        message: Human-readable status line
    """

    original: str
    normalized: str
    simplified: str
    simplified_latex: str
    steps: List[TraceStep]
    converged: bool
    message: str


def simplify_expression(
    text: str, input_format: str = "auto", config: Optional[SimplifierConfig] = None
) -> SimplificationReport:
    """Parse, simplify and render an expression given as text.

    Args:
        text: Expression in canonical notation or LaTeX
        input_format: "latex", "plain", or "auto" to detect LaTeX markup
        config: Engine configuration (defaults apply when omitted)

    Returns:
        SimplificationReport describing the result

    Raises:
        ValueError: Unknown input format
        ParseError: The input is not a valid expression
        InvariantViolation: Internal fault while rewriting
    """
    if input_format not in INPUT_FORMATS:
        raise ValueError(
            f"Unknown input format '{input_format}', expected one of {', '.join(INPUT_FORMATS)}"
        )
    logger = get_logger()

    use_latex = input_format == "latex" or (input_format == "auto" and is_latex(text))
    normalized = normalize_latex(text) if use_latex else text
    logger.simplification_start(text, normalized)

    expr = parse(normalized)
    result, trace = RewriteEngine(config).simplify(expr)

    simplified = to_string(result)
    logger.simplification_summary(simplified, len(trace), trace.converged)

    return SimplificationReport(
        original=text,
        normalized=normalized,
        simplified=simplified,
        simplified_latex=to_latex(result),
        steps=list(trace),
        converged=trace.converged,
        message=FULLY_SIMPLIFIED if trace.converged else NOT_CONVERGED,
    )


__all__ = [
    "simplify_expression",
    "SimplificationReport",
    "SimplifierConfig",
    "RewriteEngine",
    "simplify",
    "Trace",
    "TraceStep",
    "Law",
    "LawCategory",
    "LawLibrary",
    "LAW_LIBRARY",
    "build_law_library",
    "is_latex",
    "normalize_latex",
    "parse_latex",
    "evaluate",
    "equivalent",
    "truth_table",
    "variables",
    "ExpressionGenerator",
    "ExpressionPattern",
    "GeneratorOptions",
]
