# simplifier/latex.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Translation of LaTeX boolean notation into canonical notation

"""LaTeX input normalization.

``normalize_latex`` rewrites LaTeX markup into the canonical notation accepted
by ``expression.parse`` by running the textual laws of the law library in
order. Each law is repeated until the text stops changing, so nested
constructs such as ``\\overline{\\overline{A}}`` unwind from the inside out.

Example:
    >>> normalize_latex(r"\\overline{A \\land B} \\lor C")
    '!(A*B)+C'
"""

import re

from expression import parse
from expression.ast_nodes import Expr
from utils.logger import get_logger
from .laws import LAW_LIBRARY, LawLibrary

# Any of these in the input marks it as LaTeX
LATEX_MARKERS = re.compile(
    r"\\(?:lnot|neg|overline|land|wedge|cdot|lor|vee|text|mathrm|left|right|top|bot)"
    r"|[¬∧∨{}]"
)

# Bound on repetitions of one textual law over one input
_MAX_SUBSTITUTIONS = 100


def is_latex(text: str) -> bool:
    """Return True if the text contains LaTeX boolean markup."""
    return LATEX_MARKERS.search(text) is not None


def normalize_latex(text: str, library: LawLibrary = LAW_LIBRARY) -> str:
    """Translate LaTeX boolean notation into canonical notation.

    Args:
        text: LaTeX source such as ``\\lnot A \\land B``
        library: Law library supplying the textual laws

    Returns:
        Equivalent expression text in canonical notation. Markup that no law
        recognizes is left in place for the parser to reject.
    """
    logger = get_logger()
    normalized = text

    for law in library.textual_laws:
        for _ in range(_MAX_SUBSTITUTIONS):
            replaced = law.substitute(normalized)
            if replaced == normalized:
                break
            logger.debug(f"  {law.name}: {normalized} → {replaced}")
            normalized = replaced

    if "\\" in normalized:
        logger.warning(f"Unrecognized LaTeX command left in input: {normalized}")

    logger.debug(f"Normalized LaTeX input {text!r} to {normalized!r}")
    return normalized


def parse_latex(text: str) -> Expr:
    """Parse LaTeX boolean notation into an expression tree.

    Raises:
        ParseError: The normalized text is not a valid expression
    """
    return parse(normalize_latex(text))
