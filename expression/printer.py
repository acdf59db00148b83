# expression/printer.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Canonical text and LaTeX rendering of expression trees

"""Render expression trees back to textual notation.

The text printer produces the canonical notation accepted by the parser:
``+`` for disjunction, ``*`` for conjunction and prefix ``!`` for negation.
Parentheses are emitted exactly where the grammar needs them to rebuild the
same tree, so ``parse(to_string(e)) == e`` for every parser-reachable ``e``:

- an Or operand inside an And, or any compound operand inside a Not
- an operand of the same connective as its parent, which would otherwise
  merge into the parent's operand chain

The LaTeX printer follows the same grouping rules with ``\\land``, ``\\lor``
and ``\\lnot`` so that the LaTeX normalizer maps its output back to the same
tree.
"""

from __future__ import annotations

from . import ast_nodes as ast


class _TextPrinter(ast.Visitor):
    """Visitor producing canonical notation for an expression tree."""

    NOT = "!"
    AND = "*"
    OR = "+"

    def render(self, node: ast.Expr) -> str:
        return node.accept(self)

    def group(self, text: str) -> str:
        return f"({text})"

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_constant(self, n: ast.Constant) -> str:
        return str(n.value)

    def visit_not(self, n: ast.Not) -> str:
        inner = self.render(n.operand)
        if isinstance(n.operand, (ast.And, ast.Or)):
            inner = self.group(inner)
        return f"{self.NOT}{inner}"

    def visit_and(self, n: ast.And) -> str:
        parts = []
        for operand in n.operands:
            text = self.render(operand)
            if isinstance(operand, (ast.And, ast.Or)):
                text = self.group(text)
            parts.append(text)
        return self.AND.join(parts)

    def visit_or(self, n: ast.Or) -> str:
        parts = []
        for operand in n.operands:
            text = self.render(operand)
            if isinstance(operand, ast.Or):
                text = self.group(text)
            parts.append(text)
        return self.OR.join(parts)


class _LatexPrinter(_TextPrinter):
    """Visitor producing LaTeX markup with the same grouping as the text form."""

    NOT = "\\lnot "
    AND = " \\land "
    OR = " \\lor "

    def visit_not(self, n: ast.Not) -> str:
        if isinstance(n.operand, (ast.And, ast.Or)):
            return f"\\lnot{self.group(self.render(n.operand))}"
        return f"{self.NOT}{self.render(n.operand)}"


def to_string(expr: ast.Expr) -> str:
    """Render an expression in canonical textual notation.

    Args:
        expr: Expression tree to render

    Returns:
        Deterministic text such as ``A*!B+C``
    """
    return _TextPrinter().render(expr)


def to_latex(expr: ast.Expr) -> str:
    """Render an expression as LaTeX markup.

    Args:
        expr: Expression tree to render

    Returns:
        LaTeX text such as ``A \\land \\lnot B \\lor C``
    """
    return _LatexPrinter().render(expr)
