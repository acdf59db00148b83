# simplifier/laws.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Ordered catalog of boolean algebra rewrite laws

"""The master table of boolean algebra laws.

Every law has a name and a documentation formula and is one of two kinds:

- structural: ``try_apply(expr)`` matches the root of an expression tree and
  returns the rewritten node, or None when the law does not apply. Structural
  laws never descend into children; the rewrite engine visits every node.
- textual: a regular expression and a literal or computed replacement,
  applied to raw input text by the LaTeX normalizer before parsing.

Laws are grouped in categories that are applied in a fixed order. Inside a
category laws keep their definition order. The library is built once at
import time and is never mutated, so concurrent simplifications can share it.

Every structural law either removes variable occurrences or keeps their
number while pushing negations down, flattening or sorting. The distributive
expansions are guarded to fire only when they strictly reduce the number of
variable occurrences, which keeps expansion and contraction from cycling.
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, partial
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from expression import ast_nodes as ast
from expression.ast_nodes import ONE, ZERO, conjoin, disjoin, is_complement, negate
from expression.canonical import canonical_key, is_sorted, literal_count
from .config import DEFAULT_EXPANSION_LIMIT


class LawCategory(Enum):
    """Law categories in application order."""

    IDENTITY = "identity"
    DOMINATION = "domination"
    IDEMPOTENT = "idempotent"
    DOUBLE_NEGATION = "doubleNegation"
    COMPLEMENT = "complement"
    ABSORPTION = "absorption"
    DE_MORGAN = "deMorgan"
    COMMUTATIVE = "commutative"
    ASSOCIATIVE = "associative"
    DISTRIBUTIVE = "distributive"
    CONSTANT_REDUCTION = "constantReduction"
    COMMON_PATTERNS = "commonPatterns"
    SPECIAL_PATTERNS = "specialPatterns"
    LATEX_PATTERNS = "latexPatterns"


CATEGORY_ORDER: Tuple[LawCategory, ...] = tuple(LawCategory)

Rewrite = Callable[[ast.Expr], Optional[ast.Expr]]
Replacement = Union[str, Callable[[re.Match[str]], str]]


@dataclass(frozen=True)
class Law:
    """One named rewrite rule.

    Attributes:
        name: Display name used in traces
        formula: Human-readable statement of the law
        category: Category controlling application order
        rewrite: Structural matcher and builder
        pattern: Compiled regular expression of a textual law
        replacement: Template or callable for a textual law
    """

    name: str
    formula: str
    category: LawCategory
    rewrite: Optional[Rewrite] = None
    pattern: Optional[re.Pattern[str]] = None
    replacement: Optional[Replacement] = None

    def __post_init__(self):
        if (self.rewrite is None) == (self.pattern is None):
            raise ValueError(
                f"Law '{self.name}' needs exactly one of a rewrite function or a pattern"
            )
        if self.pattern is not None and self.replacement is None:
            raise ValueError(f"Textual law '{self.name}' needs a replacement")

    @property
    def is_textual(self) -> bool:
        return self.pattern is not None

    def try_apply(self, expr: ast.Expr) -> Optional[ast.Expr]:
        """Rewrite the root of ``expr`` if this law matches it.

        Returns:
            The rewritten expression, or None if the law does not apply or
            would leave the expression unchanged
        """
        if self.rewrite is None:
            raise TypeError(f"Law '{self.name}' is textual and cannot rewrite trees")
        result = self.rewrite(expr)
        if result is None or result == expr:
            return None
        return result

    def substitute(self, text: str) -> str:
        """Apply a textual law once over the whole string."""
        if self.pattern is None:
            raise TypeError(f"Law '{self.name}' is structural and cannot rewrite text")
        return self.pattern.sub(self.replacement, text)


class LawLibrary:
    """Immutable, ordered collection of laws."""

    def __init__(self, laws: Iterable[Law]):
        # sorted() is stable, so laws keep their order inside a category
        ordered = sorted(laws, key=lambda law: CATEGORY_ORDER.index(law.category))
        self._laws: Tuple[Law, ...] = tuple(ordered)
        self._structural = tuple(law for law in self._laws if not law.is_textual)
        self._textual = tuple(law for law in self._laws if law.is_textual)

    def __iter__(self) -> Iterator[Law]:
        return iter(self._laws)

    def __len__(self) -> int:
        return len(self._laws)

    @property
    def structural_laws(self) -> Tuple[Law, ...]:
        return self._structural

    @property
    def textual_laws(self) -> Tuple[Law, ...]:
        return self._textual

    def by_category(self, category: LawCategory) -> Tuple[Law, ...]:
        return tuple(law for law in self._laws if law.category is category)

    def find(self, name: str) -> Law:
        """Look up a law by name.

        Raises:
            KeyError: No law carries that name
        """
        for law in self._laws:
            if law.name == name:
                return law
        raise KeyError(name)


# ---------------------------------------------------------------------------
# Operand views
# ---------------------------------------------------------------------------


def _conjuncts(expr: ast.Expr) -> Tuple[ast.Expr, ...]:
    return expr.operands if isinstance(expr, ast.And) else (expr,)


def _disjuncts(expr: ast.Expr) -> Tuple[ast.Expr, ...]:
    return expr.operands if isinstance(expr, ast.Or) else (expr,)


def _dedupe(operands: Iterable[ast.Expr]) -> List[ast.Expr]:
    seen = set()
    unique = []
    for operand in operands:
        if operand not in seen:
            seen.add(operand)
            unique.append(operand)
    return unique


def _has_complement_pair(operands: Iterable[ast.Expr]) -> bool:
    members = set(operands)
    return any(
        isinstance(operand, ast.Not) and operand.operand in members for operand in members
    )


def _drop_absorbed(groups: List[frozenset]) -> List[int]:
    """Indices of groups not covered by a smaller (or earlier equal) group."""
    kept = []
    for i, group in enumerate(groups):
        covered = any(
            j != i and (other < group or (other == group and j < i))
            for j, other in enumerate(groups)
        )
        if not covered:
            kept.append(i)
    return kept


# ---------------------------------------------------------------------------
# Structural rewrites
# ---------------------------------------------------------------------------


def _drop_neutral(expr, node_type, neutral, build):
    if not isinstance(expr, node_type) or neutral not in expr.operands:
        return None
    if all(isinstance(operand, ast.Constant) for operand in expr.operands):
        return None
    return build(operand for operand in expr.operands if operand != neutral)


def _dominate(expr, node_type, dominant):
    if not isinstance(expr, node_type) or dominant not in expr.operands:
        return None
    if all(isinstance(operand, ast.Constant) for operand in expr.operands):
        return None
    return dominant


def _deduplicate(expr, node_type, build):
    if not isinstance(expr, node_type):
        return None
    unique = _dedupe(expr.operands)
    if len(unique) == len(expr.operands):
        return None
    return build(unique)


def _double_negation(expr):
    if isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Not):
        return expr.operand.operand
    return None


def _complement(expr, node_type, result):
    if isinstance(expr, node_type) and _has_complement_pair(expr.operands):
        return result
    return None


def _absorb(expr, node_type, members_of, build):
    if not isinstance(expr, node_type) or len(expr.operands) < 2:
        return None
    groups = [frozenset(members_of(operand)) for operand in expr.operands]
    kept = _drop_absorbed(groups)
    if len(kept) == len(expr.operands):
        return None
    return build(expr.operands[i] for i in kept)


def _de_morgan(expr, inner_type, build):
    if isinstance(expr, ast.Not) and isinstance(expr.operand, inner_type):
        return build(ast.Not(operand) for operand in expr.operand.operands)
    return None


def _sort_operands(expr, node_type):
    if not isinstance(expr, node_type) or is_sorted(expr.operands):
        return None
    return node_type(tuple(sorted(expr.operands, key=canonical_key)))


def _flatten(expr, node_type):
    if not isinstance(expr, node_type):
        return None
    if not any(isinstance(operand, node_type) for operand in expr.operands):
        return None
    flat = []
    for operand in expr.operands:
        if isinstance(operand, node_type):
            flat.extend(operand.operands)
        else:
            flat.append(operand)
    return node_type(tuple(flat))


def _expand(expr, node_type, inner_type, neutral, dominant, build_group, build_result, limit):
    """Distribute ``node_type`` over ``inner_type`` operands.

    For an And over Or operands each combination of disjuncts becomes one
    product term; the dual builds one sum clause per combination of
    conjuncts. Each group is cleaned locally (neutral constants dropped,
    duplicates merged, groups containing the dominant constant or a
    complement pair removed) and groups covered by smaller ones are absorbed.
    The expansion is returned only if it has strictly fewer variable
    occurrences than the original node.
    """
    if not isinstance(expr, node_type):
        return None
    if not any(isinstance(operand, inner_type) for operand in expr.operands):
        return None

    choices = [
        operand.operands if isinstance(operand, inner_type) else (operand,)
        for operand in expr.operands
    ]
    total = 1
    for options in choices:
        total *= len(options)
    if total > limit:
        return None

    groups = []
    for combination in itertools.product(*choices):
        members = []
        for item in combination:
            members.extend(item.operands if isinstance(item, node_type) else (item,))
        if dominant in members:
            continue
        members = _dedupe(member for member in members if member != neutral)
        if _has_complement_pair(members):
            continue
        groups.append(members)

    kept = _drop_absorbed([frozenset(members) for members in groups])
    candidate = build_result(build_group(groups[i]) for i in kept)

    if literal_count(candidate) >= literal_count(expr):
        return None
    return candidate


def _merge_adjacent(expr, node_type, members_of, build_group):
    """Merge two operands that differ only in one complemented member.

    ``X*Y + X*!Y`` becomes ``X`` and ``(X+Y)*(X+!Y)`` becomes ``X``.
    """
    if not isinstance(expr, node_type) or len(expr.operands) < 2:
        return None
    groups = [frozenset(members_of(operand)) for operand in expr.operands]
    for i, j in itertools.combinations(range(len(groups)), 2):
        only_i = groups[i] - groups[j]
        only_j = groups[j] - groups[i]
        if len(only_i) != 1 or len(only_j) != 1:
            continue
        (pivot,) = only_i
        (opposite,) = only_j
        if not is_complement(pivot, opposite):
            continue
        shared = [member for member in members_of(expr.operands[i]) if member != pivot]
        merged = build_group(shared)
        operands = [
            merged if index == i else operand
            for index, operand in enumerate(expr.operands)
            if index != j
        ]
        return node_type(tuple(operands)) if len(operands) > 1 else operands[0]
    return None


def _negate_constant(expr):
    if isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Constant):
        return negate(expr.operand)
    return None


def _fold_constants(expr):
    if not isinstance(expr, (ast.And, ast.Or)):
        return None
    if not all(isinstance(operand, ast.Constant) for operand in expr.operands):
        return None
    values = [operand.value for operand in expr.operands]
    if isinstance(expr, ast.And):
        return ONE if all(values) else ZERO
    return ONE if any(values) else ZERO


def _single_opposition(left: frozenset, right: frozenset):
    pairs = [(a, b) for a in left for b in right if is_complement(a, b)]
    return pairs[0] if len(pairs) == 1 else None


def _consensus(expr, node_type, members_of, build):
    """Drop an operand implied by the consensus of two others.

    With ``X*Y + !X*Z`` present, any further product containing ``Y*Z`` is
    redundant; dually for clauses of a product of sums.
    """
    if not isinstance(expr, node_type) or len(expr.operands) < 3:
        return None
    groups = [frozenset(members_of(operand)) for operand in expr.operands]
    for i, j in itertools.combinations(range(len(groups)), 2):
        pivot = _single_opposition(groups[i], groups[j])
        if pivot is None:
            continue
        left, right = pivot
        consensus = (groups[i] - {left}) | (groups[j] - {right})
        for k, group in enumerate(groups):
            if k in (i, j):
                continue
            if consensus <= group:
                return build(
                    operand for index, operand in enumerate(expr.operands) if index != k
                )
    return None


def _unwrap_single(expr):
    if isinstance(expr, (ast.And, ast.Or)) and len(expr.operands) == 1:
        return expr.operands[0]
    return None


# ---------------------------------------------------------------------------
# Textual replacements for LaTeX input
# ---------------------------------------------------------------------------


def _truth_constant(match: re.Match[str]) -> str:
    return "1" if match.group(1).upper().startswith("T") else "0"


def _latex_laws() -> List[Law]:
    latex = LawCategory.LATEX_PATTERNS
    return [
        Law(
            "LaTeX Delimiters (open)",
            "\\left( = (",
            latex,
            pattern=re.compile(r"\\left\s*[(\[]"),
            replacement="(",
        ),
        Law(
            "LaTeX Delimiters (close)",
            "\\right) = )",
            latex,
            pattern=re.compile(r"\\right\s*[)\]]"),
            replacement=")",
        ),
        Law(
            "LaTeX Truth Constants",
            "\\text{T} = 1, \\text{F} = 0",
            latex,
            pattern=re.compile(
                r"\\(?:text|mathrm)\s*\{\s*(T|F|TRUE|FALSE)\s*\}", re.IGNORECASE
            ),
            replacement=_truth_constant,
        ),
        Law(
            "LaTeX Top/Bottom",
            "\\top = 1, \\bot = 0",
            latex,
            pattern=re.compile(r"\\(top|bot)(?![a-zA-Z])"),
            replacement=lambda m: "1" if m.group(1) == "top" else "0",
        ),
        Law(
            "LaTeX Overline",
            "\\overline{X} = !(X)",
            latex,
            pattern=re.compile(r"\\overline\s*\{([^{}]*)\}"),
            replacement=r"!(\1)",
        ),
        Law(
            "LaTeX Negation",
            "\\lnot X = !X",
            latex,
            pattern=re.compile(r"\\(?:lnot|neg)(?![a-zA-Z])|¬"),
            replacement="!",
        ),
        Law(
            "LaTeX Conjunction",
            "X \\land Y = X * Y",
            latex,
            pattern=re.compile(r"\\(?:land|wedge|cdot)(?![a-zA-Z])|∧"),
            replacement="*",
        ),
        Law(
            "LaTeX Disjunction",
            "X \\lor Y = X + Y",
            latex,
            pattern=re.compile(r"\\(?:lor|vee)(?![a-zA-Z])|∨"),
            replacement="+",
        ),
        Law(
            "LaTeX Braces",
            "{X} = (X)",
            latex,
            pattern=re.compile(r"\{([^{}]*)\}"),
            replacement=r"(\1)",
        ),
        Law(
            "Remove Whitespace",
            "X Y = XY",
            latex,
            pattern=re.compile(r"\s+"),
            replacement="",
        ),
        Law(
            "Implicit Multiplication",
            "XY = X * Y",
            latex,
            pattern=re.compile(r"([A-Z01')])(?=[A-Z01(!])"),
            replacement=r"\1*",
        ),
    ]


# ---------------------------------------------------------------------------
# Library construction
# ---------------------------------------------------------------------------


def _structural_laws(expansion_limit: int) -> List[Law]:
    c = LawCategory
    return [
        # Identity laws
        Law(
            "AND Identity",
            "A * 1 = A",
            c.IDENTITY,
            partial(_drop_neutral, node_type=ast.And, neutral=ONE, build=conjoin),
        ),
        Law(
            "OR Identity",
            "A + 0 = A",
            c.IDENTITY,
            partial(_drop_neutral, node_type=ast.Or, neutral=ZERO, build=disjoin),
        ),
        # Domination laws
        Law(
            "AND Domination",
            "A * 0 = 0",
            c.DOMINATION,
            partial(_dominate, node_type=ast.And, dominant=ZERO),
        ),
        Law(
            "OR Domination",
            "A + 1 = 1",
            c.DOMINATION,
            partial(_dominate, node_type=ast.Or, dominant=ONE),
        ),
        # Idempotent laws
        Law(
            "AND Idempotent",
            "A * A = A",
            c.IDEMPOTENT,
            partial(_deduplicate, node_type=ast.And, build=conjoin),
        ),
        Law(
            "OR Idempotent",
            "A + A = A",
            c.IDEMPOTENT,
            partial(_deduplicate, node_type=ast.Or, build=disjoin),
        ),
        Law("Double Negation", "!(!A) = A", c.DOUBLE_NEGATION, _double_negation),
        # Complement laws
        Law(
            "AND Complement",
            "A * !A = 0",
            c.COMPLEMENT,
            partial(_complement, node_type=ast.And, result=ZERO),
        ),
        Law(
            "OR Complement",
            "A + !A = 1",
            c.COMPLEMENT,
            partial(_complement, node_type=ast.Or, result=ONE),
        ),
        # Absorption laws
        Law(
            "Absorption (A*(A+B)=A)",
            "A * (A + B) = A",
            c.ABSORPTION,
            partial(_absorb, node_type=ast.And, members_of=_disjuncts, build=conjoin),
        ),
        Law(
            "Absorption (A + A*B = A)",
            "A + A*B = A",
            c.ABSORPTION,
            partial(_absorb, node_type=ast.Or, members_of=_conjuncts, build=disjoin),
        ),
        # De Morgan's laws
        Law(
            "De Morgan's (product)",
            "!(X * Y) = !X + !Y",
            c.DE_MORGAN,
            partial(_de_morgan, inner_type=ast.And, build=disjoin),
        ),
        Law(
            "De Morgan's (sum)",
            "!(X + Y) = !X * !Y",
            c.DE_MORGAN,
            partial(_de_morgan, inner_type=ast.Or, build=conjoin),
        ),
        # Commutative & associative
        Law(
            "AND Commutative",
            "A * B = B * A",
            c.COMMUTATIVE,
            partial(_sort_operands, node_type=ast.And),
        ),
        Law(
            "OR Commutative",
            "A + B = B + A",
            c.COMMUTATIVE,
            partial(_sort_operands, node_type=ast.Or),
        ),
        Law(
            "AND Associative",
            "(A * B) * C = A * (B * C)",
            c.ASSOCIATIVE,
            partial(_flatten, node_type=ast.And),
        ),
        Law(
            "OR Associative",
            "(A + B) + C = A + (B + C)",
            c.ASSOCIATIVE,
            partial(_flatten, node_type=ast.Or),
        ),
        # Distributive expansions & merges
        Law(
            "Distributive (X*(Y+Z))",
            "X * (Y + Z) = XY + XZ",
            c.DISTRIBUTIVE,
            partial(
                _expand,
                node_type=ast.And,
                inner_type=ast.Or,
                neutral=ONE,
                dominant=ZERO,
                build_group=conjoin,
                build_result=disjoin,
                limit=expansion_limit,
            ),
        ),
        Law(
            "Distributive (X+(Y*Z))",
            "X + (Y * Z) = (X + Y)(X + Z)",
            c.DISTRIBUTIVE,
            partial(
                _expand,
                node_type=ast.Or,
                inner_type=ast.And,
                neutral=ZERO,
                dominant=ONE,
                build_group=disjoin,
                build_result=conjoin,
                limit=expansion_limit,
            ),
        ),
        Law(
            "Distributive (XY + X!Y = X)",
            "X*Y + X*!Y = X * (Y + !Y) = X",
            c.DISTRIBUTIVE,
            partial(
                _merge_adjacent, node_type=ast.Or, members_of=_conjuncts, build_group=conjoin
            ),
        ),
        Law(
            "Distributive ((X+Y)(X+!Y) = X)",
            "(X + Y)(X + !Y) = X + Y*!Y = X",
            c.DISTRIBUTIVE,
            partial(
                _merge_adjacent, node_type=ast.And, members_of=_disjuncts, build_group=disjoin
            ),
        ),
        # Constant reduction
        Law("NOT Constant", "!0 = 1, !1 = 0", c.CONSTANT_REDUCTION, _negate_constant),
        Law("Constant Folding", "1 * 0 = 0, 0 + 1 = 1", c.CONSTANT_REDUCTION, _fold_constants),
        # Common patterns
        Law(
            "Consensus Theorem (OR)",
            "XY + !XZ + YZ = XY + !XZ",
            c.COMMON_PATTERNS,
            partial(_consensus, node_type=ast.Or, members_of=_conjuncts, build=disjoin),
        ),
        Law(
            "Consensus Theorem (AND)",
            "(X + Y)(!X + Z)(Y + Z) = (X + Y)(!X + Z)",
            c.COMMON_PATTERNS,
            partial(_consensus, node_type=ast.And, members_of=_disjuncts, build=conjoin),
        ),
        # Special patterns
        Law("Redundant Grouping", "(V) = V", c.SPECIAL_PATTERNS, _unwrap_single),
    ]


@lru_cache(maxsize=None)
def build_law_library(expansion_limit: int = DEFAULT_EXPANSION_LIMIT) -> LawLibrary:
    """Construct the ordered law library.

    Libraries are cached per expansion limit, so every caller with the same
    configuration shares one immutable instance.

    Args:
        expansion_limit: Maximum terms a distributive expansion may generate

    Returns:
        LawLibrary with structural and textual laws in category order
    """
    return LawLibrary(_structural_laws(expansion_limit) + _latex_laws())


LAW_LIBRARY = build_law_library(DEFAULT_EXPANSION_LIMIT)
