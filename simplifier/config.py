# simplifier/config.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Tunable limits for the rewrite engine

"""Configuration for the rewrite engine.

All limits exist to keep the worst-case work of a single simplification
request explicit: ``max_iterations`` bounds the number of bottom-up passes,
``max_node_rewrites`` bounds how often one node may be rewritten within a
pass, and ``expansion_limit`` bounds the number of terms a distributive
expansion may generate.
"""

from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 50
DEFAULT_MAX_NODE_REWRITES = 20
DEFAULT_EXPANSION_LIMIT = 64


@dataclass(frozen=True)
class SimplifierConfig:
    """Limits and switches for one simplification run.

    Attributes:
        max_iterations: Maximum number of full bottom-up passes
        max_node_rewrites: Maximum law applications on one node per pass
        expansion_limit: Maximum terms produced by a distributive expansion
        verify: Compare truth tables of input and result after simplifying
        record_trace: Keep per-step trace records
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    max_node_rewrites: int = DEFAULT_MAX_NODE_REWRITES
    expansion_limit: int = DEFAULT_EXPANSION_LIMIT
    verify: bool = False
    record_trace: bool = True

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.max_node_rewrites < 1:
            raise ValueError(
                f"max_node_rewrites must be positive, got {self.max_node_rewrites}"
            )
        if self.expansion_limit < 2:
            raise ValueError(
                f"expansion_limit must be at least 2, got {self.expansion_limit}"
            )
