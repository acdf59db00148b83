# tests/simplifier_tests/test_engine.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Test suite for the fixpoint rewrite engine

"""Test suite for the fixpoint rewrite engine.

Covers end-to-end simplification scenarios, trace recording, the iteration
cap, determinism, and the soundness of results checked by truth table.
"""

import pytest
from expression import parse, to_string, InvariantViolation
from expression.ast_nodes import Variable, ZERO
from simplifier import RewriteEngine, SimplifierConfig, simplify
from simplifier.evaluator import equivalent
from simplifier.generator import ExpressionGenerator
from simplifier.laws import Law, LawCategory, LawLibrary
from utils.logger import get_logger


class TestSimplificationScenarios:
    """Test cases for complete simplifications."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    SCENARIOS = [
        ("A*1", "A"),
        ("A+1", "1"),
        ("A*!A", "0"),
        ("!(A*B)", "!A+!B"),
        ("A*(A+B)", "A"),
        ("A+0", "A"),
        ("A*0", "0"),
        ("A+A", "A"),
        ("!!A", "A"),
        ("A+!A", "1"),
        ("!(A+!B)", "!A*B"),
        ("A*B+A*!B", "A"),
        ("AB+!AC+BC", "A*B+!A*C"),
        ("(A+B)(A+C)", "A+B*C"),
        ("A+A*B+!A", "1"),
        ("!1+A*0", "0"),
        ("1*0", "0"),
        ("B*A+C", "A*B+C"),
        ("A(B+C)", "A*(B+C)"),
        ("((A*B)*C)", "A*B*C"),
        ("A'+A", "1"),
    ]

    @pytest.mark.parametrize("text,expected", SCENARIOS)
    def test_scenario(self, engine, text, expected):
        """Test the simplified form of a known expression."""
        result, trace = engine.simplify(parse(text))

        self.logger.debug(f"{text} -> {to_string(result)} via {trace.laws_applied}")
        assert to_string(result) == expected
        assert trace.converged

    @pytest.mark.parametrize("text,_", SCENARIOS)
    def test_simplification_is_idempotent(self, engine, text, _):
        """Simplifying a simplified expression changes nothing."""
        once, _trace = engine.simplify(parse(text))
        twice, trace = engine.simplify(once)
        assert twice == once
        assert trace.converged

    def test_already_simple_expression_has_empty_trace(self, engine):
        result, trace = engine.simplify(parse("A*B+C"))
        assert to_string(result) == "A*B+C"
        assert len(trace) == 0
        assert trace.iterations == 1
        assert trace.converged

    def test_input_is_not_mutated(self, engine):
        expr = parse("A*(A+B)")
        engine.simplify(expr)
        assert to_string(expr) == "A*(A+B)"

    def test_module_level_simplify(self):
        result, trace = simplify(parse("A*1"))
        assert result == Variable("A")
        assert trace.laws_applied == ["AND Identity"]


class TestTrace:
    """Test cases for the rewrite trace."""

    def test_trace_records_node_rewrites(self):
        engine = RewriteEngine()
        result, trace = engine.simplify(parse("A*1"))

        assert len(trace) == 1
        step = trace.steps[0]
        assert step.law_name == "AND Identity"
        assert step.formula == "A * 1 = A"
        assert step.category is LawCategory.IDENTITY
        assert step.before_text == "A*1"
        assert step.after_text == "A"
        assert step.iteration == 1
        assert str(step) == "AND Identity: A*1 → A"

    def test_trace_order_follows_law_order(self):
        _, trace = RewriteEngine().simplify(parse("1*0"))
        assert trace.laws_applied == ["AND Commutative", "Constant Folding"]

    def test_trace_spans_passes(self):
        _, trace = RewriteEngine().simplify(parse("!(A+!B)"))
        assert trace.laws_applied == ["De Morgan's (sum)", "Double Negation"]
        assert [step.iteration for step in trace] == [1, 2]
        assert trace.iterations == 3

    def test_trace_can_be_disabled(self):
        engine = RewriteEngine(SimplifierConfig(record_trace=False))
        result, trace = engine.simplify(parse("!(A+!B)"))
        assert to_string(result) == "!A*B"
        assert len(trace) == 0
        assert trace.converged

    def test_latex_rendering_of_steps(self):
        _, trace = RewriteEngine().simplify(parse("!(A*B)"))
        step = trace.steps[0]
        assert step.before_latex == "\\lnot(A \\land B)"
        assert step.after_latex == "\\lnot A \\lor \\lnot B"


class TestTermination:
    """Test cases for the iteration cap and non-convergence flag."""

    def test_iteration_cap_reports_non_convergence(self):
        result, trace = RewriteEngine().simplify(parse("!!A*1"), max_iterations=1)
        assert result == Variable("A")
        assert not trace.converged
        assert trace.iterations == 1

    def test_same_input_converges_with_default_cap(self):
        result, trace = RewriteEngine().simplify(parse("!!A*1"))
        assert result == Variable("A")
        assert trace.converged
        assert trace.iterations == 2

    def test_configured_cap(self):
        engine = RewriteEngine(SimplifierConfig(max_iterations=1))
        _, trace = engine.simplify(parse("!(A+!B)"))
        assert not trace.converged

    @pytest.mark.parametrize("limit", [0, -3])
    def test_invalid_cap(self, limit):
        with pytest.raises(ValueError):
            RewriteEngine().simplify(parse("A"), max_iterations=limit)

    def test_expansion_limit_blocks_expansion(self):
        engine = RewriteEngine(SimplifierConfig(expansion_limit=2))
        result, trace = engine.simplify(parse("(A+B)*(A+C)"))
        assert to_string(result) == "(A+B)*(A+C)"
        assert trace.converged


class TestSoundness:
    """Property checks over generated expressions."""

    @pytest.mark.parametrize("seed", range(40))
    def test_generated_expressions_stay_equivalent(self, seed):
        generator = ExpressionGenerator(seed=seed)
        engine = RewriteEngine(SimplifierConfig(verify=True))

        for complexity in (1, 2, 3, 4):
            expr = generator.generate(complexity)
            result, trace = engine.simplify(expr)
            assert equivalent(expr, result), f"{expr} simplified to {result}"
            assert trace.converged, f"{expr} did not converge"

    @pytest.mark.parametrize("seed", range(10))
    def test_generated_results_are_idempotent(self, seed):
        generator = ExpressionGenerator(seed=seed)
        engine = RewriteEngine()
        expr = generator.generate(4)
        once, _ = engine.simplify(expr)
        twice, _ = engine.simplify(once)
        assert twice == once

    def test_simplification_is_deterministic(self):
        expr = parse("C*B+!(A*C)+B*!A*(C+A)")
        first, first_trace = RewriteEngine().simplify(expr)
        second, second_trace = RewriteEngine().simplify(expr)
        assert first == second
        assert first_trace.laws_applied == second_trace.laws_applied


class TestInvariantViolations:
    """Test cases for internal faults surfacing from laws."""

    def test_unsound_law_detected_by_verification(self):
        bogus = Law(
            "Bogus",
            "A = 0",
            LawCategory.IDENTITY,
            rewrite=lambda e: ZERO if isinstance(e, Variable) else None,
        )
        engine = RewriteEngine(SimplifierConfig(verify=True), LawLibrary([bogus]))
        with pytest.raises(InvariantViolation):
            engine.simplify(parse("A"))

    def test_unsound_law_passes_without_verification(self):
        bogus = Law(
            "Bogus",
            "A = 0",
            LawCategory.IDENTITY,
            rewrite=lambda e: ZERO if isinstance(e, Variable) else None,
        )
        result, _ = RewriteEngine(library=LawLibrary([bogus])).simplify(parse("A"))
        assert result == ZERO

    def test_non_expression_result_is_fatal(self):
        broken = Law(
            "Broken",
            "A = ?",
            LawCategory.IDENTITY,
            rewrite=lambda e: "not an expression" if isinstance(e, Variable) else None,
        )
        with pytest.raises(InvariantViolation):
            RewriteEngine(library=LawLibrary([broken])).simplify(parse("A"))
