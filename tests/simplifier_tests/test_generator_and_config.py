# tests/simplifier_tests/test_generator_and_config.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Test suite for expression generation and engine configuration

"""Test suite for expression generation and engine configuration."""

import pytest
from expression import to_string
from expression.ast_nodes import And, Or, Not
from simplifier import RewriteEngine, SimplifierConfig
from simplifier.generator import (
    ExpressionGenerator,
    ExpressionPattern,
    GeneratorOptions,
    OutputFormat,
)
from simplifier.laws import LawCategory
from simplifier.latex import is_latex
from utils.logger import get_logger


class TestExpressionGenerator:
    """Test cases for random and patterned generation."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_seed_reproduces_sequence(self):
        first = ExpressionGenerator(seed=7)
        second = ExpressionGenerator(seed=7)
        assert [to_string(first.generate(3)) for _ in range(5)] == [
            to_string(second.generate(3)) for _ in range(5)
        ]

    @pytest.mark.parametrize("complexity", [1, 2, 3, 4])
    def test_generate_always_has_an_operator(self, complexity):
        generator = ExpressionGenerator(seed=complexity)
        for _ in range(10):
            expr = generator.generate(complexity)
            root = expr.operand if isinstance(expr, Not) else expr
            assert isinstance(root, (And, Or))

    def test_variable_pool_grows_with_complexity(self):
        generator = ExpressionGenerator(seed=3)
        for _ in range(20):
            text = to_string(generator.generate(1))
            assert set(ch for ch in text if ch.isalpha()) <= set("ABC")

    def test_latex_output(self):
        generator = ExpressionGenerator(seed=11)
        text = generator.generate_text(2, OutputFormat.LATEX)
        self.logger.debug(f"Generated LaTeX: {text}")
        assert is_latex(text)

    def test_constants_only_when_enabled(self):
        options = GeneratorOptions(include_constants=True, constant_probability=1.0)
        text = to_string(ExpressionGenerator(options, seed=1).generate(1))
        assert set(ch for ch in text if ch.isalpha()) == set()

    # Each pattern must be simplified by a law of the named category
    PATTERN_CATEGORIES = [
        (ExpressionPattern.DE_MORGAN, LawCategory.DE_MORGAN),
        (ExpressionPattern.ABSORPTION, LawCategory.ABSORPTION),
        (ExpressionPattern.IDEMPOTENT, LawCategory.IDEMPOTENT),
        (ExpressionPattern.DISTRIBUTIVE, LawCategory.DISTRIBUTIVE),
        (ExpressionPattern.COMPLEMENT, LawCategory.COMPLEMENT),
    ]

    @pytest.mark.parametrize("pattern,category", PATTERN_CATEGORIES)
    def test_patterned_expressions(self, pattern, category):
        generator = ExpressionGenerator(seed=5)
        engine = RewriteEngine(SimplifierConfig(verify=True))
        for _ in range(5):
            expr = generator.generate_patterned(pattern)
            _, trace = engine.simplify(expr)
            categories = {step.category for step in trace}
            assert category in categories, f"{pattern} produced {expr}"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"variables": []},
            {"variables": ["a"]},
            {"variables": ["AB"]},
            {"negation_probability": 1.5},
            {"constant_probability": -0.1},
        ],
    )
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValueError):
            GeneratorOptions(**kwargs)

    def test_invalid_complexity(self):
        with pytest.raises(ValueError):
            ExpressionGenerator().generate(0)


class TestSimplifierConfig:
    """Test cases for configuration validation."""

    def test_defaults(self):
        config = SimplifierConfig()
        assert config.max_iterations == 50
        assert config.max_node_rewrites == 20
        assert config.expansion_limit == 64
        assert config.verify is False
        assert config.record_trace is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_iterations": 0},
            {"max_node_rewrites": 0},
            {"expansion_limit": 1},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            SimplifierConfig(**kwargs)

    def test_config_is_frozen(self):
        config = SimplifierConfig()
        with pytest.raises(AttributeError):
            config.max_iterations = 10
