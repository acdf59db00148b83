# tests/conftest.py
# This file is part of Lattice - A Boolean Algebra Simplifier
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Lattice simplifier tests.

This module provides pytest configuration, fixtures, and utilities for testing
the boolean algebra simplifier. It ensures proper module path setup and
provides common test infrastructure for all test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import simplifier
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def engine():
    """Provide a rewrite engine with verification enabled.

    Returns:
        RewriteEngine: Engine that checks every result by truth table
    """
    from simplifier import RewriteEngine, SimplifierConfig

    return RewriteEngine(SimplifierConfig(verify=True))


@pytest.fixture
def law_library():
    """Provide the shared default law library.

    Returns:
        LawLibrary: Library built with the default expansion limit
    """
    from simplifier import LAW_LIBRARY

    return LAW_LIBRARY


@pytest.fixture
def expression_file(tmp_path):
    """Provide a factory writing expression text to a temporary file.

    Returns:
        Callable[[str], Path]: Writes the text and returns the file path
    """

    def _write(text: str) -> Path:
        path = tmp_path / "expression.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
