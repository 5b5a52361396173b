# tests/conftest.py
# This file is part of Veritas - A Propositional Logic Calculator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Veritas test suites.

This module provides pytest configuration, fixtures, and utilities for testing
the propositional logic calculator. It ensures proper module path setup and
provides common formulas for the test modules.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
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

    Automatically runs before any tests to ensure the testing environment
    is properly configured. Skips the entire test session if critical
    dependencies are missing.

    Yields:
        None: Control to test execution
    """
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def tautologies():
    """Formulas that hold under every assignment.

    Returns:
        List[str]: Tautologies in mixed notation
    """
    return [
        "p∨~p",
        "p→p",
        "p -> p",
        "(p -> q) <-> (!q -> !p)",
        "~(p∧q) ↔ (~p∨~q)",
        "((p→q)∧(q→r))→(p→r)",
        "p xor q <-> !(p <-> q)",
        "s | !s",
    ]


@pytest.fixture
def non_tautologies():
    """Formulas falsified by at least one assignment.

    Returns:
        List[str]: Satisfiable or contradictory formulas
    """
    return [
        "p∧~p",
        "p",
        "p→q",
        "p ∨ q",
        "(p→q)→p",
        "p xor p",
    ]
