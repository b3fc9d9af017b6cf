# tests/conftest.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Krypto tests.

The configuration handles:
- Python path setup for module imports
- Test environment verification
- Common quiz fixtures
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
    """Verify that the project packages can be imported.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import quiz
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def sample_quiz():
    """Provide a quiz whose cards sum to the target.

    Returns:
        Quiz: Cards 1..5 with target 15
    """
    from quiz import Quiz

    return Quiz(cards=(1, 2, 3, 4, 5), target=15)


@pytest.fixture
def runaway_expression():
    """Provide an expression long enough to exceed the default operation ceiling.

    Returns:
        str: Four hundred chained additions
    """
    return "1+" * 400 + "1"
