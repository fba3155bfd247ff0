# tests/conftest.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Modus test suite.

This module provides pytest configuration and fixtures shared by the test
packages. It ensures the project's top-level packages are importable when
the tests run from a source checkout.
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
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import model
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def state_domain():
    """The state/log domain used by the reference traces."""
    from model import StateWriterDomain

    return StateWriterDomain()


@pytest.fixture
def recording_domain():
    """The always-applicable recording domain."""
    from model import RecordingDomain

    return RecordingDomain()


@pytest.fixture
def initial_world():
    """Reference starting world: state -1, empty log."""
    from model import StateLog

    return StateLog(-1)
