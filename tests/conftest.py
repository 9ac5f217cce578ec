"""
Shared pytest fixtures and configuration for typepred tests.

This module provides:
- Quiet structured logging for every test
- Registry isolation for tests that register their own predicates

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(scratch_predicates):
        ...
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure typepred package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typepred.core.logging import configure_logging
from typepred.core.registry import list_predicates, unregister_predicate


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def quiet_logging() -> Generator[None, None, None]:
    """Keep debug events out of test output unless a test opts in."""
    configure_logging(level="WARNING", json_format=True, service="typepred-tests")
    yield


# =============================================================================
# Registry Cleanup Fixtures
# =============================================================================


@pytest.fixture
def scratch_predicates() -> Generator[None, None, None]:
    """
    Remove any predicate a test registers.

    Not auto-applied because most tests don't modify the registry.
    """
    before = set(list_predicates())
    yield
    for name in sorted(set(list_predicates()) - before):
        try:
            unregister_predicate(name)
        except KeyError:
            # Already removed along with its target
            pass
