"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # End-to-end tests through files and the CLI

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    ITEM_TTL,
    LINKED_LIST_TTL,
    ORDERED_LIST_TTL,
    parse_turtle,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end tests through files and the CLI")


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def item_graph():
    """Single item result: :alice with a type, literals and a nested :bob."""
    return parse_turtle(ITEM_TTL)


@pytest.fixture
def linked_list_graph():
    """Linked list result: :first -> :second -> :third."""
    return parse_turtle(LINKED_LIST_TTL)


@pytest.fixture
def ordered_list_graph():
    """List items ordered ascending by :rank, one item without a rank."""
    return parse_turtle(ORDERED_LIST_TTL)


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def item_ttl_file(tmp_path):
    """Create a temporary Turtle file holding the single item result."""
    path = tmp_path / "item.ttl"
    path.write_text(ITEM_TTL, encoding="utf-8")
    return path


@pytest.fixture
def linked_list_ttl_file(tmp_path):
    """Create a temporary Turtle file holding the linked list result."""
    path = tmp_path / "list.ttl"
    path.write_text(LINKED_LIST_TTL, encoding="utf-8")
    return path
