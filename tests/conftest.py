"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test modules.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import patch

import pytest

from social_graph.graph.engine import SocialGraph

# Set test environment before importing app modules
os.environ["APP_ENV"] = "development"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Clear cached settings around every test."""
    from social_graph.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings() -> Generator[Any, None, None]:
    """Provide settings loaded from a controlled environment.

    Yields:
        Settings instance with small ranking defaults.
    """
    with patch.dict(
        os.environ,
        {
            "APP_ENV": "development",
            "GRAPH_DEFAULT_TOP_N": "2",
            "GRAPH_RECOMMENDATION_TOP_N": "2",
        },
    ):
        from social_graph.config import get_settings

        get_settings.cache_clear()
        yield get_settings()
        get_settings.cache_clear()


@pytest.fixture
def empty_graph() -> SocialGraph:
    """Create an empty graph."""
    return SocialGraph()


@pytest.fixture
def scenario_graph() -> SocialGraph:
    """Create the four-user graph.

    alice - bob, alice - charlie, bob - charlie, charlie - diana
    """
    graph = SocialGraph()
    graph.add_user("alice", "Alice Johnson", 25, "Boston")
    graph.add_user("bob", "Bob Smith", 28, "Denver")
    graph.add_user("charlie", "Charlie Brown", 22)
    graph.add_user("diana", "Diana Ross", 30)
    graph.add_friendship("alice", "bob")
    graph.add_friendship("alice", "charlie")
    graph.add_friendship("bob", "charlie")
    graph.add_friendship("charlie", "diana")
    return graph


@pytest.fixture
def demo_graph() -> SocialGraph:
    """Create the ten-user demo network plus a separate pair and one loner."""
    graph = SocialGraph()
    for name in [
        "alice", "bob", "charlie", "diana", "eve",
        "frank", "grace", "henry", "ivy", "jack",
        "kim", "leo", "mia",
    ]:
        graph.add_user(name, name.title())
    for a, b in [
        ("alice", "bob"), ("alice", "charlie"), ("alice", "diana"),
        ("bob", "charlie"), ("bob", "eve"), ("charlie", "frank"),
        ("diana", "eve"), ("diana", "grace"), ("eve", "frank"),
        ("eve", "henry"), ("frank", "grace"), ("grace", "henry"),
        ("henry", "ivy"), ("ivy", "jack"), ("jack", "alice"),
        ("kim", "leo"),
    ]:
        graph.add_friendship(a, b)
    return graph


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")
