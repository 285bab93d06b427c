"""Pytest configuration and fixtures."""

import pytest

from tests.helpers.mocks import MockPoolFetcher


@pytest.fixture
def mock_fetcher() -> MockPoolFetcher:
    """Empty mock fetcher; tests fill in .pools."""
    return MockPoolFetcher()
