"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration.
For shared marketplace builders, see tests/fixtures/marketplace_fixtures.py
"""

import pytest

from tests.fixtures.marketplace_fixtures import MarketplaceFixture


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def marketplace():
    """A fresh in-memory marketplace with the subject catalog loaded."""
    fixture = MarketplaceFixture()
    yield fixture
    fixture.close()
