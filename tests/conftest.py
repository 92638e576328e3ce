"""
Pytest configuration and shared fixtures for lsp-types tests.
"""

import pytest

from lsp_types.features import proposed_features


@pytest.fixture(autouse=True)
def stable_surface():
    """Run every test with the proposed surface off, whatever the environment says."""
    with proposed_features(False) as enabled:
        yield enabled


@pytest.fixture
def proposed(stable_surface):
    with proposed_features(True) as enabled:
        yield enabled

