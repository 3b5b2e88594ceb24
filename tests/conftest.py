"""Pytest configuration and shared fixtures for maybe-chain tests."""

import pytest

from maybe_chain import _config
from maybe_chain._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def reset_config():
    """Start every test from the default configuration."""
    _config.reset()
    yield
    _config.reset()


@pytest.fixture(autouse=True)
def cleanup_hooks():
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def user():
    """Sample record for extend/assign tests."""
    return {'id': 1, 'name': 'Alice'}


@pytest.fixture
def numbers():
    """Sample sequence for filter_map tests."""
    return [1, 2, 3, 4, 5]
