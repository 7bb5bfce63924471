"""Pytest configuration and shared fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from netkit.main import app


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test."""
    # Store original env vars
    original_env = os.environ.copy()

    yield

    # Restore original env vars after test
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def client():
    """Create test client for the default application."""
    return TestClient(app)
