"""Shared fixtures for API integration tests.

This module provides the TestClient with a SystemState injected through
FastAPI's dependency override system.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_system_state
from main import app


@pytest.fixture
def client_with_state(fresh_state):
    """Provide a TestClient with a fresh SystemState injected.

    Args:
        fresh_state: A pytest fixture providing a fresh SystemState.

    Yields:
        A tuple of (TestClient, SystemState) for testing.

    Example:
        def test_something(client_with_state):
            client, state = client_with_state
            response = client.get("/filesystem/paths")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_system_state] = lambda: fresh_state

    client = TestClient(app)

    yield client, fresh_state

    app.dependency_overrides.clear()
