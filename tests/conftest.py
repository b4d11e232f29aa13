"""Shared fixtures: fast settings and a lifespan-managed test client."""

import pytest
from fastapi.testclient import TestClient

from demoapp.app import create_app
from demoapp.config import Settings


@pytest.fixture
def settings():
    """Settings with a long task short enough for the test suite."""
    return Settings(long_task_steps=10, long_task_step_seconds=0.01)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.state.shutdown_calls = []
    app.state.shutdown_trigger = lambda: app.state.shutdown_calls.append(True)
    return app


@pytest.fixture
def client(app):
    """Test client inside a ``with`` block so startup/shutdown hooks run."""
    with TestClient(app) as client:
        yield client
