# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from web.api import app


@pytest.fixture
def client():
    """TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a fixed sequence of answers."""
    def _feed(*answers):
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))
    return _feed
