# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the test modules.
#
# Every test gets its own SQLite file under pytest's tmp_path, so tests never
# see each other's users.
# =============================================================================

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.db.engine import AppContext
from app.main import create_app

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Default settings pointed at a throwaway database."""
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.sqlite'}")


@pytest.fixture
def make_client(tmp_path):
    """
    Factory for a TestClient running the app with overridden settings.

    The client is entered as a context manager so the lifespan opens and
    closes storage exactly as uvicorn would.
    """
    clients = []

    def _make(**overrides) -> TestClient:
        overrides.setdefault("DATABASE_URL", f"sqlite:///{tmp_path / 'test.sqlite'}")
        client = TestClient(create_app(Settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def context(settings):
    """An opened AppContext for persistence-level tests."""
    ctx = AppContext(settings)
    ctx.open()
    yield ctx
    ctx.close()


@pytest.fixture
def ada(client) -> dict:
    """A stored user created through the API."""
    response = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})
    assert response.status_code == 200
    return response.json()
