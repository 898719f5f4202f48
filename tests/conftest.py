"""Shared fixtures — mongomock database, auth override and an async test client.

Every test gets a fresh in-memory ``mongomock`` client swapped in for the
process-wide ``MongoClient``, so services run their real queries without
a server.  ``client`` authenticates every request as ``current_user``;
``anon_client`` leaves ``get_current_user`` in place for auth tests.
Startup events do not run under ``ASGITransport``, so neither MongoDB nor
Firebase is contacted.
"""

import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "assignment_api_test")
os.environ.setdefault("FIREBASE_CREDENTIALS", "tests/no-service-account.json")

import mongomock
import pytest
from httpx import ASGITransport, AsyncClient

import assignment_api.app.core.db as db_module
from assignment_api.app.core.config import settings
from assignment_api.app.core.security import get_current_user
from assignment_api.app.main import app


@pytest.fixture
def mongo(monkeypatch):
    """Fresh mongomock database used by every service call in the test."""
    mock_client = mongomock.MongoClient()
    monkeypatch.setattr(db_module, "_client", mock_client)
    return mock_client[settings.mongo_db]


@pytest.fixture
def current_user():
    """Decoded token claims; tests may mutate this dict before requests."""
    return {"uid": "uid-alice", "email": "alice@example.com", "name": "Alice"}


@pytest.fixture
async def client(mongo, current_user):
    app.dependency_overrides[get_current_user] = lambda: current_user
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def anon_client(mongo):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
