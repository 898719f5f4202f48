"""Token handling — 401 without a bearer token, 403 when Firebase rejects it."""

import pytest
from firebase_admin import auth

from assignment_api.app.core import security


@pytest.fixture
def verifier(monkeypatch):
    """Replace Firebase verification; returns the list of tokens seen."""
    seen = []

    def fake_verify(token, *args, **kwargs):
        seen.append(token)
        if token == "good-token":
            return {"uid": "uid-erin", "email": "erin@example.com", "name": "Erin"}
        if token == "expired-token":
            raise auth.ExpiredIdTokenError("Token expired", cause=None)
        raise ValueError("Wrong number of segments in token")

    monkeypatch.setattr(security.auth, "verify_id_token", fake_verify)
    return seen


async def test_missing_header_returns_401(anon_client, verifier):
    res = await anon_client.post("/assignments", json={"title": "x"})
    assert res.status_code == 401
    assert res.json() == {"success": False, "message": "Unauthorized"}
    assert verifier == []


async def test_non_bearer_scheme_returns_401(anon_client, verifier):
    res = await anon_client.get(
        "/submitted-assignments",
        params={"email": "a@example.com"},
        headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert res.status_code == 401


async def test_malformed_token_returns_403(anon_client, verifier):
    res = await anon_client.post(
        "/assignments", json={"title": "x"},
        headers={"Authorization": "Bearer garbage"},
    )
    assert res.status_code == 403
    assert res.json() == {"success": False, "message": "Forbidden"}


async def test_expired_token_returns_403(anon_client, verifier):
    res = await anon_client.post(
        "/assignments", json={"title": "x"},
        headers={"Authorization": "Bearer expired-token"},
    )
    assert res.status_code == 403


async def test_valid_token_reaches_handler_with_claims(anon_client, verifier, mongo):
    res = await anon_client.post(
        "/assignments", json={"title": "Queues"},
        headers={"Authorization": "Bearer good-token"},
    )
    assert res.status_code == 200
    assert verifier == ["good-token"]
    stored = mongo["assignments"].find_one({"title": "Queues"})
    assert stored["creator"]["email"] == "erin@example.com"


async def test_public_routes_need_no_token(anon_client, verifier):
    res = await anon_client.get("/assignments")
    assert res.status_code == 200
    assert verifier == []
