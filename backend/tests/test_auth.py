"""
Tests for bearer token authentication
"""

from types import SimpleNamespace

import pytest
from fastapi import HTTPException
from httpx import AsyncClient
from jose import jwt

from app.dependencies import auth as auth_deps


def make_request(authorization=None):
    headers = {"authorization": authorization} if authorization is not None else {}
    return SimpleNamespace(headers=headers)


def test_extract_bearer_token():
    assert auth_deps.extract_bearer_token(make_request("Bearer abc")) == "abc"
    assert auth_deps.extract_bearer_token(make_request("bearer  abc ")) == "abc"
    assert auth_deps.extract_bearer_token(make_request("Basic abc")) is None
    assert auth_deps.extract_bearer_token(make_request("Bearer ")) is None
    assert auth_deps.extract_bearer_token(make_request()) is None


@pytest.mark.asyncio
async def test_get_current_user_reads_subject_claim():
    token = jwt.encode({"sub": "alice"}, auth_deps.settings.JWT_SECRET, algorithm="HS256")

    user = await auth_deps.get_current_user(make_request(f"Bearer {token}"))

    assert user.user_id == "alice"


@pytest.mark.asyncio
async def test_get_current_user_rejects_missing_header():
    with pytest.raises(HTTPException) as exc:
        await auth_deps.get_current_user(make_request())

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_rejects_missing_subject_claim(monkeypatch):
    monkeypatch.setattr(
        auth_deps.jwt,
        "decode",
        lambda *_args, **_kwargs: {"email": "alice@example.com"},
    )

    with pytest.raises(HTTPException) as exc:
        await auth_deps.get_current_user(make_request("Bearer token"))

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_rejects_blank_subject_claim(monkeypatch):
    monkeypatch.setattr(auth_deps.jwt, "decode", lambda *_args, **_kwargs: {"sub": "  "})

    with pytest.raises(HTTPException) as exc:
        await auth_deps.get_current_user(make_request("Bearer token"))

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_rejects_wrong_signature():
    token = jwt.encode({"sub": "alice"}, "some-other-secret", algorithm="HS256")

    with pytest.raises(HTTPException) as exc:
        await auth_deps.get_current_user(make_request(f"Bearer {token}"))

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_unavailable_without_verifier(monkeypatch):
    monkeypatch.setattr(auth_deps.settings, "JWT_SECRET", "")

    with pytest.raises(HTTPException) as exc:
        await auth_deps.get_current_user(make_request("Bearer token"))

    assert exc.value.status_code == 503


def test_verify_token_checks_audience_when_configured(monkeypatch):
    monkeypatch.setattr(auth_deps.settings, "JWT_AUDIENCE", "watchparty")
    secret = auth_deps.settings.JWT_SECRET

    good = jwt.encode({"sub": "alice", "aud": "watchparty"}, secret, algorithm="HS256")
    bad = jwt.encode({"sub": "alice", "aud": "elsewhere"}, secret, algorithm="HS256")

    assert auth_deps.verify_token(good).user_id == "alice"
    assert auth_deps.verify_token(bad) is None


@pytest.mark.asyncio
async def test_protected_endpoint_requires_token(client: AsyncClient):
    response = await client.get("/api/tools/watchparty/user")
    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized: Missing or invalid token"


@pytest.mark.asyncio
async def test_protected_endpoint_rejects_garbage_token(client: AsyncClient):
    response = await client.get(
        "/api/tools/watchparty/user",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized: Invalid or expired token"
