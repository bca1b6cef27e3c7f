"""Unit tests for the access gate (src/notesapi/middleware/auth.py)."""

import uuid
from datetime import timedelta
from typing import Optional

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from notesapi.config import Settings, get_settings
from notesapi.core.exceptions import AppError
from notesapi.main import app_error_handler
from notesapi.middleware.auth import RequestContext, get_current_user_id, require_auth
from notesapi.security import TokenService

SECRET = "middleware-secret"


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_exception_handler(AppError, app_error_handler)
    app.dependency_overrides[get_settings] = lambda: Settings(jwt_secret=SECRET)

    @app.get("/protected")
    async def protected(request: Request, context: RequestContext = Depends(require_auth)):
        return {"user_id": str(context.user_id), "state": str(request.state.user_id)}

    @app.get("/me")
    async def me(user_id=Depends(get_current_user_id)):
        return {"user_id": str(user_id)}

    return app


def _make_bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


@pytest.fixture
def client():
    return TestClient(build_app())


@pytest.fixture
def tokens():
    return TokenService(secret_key=SECRET)


def test_valid_token_attaches_user_id(client, tokens):
    uid = uuid.uuid4()
    resp = client.get("/protected", headers=_make_bearer(tokens.issue(uid)))

    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(uid), "state": str(uid)}


def test_get_current_user_id_dependency(client, tokens):
    uid = uuid.uuid4()
    resp = client.get("/me", headers=_make_bearer(tokens.issue(uid)))

    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(uid)}


def test_missing_header_is_token_invalid(client):
    resp = client.get("/protected")

    assert resp.status_code == 401
    assert resp.json() == {"success": False, "error": "Missing token", "code": "TOKEN_INVALID"}


@pytest.mark.parametrize(
    "headers",
    [
        {"Authorization": "Basic abc"},
        {"Authorization": "Bearer"},
        {"Authorization": "token-without-scheme"},
    ],
)
def test_malformed_header_is_token_invalid(client, headers):
    resp = client.get("/protected", headers=headers)

    assert resp.status_code == 401
    assert resp.json()["code"] == "TOKEN_INVALID"


def test_bad_signature_is_token_invalid(client):
    token = TokenService(secret_key="someone-else").issue(uuid.uuid4())
    resp = client.get("/protected", headers=_make_bearer(token))

    assert resp.status_code == 401
    assert resp.json()["code"] == "TOKEN_INVALID"


def test_expired_token_is_token_expired(client, tokens):
    token = tokens.issue(uuid.uuid4(), expires_delta=timedelta(seconds=-5))
    resp = client.get("/protected", headers=_make_bearer(token))

    assert resp.status_code == 401
    assert resp.json()["code"] == "TOKEN_EXPIRED"


def test_non_uuid_subject_is_token_invalid(client, tokens):
    resp = client.get("/protected", headers=_make_bearer(tokens.issue("not-a-uuid")))

    assert resp.status_code == 401
    assert resp.json()["code"] == "TOKEN_INVALID"
