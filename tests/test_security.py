"""Token validation and the authorization hook."""

import time

from fastapi.testclient import TestClient

from code_camp_api.app.core.security import (
    SUPERUSER_CLAIM,
    create_access_token,
    decode_access_token,
    superuser_policy,
)
from code_camp_api.app.main import create_app


def test_token_round_trip(settings):
    token = create_access_token(settings, {"sub": "jane", SUPERUSER_CLAIM: "True"})
    claims = decode_access_token(settings, token)
    assert claims["sub"] == "jane"
    assert claims["iss"] == settings.token_issuer
    assert claims["aud"] == settings.token_audience


def test_expired_token_rejected(settings):
    token = create_access_token(settings, {"sub": "jane", "exp": int(time.time()) - 10})
    assert decode_access_token(settings, token) is None


def test_wrong_audience_rejected(settings):
    token = create_access_token(settings, {"sub": "jane", "aud": "someone-else"})
    assert decode_access_token(settings, token) is None


def test_tampered_token_rejected(settings):
    token = create_access_token(settings, {"sub": "jane"})
    header, payload, signature = token.split(".")
    assert decode_access_token(settings, f"{header}.{payload}x.{signature}") is None
    assert decode_access_token(settings, "not-a-token") is None


def test_superuser_policy():
    assert superuser_policy({SUPERUSER_CLAIM: "True"})
    assert not superuser_policy({SUPERUSER_CLAIM: "False"})
    assert not superuser_policy({})


def test_token_without_superuser_claim_is_forbidden(client, settings):
    token = create_access_token(settings, {"sub": "jane"})
    resp = client.post(
        "/api/camps",
        json={"name": "Code Camp", "moniker": "cc"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert resp.status_code == 403


def test_invalid_token_is_unauthorized(client):
    resp = client.delete("/api/camps/1", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_custom_policy(settings):
    app = create_app(settings, authorization_policy=lambda claims: claims.get("sub") == "organizer")
    organizer = create_access_token(settings, {"sub": "organizer"})
    with TestClient(app) as client:
        resp = client.post(
            "/api/camps",
            json={"name": "Code Camp", "moniker": "cc"},
            headers={"Authorization": f"Bearer {organizer}"},
        )
        assert resp.status_code == 201


def test_auth_disabled(settings):
    settings.auth_enabled = False
    with TestClient(create_app(settings)) as client:
        resp = client.post("/api/camps", json={"name": "Code Camp", "moniker": "cc"})
        assert resp.status_code == 201
