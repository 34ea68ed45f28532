"""Application wiring: cross-origin policies."""

from dataclasses import replace

from fastapi.testclient import TestClient

from code_camp_api.app.main import create_app


def _client(settings):
    return TestClient(create_app(settings))


def test_any_origin_may_read(settings):
    with _client(replace(settings, cors_allow_any_get=True)) as client:
        resp = client.get("/api/camps", headers={"Origin": "http://elsewhere.example"})
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"


def test_any_origin_get_policy_refuses_writes(settings):
    with _client(replace(settings, cors_allow_any_get=True)) as client:
        resp = client.options(
            "/api/camps",
            headers={"Origin": "http://elsewhere.example", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 400
        assert "method" in resp.text
        assert resp.headers["access-control-allow-methods"] == "GET"


def test_origin_list_only_allows_listed_origins(settings):
    with _client(replace(settings, cors_origins=["http://localhost:8000"])) as client:
        allowed = client.get("/api/camps", headers={"Origin": "http://localhost:8000"})
        assert allowed.headers["access-control-allow-origin"] == "http://localhost:8000"
        other = client.get("/api/camps", headers={"Origin": "http://elsewhere.example"})
        assert "access-control-allow-origin" not in other.headers
