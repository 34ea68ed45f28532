"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` and an
application built from explicit ``Settings``.
"""

import pytest
from fastapi.testclient import TestClient

from code_camp_api.app.core.config import Settings
from code_camp_api.app.core.db import get_connection, init_db
from code_camp_api.app.core.security import SUPERUSER_CLAIM, create_access_token
from code_camp_api.app.data.repository import CampRepository
from code_camp_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_path=str(tmp_path / "code_camp_test.db"),
        seed_database=False,
        token_key="test-signing-key",
        cors_origins=[],
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(settings):
    token = create_access_token(settings, {"sub": "admin@example.com", SUPERUSER_CLAIM: "True"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def camp_payload():
    return {
        "name": "Code Camp",
        "moniker": "cc2024",
        "length": 1,
        "eventDate": "2024-06-01",
        "location": "Atlanta, GA",
        "description": "A day of talks",
    }


@pytest.fixture
def created_camp(client, auth_headers, camp_payload):
    resp = client.post("/api/camps", json=camp_payload, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def database(settings):
    init_db(settings.database_path)
    return settings.database_path


@pytest.fixture
def repository(database):
    conn = get_connection(database)
    try:
        yield CampRepository(conn)
    finally:
        conn.close()
