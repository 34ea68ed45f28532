"""HTTP tests for /api/camps/{moniker}/speakers."""

import pytest


@pytest.fixture
def other_camp(client, auth_headers):
    resp = client.post(
        "/api/camps",
        json={"name": "Other Camp", "moniker": "other-moniker"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def jane(client, auth_headers, created_camp):
    resp = client.post("/api/camps/cc2024/speakers", json={"name": "Jane"}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


def test_create_speaker_scenario(client, auth_headers, created_camp, other_camp):
    resp = client.post("/api/camps/cc2024/speakers", json={"name": "Jane"}, headers=auth_headers)
    assert resp.status_code == 201
    speaker = resp.json()
    assert resp.headers["location"].endswith(f"/api/camps/cc2024/speakers/{speaker['id']}")

    fetched = client.get(f"/api/camps/cc2024/speakers/{speaker['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Jane"
    assert fetched.json()["campMoniker"] == "cc2024"

    wrong = client.get(f"/api/camps/other-moniker/speakers/{speaker['id']}")
    assert wrong.status_code == 400
    assert wrong.json()["detail"] == "Speaker not in specified camp"


def test_scope_mismatch_for_unknown_moniker(client, jane):
    resp = client.get(f"/api/camps/nope/speakers/{jane['id']}")
    assert resp.status_code == 400


def test_get_missing_speaker(client, created_camp):
    resp = client.get("/api/camps/cc2024/speakers/999")
    assert resp.status_code == 404


def test_speaker_id_beyond_storage_range_is_not_found(client, auth_headers, created_camp):
    huge = 2 ** 70
    assert client.get(f"/api/camps/cc2024/speakers/{huge}").status_code == 404
    resp = client.delete(f"/api/camps/cc2024/speakers/{huge}", headers=auth_headers)
    assert resp.status_code == 404


def test_list_speakers(client, auth_headers, created_camp, other_camp, jane):
    client.post("/api/camps/other-moniker/speakers", json={"name": "Bob"}, headers=auth_headers)
    resp = client.get("/api/camps/cc2024/speakers")
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Jane"]
    assert client.get("/api/camps/unknown/speakers").json() == []


def test_camp_includes_speakers(client, created_camp, jane):
    camp = client.get(f"/api/camps/{created_camp['id']}?includeSpeakers=true").json()
    assert [s["id"] for s in camp["speakers"]] == [jane["id"]]
    assert camp["speakers"][0]["url"].endswith(f"/api/camps/cc2024/speakers/{jane['id']}")


def test_create_speaker_unknown_camp_has_no_side_effect(client, auth_headers, created_camp):
    resp = client.post("/api/camps/missing/speakers", json={"name": "Jane"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "could not find camp moniker missing"
    assert client.get("/api/camps/missing/speakers").json() == []
    assert client.get("/api/camps/cc2024/speakers").json() == []


def test_create_speaker_requires_name(client, auth_headers, created_camp):
    resp = client.post("/api/camps/cc2024/speakers", json={"bio": "no name"}, headers=auth_headers)
    assert resp.status_code == 400


def test_create_speaker_requires_token(client, created_camp):
    resp = client.post("/api/camps/cc2024/speakers", json={"name": "Jane"})
    assert resp.status_code == 401


def test_update_speaker_overwrites_all_fields(client, auth_headers, created_camp):
    created = client.post(
        "/api/camps/cc2024/speakers",
        json={"name": "Jane", "companyName": "Acme", "bio": "Talks a lot"},
        headers=auth_headers,
    ).json()
    resp = client.put(
        f"/api/camps/cc2024/speakers/{created['id']}",
        json={"name": "Jane Doe", "twitterName": "janedoe"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    stored = client.get(f"/api/camps/cc2024/speakers/{created['id']}").json()
    assert stored["name"] == "Jane Doe"
    assert stored["twitterName"] == "janedoe"
    assert stored["companyName"] is None
    assert stored["bio"] is None


def test_patch_speaker_with_same_values_succeeds(client, auth_headers, jane):
    resp = client.patch(f"/api/camps/cc2024/speakers/{jane['id']}", json={"name": "Jane"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Jane"


def test_update_speaker_wrong_camp(client, auth_headers, other_camp, jane):
    resp = client.put(
        f"/api/camps/other-moniker/speakers/{jane['id']}",
        json={"name": "Hijacked"},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert client.get(f"/api/camps/cc2024/speakers/{jane['id']}").json()["name"] == "Jane"


def test_update_missing_speaker(client, auth_headers, created_camp):
    resp = client.put("/api/camps/cc2024/speakers/5", json={"name": "x"}, headers=auth_headers)
    assert resp.status_code == 404


def test_delete_speaker(client, auth_headers, jane):
    resp = client.delete(f"/api/camps/cc2024/speakers/{jane['id']}", headers=auth_headers)
    assert resp.status_code == 204
    assert client.get(f"/api/camps/cc2024/speakers/{jane['id']}").status_code == 404


def test_delete_speaker_wrong_camp(client, auth_headers, other_camp, jane):
    resp = client.delete(f"/api/camps/other-moniker/speakers/{jane['id']}", headers=auth_headers)
    assert resp.status_code == 400
    assert client.get(f"/api/camps/cc2024/speakers/{jane['id']}").status_code == 200
