"""Tests for the /api/v1/coaches endpoints."""

from __future__ import annotations

BASE = "/api/v1/coaches"


def _create(client, **body):
    resp = client.post(BASE, json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


# =============================================================================
# POST / GET
# =============================================================================


class TestCreateCoach:
    def test_created(self, client):
        resp = client.post(BASE, json={"first_name": "Jupp", "last_name": "Heynckes"})
        assert resp.status_code == 201
        body = resp.json()
        assert body["id"] >= 1
        assert body["first_name"] == "Jupp"
        assert body["team_id"] is None

    def test_location_header(self, client):
        resp = client.post(BASE, json={"first_name": "Jupp"})
        coach_id = resp.json()["id"]
        assert resp.headers["Location"].endswith(f"{BASE}/{coach_id}")

    def test_location_resolves(self, client):
        resp = client.post(BASE, json={"first_name": "Jupp"})
        fetched = client.get(resp.headers["Location"])
        assert fetched.status_code == 200
        assert fetched.json() == resp.json()

    def test_explicit_id(self, client):
        assert _create(client, id=9, first_name="Jupp")["id"] == 9

    def test_duplicate_id(self, client):
        _create(client, id=9, first_name="Jupp")
        resp = client.post(BASE, json={"id": 9, "first_name": "Other"})
        assert resp.status_code == 409
        assert resp.headers["content-type"].startswith("application/problem+json")

    def test_empty_body_allowed(self, client):
        body = _create(client)
        assert body["first_name"] is None


class TestGetCoach:
    def test_found(self, client):
        created = _create(client, first_name="Jupp", last_name="Heynckes")
        resp = client.get(f"{BASE}/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    def test_not_found(self, client):
        resp = client.get(f"{BASE}/999")
        assert resp.status_code == 404
        assert resp.json()["status"] == 404

    def test_list(self, client):
        _create(client, first_name="A")
        _create(client, first_name="B")
        _create(client, first_name="C")
        resp = client.get(BASE, params={"limit": 2})
        body = resp.json()
        assert [c["first_name"] for c in body["data"]] == ["A", "B"]
        assert body["page"] == {"total": 3, "limit": 2, "offset": 0, "has_more": True}

    def test_list_limit_validated(self, client):
        assert client.get(BASE, params={"limit": 0}).status_code == 422


# =============================================================================
# PUT
# =============================================================================


class TestUpdateCoach:
    def test_known(self, client):
        created = _create(client, first_name="Jupp", last_name="Heynckes")
        resp = client.put(
            f"{BASE}/{created['id']}", json={"first_name": "Jupp", "last_name": "Derwall"}
        )
        assert resp.status_code == 200
        assert resp.json()["last_name"] == "Derwall"
        assert client.get(f"{BASE}/{created['id']}").json()["last_name"] == "Derwall"

    def test_unknown_is_404_with_entity(self, client):
        resp = client.put(f"{BASE}/42", json={"first_name": "Nobody"})
        assert resp.status_code == 404
        body = resp.json()
        assert body["title"] == "Don't know coach"
        assert body["details"]["entity"] == {"id": 42, "first_name": "Nobody", "last_name": None}

    def test_unknown_is_not_created(self, client):
        client.put(f"{BASE}/42", json={"first_name": "Nobody"})
        assert client.get(f"{BASE}/42").status_code == 404
        assert client.get(BASE).json()["page"]["total"] == 0

    def test_path_id_wins(self, client):
        created = _create(client, first_name="Jupp")
        resp = client.put(f"{BASE}/{created['id']}", json={"id": 500, "first_name": "Otto"})
        assert resp.status_code == 200
        assert resp.json()["id"] == created["id"]
        assert client.get(f"{BASE}/500").status_code == 404


# =============================================================================
# DELETE
# =============================================================================


class TestDeleteCoach:
    def test_deleted(self, client):
        created = _create(client, first_name="Jupp")
        resp = client.delete(f"{BASE}/{created['id']}")
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"{BASE}/{created['id']}").status_code == 404

    def test_not_found(self, client):
        assert client.delete(f"{BASE}/1").status_code == 404

    def test_team_loses_coach(self, client):
        coach = _create(client, first_name="Jupp")
        team = client.post("/api/v1/teams", json={"name": "Bayern", "coach_id": coach["id"]}).json()
        client.delete(f"{BASE}/{coach['id']}")
        assert client.get(f"/api/v1/teams/{team['id']}").json()["coach_id"] is None
