"""Tests for the /api/v1/teams endpoints."""

from __future__ import annotations

BASE = "/api/v1/teams"


def _coach(client, **body):
    return client.post("/api/v1/coaches", json=body or {"first_name": "Jupp"}).json()


def _team(client, **body):
    resp = client.post(BASE, json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestCreateTeam:
    def test_created(self, client):
        resp = client.post(BASE, json={"name": "Gladbach"})
        assert resp.status_code == 201
        assert resp.json()["player_ids"] == []
        assert resp.headers["Location"].endswith(f"{BASE}/{resp.json()['id']}")

    def test_name_required(self, client):
        assert client.post(BASE, json={}).status_code == 422
        assert client.post(BASE, json={"name": ""}).status_code == 422

    def test_with_coach(self, client):
        coach = _coach(client)
        team = _team(client, name="Bayern", coach_id=coach["id"])
        assert team["coach_id"] == coach["id"]
        assert client.get(f"/api/v1/coaches/{coach['id']}").json()["team_id"] == team["id"]

    def test_unknown_coach(self, client):
        resp = client.post(BASE, json={"name": "Bayern", "coach_id": 77})
        assert resp.status_code == 400
        assert resp.json()["details"] == {"coach_id": 77}

    def test_coach_already_bound(self, client):
        coach = _coach(client)
        _team(client, name="One", coach_id=coach["id"])
        resp = client.post(BASE, json={"name": "Two", "coach_id": coach["id"]})
        assert resp.status_code == 409


class TestGetTeam:
    def test_roster(self, client):
        team = _team(client, name="Bayern")
        p = client.post("/api/v1/players", json={"name": "Gerd", "team_id": team["id"]}).json()
        assert client.get(f"{BASE}/{team['id']}").json()["player_ids"] == [p["id"]]

    def test_not_found(self, client):
        assert client.get(f"{BASE}/3").status_code == 404

    def test_list(self, client):
        _team(client, name="A")
        _team(client, name="B")
        body = client.get(BASE, params={"offset": 1}).json()
        assert [t["name"] for t in body["data"]] == ["B"]
        assert body["page"]["total"] == 2


class TestUpdateTeam:
    def test_known(self, client):
        team = _team(client, name="Borussia")
        resp = client.put(f"{BASE}/{team['id']}", json={"name": "Borussia Dortmund"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Borussia Dortmund"

    def test_unknown_is_404_with_entity(self, client):
        resp = client.put(f"{BASE}/8", json={"name": "Nowhere"})
        assert resp.status_code == 404
        body = resp.json()
        assert body["title"] == "Don't know team"
        assert body["details"]["entity"] == {"id": 8, "name": "Nowhere", "coach_id": None}
        assert client.get(f"{BASE}/8").status_code == 404

    def test_steal_coach(self, client):
        coach = _coach(client)
        _team(client, name="One", coach_id=coach["id"])
        other = _team(client, name="Two")
        resp = client.put(f"{BASE}/{other['id']}", json={"name": "Two", "coach_id": coach["id"]})
        assert resp.status_code == 409


class TestDeleteTeam:
    def test_deleted(self, client):
        team = _team(client, name="Gone")
        assert client.delete(f"{BASE}/{team['id']}").status_code == 204
        assert client.get(f"{BASE}/{team['id']}").status_code == 404

    def test_players_unassigned(self, client):
        team = _team(client, name="Gone")
        p = client.post("/api/v1/players", json={"name": "Gerd", "team_id": team["id"]}).json()
        client.delete(f"{BASE}/{team['id']}")
        assert client.get(f"/api/v1/players/{p['id']}").json()["team_id"] is None
