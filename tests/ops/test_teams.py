"""Tests for roster.ops.teams."""

from __future__ import annotations

from roster.core.orm import TeamTable
from roster.ops.requests import CreateTeamRequest, ListRequest, UpdateTeamRequest
from roster.ops.teams import create_team, delete_team, get_team, list_teams, update_team


class TestCreateTeam:
    def test_without_coach(self, ctx):
        r = create_team(ctx, CreateTeamRequest(name="Gladbach"))
        assert r.success
        assert r.data.name == "Gladbach"
        assert r.data.coach_id is None
        assert r.data.player_ids == []

    def test_with_coach(self, ctx, make_coach):
        coach = make_coach()
        r = create_team(ctx, CreateTeamRequest(name="Bayern", coach_id=coach.id))
        assert r.data.coach_id == coach.id

    def test_unknown_coach(self, ctx, session):
        r = create_team(ctx, CreateTeamRequest(name="Bayern", coach_id=99))
        assert r.error.code == "VALIDATION_FAILED"
        assert r.error.details == {"coach_id": 99}
        assert session.query(TeamTable).count() == 0

    def test_coach_already_bound(self, ctx, make_coach, make_team):
        coach = make_coach()
        first = make_team(name="One", coach_id=coach.id)
        r = create_team(ctx, CreateTeamRequest(name="Two", coach_id=coach.id))
        assert r.error.code == "CONFLICT"
        assert r.error.details == {"coach_id": coach.id, "team_id": first.id}

    def test_explicit_id_conflict(self, ctx, make_team):
        team = make_team()
        r = create_team(ctx, CreateTeamRequest(id=team.id, name="Dup"))
        assert r.error.code == "CONFLICT"

    def test_dry_run(self, dry_ctx, session):
        r = create_team(dry_ctx, CreateTeamRequest(name="Ghosts"))
        assert r.success
        assert session.query(TeamTable).count() == 0


class TestGetAndListTeams:
    def test_get_lists_players(self, ctx, make_team, make_player):
        team = make_team()
        a = make_player(name="A", team_id=team.id)
        b = make_player(name="B", team_id=team.id)
        r = get_team(ctx, team.id)
        assert r.data.player_ids == [a.id, b.id]

    def test_get_not_found(self, ctx):
        assert get_team(ctx, 1).error.code == "NOT_FOUND"

    def test_list(self, ctx, make_team):
        make_team(name="A")
        make_team(name="B")
        r = list_teams(ctx, ListRequest())
        assert [t.name for t in r.data] == ["A", "B"]
        assert r.total == 2
        assert not r.has_more


class TestUpdateTeam:
    def test_rename(self, ctx, make_team):
        team = make_team(name="Borussia")
        r = update_team(ctx, UpdateTeamRequest(id=team.id, name="Borussia Dortmund"))
        assert r.success
        assert r.metadata["changes"] == {"name": "Borussia -> Borussia Dortmund"}

    def test_assign_coach(self, ctx, make_coach, make_team):
        from roster.ops.coaches import get_coach

        coach = make_coach()
        team = make_team()
        r = update_team(ctx, UpdateTeamRequest(id=team.id, name=team.name, coach_id=coach.id))
        assert r.metadata["changes"] == {"coach_id": f"null -> {coach.id}"}
        assert get_coach(ctx, coach.id).data.team_id == team.id

    def test_keep_own_coach(self, ctx, make_coach, make_team):
        coach = make_coach()
        team = make_team(coach_id=coach.id)
        r = update_team(ctx, UpdateTeamRequest(id=team.id, name="Renamed", coach_id=coach.id))
        assert r.success
        assert r.data.coach_id == coach.id

    def test_steal_coach_conflict(self, ctx, make_coach, make_team):
        coach = make_coach()
        make_team(name="One", coach_id=coach.id)
        other = make_team(name="Two")
        r = update_team(ctx, UpdateTeamRequest(id=other.id, name="Two", coach_id=coach.id))
        assert r.error.code == "CONFLICT"

    def test_players_untouched(self, ctx, make_team, make_player):
        team = make_team()
        player = make_player(team_id=team.id)
        r = update_team(ctx, UpdateTeamRequest(id=team.id, name="New"))
        assert r.data.player_ids == [player.id]
        assert "player_ids" not in r.metadata["changes"]

    def test_unknown_team_rejected(self, ctx, session):
        r = update_team(ctx, UpdateTeamRequest(id=12, name="Nowhere"))
        assert r.error.code == "NOT_FOUND"
        assert r.error.message == "Don't know team"
        assert r.error.details["entity"] == {"id": 12, "name": "Nowhere", "coach_id": None}
        assert session.get(TeamTable, 12) is None

    def test_dry_run(self, dry_ctx, session, make_team):
        team = make_team(name="Old")
        r = update_team(dry_ctx, UpdateTeamRequest(id=team.id, name="New"))
        assert r.metadata["changes"] == {"name": "Old -> New"}
        session.expire_all()
        assert session.get(TeamTable, team.id).name == "Old"


class TestDeleteTeam:
    def test_deletes_and_unassigns_players(self, ctx, make_team, make_player):
        from roster.ops.players import get_player

        team = make_team()
        player = make_player(team_id=team.id)
        r = delete_team(ctx, team.id)
        assert r.success
        assert get_team(ctx, team.id).error.code == "NOT_FOUND"
        assert get_player(ctx, player.id).data.team_id is None

    def test_not_found(self, ctx):
        assert delete_team(ctx, 3).error.code == "NOT_FOUND"


class TestCoachBindingRace:
    """The unique ``coach_id`` column still guards when the pre-check is bypassed."""

    def test_create_maps_unique_violation_to_conflict(self, ctx, monkeypatch, make_coach, make_team):
        from roster.ops import teams

        coach = make_coach()
        make_team(name="One", coach_id=coach.id)
        monkeypatch.setattr(teams, "_check_coach", lambda *args: None)
        r = create_team(ctx, CreateTeamRequest(name="Two", coach_id=coach.id))
        assert r.error.code == "CONFLICT"
        assert ctx.session.query(TeamTable).count() == 1

    def test_update_maps_unique_violation_to_conflict(self, ctx, monkeypatch, make_coach, make_team):
        from roster.ops import teams

        coach = make_coach()
        make_team(name="One", coach_id=coach.id)
        other = make_team(name="Two")
        monkeypatch.setattr(teams, "_check_coach", lambda *args: None)
        r = update_team(ctx, UpdateTeamRequest(id=other.id, name="Two", coach_id=coach.id))
        assert r.error.code == "CONFLICT"
