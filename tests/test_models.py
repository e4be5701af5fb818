"""
Tests for lobby construction and match application.
"""

from datetime import timedelta

from clash_arena.config import MAX_TEAMS, PLACEMENT_POINTS
from clash_arena.lobby.models import Lobby, apply_match, build_lobby
from tests.helpers import FIXED_TIME, make_results


class TestBuildLobby:
    """Tests for build_lobby function."""

    def test_default_roster(self):
        lobby = build_lobby("Scrims", now=FIXED_TIME)
        assert len(lobby.teams) == MAX_TEAMS
        assert [t.name for t in lobby.teams[:3]] == ["Team 1", "Team 2", "Team 3"]
        assert lobby.team_ids == list(range(1, MAX_TEAMS + 1))

    def test_counters_start_at_zero(self, lobby):
        for team in lobby.teams:
            assert (team.total_points, team.placement_points, team.kill_points, team.booyahs) == (0, 0, 0, 0)
            assert team.matches == []

    def test_timestamps_equal_at_creation(self, lobby):
        assert lobby.created_at == lobby.updated_at == FIXED_TIME
        assert lobby.matches == []

    def test_ids_are_unique(self):
        assert build_lobby("A").lobby_id != build_lobby("B").lobby_id

    def test_get_team_missing(self, lobby):
        assert lobby.get_team(99) is None


class TestApplyMatch:
    """Tests for apply_match function."""

    def test_counters_accumulate(self, lobby):
        apply_match(lobby, make_results([1, 2, 3], kills=[5, 2, 0]))

        first, second, third = lobby.teams
        assert (first.placement_points, first.kill_points, first.total_points, first.booyahs) == (12, 5, 17, 1)
        assert (second.placement_points, second.kill_points, second.total_points, second.booyahs) == (9, 2, 11, 0)
        assert (third.placement_points, third.kill_points, third.total_points, third.booyahs) == (8, 0, 8, 0)

    def test_total_delta_independent_of_booyah(self):
        with_flag = build_lobby("A", team_count=3)
        without_flag = build_lobby("B", team_count=3)
        apply_match(with_flag, make_results([1, 2, 3], kills=[3, 3, 3], booyah_first=True))
        apply_match(without_flag, make_results([1, 2, 3], kills=[3, 3, 3], booyah_first=False))

        assert [t.total_points for t in with_flag.teams] == [t.total_points for t in without_flag.teams]
        assert with_flag.teams[0].booyahs == 1
        assert without_flag.teams[0].booyahs == 0

    def test_total_delta_matches_formula(self, full_lobby):
        placements = list(range(12, 0, -1))
        kills = [k % 4 for k in range(12)]
        before = [t.total_points for t in full_lobby.teams]

        apply_match(full_lobby, make_results(placements, kills=kills))

        for team, was, placement, k in zip(full_lobby.teams, before, placements, kills):
            assert team.total_points == was + PLACEMENT_POINTS[placement] + k

    def test_match_numbers_are_dense(self, lobby):
        for _ in range(3):
            apply_match(lobby, make_results([1, 2, 3]))
        assert [m.match_number for m in lobby.matches] == [1, 2, 3]
        assert [r.match_number for r in lobby.teams[0].matches] == [1, 2, 3]

    def test_team_history_entry(self, lobby):
        apply_match(lobby, make_results([2, 1, 3], kills=[4, 1, 0]))
        record = lobby.teams[0].matches[0]
        assert record.match_number == 1
        assert record.placement == 2
        assert record.kills == 4
        assert record.booyah is False
        assert record.points.total == 13

    def test_lobby_history_entry(self, lobby):
        played = FIXED_TIME + timedelta(hours=1)
        apply_match(lobby, make_results([3, 1, 2]), timestamp=played)

        match = lobby.matches[0]
        assert match.timestamp == played
        assert [r.team_id for r in match.results] == [1, 2, 3]
        assert [r.placement for r in match.results] == [3, 1, 2]
        assert lobby.updated_at == played
        assert lobby.created_at == FIXED_TIME

    def test_results_matched_by_team_id_not_position(self, lobby):
        results = make_results([1, 2, 3], kills=[7, 0, 0])
        apply_match(lobby, list(reversed(results)))
        assert lobby.teams[0].total_points == 19
        assert lobby.teams[2].total_points == 8

    def test_stored_results_are_copies(self, lobby):
        results = make_results([1, 2, 3])
        apply_match(lobby, results)
        results[0].kills = 99
        assert lobby.matches[0].results[0].kills == 0

    def test_total_equals_sum_of_parts(self, lobby):
        apply_match(lobby, make_results([1, 2, 3], kills=[1, 2, 3]))
        apply_match(lobby, make_results([2, 3, 1], kills=[0, 5, 2]))
        for team in lobby.teams:
            assert team.total_points == team.placement_points + team.kill_points


class TestSerialization:
    """Tests for to_dict / from_dict on the lobby records."""

    def test_round_trip(self, lobby):
        apply_match(lobby, make_results([1, 3, 2], kills=[2, 0, 1]), timestamp=FIXED_TIME)
        lobby.teams[1].name = "Night Owls"
        assert Lobby.from_dict(lobby.to_dict()) == lobby

    def test_timestamps_serialized_as_iso(self, lobby):
        data = lobby.to_dict()
        assert data['created_at'] == FIXED_TIME.isoformat()
