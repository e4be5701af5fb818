"""
Tests for standings ranking.
"""

import random

from clash_arena.lobby.models import Team, apply_match
from clash_arena.scoring.ranking import rank_progression, rank_teams, standings
from tests.helpers import make_results


def make_team(team_id, total=0, booyahs=0, placement=None, kills=None):
    placement = total if placement is None else placement
    kills = total - placement if kills is None else kills
    return Team(
        team_id=team_id,
        name=f"Team {team_id}",
        total_points=total,
        placement_points=placement,
        kill_points=kills,
        booyahs=booyahs,
    )


class TestRankTeams:
    """Tests for rank_teams function."""

    def test_orders_by_total(self):
        teams = [make_team(1, 10), make_team(2, 30), make_team(3, 20)]
        assert [t.team_id for t in rank_teams(teams)] == [2, 3, 1]

    def test_booyah_breaks_total_tie(self):
        a = make_team(1, total=20, booyahs=1, placement=5, kills=15)
        b = make_team(2, total=20, booyahs=0, placement=18, kills=2)
        assert [t.team_id for t in rank_teams([b, a])] == [1, 2]

    def test_placement_points_break_booyah_tie(self):
        a = make_team(1, total=20, booyahs=1, placement=12, kills=8)
        b = make_team(2, total=20, booyahs=1, placement=14, kills=6)
        assert [t.team_id for t in rank_teams([a, b])] == [2, 1]

    def test_kill_points_last_key(self):
        # Only possible with a custom table, but the key still applies
        a = make_team(1, total=20, booyahs=0, placement=10, kills=9)
        b = make_team(2, total=20, booyahs=0, placement=10, kills=10)
        assert [t.team_id for t in rank_teams([a, b])] == [2, 1]

    def test_full_ties_keep_input_order(self):
        teams = [make_team(i, total=0) for i in (4, 2, 9, 1)]
        assert [t.team_id for t in rank_teams(teams)] == [4, 2, 9, 1]

    def test_does_not_mutate_input(self):
        teams = [make_team(1, 5), make_team(2, 15)]
        snapshot = list(teams)
        ranked = rank_teams(teams)
        assert teams == snapshot
        assert ranked is not teams

    def test_idempotent(self):
        teams = [make_team(i, total=(i * 7) % 5, booyahs=i % 2) for i in range(1, 13)]
        once = rank_teams(teams)
        assert rank_teams(once) == once
        assert rank_teams(teams) == once

    def test_input_order_irrelevant_for_distinct_teams(self):
        teams = [make_team(i, total=i * 3, booyahs=i % 3) for i in range(1, 13)]
        expected = [t.team_id for t in rank_teams(teams)]

        shuffled = list(teams)
        random.Random(7).shuffle(shuffled)
        assert [t.team_id for t in rank_teams(shuffled)] == expected

    def test_empty(self):
        assert rank_teams([]) == []


class TestStandings:
    """Tests for standings and rank_progression."""

    def test_ranks_are_one_based(self, lobby):
        apply_match(lobby, make_results([2, 3, 1]))
        result = standings(lobby)
        assert [s.rank for s in result] == [1, 2, 3]
        assert [s.team.team_id for s in result] == [3, 1, 2]

    def test_fresh_lobby_keeps_roster_order(self, lobby):
        assert [s.team.team_id for s in standings(lobby)] == [1, 2, 3]

    def test_progression_rows(self, lobby):
        apply_match(lobby, make_results([1, 2, 3]))
        apply_match(lobby, make_results([3, 1, 2], kills=[0, 10, 0]))

        rows = rank_progression(lobby)
        assert len(rows) == 6

        after_first = {r['team_id']: r['rank'] for r in rows if r['match_number'] == 1}
        after_second = {r['team_id']: r['rank'] for r in rows if r['match_number'] == 2}
        assert after_first == {1: 1, 2: 2, 3: 3}
        # Team 2: 9 + 12 + 10 = 31, team 1: 12 + 8 = 20, team 3: 8 + 9 = 17
        assert after_second == {2: 1, 1: 2, 3: 3}

    def test_progression_final_totals_match_counters(self, lobby):
        apply_match(lobby, make_results([2, 1, 3], kills=[3, 1, 4]))
        apply_match(lobby, make_results([1, 3, 2], kills=[0, 2, 2]))

        final = {r['team_id']: r['total_points'] for r in rank_progression(lobby) if r['match_number'] == 2}
        assert final == {t.team_id: t.total_points for t in lobby.teams}

    def test_progression_empty_lobby(self, lobby):
        assert rank_progression(lobby) == []

    def test_progression_missing_record_scores_nothing(self, lobby):
        apply_match(lobby, make_results([1, 2, 3]))
        apply_match(lobby, make_results([3, 2, 1]))
        lobby.teams[0].matches.pop()

        rows = rank_progression(lobby)
        assert len(rows) == 6
        after_second = {r['team_id']: r['total_points'] for r in rows if r['match_number'] == 2}
        # Team 1 keeps only its first-match 12 points
        assert after_second == {1: 12, 2: 18, 3: 20}
