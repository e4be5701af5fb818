"""
Tests for match point computation.
"""

import pytest

from clash_arena.config import PLACEMENT_POINTS
from clash_arena.scoring.points import PointBreakdown, compute_match_points


class TestComputeMatchPoints:
    """Tests for compute_match_points function."""

    def test_first_place_with_booyah(self):
        result = compute_match_points(placement=1, kills=5, booyah=True)
        assert result == PointBreakdown(
            placement_points=12, kill_points=5, booyah_points=0, total=17
        )

    def test_as_dict(self):
        result = compute_match_points(placement=1, kills=5, booyah=True)
        assert result.as_dict() == {
            'placement_points': 12,
            'kill_points': 5,
            'booyah_points': 0,
            'total': 17,
        }

    @pytest.mark.parametrize("placement,expected", sorted(PLACEMENT_POINTS.items()))
    def test_default_placement_table(self, placement, expected):
        assert compute_match_points(placement, 0).placement_points == expected

    def test_placement_outside_table_scores_zero(self):
        result = compute_match_points(placement=13, kills=2)
        assert result.placement_points == 0
        assert result.total == 2

    def test_zero_kills(self):
        assert compute_match_points(placement=4, kills=0).total == 7

    def test_custom_kill_value(self):
        result = compute_match_points(placement=2, kills=3, kill_point_value=2)
        assert result.kill_points == 6
        assert result.total == 15

    def test_custom_placement_table(self):
        result = compute_match_points(placement=1, kills=0, placement_table={1: 20})
        assert result.placement_points == 20


class TestBooyahNeverScores:
    """Booyah is a tiebreak counter and never changes the total."""

    @pytest.mark.parametrize("placement", range(1, 13))
    def test_total_independent_of_booyah(self, placement):
        with_booyah = compute_match_points(placement, 4, booyah=True)
        without_booyah = compute_match_points(placement, 4, booyah=False)
        assert with_booyah.total == without_booyah.total

    def test_bonus_reported_but_not_added(self):
        result = compute_match_points(placement=1, kills=0, booyah=True, booyah_bonus=1)
        assert result.booyah_points == 1
        assert result.total == 12

    def test_total_is_placement_plus_kills(self):
        for placement in range(1, 13):
            for kills in (0, 1, 7):
                r = compute_match_points(placement, kills, booyah=placement == 1)
                assert r.total == r.placement_points + r.kill_points
