"""
Match Points Calculation

Turns one team's finish in one match (placement, kills, booyah flag) into a
point breakdown. Booyah is recorded for tiebreaks but never changes the total.

Usage:
    from clash_arena.scoring import compute_match_points
    breakdown = compute_match_points(placement=1, kills=5, booyah=True)
"""

from dataclasses import asdict, dataclass

from clash_arena.config import BOOYAH_BONUS, KILL_POINT_VALUE, PLACEMENT_POINTS


@dataclass(frozen=True)
class PointBreakdown:
    """Points earned by one team in one match."""

    placement_points: int
    kill_points: int
    booyah_points: int
    total: int

    def as_dict(self) -> dict:
        return asdict(self)


def placement_points_for(placement, placement_table=None):
    """Look up placement points; placements outside the table score 0."""
    table = PLACEMENT_POINTS if placement_table is None else placement_table
    return table.get(placement, 0)


def compute_match_points(
    placement: int,
    kills: int,
    booyah: bool = False,
    placement_table: dict | None = None,
    kill_point_value: int = KILL_POINT_VALUE,
    booyah_bonus: int = BOOYAH_BONUS,
) -> PointBreakdown:
    """
    Compute the point breakdown for a single match result.

    Args:
        placement: Finishing position (1 = best)
        kills: Number of kills (>= 0)
        booyah: Whether the team was flagged with a booyah
        placement_table: Placement -> points mapping (default: PLACEMENT_POINTS)
        kill_point_value: Points awarded per kill
        booyah_bonus: Reported as booyah_points when flagged, never added to total

    Returns:
        PointBreakdown with placement, kill and booyah points plus the total
    """
    placement_points = placement_points_for(placement, placement_table)
    kill_points = kills * kill_point_value
    booyah_points = booyah_bonus if booyah else 0

    return PointBreakdown(
        placement_points=placement_points,
        kill_points=kill_points,
        booyah_points=booyah_points,
        total=placement_points + kill_points,
    )
