"""
Scoring and Ranking

Modules:
- points: Per-match point computation
- ranking: Four-key standings order and rank progression
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name in ("compute_match_points", "PointBreakdown"):
        from clash_arena.scoring import points
        return getattr(points, name)
    if name in ("rank_teams", "standings", "rank_progression"):
        from clash_arena.scoring import ranking
        return getattr(ranking, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
