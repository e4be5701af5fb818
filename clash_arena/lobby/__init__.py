"""
Lobby Management

Modules:
- models: Lobby, Team and Match records and match application
- validation: Match result checks, lobby name checks, consistency audit
- store: LobbyStore lifecycle operations
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name in ("Lobby", "Team", "Match", "MatchResult", "TeamMatchRecord", "apply_match"):
        from clash_arena.lobby import models
        return getattr(models, name)
    if name in ("validate_match_results", "check_lobby_consistency"):
        from clash_arena.lobby import validation
        return getattr(validation, name)
    if name == "LobbyStore":
        from clash_arena.lobby.store import LobbyStore
        return LobbyStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
