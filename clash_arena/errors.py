"""
Exception types shared across the Clash Arena modules.
"""


class ArenaError(Exception):
    """Base exception for all tracker errors"""
    pass


# --- Match validation ---
class MatchValidationError(ArenaError):
    """Raised when a set of match results is rejected"""
    pass


class InvalidPlacementError(MatchValidationError):
    """A placement lies outside 1..team_count"""

    def __init__(self, team_id, placement, team_count):
        self.team_id = team_id
        self.placement = placement
        self.team_count = team_count
        super().__init__(
            f"Invalid placement {placement!r} for team {team_id}: "
            f"must be between 1 and {team_count}"
        )


class DuplicatePlacementError(MatchValidationError):
    """Two or more results claim the same placement"""

    def __init__(self, placements):
        self.placements = sorted(placements)
        super().__init__(f"Duplicate placements found: {self.placements}")


class InvalidKillsError(MatchValidationError):
    """Kill count is not a non-negative integer"""

    def __init__(self, team_id, kills):
        self.team_id = team_id
        self.kills = kills
        super().__init__(f"Invalid kill count {kills!r} for team {team_id}")


class IncompleteResultsError(MatchValidationError):
    """The result set does not name every team exactly once"""

    def __init__(self, missing=(), unknown=(), repeated=(), missing_placements=()):
        self.missing = sorted(missing)
        self.unknown = sorted(unknown)
        self.repeated = sorted(repeated)
        self.missing_placements = sorted(missing_placements)
        msg = "Match results must contain exactly one entry per team:"
        if self.missing:
            msg += f" Missing teams: {self.missing}"
        if self.unknown:
            msg += f" Unknown teams: {self.unknown}"
        if self.repeated:
            msg += f" Repeated teams: {self.repeated}"
        if self.missing_placements:
            msg += f" Missing placements: {self.missing_placements}"
        super().__init__(msg)


# --- Lobby lifecycle ---
class LobbyError(ArenaError):
    """Raised when a lobby operation is rejected"""
    pass


class EmptyNameError(LobbyError):
    pass


class NameTooLongError(LobbyError):

    def __init__(self, name, max_length):
        self.name = name
        self.max_length = max_length
        super().__init__(f"Name too long: {len(name)} characters. Maximum allowed: {max_length}")


class CapacityExceededError(LobbyError):

    def __init__(self, what, limit):
        self.what = what
        self.limit = limit
        super().__init__(f"Maximum {limit} {what} reached")


# --- Export ---
class ExportError(ArenaError):
    pass


class NoMatchesError(ExportError):
    """Raised when exporting a lobby that has no recorded matches"""
    pass
