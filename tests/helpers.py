"""
Helpers shared by the tracker tests.
"""

from datetime import datetime, timezone

from clash_arena.lobby.models import MatchResult

FIXED_TIME = datetime(2025, 6, 1, 18, 30, tzinfo=timezone.utc)


def make_results(placements, kills=None, booyah_first=True):
    """
    Build one MatchResult per team, team ids 1..N in order.

    placements[i] is the placement of team i + 1.
    """
    kills = kills or [0] * len(placements)
    return [
        MatchResult(
            team_id=index + 1,
            placement=placement,
            kills=kills[index],
            booyah=booyah_first and placement == 1,
        )
        for index, placement in enumerate(placements)
    ]


class RecordingGateway:
    """In-memory gateway that remembers every save."""

    def __init__(self, lobbies=None, fail=False):
        self.lobbies = lobbies or []
        self.fail = fail
        self.saves = 0

    def load(self):
        return list(self.lobbies)

    def save(self, lobbies):
        self.saves += 1
        if self.fail:
            return False
        self.lobbies = list(lobbies)
        return True
