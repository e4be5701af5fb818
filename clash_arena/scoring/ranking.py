"""
Standings Ranking

Orders teams by their cumulative counters with a four-key descending
comparison:
1. total points
2. booyahs (tiebreak only)
3. placement points
4. kill points

Teams tied on all four keys keep their input order, so repeated renders of
the same lobby always come out the same.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Standing:
    rank: int
    team: object


def ranking_key(team):
    """Sort key for one team; smaller sorts first."""
    return (
        -team.total_points,
        -team.booyahs,
        -team.placement_points,
        -team.kill_points,
    )


def rank_teams(teams):
    """
    Return a new list of teams in ranking order.

    The input sequence is left untouched. Python's sort is stable, which
    keeps fully tied teams in their original order.
    """
    return sorted(teams, key=ranking_key)


def standings(lobby) -> list[Standing]:
    """Ranked teams of a lobby paired with their 1-based rank."""
    return [
        Standing(rank=position, team=team)
        for position, team in enumerate(rank_teams(lobby.teams), start=1)
    ]


class _Snapshot:
    """Cumulative counters of one team after a given match."""

    __slots__ = ('team_id', 'name', 'total_points', 'placement_points', 'kill_points', 'booyahs')

    def __init__(self, team_id, name):
        self.team_id = team_id
        self.name = name
        self.total_points = 0
        self.placement_points = 0
        self.kill_points = 0
        self.booyahs = 0


def rank_progression(lobby) -> list[dict]:
    """
    Replay each team's match history and rank the lobby after every match.

    Records are looked up by match number. A team with no record for a match
    (possible in a damaged save) scores nothing for it.

    Returns:
        List of rows with keys match_number, team_id, team_name, total_points
        and rank, one row per team per match
    """
    snapshots = [_Snapshot(team.team_id, team.name) for team in lobby.teams]
    histories = {
        team.team_id: {record.match_number: record for record in team.matches}
        for team in lobby.teams
    }
    rows = []

    for match in lobby.matches:
        for snap in snapshots:
            record = histories[snap.team_id].get(match.match_number)
            if record is None:
                continue
            snap.total_points += record.points.total
            snap.placement_points += record.points.placement_points
            snap.kill_points += record.points.kill_points
            snap.booyahs += 1 if record.booyah else 0

        for position, snap in enumerate(rank_teams(snapshots), start=1):
            rows.append({
                'match_number': match.match_number,
                'team_id': snap.team_id,
                'team_name': snap.name,
                'total_points': snap.total_points,
                'rank': position,
            })

    return rows
