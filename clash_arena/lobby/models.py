"""
Lobby, Team and Match records plus the match application step.

A Lobby owns a fixed roster of Teams and an append-only list of Matches.
Applying a match adds every team's points to its running counters and
appends a history entry both on the team and on the lobby.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from clash_arena.config import DEFAULT_TEAM_NAME, MAX_TEAMS
from clash_arena.scoring.points import PointBreakdown, compute_match_points
from clash_arena.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_lobby_id() -> str:
    return uuid.uuid4().hex


@dataclass
class MatchResult:
    """One team's finish in one match, as entered by the organizer."""

    team_id: int
    placement: int
    kills: int = 0
    booyah: bool = False

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'placement': self.placement,
            'kills': self.kills,
            'booyah': self.booyah,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MatchResult":
        return cls(
            team_id=int(data['team_id']),
            placement=int(data['placement']),
            kills=int(data['kills']),
            booyah=bool(data['booyah']),
        )


@dataclass
class TeamMatchRecord:
    """A team's own history entry for one match."""

    match_number: int
    placement: int
    kills: int
    booyah: bool
    points: PointBreakdown

    def to_dict(self) -> dict:
        return {
            'match_number': self.match_number,
            'placement': self.placement,
            'kills': self.kills,
            'booyah': self.booyah,
            'points': self.points.as_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamMatchRecord":
        return cls(
            match_number=int(data['match_number']),
            placement=int(data['placement']),
            kills=int(data['kills']),
            booyah=bool(data['booyah']),
            points=PointBreakdown(**data['points']),
        )


@dataclass
class Team:
    team_id: int
    name: str
    total_points: int = 0
    placement_points: int = 0
    kill_points: int = 0
    booyahs: int = 0
    matches: list[TeamMatchRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'name': self.name,
            'total_points': self.total_points,
            'placement_points': self.placement_points,
            'kill_points': self.kill_points,
            'booyahs': self.booyahs,
            'matches': [record.to_dict() for record in self.matches],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Team":
        return cls(
            team_id=int(data['team_id']),
            name=str(data['name']),
            total_points=int(data['total_points']),
            placement_points=int(data['placement_points']),
            kill_points=int(data['kill_points']),
            booyahs=int(data['booyahs']),
            matches=[TeamMatchRecord.from_dict(m) for m in data.get('matches', [])],
        )


@dataclass
class Match:
    match_number: int
    timestamp: datetime
    results: list[MatchResult]

    def to_dict(self) -> dict:
        return {
            'match_number': self.match_number,
            'timestamp': self.timestamp.isoformat(),
            'results': [result.to_dict() for result in self.results],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Match":
        return cls(
            match_number=int(data['match_number']),
            timestamp=datetime.fromisoformat(data['timestamp']),
            results=[MatchResult.from_dict(r) for r in data['results']],
        )


@dataclass
class Lobby:
    """A tournament: a fixed roster of teams and a bounded list of matches."""

    lobby_id: str
    name: str
    teams: list[Team]
    matches: list[Match] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def team_ids(self) -> list[int]:
        return [team.team_id for team in self.teams]

    def get_team(self, team_id: int) -> Team | None:
        """Look up a team by id, or None when the lobby has no such team."""
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    def to_dict(self) -> dict:
        return {
            'lobby_id': self.lobby_id,
            'name': self.name,
            'teams': [team.to_dict() for team in self.teams],
            'matches': [match.to_dict() for match in self.matches],
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Lobby":
        return cls(
            lobby_id=str(data['lobby_id']),
            name=str(data['name']),
            teams=[Team.from_dict(t) for t in data['teams']],
            matches=[Match.from_dict(m) for m in data.get('matches', [])],
            created_at=datetime.fromisoformat(data['created_at']),
            updated_at=datetime.fromisoformat(data['updated_at']),
        )


def build_lobby(name: str, team_count: int = MAX_TEAMS, now: datetime | None = None) -> Lobby:
    """
    Build a fresh lobby with zeroed teams named "Team 1".."Team N".

    Name checks and the lobby limit are handled by LobbyStore.create_lobby.
    """
    created = now or utc_now()
    teams = [
        Team(team_id=number, name=DEFAULT_TEAM_NAME.format(number=number))
        for number in range(1, team_count + 1)
    ]
    return Lobby(
        lobby_id=new_lobby_id(),
        name=name,
        teams=teams,
        created_at=created,
        updated_at=created,
    )


def apply_match(
    lobby: Lobby,
    results: list[MatchResult],
    timestamp: datetime | None = None,
    **scoring_options,
) -> Lobby:
    """
    Apply one validated match to a lobby.

    Preconditions (checked by the caller, see LobbyStore.record_match):
    - results passed validate_match_results with one entry per team
    - the lobby still has room for another match

    Args:
        lobby: Lobby to update in place
        results: One MatchResult per team
        timestamp: Match time (default: now, UTC)
        **scoring_options: Passed through to compute_match_points

    Returns:
        The same lobby, updated
    """
    by_team = {result.team_id: result for result in results}
    match_number = lobby.match_count + 1
    played_at = timestamp or utc_now()

    # Score every team before touching any counter
    scored = []
    for team in lobby.teams:
        result = by_team[team.team_id]
        points = compute_match_points(
            result.placement, result.kills, result.booyah, **scoring_options
        )
        scored.append((team, result, points))

    for team, result, points in scored:
        team.placement_points += points.placement_points
        team.kill_points += points.kill_points
        team.total_points += points.total
        if result.booyah:
            team.booyahs += 1
        team.matches.append(TeamMatchRecord(
            match_number=match_number,
            placement=result.placement,
            kills=result.kills,
            booyah=result.booyah,
            points=points,
        ))

    lobby.matches.append(Match(
        match_number=match_number,
        timestamp=played_at,
        results=[replace(by_team[team_id]) for team_id in lobby.team_ids],
    ))
    lobby.updated_at = played_at

    logger.debug(f"Applied match {match_number} to lobby '{lobby.name}'")
    return lobby
