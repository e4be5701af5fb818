"""
Match and Lobby Validation

Checks that run before any state is touched:
- validate_match_results: placement range, duplicate placements, kill counts
  and team coverage for one match
- validate_lobby_name: non-empty, length-limited lobby names
- check_lobby_consistency: audit of running totals against match history
"""

from collections import Counter

from clash_arena.config import MAX_LOBBY_NAME_LENGTH
from clash_arena.errors import (
    DuplicatePlacementError,
    EmptyNameError,
    IncompleteResultsError,
    InvalidKillsError,
    InvalidPlacementError,
    NameTooLongError,
)
from clash_arena.scoring.points import compute_match_points
from clash_arena.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_match_results(results, team_count: int, team_ids=None) -> list[str]:
    """
    Validate one match worth of results.

    Checks run in order and the first failure wins:
    1. every placement lies in 1..team_count
    2. no two results share a placement
    3. kill counts are non-negative integers
    4. every placement 1..team_count is taken, and when team_ids is given,
       every team appears exactly once

    Args:
        results: Sequence of MatchResult
        team_count: Number of teams in the lobby
        team_ids: Optional ids of the lobby's teams

    Returns:
        List of warning messages (empty if nothing looks odd)

    Raises:
        InvalidPlacementError: If a placement is out of range
        DuplicatePlacementError: If a placement is claimed twice
        InvalidKillsError: If a kill count is negative or not an integer
        IncompleteResultsError: If the results do not cover each team once
    """
    warnings = []

    for result in results:
        if not _is_int(result.placement) or not 1 <= result.placement <= team_count:
            raise InvalidPlacementError(result.team_id, result.placement, team_count)

    placement_counts = Counter(result.placement for result in results)
    duplicates = [placement for placement, count in placement_counts.items() if count > 1]
    if duplicates:
        raise DuplicatePlacementError(duplicates)

    for result in results:
        if not _is_int(result.kills) or result.kills < 0:
            raise InvalidKillsError(result.team_id, result.kills)

    if team_ids is not None:
        expected = set(team_ids)
        seen = Counter(result.team_id for result in results)
        missing = expected - set(seen)
        unknown = set(seen) - expected
        repeated = {team_id for team_id, count in seen.items() if count > 1}
        if missing or unknown or repeated:
            raise IncompleteResultsError(missing, unknown, repeated)

    # Placements are unique and in range, so a short list leaves gaps
    if len(results) != team_count:
        missing_placements = set(range(1, team_count + 1)) - set(placement_counts)
        raise IncompleteResultsError(missing_placements=missing_placements)

    # Soft checks: booyah is entered separately from placement
    for result in results:
        if result.booyah and result.placement != 1:
            warnings.append(
                f"Team {result.team_id} flagged with booyah but placed {result.placement}"
            )
        elif result.placement == 1 and not result.booyah:
            warnings.append(f"Team {result.team_id} placed 1st without a booyah")

    return warnings


def validate_lobby_name(name: str, max_length: int = MAX_LOBBY_NAME_LENGTH) -> str:
    """
    Validate a lobby name and return it stripped of surrounding whitespace.

    Raises:
        EmptyNameError: If the name is empty after stripping
        NameTooLongError: If the name exceeds max_length
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise EmptyNameError("Please enter a lobby name")
    if len(cleaned) > max_length:
        raise NameTooLongError(cleaned, max_length)
    return cleaned


def check_lobby_consistency(lobby, **scoring_options) -> list[str]:
    """
    Audit a lobby's running totals against its recorded history.

    Used after loading a saved snapshot; an empty list means the lobby is
    internally consistent.

    Returns:
        List of problem descriptions
    """
    problems = []
    match_count = len(lobby.matches)

    for position, match in enumerate(lobby.matches, start=1):
        if match.match_number != position:
            problems.append(
                f"Match at position {position} is numbered {match.match_number}"
            )
        placements = sorted(result.placement for result in match.results)
        if placements != list(range(1, len(lobby.teams) + 1)):
            problems.append(f"Match {match.match_number} placements are not 1..{len(lobby.teams)}")

    for team in lobby.teams:
        label = f"Team {team.team_id} ('{team.name}')"

        if team.total_points != team.placement_points + team.kill_points:
            problems.append(f"{label} total does not equal placement + kill points")

        if len(team.matches) != match_count:
            problems.append(
                f"{label} has {len(team.matches)} match records, lobby has {match_count}"
            )

        placement_sum = sum(record.points.placement_points for record in team.matches)
        kill_sum = sum(record.points.kill_points for record in team.matches)
        booyah_count = sum(1 for record in team.matches if record.booyah)
        if (team.placement_points, team.kill_points, team.booyahs) != (placement_sum, kill_sum, booyah_count):
            problems.append(f"{label} counters do not match its match history")

        for record in team.matches:
            expected = compute_match_points(
                record.placement, record.kills, record.booyah, **scoring_options
            )
            if record.points.total != expected.total:
                problems.append(
                    f"{label} match {record.match_number} scored {record.points.total}, "
                    f"expected {expected.total}"
                )

    return problems
