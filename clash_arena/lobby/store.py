"""
Lobby Store

Owns every lobby of a session plus the id of the currently selected one.
All lifecycle operations go through here:
- create_lobby / delete_lobby
- rename_team
- record_match (validate, check capacity, apply, save)

Usage:
    from clash_arena.lobby.store import LobbyStore
    from clash_arena.persistence import JsonFileGateway

    store = LobbyStore.open(JsonFileGateway())
    lobby = store.create_lobby("Friday Scrims")
"""

from datetime import datetime

from clash_arena.config import (
    APP_NAME,
    APP_VERSION,
    MAX_LOBBIES,
    MAX_LOBBY_NAME_LENGTH,
    MAX_MATCHES,
    MAX_TEAMS,
)
from clash_arena.errors import CapacityExceededError
from clash_arena.lobby.models import Lobby, MatchResult, apply_match, build_lobby, utc_now
from clash_arena.lobby.validation import validate_lobby_name, validate_match_results
from clash_arena.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class LobbyStore:
    """In-memory collection of lobbies with an optional persistence hook."""

    def __init__(
        self,
        lobbies: list[Lobby] | None = None,
        gateway=None,
        max_lobbies: int = MAX_LOBBIES,
        max_teams: int = MAX_TEAMS,
        max_matches: int = MAX_MATCHES,
    ):
        self.lobbies: list[Lobby] = list(lobbies or [])
        self.gateway = gateway
        self.max_lobbies = max_lobbies
        self.max_teams = max_teams
        self.max_matches = max_matches
        self.current_lobby_id: str | None = None

    @classmethod
    def open(cls, gateway, **limits) -> "LobbyStore":
        """Create a store pre-filled with whatever the gateway can load."""
        store = cls(lobbies=gateway.load(), gateway=gateway, **limits)
        logger.info(f"{APP_NAME} v{APP_VERSION} ready with {len(store.lobbies)} lobbies")
        return store

    # --- Persistence ---
    def save(self) -> bool:
        """Save through the gateway; failures are logged and never undo state."""
        if self.gateway is None:
            return False
        return self.gateway.save(self.lobbies)

    # --- Lookup ---
    def get_lobby(self, lobby_id: str | None) -> Lobby | None:
        for lobby in self.lobbies:
            if lobby.lobby_id == lobby_id:
                return lobby
        return None

    def select_lobby(self, lobby_id: str | None) -> Lobby | None:
        """Make a lobby current; unknown ids clear the selection."""
        lobby = self.get_lobby(lobby_id)
        self.current_lobby_id = lobby.lobby_id if lobby else None
        return lobby

    def current_lobby(self) -> Lobby | None:
        """Resolve the current selection, or None if it no longer exists."""
        return self.get_lobby(self.current_lobby_id)

    # --- Lifecycle ---
    def create_lobby(self, name: str, now: datetime | None = None) -> Lobby:
        """
        Create a lobby with a full roster of zeroed teams.

        Raises:
            EmptyNameError: If the name is blank
            NameTooLongError: If the name exceeds the length limit
            CapacityExceededError: If the lobby limit is already reached
        """
        cleaned = validate_lobby_name(name, MAX_LOBBY_NAME_LENGTH)
        if len(self.lobbies) >= self.max_lobbies:
            raise CapacityExceededError("lobbies", self.max_lobbies)

        lobby = build_lobby(cleaned, self.max_teams, now=now)
        self.lobbies.append(lobby)
        logger.info(f"Created lobby '{lobby.name}' ({lobby.lobby_id}) with {len(lobby.teams)} teams")
        self.save()
        return lobby

    def delete_lobby(self, lobby_id: str) -> bool:
        """Remove a lobby with its teams and history. Unknown ids are ignored."""
        lobby = self.get_lobby(lobby_id)
        if lobby is None:
            return False

        self.lobbies.remove(lobby)
        if self.current_lobby_id == lobby_id:
            self.current_lobby_id = None
        logger.info(f"Deleted lobby '{lobby.name}' ({lobby_id})")
        self.save()
        return True

    def rename_team(self, lobby_id: str, team_id: int, new_name: str) -> bool:
        """
        Rename a team. Blank names and unknown lobby/team ids are ignored.

        Length is limited by the input widget and not checked again here.
        """
        name = (new_name or "").strip()
        if not name:
            return False

        lobby = self.get_lobby(lobby_id)
        team = lobby.get_team(team_id) if lobby else None
        if team is None:
            return False

        if team.name != name:
            team.name = name
            lobby.updated_at = utc_now()
            self.save()
        return True

    # --- Matches ---
    def can_record_match(self, lobby: Lobby) -> bool:
        return lobby.match_count < self.max_matches

    def record_match(
        self,
        lobby_id: str,
        results: list[MatchResult],
        timestamp: datetime | None = None,
    ) -> Lobby | None:
        """
        Validate and apply one match to a lobby, then save.

        Returns:
            The updated lobby, or None if the lobby does not exist

        Raises:
            MatchValidationError: If the results are rejected
            CapacityExceededError: If the lobby already holds max_matches matches
        """
        lobby = self.get_lobby(lobby_id)
        if lobby is None:
            return None

        if not self.can_record_match(lobby):
            raise CapacityExceededError("matches", self.max_matches)

        warnings = validate_match_results(results, len(lobby.teams), lobby.team_ids)
        for w in warnings:
            logger.warning(f"  Warning: {w}")

        apply_match(lobby, results, timestamp=timestamp)
        logger.info(f"Recorded match {lobby.match_count}/{self.max_matches} for lobby '{lobby.name}'")
        self.save()
        return lobby

    # --- Status ---
    def status(self) -> dict:
        return {
            'timestamp': utc_now().isoformat(),
            'version': APP_VERSION,
            'lobbies_loaded': len(self.lobbies),
            'max_lobbies': self.max_lobbies,
            'max_teams': self.max_teams,
            'max_matches': self.max_matches,
            'storage_attached': self.gateway is not None,
        }
