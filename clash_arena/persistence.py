"""
Lobby Persistence

Saves and loads a snapshot of every lobby as one JSON document. Loading is
forgiving (a missing or unreadable file means "no lobbies") and saving is
best-effort: failures are logged and reported, never raised.
"""

import json
from pathlib import Path

from clash_arena.config import APP_VERSION, STORE_FILE
from clash_arena.lobby.models import Lobby
from clash_arena.lobby.validation import check_lobby_consistency
from clash_arena.utils import atomic_write_text, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def lobbies_to_json(lobbies) -> str:
    """Serialize lobbies to a JSON document."""
    payload = {
        'version': APP_VERSION,
        'lobbies': [lobby.to_dict() for lobby in lobbies],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def lobbies_from_json(text: str) -> list[Lobby]:
    """
    Parse a JSON document produced by lobbies_to_json.

    A bare list of lobbies is accepted as well.

    Raises:
        ValueError: If the document is not valid JSON or has the wrong shape
    """
    data = json.loads(text)
    if isinstance(data, dict):
        data = data.get('lobbies')
    if not isinstance(data, list):
        raise ValueError("Expected a list of lobbies")
    try:
        return [Lobby.from_dict(item) for item in data]
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed lobby record: {e}") from e


class JsonFileGateway:
    """Load/save hook backed by a single JSON file."""

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else STORE_FILE

    def load(self) -> list[Lobby]:
        if not self.path.exists():
            logger.info("No saved data found - starting fresh")
            return []

        try:
            lobbies = lobbies_from_json(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading data from {self.path}: {e}")
            return []

        for lobby in lobbies:
            for problem in check_lobby_consistency(lobby):
                logger.warning(f"Lobby '{lobby.name}': {problem}")

        logger.info(f"Loaded {len(lobbies)} lobbies from {self.path}")
        return lobbies

    def save(self, lobbies) -> bool:
        try:
            atomic_write_text(lobbies_to_json(lobbies), self.path, suffix='.json')
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving data to {self.path}: {e}")
            return False

        logger.info(f"Saved {len(lobbies)} lobbies to {self.path}")
        return True
