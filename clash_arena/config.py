"""
Central configuration for the Clash Arena results tracker.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Application ---
APP_NAME = "Clash Arena ESP Manager"
APP_VERSION = "1.0.0"

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
OUTPUT_FOLDER = DATA_FOLDER / "exports"
STORE_FILE = DATA_FOLDER / "clash_arena_lobbies.json"

# --- Capacity Limits ---
MAX_LOBBIES = 4   # Lobbies that may exist at the same time
MAX_TEAMS = 12    # Teams per lobby, fixed at creation
MAX_MATCHES = 6   # Matches per lobby

# --- Naming ---
MAX_LOBBY_NAME_LENGTH = 30
MAX_TEAM_NAME_LENGTH = 25
DEFAULT_TEAM_NAME = "Team {number}"

# --- Points System ---
KILL_POINT_VALUE = 1  # Points per kill

# Placement -> points. Placements missing from the table score 0.
PLACEMENT_POINTS = {
    1: 12,
    2: 9,
    3: 8,
    4: 7,
    5: 6,
    6: 5,
    7: 4,
    8: 3,
    9: 2,
    10: 1,
    11: 0,
    12: 0,
}

# Booyah (1st place) is a tiebreak counter only and never adds to totals.
# Older rule sets awarded +1 here.
BOOYAH_BONUS = 0

# --- Export ---
CSV_COLUMNS = [
    "Rank",
    "Team Name",
    "Booyahs",
    "Placement Points",
    "Kill Points",
    "Total Points",
]
