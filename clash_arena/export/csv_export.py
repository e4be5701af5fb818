"""
Results Table Export

Builds the ranked results table of a lobby as a DataFrame and writes it as
CSV, followed by a short block of lobby metadata.

Usage:
    from clash_arena.export import export_results_csv
    path = export_results_csv(lobby)
"""

import csv
from datetime import datetime
from pathlib import Path

import pandas as pd

from clash_arena.config import CSV_COLUMNS, OUTPUT_FOLDER
from clash_arena.errors import NoMatchesError
from clash_arena.scoring.ranking import standings
from clash_arena.utils import atomic_write_text, safe_filename, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def require_matches(lobby) -> None:
    """Raise NoMatchesError when the lobby has nothing to export yet."""
    if lobby.match_count == 0:
        raise NoMatchesError(f"No data to export for '{lobby.name}'. Please add matches first.")


def standings_frame(lobby) -> pd.DataFrame:
    """
    Ranked standings of a lobby as a DataFrame.

    Columns: Rank, Team Name, Booyahs, Placement Points, Kill Points, Total Points
    """
    rows = [
        {
            'Rank': standing.rank,
            'Team Name': standing.team.name,
            'Booyahs': standing.team.booyahs,
            'Placement Points': standing.team.placement_points,
            'Kill Points': standing.team.kill_points,
            'Total Points': standing.team.total_points,
        }
        for standing in standings(lobby)
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def results_csv_text(lobby, generated_at: datetime | None = None) -> str:
    """
    Render the results table plus lobby metadata as CSV text.

    Raises:
        NoMatchesError: If the lobby has no matches
    """
    require_matches(lobby)
    generated = generated_at or datetime.now()

    table = standings_frame(lobby).to_csv(index=False, lineterminator='\n')

    metadata = pd.DataFrame([
        ['Lobby', lobby.name],
        ['Matches', str(lobby.match_count)],
        ['Generated', generated.strftime('%Y-%m-%d %H:%M:%S')],
    ])
    meta = metadata.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator='\n')

    return f"{table}\n{meta}"


def results_filename(lobby) -> str:
    return f"{safe_filename(lobby.name)}_Results.csv"


def card_filename(lobby) -> str:
    return f"{safe_filename(lobby.name)}_Match{lobby.match_count}.png"


def export_results_csv(lobby, folder: Path | None = None, generated_at: datetime | None = None) -> Path:
    """
    Write the results CSV of a lobby to disk.

    Args:
        lobby: Lobby to export
        folder: Destination folder (default: OUTPUT_FOLDER)
        generated_at: Timestamp for the metadata block (default: now)

    Returns:
        Path to the written CSV file

    Raises:
        NoMatchesError: If the lobby has no matches
    """
    text = results_csv_text(lobby, generated_at)
    path = (folder or OUTPUT_FOLDER) / results_filename(lobby)
    atomic_write_text(text, path, suffix='.csv')
    logger.info(f"CSV exported: {path}")
    return path
