"""
Results Card

A shareable standings card rendered as a plotly table figure. The dashboard
shows it with the plotly toolbar enabled, whose camera button downloads the
card as a PNG.
"""

import plotly.graph_objects as go

from clash_arena.config import APP_NAME
from clash_arena.export.csv_export import require_matches
from clash_arena.scoring.ranking import standings

# --- Card palette ---
CARD_COLORS = {
    "background": "#0a0a0f",
    "row": "#1a1a24",
    "row_alt": "#22222e",
    "header": "#2a2a38",
    "text": "#ffffff",
    "total": "#ff0844",
    "booyah": "#ffd700",
}

# Podium rows get a rank colour
PODIUM_COLORS = {
    1: "#FFD700",
    2: "#C0C0C0",
    3: "#CD7F32",
}

HEADER = ["#", "TEAM", "BOOYAH", "PLACE PTS", "KILL PTS", "TOTAL"]


def match_count_label(count: int) -> str:
    return f"After {count} Match{'' if count == 1 else 'es'}"


def build_results_card(lobby, width: int = 900) -> go.Figure:
    """
    Build the results card figure for a lobby.

    Raises:
        NoMatchesError: If the lobby has no matches
    """
    require_matches(lobby)
    ranked = standings(lobby)

    columns = [
        [s.rank for s in ranked],
        [s.team.name for s in ranked],
        [s.team.booyahs for s in ranked],
        [s.team.placement_points for s in ranked],
        [s.team.kill_points for s in ranked],
        [s.team.total_points for s in ranked],
    ]

    row_fill = [
        CARD_COLORS["row"] if i % 2 == 0 else CARD_COLORS["row_alt"]
        for i in range(len(ranked))
    ]
    rank_colors = [PODIUM_COLORS.get(s.rank, CARD_COLORS["text"]) for s in ranked]
    text = CARD_COLORS["text"]
    font_colors = [
        rank_colors,
        [text] * len(ranked),
        [CARD_COLORS["booyah"]] * len(ranked),
        [text] * len(ranked),
        [text] * len(ranked),
        [CARD_COLORS["total"]] * len(ranked),
    ]

    fig = go.Figure(data=[go.Table(
        columnwidth=[40, 220, 80, 90, 80, 80],
        header=dict(
            values=HEADER,
            fill_color=CARD_COLORS["header"],
            font=dict(color=text, size=14),
            align=["center", "left", "center", "center", "center", "center"],
            height=36,
        ),
        cells=dict(
            values=columns,
            fill_color=[row_fill] * len(columns),
            font=dict(color=font_colors, size=14),
            align=["center", "left", "center", "center", "center", "center"],
            height=32,
        ),
    )])

    fig.update_layout(
        title=dict(
            text=f"<b>{lobby.name.upper()}</b><br><sup>{match_count_label(lobby.match_count)}</sup>",
            x=0.5,
            font=dict(color=text, size=24),
        ),
        paper_bgcolor=CARD_COLORS["background"],
        width=width,
        height=140 + 34 * (len(ranked) + 1),
        margin=dict(l=20, r=20, t=90, b=40),
        annotations=[dict(
            text=APP_NAME,
            showarrow=False,
            xref="paper",
            yref="paper",
            x=0.5,
            y=-0.03,
            font=dict(color=text, size=11),
        )],
    )
    return fig
