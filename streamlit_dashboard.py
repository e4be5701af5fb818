import streamlit as st
import pandas as pd
import plotly.express as px
from datetime import datetime

from clash_arena.config import (
    APP_NAME,
    APP_VERSION,
    MAX_TEAM_NAME_LENGTH,
    MAX_LOBBY_NAME_LENGTH,
    PLACEMENT_POINTS,
    KILL_POINT_VALUE,
)
from clash_arena.errors import LobbyError, MatchValidationError
from clash_arena.export.card import build_results_card
from clash_arena.export.csv_export import (
    card_filename,
    results_csv_text,
    results_filename,
    standings_frame,
)
from clash_arena.lobby.models import MatchResult
from clash_arena.lobby.store import LobbyStore
from clash_arena.persistence import JsonFileGateway
from clash_arena.scoring.ranking import rank_progression

# --- Page Configuration ---
st.set_page_config(
    page_title=APP_NAME,
    page_icon="🔥",
    layout="wide",
)

# --- Design System ---
ACCENT_COLORS = {
    "primary": "#FF0844",       # Arena red - primary accent
    "booyah": "#FFD700",        # Gold - booyah counter
    "info": "#3B82F6",
    "chart_palette": [
        "#FF0844", "#3B82F6", "#10B981", "#F59E0B", "#8B5CF6", "#EC4899",
        "#06B6D4", "#84CC16", "#F97316", "#6366F1", "#14B8A6", "#A855F7",
    ],
}

# Icons for the podium
RANK_ICONS = {
    1: "👑",
    2: "🥈",
    3: "🥉",
}


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures.

    Text colors are not set, letting Streamlit inject theme-aware colors.
    """
    grid_color = "rgba(128, 128, 128, 0.4)"
    line_color = "rgba(128, 128, 128, 0.3)"

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor=grid_color, linecolor=line_color, zeroline=False),
        yaxis=dict(gridcolor=grid_color, linecolor=line_color, zeroline=False),
        legend=dict(title_text="", bgcolor="rgba(0,0,0,0)", borderwidth=0),
        margin=dict(l=20, r=20, t=30, b=20),
        dragmode=False,  # Disable pan/zoom to prevent scroll hijacking on mobile
    )
    return fig


def get_store() -> LobbyStore:
    """One store per browser session, loaded from disk on first use."""
    if "store" not in st.session_state:
        st.session_state.store = LobbyStore.open(JsonFileGateway())
    return st.session_state.store


# --- Sidebar ---
def render_sidebar(store):
    with st.sidebar:
        st.header("🏟️ Lobbies")
        st.caption(f"{len(store.lobbies)}/{store.max_lobbies} lobbies")

        with st.form("create_lobby", clear_on_submit=True):
            name = st.text_input("Lobby name", max_chars=MAX_LOBBY_NAME_LENGTH)
            if st.form_submit_button("Create Lobby", use_container_width=True):
                try:
                    lobby = store.create_lobby(name)
                    store.select_lobby(lobby.lobby_id)
                except LobbyError as e:
                    st.error(str(e))

        for lobby in store.lobbies:
            label = f"{lobby.name} · {lobby.match_count}/{store.max_matches}"
            selected = lobby.lobby_id == store.current_lobby_id
            if st.button(label, key=f"open_{lobby.lobby_id}", use_container_width=True,
                         type="primary" if selected else "secondary"):
                store.select_lobby(lobby.lobby_id)
                st.rerun()

        with st.expander("Points system", expanded=False):
            table = pd.DataFrame(
                {"Placement": list(PLACEMENT_POINTS), "Points": list(PLACEMENT_POINTS.values())}
            )
            st.dataframe(table, hide_index=True, width='stretch')
            st.caption(f"{KILL_POINT_VALUE} point per kill. Booyahs break ties only.")

        st.caption(f"{APP_NAME} v{APP_VERSION}")


# --- Lobby Views ---
def render_team_names(store, lobby):
    with st.expander("✏️ Team names", expanded=lobby.match_count == 0):
        with st.form(f"rename_{lobby.lobby_id}"):
            cols = st.columns(3)
            new_names = {}
            for i, team in enumerate(lobby.teams):
                new_names[team.team_id] = cols[i % 3].text_input(
                    f"Team {team.team_id}",
                    value=team.name,
                    max_chars=MAX_TEAM_NAME_LENGTH,
                    key=f"name_{lobby.lobby_id}_{team.team_id}",
                )
            if st.form_submit_button("Save names"):
                for team_id, new_name in new_names.items():
                    store.rename_team(lobby.lobby_id, team_id, new_name)
                st.rerun()


def render_match_entry(store, lobby):
    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    if not store.can_record_match(lobby):
        st.info(f"All {store.max_matches} matches recorded for this lobby.")
        return

    st.subheader(f"➕ Match {lobby.match_count + 1}")
    team_count = len(lobby.teams)

    # Keys carry the match number so inputs reset only once a match is saved
    entry = f"{lobby.lobby_id}_{lobby.match_count}"
    with st.form(f"match_{entry}"):
        header = st.columns([3, 2, 2, 1])
        header[0].markdown("**Team**")
        header[1].markdown("**Placement**")
        header[2].markdown("**Kills**")
        header[3].markdown("**Booyah**")

        results = []
        for team in lobby.teams:
            row = st.columns([3, 2, 2, 1])
            row[0].write(team.name)
            placement = row[1].number_input(
                "Placement", min_value=1, max_value=team_count, step=1,
                value=team.team_id, key=f"p_{entry}_{team.team_id}",
                label_visibility="collapsed",
            )
            kills = row[2].number_input(
                "Kills", min_value=0, step=1, value=0,
                key=f"k_{entry}_{team.team_id}",
                label_visibility="collapsed",
            )
            booyah = row[3].checkbox(
                "Booyah", key=f"b_{entry}_{team.team_id}",
                label_visibility="collapsed",
            )
            results.append(MatchResult(
                team_id=team.team_id,
                placement=int(placement),
                kills=int(kills),
                booyah=booyah,
            ))

        if st.form_submit_button("Save Match", type="primary"):
            try:
                store.record_match(lobby.lobby_id, results)
                st.session_state.flash = f"Match {lobby.match_count} saved"
                st.rerun()
            except (MatchValidationError, LobbyError) as e:
                st.error(str(e))


def render_standings(lobby):
    st.subheader("🏆 Standings")
    df = standings_frame(lobby)
    df.insert(0, "", df["Rank"].map(lambda r: RANK_ICONS.get(r, "")))

    st.dataframe(
        df,
        width='stretch',
        hide_index=True,
        column_config={
            "Rank": st.column_config.NumberColumn("Rank", format="%d"),
            "Booyahs": st.column_config.NumberColumn("Booyahs", format="%d", help="Tiebreak only"),
            "Total Points": st.column_config.NumberColumn("Total", format="%d"),
        },
    )

    if lobby.match_count == 0:
        return

    col1, col2 = st.columns(2)
    with col1:
        points = df.melt(
            id_vars=["Team Name"],
            value_vars=["Placement Points", "Kill Points"],
            var_name="Source",
            value_name="Points",
        )
        fig_points = px.bar(
            points, x="Points", y="Team Name", color="Source", orientation="h",
            color_discrete_sequence=[ACCENT_COLORS["info"], ACCENT_COLORS["primary"]],
        )
        apply_plotly_style(fig_points)
        fig_points.update_layout(height=420, yaxis=dict(autorange="reversed", title=""))
        st.plotly_chart(fig_points, use_container_width=True, config={'displayModeBar': False})

    with col2:
        progression = pd.DataFrame(rank_progression(lobby))
        fig_rank = px.line(
            progression, x="match_number", y="rank", color="team_name", markers=True,
            labels={"match_number": "Match", "rank": "Rank", "team_name": "Team"},
            color_discrete_sequence=ACCENT_COLORS["chart_palette"],
        )
        apply_plotly_style(fig_rank)
        fig_rank.update_layout(height=420, yaxis=dict(autorange="reversed", dtick=1))
        fig_rank.update_xaxes(dtick=1)
        st.plotly_chart(fig_rank, use_container_width=True, config={'displayModeBar': False})


def render_exports(lobby):
    st.subheader("📤 Export")
    if lobby.match_count == 0:
        st.caption("Add at least one match before exporting.")
        return

    st.download_button(
        "⬇ Export CSV",
        data=results_csv_text(lobby, generated_at=datetime.now()),
        file_name=results_filename(lobby),
        mime="text/csv",
    )

    card = build_results_card(lobby)
    st.plotly_chart(
        card,
        use_container_width=False,
        config={
            'displayModeBar': True,
            'modeBarButtonsToRemove': ['zoom', 'pan', 'select', 'lasso2d', 'autoScale', 'resetScale'],
            'toImageButtonOptions': {
                'format': 'png',
                'filename': card_filename(lobby).removesuffix('.png'),
                'scale': 2,
            },
        },
    )
    st.caption("Use the camera icon on the card to download it as an image.")


# --- Main App ---
def main():
    st.title(f"🔥 {APP_NAME}")
    store = get_store()
    render_sidebar(store)

    lobby = store.current_lobby()
    if lobby is None:
        st.info("Create or select a lobby from the sidebar to start recording matches.")
        return

    head, action = st.columns([5, 1])
    head.header(lobby.name)
    head.caption(
        f"{len(lobby.teams)} teams · {lobby.match_count}/{store.max_matches} matches · "
        f"created {lobby.created_at:%Y-%m-%d %H:%M} UTC"
    )
    with action.popover("🗑️ Delete"):
        st.write(f"Delete **{lobby.name}** and all of its matches?")
        if st.button("Delete lobby", type="primary", key=f"delete_{lobby.lobby_id}"):
            store.delete_lobby(lobby.lobby_id)
            st.rerun()

    render_team_names(store, lobby)
    render_match_entry(store, lobby)
    render_standings(lobby)
    render_exports(lobby)


if __name__ == "__main__":
    main()
