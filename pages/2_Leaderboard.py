import logging

import streamlit as st

from analytics import summarize_month
from constants import POPULATION_SIZE
from exceptions import MissionTrackerError
from logger import setup_logging
from ranking_service import build_leaderboard, entries_to_dataframe, style_leaderboard, tiers_dataframe
from storage import MissionStore
from tiers import format_rank
from utils import get_local_today

setup_logging()
logger = logging.getLogger("app.leaderboard_page")

st.set_page_config(layout="wide", page_title="Leaderboard")

st.title("🏆 Bangladesh Arena")
st.caption(f"Census: {POPULATION_SIZE:,} Candidates · Formula: Total Sessions × Efficiency (%)")

# --- Page Entry Logic ---
# Reuse the tracker's log if it is loaded, otherwise read it from disk.
if "mission_data" not in st.session_state:
    try:
        st.session_state.mission_data = MissionStore().load()
        st.session_state.log_load_failed = False
    except MissionTrackerError as e:
        st.error(f"Could not load your study log: {e}")
        st.session_state.mission_data = {}
        st.session_state.log_load_failed = True

# One clock read per run; rank and lobby are both computed from this day.
today = get_local_today()
summary = summarize_month(st.session_state.mission_data, today.year, today.month)

# Clicking re-runs the script, which re-rolls the lobby jitter.
st.button("🔄 Refresh")

view = build_leaderboard(summary, today.day)

m1, m2, m3 = st.columns(3)
m1.metric("Global Rank", f"#{view.global_rank:,}")
m2.metric("Pure Points", f"{round(view.score):,}")
m3.metric("Badge", view.badge.display_label)

display_columns = ["Rank", "Name", "Tier", "Sessions", "Efficiency", "Points"]

lobby_tab, elite_tab, tiers_tab = st.tabs(["My Lobby", "Top 100", "Tiers Info"])

with lobby_tab:
    if view.elite.contains_user:
        st.success(f"You are {format_rank(view.global_rank)} in the Top 100. See the Top 100 tab.")
    else:
        st.dataframe(
            style_leaderboard(entries_to_dataframe(view.peers)),
            column_order=display_columns,
            hide_index=True,
            use_container_width=True,
        )

with elite_tab:
    st.dataframe(
        style_leaderboard(entries_to_dataframe(view.elite.entries)),
        column_order=display_columns,
        hide_index=True,
        use_container_width=True,
    )

with tiers_tab:
    st.dataframe(tiers_dataframe(), hide_index=True, use_container_width=True)

if st.button("⬅️ Back to Tracker"):
    st.switch_page("1_Tracker.py")
