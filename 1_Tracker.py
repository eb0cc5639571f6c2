import logging
from dataclasses import replace

import streamlit as st

from analytics import (
    build_daily_frame,
    calendar_stats,
    monthly_progress_percent,
    performance_profile,
    session_distribution,
    style_calendar,
    summarize_month,
)
from constants import DAILY_TARGET, FIXED_SESSIONS, MAX_SESSION_RATING, MONTHLY_TARGET_SESSIONS
from exceptions import MissionTrackerError
from logger import setup_logging
from session_editor import create_session_dataframe, dataframe_to_sessions
from storage import MissionStore
from utils import date_key, get_local_today

setup_logging()
logger = logging.getLogger("app.tracker")

st.set_page_config(layout="wide", page_title="Mission Tracker")

st.title("📚 Mission Tracker Pro")
st.caption("Nationwide Candidate Simulation Engine")

store = MissionStore()
today = get_local_today()

# --- Load the daily log once per browser session ---
if "mission_data" not in st.session_state:
    try:
        st.session_state.mission_data = store.load()
        st.session_state.log_load_failed = False
    except MissionTrackerError as e:
        st.error(f"Could not load your study log: {e}")
        st.session_state.mission_data = {}
        st.session_state.log_load_failed = True

mission_data = st.session_state.mission_data

col1, col2 = st.columns([2, 1])

# --- Daily Log ---
with col2:
    st.header("Daily Log")
    selected_date = st.date_input("Day", value=today, max_value=today)
    selected_key = date_key(selected_date)
    day = MissionStore.get_day(mission_data, selected_key)

    st.info(
        f"**Efficiency:** {day.efficiency}% · "
        f"**{day.rated_sessions}** of {len(day.sessions)} sessions rated"
    )

    edited_df = st.data_editor(
        create_session_dataframe(day.sessions),
        column_config={
            "#": st.column_config.NumberColumn("#", disabled=True),
            "Subject": st.column_config.TextColumn("Subject"),
            "Rating": st.column_config.NumberColumn(
                "Rating", min_value=0, max_value=MAX_SESSION_RATING, step=1
            ),
        },
        num_rows="dynamic",
        hide_index=True,
        use_container_width=True,
        key=f"editor_{selected_key}",
    )
    st.caption(f"The first {FIXED_SESSIONS} sessions are mandatory; add rows for extra sessions.")

    # Saving over an unreadable file would replace it with this one day
    load_failed = st.session_state.get("log_load_failed", False)
    if load_failed:
        st.warning("Saving is disabled until the study log file is fixed.")
    if st.button("💾 Save Day", use_container_width=True, disabled=load_failed, key="save_day"):
        new_day = replace(day, sessions=dataframe_to_sessions(edited_df))
        try:
            updated = MissionStore.record_day(mission_data, selected_key, new_day)
            store.save(updated)
        except MissionTrackerError as e:
            st.error(f"Failed to save {selected_key}: {e}")
        else:
            st.session_state.mission_data = updated
            recorded = updated[selected_key]
            logger.info(
                f"Recorded {selected_key}: {recorded.rated_sessions} sessions at "
                f"{recorded.efficiency}%"
            )
            st.rerun()

# --- Monthly Analytics ---
with col1:
    year, month = selected_date.year, selected_date.month
    st.header(f"{selected_date.strftime('%B %Y')}")

    summary = summarize_month(mission_data, year, month)
    m1, m2, m3 = st.columns(3)
    m1.metric("Sessions", f"{summary.total_sessions} / {MONTHLY_TARGET_SESSIONS}")
    m2.metric("Avg Efficiency", f"{summary.avg_efficiency:.0f}%")
    m3.metric("Daily Target", f"{DAILY_TARGET} sessions")
    st.progress(monthly_progress_percent(summary.total_sessions) / 100)

    st.subheader("Calendar")
    cal = calendar_stats(mission_data, year, month)
    c1, c2, c3 = st.columns(3)
    c1.metric("Days Logged", cal.days_logged)
    c2.metric("Sessions / Day", f"{cal.avg_sessions_per_day:.1f}")
    c3.metric("Logged-Day Efficiency", f"{cal.avg_efficiency}%")
    st.dataframe(style_calendar(mission_data, year, month), hide_index=True, use_container_width=True)

    daily_frame = build_daily_frame(mission_data, year, month, today)
    if daily_frame.empty:
        st.info("No sessions logged this month yet.")
    else:
        st.subheader("Daily Sessions & Efficiency")
        st.line_chart(daily_frame, x="day", y=["sessions", "efficiency"])

        st.subheader("Session Distribution")
        st.bar_chart(session_distribution(daily_frame), x="bucket", y="days")

        st.subheader("Performance Profile")
        profile = performance_profile(daily_frame, today)
        cols = st.columns(len(profile))
        for col, (metric, value) in zip(cols, profile.items()):
            col.metric(metric, f"{value:.0f}%")

    if st.button("🏆 Open Leaderboard"):
        st.switch_page("pages/2_Leaderboard.py")
