# session_editor.py
"""
Daily session editor data processing utilities.

This module handles conversion between StudySession objects and pandas
DataFrames for the tracker page's data editor.
"""

import pandas as pd

from app_types import StudySession
from constants import FIXED_SESSIONS

EDITOR_COLUMNS = ["#", "Subject", "Rating"]


def create_session_dataframe(sessions: list[StudySession]) -> pd.DataFrame:
    """Creates a DataFrame for the editor from a day's sessions."""
    return pd.DataFrame(
        {
            "#": range(1, len(sessions) + 1),
            "Subject": [s.subject for s in sessions],
            "Rating": pd.Series([s.rating for s in sessions], dtype="float64"),
        },
        columns=EDITOR_COLUMNS,
    )


def dataframe_to_sessions(edited_df: pd.DataFrame) -> list[StudySession]:
    """
    Converts an edited session DataFrame back into StudySession objects.

    Rows added through the editor arrive with NaN/None cells; an empty
    rating means "not rated yet". The first FIXED_SESSIONS sessions are
    mandatory, so the list is padded back up to that length if rows were
    deleted.

    Args:
        edited_df: DataFrame from the Streamlit data_editor

    Returns:
        List of StudySession objects in editor order
    """
    sessions = []
    for _, row in edited_df.iterrows():
        subject = "" if pd.isna(row.get("Subject")) else str(row["Subject"]).strip()
        rating = None if pd.isna(row.get("Rating")) else int(row["Rating"])
        sessions.append(StudySession(subject=subject, rating=rating))

    while len(sessions) < FIXED_SESSIONS:
        sessions.append(StudySession())

    return sessions
