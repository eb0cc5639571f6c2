"""
Tests for the daily session editor.

These tests verify the behavior of processing session rows from the UI,
including rows added through the editor with empty cells.
"""

import math

import pandas as pd

from app_types import StudySession
from constants import FIXED_SESSIONS
from session_editor import create_session_dataframe, dataframe_to_sessions


class TestSessionEditorProcessing:
    """Tests for converting between sessions and editor DataFrames."""

    def test_dataframe_shape(self):
        sessions = [StudySession("Physics", 8), StudySession()]
        df = create_session_dataframe(sessions)

        assert list(df.columns) == ["#", "Subject", "Rating"]
        assert list(df["#"]) == [1, 2]
        assert df.loc[0, "Rating"] == 8
        assert math.isnan(df.loc[1, "Rating"])

    def test_unchanged_dataframe_round_trips(self):
        sessions = [StudySession("Physics", 8), StudySession("Math", None)] + [
            StudySession() for _ in range(FIXED_SESSIONS - 2)
        ]
        assert dataframe_to_sessions(create_session_dataframe(sessions)) == sessions

    def test_new_row_with_empty_cells(self):
        """
        When a row is added in the editor with only a subject typed in, the
        resulting session has no rating rather than a NaN one.
        """
        df = create_session_dataframe([StudySession() for _ in range(FIXED_SESSIONS)])
        new_row = pd.DataFrame([{"#": None, "Subject": "  Extra Chem ", "Rating": None}])
        edited_df = pd.concat([df, new_row], ignore_index=True)

        result = dataframe_to_sessions(edited_df)

        assert len(result) == FIXED_SESSIONS + 1
        assert result[-1] == StudySession("Extra Chem", None)

    def test_deleted_rows_are_padded_back(self):
        df = create_session_dataframe([StudySession("Physics", 7)])
        result = dataframe_to_sessions(df)

        assert len(result) == FIXED_SESSIONS
        assert result[0] == StudySession("Physics", 7)
        assert all(s == StudySession() for s in result[1:])

    def test_float_ratings_become_ints(self):
        df = pd.DataFrame({"#": [1], "Subject": ["Math"], "Rating": [9.0]})
        rating = dataframe_to_sessions(df)[0].rating
        assert rating == 9
        assert isinstance(rating, int)
