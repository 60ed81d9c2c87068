"""
leitner.analysis
---------

This module defines optional pandas-based views of the practice history.

Install with: pip install "leitner[analysis]"
"""

from __future__ import annotations
from collections.abc import Sequence
import pandas as pd
from leitner.difficulty import AnswerDifficulty
from leitner.history import HistoryEntry
from leitner.progress import EmptyHistoryError

DIFFICULTY_COLUMNS = [difficulty.name for difficulty in AnswerDifficulty]


def history_to_dataframe(history: Sequence[HistoryEntry]) -> pd.DataFrame:
    """
    Flattens a practice history into a DataFrame, one row per practice trial.

    Args:
        history: The learner's practice history.

    Returns:
        pd.DataFrame: Columns `front`, `back`, `date` and `difficulty` (the difficulty name).

    Raises:
        EmptyHistoryError: If `history` is empty.
    """

    if len(history) == 0:
        raise EmptyHistoryError("History must not be empty")

    return pd.DataFrame(
        {
            "front": history_entry.card.front,
            "back": history_entry.card.back,
            "date": history_entry.date,
            "difficulty": history_entry.difficulty.name,
        }
        for history_entry in history
    )


def difficulty_breakdown(history: Sequence[HistoryEntry]) -> pd.DataFrame:
    """
    Counts, per card, how often each difficulty was given.

    Args:
        history: The learner's practice history.

    Returns:
        pd.DataFrame: Indexed by (`front`, `back`), with one column per difficulty and a
            `practices` column, sorted by most practiced card first.

    Raises:
        EmptyHistoryError: If `history` is empty.
    """

    history_df = history_to_dataframe(history)

    breakdown = (
        pd.crosstab(
            index=[history_df["front"], history_df["back"]],
            columns=history_df["difficulty"],
        )
        .reindex(columns=DIFFICULTY_COLUMNS, fill_value=0)
        .astype(int)
    )
    breakdown.columns.name = None
    breakdown["practices"] = breakdown[DIFFICULTY_COLUMNS].sum(axis=1)

    return breakdown.sort_values(
        by=["practices", "front"], ascending=[False, True], kind="stable"
    )


__all__ = ["history_to_dataframe", "difficulty_breakdown"]
