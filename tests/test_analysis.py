import pytest

pd = pytest.importorskip("pandas")

from leitner.analysis import history_to_dataframe, difficulty_breakdown
from leitner import AnswerDifficulty, EmptyHistoryError, Flashcard, Scheduler

from datetime import datetime, timedelta, timezone

CARD_A = Flashcard("Q1", "A1")
CARD_B = Flashcard("Q2", "A2", tags=["language"])


def get_history():
    scheduler = Scheduler()
    buckets = {0: {CARD_A, CARD_B}}
    review_datetime = datetime(2022, 11, 29, 12, 30, 0, 0, timezone.utc)

    trials = [
        (CARD_A, AnswerDifficulty.Easy),
        (CARD_B, AnswerDifficulty.Wrong),
        (CARD_A, AnswerDifficulty.Hard),
        (CARD_B, AnswerDifficulty.Easy),
        (CARD_A, AnswerDifficulty.Easy),
    ]

    history = []
    for card, difficulty in trials:
        buckets, history_entry = scheduler.review_card(
            buckets, card, difficulty, review_datetime=review_datetime
        )
        history.append(history_entry)
        review_datetime += timedelta(days=1)

    return history


def test_history_to_dataframe():
    history = get_history()

    history_df = history_to_dataframe(history)

    assert list(history_df.columns) == ["front", "back", "date", "difficulty"]
    assert len(history_df) == len(history)
    assert history_df["difficulty"].tolist() == ["Easy", "Wrong", "Hard", "Easy", "Easy"]
    assert history_df["front"].tolist() == ["Q1", "Q2", "Q1", "Q2", "Q1"]


def test_difficulty_breakdown():
    breakdown = difficulty_breakdown(get_history())

    assert list(breakdown.columns) == ["Wrong", "Hard", "Easy", "practices"]
    assert list(breakdown.index) == [("Q1", "A1"), ("Q2", "A2")]

    assert breakdown.loc[("Q1", "A1")].tolist() == [0, 1, 2, 3]
    assert breakdown.loc[("Q2", "A2")].tolist() == [1, 0, 1, 2]

    assert breakdown["practices"].sum() == 5


def test_difficulty_breakdown_missing_difficulties():
    history = [
        entry for entry in get_history() if entry.difficulty == AnswerDifficulty.Easy
    ]

    breakdown = difficulty_breakdown(history)

    assert breakdown["Wrong"].sum() == 0
    assert breakdown["Hard"].sum() == 0
    assert breakdown["Easy"].sum() == 3


def test_empty_history():
    with pytest.raises(EmptyHistoryError):
        history_to_dataframe([])

    with pytest.raises(EmptyHistoryError):
        difficulty_breakdown([])
