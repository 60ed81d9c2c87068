"""
leitner.progress
---------

This module computes learning progress statistics from the buckets and the practice history.

Classes:
    Progress: Aggregate statistics about the learner's progress.
    EmptyHistoryError: Raised when statistics are requested without any practice history.
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypedDict
from leitner.buckets import BucketMap
from leitner.history import HistoryEntry


class EmptyHistoryError(ValueError):
    """
    Raised when progress is computed from an empty practice history.
    """


class ProgressDict(TypedDict):
    """
    JSON-serializable dictionary representation of a Progress object.
    """

    total: int
    bucket_counts: list[int]
    average_practices: float


@dataclass(frozen=True)
class Progress:
    """
    Aggregate statistics about the learner's progress.

    Attributes:
        total: The number of cards currently in the buckets.
        bucket_counts: The number of cards in each bucket, from bucket 0 to the highest occupied bucket.
        average_practices: The number of recorded practice trials per bucketed card.
    """

    total: int
    bucket_counts: list[int]
    average_practices: float

    def to_dict(self) -> ProgressDict:
        return {
            "total": self.total,
            "bucket_counts": list(self.bucket_counts),
            "average_practices": self.average_practices,
        }


def compute_progress(
    buckets: BucketMap, history: Sequence[HistoryEntry]
) -> Progress:
    """
    Computes statistics about the learner's progress.

    `average_practices` divides the practice count of every card in the history, including
    cards no longer in the buckets, by the number of cards currently bucketed. It is a rough
    signal, not a per-card average.

    Args:
        buckets: The current BucketMap.
        history: The learner's practice history.

    Returns:
        Progress: The total number of cards, the cards per bucket and the average number of practices.

    Raises:
        EmptyHistoryError: If `history` is empty.
    """

    if len(history) == 0:
        raise EmptyHistoryError("History must not be empty")

    total = sum(len(cards) for cards in buckets.values())

    max_bucket = max(buckets.keys(), default=0)
    bucket_counts = [len(buckets.get(bucket, ())) for bucket in range(max_bucket + 1)]

    practice_counts = Counter(history_entry.card for history_entry in history)
    total_practices = sum(practice_counts.values())

    average_practices = 0.0 if total == 0 else total_practices / total

    return Progress(
        total=total,
        bucket_counts=bucket_counts,
        average_practices=average_practices,
    )


__all__ = ["EmptyHistoryError", "Progress", "compute_progress"]
