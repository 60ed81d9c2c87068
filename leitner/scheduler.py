"""
leitner.scheduler
---------

This module defines the Scheduler class as well as module-level shortcuts that use a default Scheduler.

Classes:
    Scheduler: The Modified-Leitner spaced-repetition scheduler.
"""

from __future__ import annotations
from collections.abc import Iterable, Sequence, Set
from dataclasses import dataclass
from datetime import datetime, timezone
import json
import logging
from typing import TypedDict
from typing_extensions import Self, assert_never
from leitner.buckets import RETIRED_BUCKET, BucketMap, find_bucket
from leitner.card import Flashcard
from leitner.difficulty import AnswerDifficulty
from leitner.history import HistoryEntry

logger = logging.getLogger(__name__)


class SchedulerDict(TypedDict):
    """
    JSON-serializable dictionary representation of a Scheduler object.
    """

    retired_bucket: int


@dataclass(init=False)
class Scheduler:
    """
    The Modified-Leitner scheduler.

    Bucket i is practiced every 2**i days. A Wrong answer sends a card back to bucket 0,
    Hard moves it one bucket down and Easy one bucket up, until it reaches the retired bucket.
    Retired cards are never due.

    Attributes:
        retired_bucket: The bucket number of mastered cards.
    """

    retired_bucket: int

    def __init__(self, retired_bucket: int = RETIRED_BUCKET) -> None:
        if isinstance(retired_bucket, bool) or not isinstance(retired_bucket, int):
            raise ValueError(
                f"retired_bucket must be an int, got {type(retired_bucket).__name__}"
            )
        if retired_bucket < 1:
            raise ValueError(f"retired_bucket must be at least 1, got {retired_bucket}")

        self.retired_bucket = retired_bucket

    def practice(self, bucket_sets: Sequence[Set[Flashcard]], day: int) -> set[Flashcard]:
        """
        Selects the cards to practice on a given day.

        Args:
            bucket_sets: The dense list-of-sets representation of the buckets.
            day: The current day number, starting from 0.

        Returns:
            set[Flashcard]: Every card in a bucket that is due on `day`. Retired cards are never included.

        Raises:
            ValueError: If `day` is not a non-negative int.
        """

        if isinstance(day, bool) or not isinstance(day, int) or day < 0:
            raise ValueError(f"day must be a non-negative int, got {day!r}")

        due_cards: set[Flashcard] = set()
        for bucket, cards in enumerate(bucket_sets):
            if bucket == self.retired_bucket:
                continue

            if day % 2**bucket == 0:
                due_cards.update(cards)

        logger.debug("day %d: %d cards due", day, len(due_cards))

        return due_cards

    def update(
        self,
        buckets: BucketMap,
        card: Flashcard,
        difficulty: AnswerDifficulty,
    ) -> dict[int, set[Flashcard]]:
        """
        Moves a card to its next bucket after a practice trial.

        The given mapping and its sets are left untouched.

        Args:
            buckets: The current BucketMap.
            card: The card that was practiced.
            difficulty: How well the learner answered the card.

        Returns:
            dict[int, set[Flashcard]]: The new BucketMap. If `card` isn't in any bucket,
                this is an unchanged copy of `buckets`.
        """

        new_buckets = {bucket: set(cards) for bucket, cards in buckets.items()}

        current_bucket = find_bucket(new_buckets, card)
        if current_bucket is None:
            logger.debug("card %r is not in any bucket, nothing to update", card.front)
            return new_buckets

        new_buckets[current_bucket].discard(card)
        if len(new_buckets[current_bucket]) == 0:
            del new_buckets[current_bucket]

        next_bucket = self._next_bucket(
            current_bucket=current_bucket, difficulty=difficulty
        )
        new_buckets.setdefault(next_bucket, set()).add(card)

        logger.debug(
            "card %r answered %s: bucket %d -> %d",
            card.front,
            difficulty.name,
            current_bucket,
            next_bucket,
        )

        return new_buckets

    def review_card(
        self,
        buckets: BucketMap,
        card: Flashcard,
        difficulty: AnswerDifficulty,
        review_datetime: datetime | None = None,
    ) -> tuple[dict[int, set[Flashcard]], HistoryEntry]:
        """
        Updates the buckets after a practice trial and creates the matching history entry.

        Args:
            buckets: The current BucketMap.
            card: The card that was practiced.
            difficulty: How well the learner answered the card.
            review_datetime: The date and time of the practice trial. Defaults to now.

        Returns:
            tuple[dict[int, set[Flashcard]], HistoryEntry]: The new BucketMap and the entry to append to the history.

        Raises:
            ValueError: If the `review_datetime` argument is not timezone-aware and set to UTC.
        """

        if review_datetime is not None and (
            (review_datetime.tzinfo is None) or (review_datetime.tzinfo != timezone.utc)
        ):
            raise ValueError("datetime must be timezone-aware and set to UTC")

        if review_datetime is None:
            review_datetime = datetime.now(timezone.utc)

        new_buckets = self.update(buckets, card, difficulty)
        history_entry = HistoryEntry(
            card=card, date=review_datetime, difficulty=difficulty
        )

        return new_buckets, history_entry

    def replay(
        self, buckets: BucketMap, history: Iterable[HistoryEntry]
    ) -> dict[int, set[Flashcard]]:
        """
        Applies a practice history to a BucketMap, oldest entry first.

        Useful for recomputing bucket state after changing the scheduler's retired bucket.

        Args:
            buckets: The BucketMap the history starts from.
            history: The history entries to apply (order doesn't matter).

        Returns:
            dict[int, set[Flashcard]]: The BucketMap after every entry has been applied.
        """

        new_buckets = {bucket: set(cards) for bucket, cards in buckets.items()}
        for history_entry in sorted(history, key=lambda entry: entry.date):
            new_buckets = self.update(
                new_buckets, history_entry.card, history_entry.difficulty
            )

        return new_buckets

    def to_dict(
        self,
    ) -> SchedulerDict:
        """
        Returns a dictionary representation of the Scheduler object.

        Returns:
            SchedulerDict: A dictionary representation of the Scheduler object.
        """

        return {"retired_bucket": self.retired_bucket}

    @classmethod
    def from_dict(cls, source_dict: SchedulerDict) -> Self:
        """
        Creates a Scheduler object from an existing dictionary.

        Args:
            source_dict: A dictionary representing an existing Scheduler object.

        Returns:
            Self: A Scheduler object created from the provided dictionary.
        """

        return cls(retired_bucket=source_dict["retired_bucket"])

    def to_json(self, indent: int | str | None = None) -> str:
        """
        Returns a JSON-serialized string of the Scheduler object.

        Args:
            indent: Equivalent argument to the indent in json.dumps()

        Returns:
            str: A JSON-serialized string of the Scheduler object.
        """

        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, source_json: str) -> Self:
        """
        Creates a Scheduler object from a JSON-serialized string.

        Args:
            source_json: A JSON-serialized string of an existing Scheduler object.

        Returns:
            Self: A Scheduler object created from the JSON string.
        """

        source_dict: SchedulerDict = json.loads(source_json)
        return cls.from_dict(source_dict=source_dict)

    def _next_bucket(self, *, current_bucket: int, difficulty: AnswerDifficulty) -> int:
        match difficulty:
            case AnswerDifficulty.Wrong:
                return 0
            case AnswerDifficulty.Hard:
                return max(0, current_bucket - 1)
            case AnswerDifficulty.Easy:
                # retired cards stay retired
                if current_bucket == self.retired_bucket:
                    return current_bucket
                return current_bucket + 1
            case _:
                assert_never(difficulty)


_default_scheduler = Scheduler()


def practice(bucket_sets: Sequence[Set[Flashcard]], day: int) -> set[Flashcard]:
    """
    Selects the cards to practice on `day` using the default Scheduler.
    """

    return _default_scheduler.practice(bucket_sets, day)


def update(
    buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty
) -> dict[int, set[Flashcard]]:
    """
    Moves `card` to its next bucket using the default Scheduler.
    """

    return _default_scheduler.update(buckets, card, difficulty)


__all__ = ["Scheduler", "practice", "update"]
