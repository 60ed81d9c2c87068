"""
leitner.history
---------

This module defines the HistoryEntry class.

Classes:
    HistoryEntry: Represents one practice trial of a Flashcard.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import TypedDict
import json
from typing_extensions import Self
from leitner.card import Flashcard, FlashcardDict
from leitner.difficulty import AnswerDifficulty


class HistoryEntryDict(TypedDict):
    """
    JSON-serializable dictionary representation of a HistoryEntry object.
    """

    card: FlashcardDict
    date: str
    difficulty: int


@dataclass
class HistoryEntry:
    """
    Represents the log entry of a Flashcard that has been practiced.

    Attributes:
        card: The card that was practiced.
        date: The date and time of the practice trial.
        difficulty: How well the learner answered the card.
    """

    card: Flashcard
    date: datetime
    difficulty: AnswerDifficulty

    def to_dict(
        self,
    ) -> HistoryEntryDict:
        """
        Returns a dictionary representation of the HistoryEntry object.

        Returns:
            A dictionary representation of the HistoryEntry object.
        """

        return {
            "card": self.card.to_dict(),
            "date": self.date.isoformat(),
            "difficulty": int(self.difficulty),
        }

    @classmethod
    def from_dict(
        cls,
        source_dict: HistoryEntryDict,
    ) -> Self:
        """
        Creates a HistoryEntry object from an existing dictionary.

        Args:
            source_dict: A dictionary representing an existing HistoryEntry object.

        Returns:
            A HistoryEntry object created from the provided dictionary.
        """

        return cls(
            card=Flashcard.from_dict(source_dict["card"]),
            date=datetime.fromisoformat(source_dict["date"]),
            difficulty=AnswerDifficulty(int(source_dict["difficulty"])),
        )

    def to_json(self, indent: int | str | None = None) -> str:
        """
        Returns a JSON-serialized string of the HistoryEntry object.

        Args:
            indent: Equivalent argument to the indent in json.dumps()

        Returns:
            str: A JSON-serialized string of the HistoryEntry object.
        """

        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, source_json: str) -> Self:
        """
        Creates a HistoryEntry object from a JSON-serialized string.

        Args:
            source_json: A JSON-serialized string of an existing HistoryEntry object.

        Returns:
            Self: A HistoryEntry object created from the JSON string.
        """

        source_dict: HistoryEntryDict = json.loads(source_json)
        return cls.from_dict(source_dict=source_dict)


__all__ = ["HistoryEntry"]
