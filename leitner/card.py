"""
leitner.card
---------

This module defines the Flashcard class.

Classes:
    Flashcard: An immutable flashcard tracked by the Leitner buckets.
"""

from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass
import json
from typing import TypedDict
from typing_extensions import Self


class FlashcardDict(TypedDict):
    """
    JSON-serializable dictionary representation of a Flashcard object.
    """

    front: str
    back: str
    hint: str
    tags: list[str]


@dataclass(frozen=True, init=False)
class Flashcard:
    """
    Represents a flashcard.

    A Flashcard never knows which bucket it is in; bucket membership is kept by the
    bucket mapping alone. Two Flashcards with the same fields are the same card.

    Attributes:
        front: The prompt shown to the learner.
        back: The expected answer.
        hint: The hint shown for cards that don't get a generated hint.
        tags: The set of tags attached to the card.
    """

    front: str
    back: str
    hint: str
    tags: frozenset[str]

    def __init__(
        self,
        front: str,
        back: str,
        hint: str = "",
        tags: Iterable[str] = (),
    ) -> None:
        if isinstance(tags, str):
            raise TypeError("tags must be an iterable of strings, not a single string")

        object.__setattr__(self, "front", front)
        object.__setattr__(self, "back", back)
        object.__setattr__(self, "hint", hint)
        object.__setattr__(self, "tags", frozenset(tags))

    def to_dict(self) -> FlashcardDict:
        """
        Returns a JSON-serializable dictionary representation of the Flashcard object.

        Returns:
            A dictionary representation of the Flashcard object.
        """

        return {
            "front": self.front,
            "back": self.back,
            "hint": self.hint,
            "tags": sorted(self.tags),
        }

    @classmethod
    def from_dict(cls, source_dict: FlashcardDict) -> Self:
        """
        Creates a Flashcard object from an existing dictionary.

        Args:
            source_dict: A dictionary representing an existing Flashcard object.

        Returns:
            A Flashcard object created from the provided dictionary.
        """

        return cls(
            front=source_dict["front"],
            back=source_dict["back"],
            hint=source_dict.get("hint", ""),
            tags=source_dict.get("tags", []),
        )

    def to_json(self, indent: int | str | None = None) -> str:
        """
        Returns a JSON-serialized string of the Flashcard object.

        Args:
            indent: Equivalent argument to the indent in json.dumps()

        Returns:
            str: A JSON-serialized string of the Flashcard object.
        """

        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, source_json: str) -> Self:
        """
        Creates a Flashcard object from a JSON-serialized string.

        Args:
            source_json: A JSON-serialized string of an existing Flashcard object.

        Returns:
            Self: A Flashcard object created from the JSON string.
        """

        source_dict: FlashcardDict = json.loads(source_json)
        return cls.from_dict(source_dict=source_dict)


__all__ = ["Flashcard"]
