"""
leitner
-------

Leitner is a Python implementation of the Modified-Leitner spaced-repetition algorithm: flashcards live
in numbered buckets, bucket i is practiced every 2**i days and each answer moves a card between buckets.
"""

import importlib
import logging
from types import ModuleType
from typing import TYPE_CHECKING

from leitner.buckets import (
    RETIRED_BUCKET,
    BucketRange,
    get_bucket_range,
    to_bucket_map,
    to_bucket_sets,
)
from leitner.card import Flashcard
from leitner.difficulty import AnswerDifficulty
from leitner.hint import get_hint
from leitner.history import HistoryEntry
from leitner.progress import EmptyHistoryError, Progress, compute_progress
from leitner.scheduler import Scheduler, practice, update

if TYPE_CHECKING:
    from leitner import analysis

logging.getLogger(__name__).addHandler(logging.NullHandler())


# lazy load the analysis module due to its pandas dependency
def __getattr__(name: str) -> ModuleType:
    if name == "analysis":
        return importlib.import_module("leitner.analysis")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AnswerDifficulty",
    "BucketRange",
    "EmptyHistoryError",
    "Flashcard",
    "HistoryEntry",
    "Progress",
    "RETIRED_BUCKET",
    "Scheduler",
    "analysis",
    "compute_progress",
    "get_bucket_range",
    "get_hint",
    "practice",
    "to_bucket_map",
    "to_bucket_sets",
    "update",
]
