"""
leitner.buckets
---------

This module defines the two representations of the Leitner buckets and the conversions between them.

A BucketMap is the sparse, authoritative form: bucket number -> non-empty set of cards.
A BucketSets list is the dense, derived form: index i holds the set of cards in bucket i.

Classes:
    BucketRange: The smallest and largest occupied bucket numbers.
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from leitner.card import Flashcard

RETIRED_BUCKET = 5

BucketMap = Mapping[int, Set[Flashcard]]
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True)
class BucketRange:
    """
    The range of buckets that hold at least one card.

    Attributes:
        min_bucket: The lowest occupied bucket number.
        max_bucket: The highest occupied bucket number.
    """

    min_bucket: int
    max_bucket: int


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Converts a BucketMap into the dense list-of-sets representation.

    Args:
        buckets: Mapping of bucket numbers to the sets of cards in them.

    Returns:
        BucketSets: A list whose element i is a copy of the set of cards in bucket i.
            Buckets missing from the mapping are empty sets. An empty mapping gives an empty list.
    """

    if len(buckets) == 0:
        return []

    max_bucket = max(buckets.keys())
    return [set(buckets.get(bucket, ())) for bucket in range(max_bucket + 1)]


def to_bucket_map(bucket_sets: Sequence[Set[Flashcard]]) -> dict[int, set[Flashcard]]:
    """
    Converts the dense list-of-sets representation back into a BucketMap, dropping empty buckets.
    """

    return {
        bucket: set(cards) for bucket, cards in enumerate(bucket_sets) if len(cards) > 0
    }


def get_bucket_range(bucket_sets: Sequence[Set[Flashcard]]) -> BucketRange | None:
    """
    Finds the range of buckets that contain cards, as a rough measure of progress.

    Args:
        bucket_sets: The dense list-of-sets representation of the buckets.

    Returns:
        BucketRange | None: The lowest and highest occupied buckets, or None if no bucket holds a card.
    """

    occupied = [bucket for bucket, cards in enumerate(bucket_sets) if len(cards) > 0]

    if len(occupied) == 0:
        return None

    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


def find_bucket(buckets: BucketMap, card: Flashcard) -> int | None:
    """
    Returns the number of the bucket holding `card`, or None if the card isn't in any bucket.
    """

    for bucket, cards in buckets.items():
        if card in cards:
            return bucket

    return None


def validate_buckets(buckets: BucketMap) -> None:
    """
    Checks that a BucketMap is well-formed.

    Args:
        buckets: The mapping to check.

    Raises:
        ValueError: If a bucket number is negative, a bucket is empty or a card is in more than one bucket.
    """

    error_messages = []
    seen: dict[Flashcard, int] = {}
    for bucket in sorted(buckets):
        cards = buckets[bucket]

        if bucket < 0:
            error_messages.append(f"bucket {bucket} is negative")

        if len(cards) == 0:
            error_messages.append(f"bucket {bucket} is empty")

        for card in cards:
            if card in seen:
                error_messages.append(
                    f"card {card.front!r} is in both bucket {seen[card]} and bucket {bucket}"
                )
            else:
                seen[card] = bucket

    if len(error_messages) > 0:
        raise ValueError(
            "Invalid buckets provided:\n" + "\n".join(error_messages)
        )


__all__ = [
    "RETIRED_BUCKET",
    "BucketMap",
    "BucketSets",
    "BucketRange",
    "to_bucket_sets",
    "to_bucket_map",
    "get_bucket_range",
    "find_bucket",
    "validate_buckets",
]
