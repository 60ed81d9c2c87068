"""
leitner.hint
---------

This module generates the hint shown next to the front of a Flashcard.
"""

from leitner.card import Flashcard

LANGUAGE_TAG = "language"
MASK_CHAR = "_"


def get_hint(card: Flashcard) -> str:
    """
    Generates a hint for a flashcard.

    Language cards get their answer masked: whitespace is removed, the first letter is
    kept and every other letter is replaced by MASK_CHAR. Other cards use their stored hint.

    Args:
        card: The flashcard to hint.

    Returns:
        str: The hint for the front of the card.
    """

    if LANGUAGE_TAG in card.tags:
        letters = "".join(card.back.split())
        if len(letters) == 0:
            return ""
        return letters[0] + MASK_CHAR * (len(letters) - 1)

    return card.hint


__all__ = ["LANGUAGE_TAG", "MASK_CHAR", "get_hint"]
