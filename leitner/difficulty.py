from enum import IntEnum


class AnswerDifficulty(IntEnum):
    """
    Enum representing how well the learner answered a Flashcard in one practice trial.
    """

    Wrong = 0
    Hard = 1
    Easy = 2


__all__ = ["AnswerDifficulty"]
