"""Difficulty state machine driven by answer outcomes."""
import logging

from learndeck.config import settings
from learndeck.models.models import Difficulty, Word

logger = logging.getLogger(__name__)


def answer_accuracy(word: Word, is_correct: bool, new_correct_count: int) -> float:
    """Accuracy including the answer being recorded.

    The denominator is the post-answer review total (review_count + 1).
    A word with no history scores 1.0 or 0.0 on this answer alone.
    """
    if word.review_count > 0:
        return new_correct_count / (word.review_count + 1)
    return 1.0 if is_correct else 0.0


def next_difficulty(word: Word, is_correct: bool, new_correct_count: int) -> Difficulty:
    """Compute the difficulty a word moves to after an answer.

    Args:
        word: The word as it was before the answer.
        is_correct: Whether the answer was correct.
        new_correct_count: correct_count after this answer.
    """
    current = word.difficulty
    cfg = settings.scheduling

    if is_correct:
        if current in (Difficulty.FAILED, Difficulty.NEW):
            return Difficulty.LEARNING
        if current == Difficulty.LEARNING and new_correct_count >= cfg.learning_to_review_correct:
            return Difficulty.REVIEW
        if current == Difficulty.REVIEW and new_correct_count >= cfg.review_to_mastered_correct:
            return Difficulty.MASTERED
        return current

    accuracy = answer_accuracy(word, is_correct, new_correct_count)
    if word.review_count >= cfg.failed_min_reviews and accuracy < cfg.failed_accuracy_threshold:
        logger.debug(f"Word {word.id} demoted to failed (accuracy {accuracy:.2f})")
        return Difficulty.FAILED
    if current == Difficulty.MASTERED:
        return Difficulty.REVIEW
    if current == Difficulty.REVIEW:
        return Difficulty.LEARNING
    return current
