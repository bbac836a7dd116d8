"""Review interval calculation and answer recording."""
import dataclasses
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

from learndeck.config import settings
from learndeck.models.models import Difficulty, Word
from learndeck.monitoring import answers_recorded, difficulty_transitions
from learndeck.services.difficulty import next_difficulty

logger = logging.getLogger(__name__)


def next_review_offset(difficulty: Difficulty, is_correct: bool) -> timedelta:
    """Time until the next review, based on the difficulty before the answer."""
    correct_days, incorrect_days = settings.scheduling.review_intervals[Difficulty(difficulty).value]
    return timedelta(days=correct_days if is_correct else incorrect_days)


def calculate_next_review(word: Word, is_correct: bool, now: Optional[datetime] = None) -> datetime:
    """Calculate the next review date for a word answered at now."""
    now = now or datetime.now(UTC)
    return now + next_review_offset(word.difficulty, is_correct)


def record_answer(word: Word, is_correct: bool, now: Optional[datetime] = None) -> Word:
    """Return a new snapshot of word with one answer applied.

    Both the interval and the difficulty transition read the pre-answer state.
    """
    now = now or datetime.now(UTC)
    new_correct_count = word.correct_count + 1 if is_correct else word.correct_count

    updated = dataclasses.replace(
        word,
        last_reviewed=now,
        review_count=word.review_count + 1,
        correct_count=new_correct_count,
        next_review=calculate_next_review(word, is_correct, now),
        difficulty=next_difficulty(word, is_correct, new_correct_count),
    )

    answers_recorded.labels(outcome="correct" if is_correct else "incorrect").inc()
    if updated.difficulty != word.difficulty:
        difficulty_transitions.labels(
            from_difficulty=word.difficulty.value,
            to_difficulty=updated.difficulty.value,
        ).inc()
        logger.info(f"Word {word.id}: {word.difficulty.value} -> {updated.difficulty.value}")
    logger.debug(f"Word {word.id} next review at {updated.next_review.isoformat()}")
    return updated
