"""Selecting which words a study session draws from."""
from datetime import datetime, UTC
from typing import List, Optional, Sequence

from learndeck.config import settings
from learndeck.models.models import Difficulty, Word
from learndeck.models.session_models import StudyType


def is_due(word: Word, now: Optional[datetime] = None) -> bool:
    """A word is due once its review date has passed or if it was never answered."""
    now = now or datetime.now(UTC)
    return word.next_review <= now or word.last_reviewed is None


def _has_failed_accuracy(word: Word) -> bool:
    return word.accuracy is not None and word.accuracy < settings.session.failed_study_accuracy


def filter_by_study_type(
    words: Sequence[Word], study_type: StudyType, now: Optional[datetime] = None
) -> List[Word]:
    """Keep the words matching a study type, in their original order."""
    now = now or datetime.now(UTC)

    if study_type == StudyType.ALL:
        return list(words)
    if study_type == StudyType.DUE:
        return [word for word in words if is_due(word, now)]
    if study_type == StudyType.NEW:
        return [word for word in words if word.difficulty == Difficulty.NEW]
    if study_type == StudyType.LEARNING:
        return [word for word in words if word.difficulty == Difficulty.LEARNING]
    if study_type == StudyType.REVIEW:
        return [
            word for word in words
            if word.difficulty == Difficulty.REVIEW or word.next_review <= now
        ]
    if study_type == StudyType.MASTERED:
        return [word for word in words if word.difficulty == Difficulty.MASTERED]
    if study_type == StudyType.FAILED:
        return [word for word in words if _has_failed_accuracy(word)]
    raise ValueError(f"Unknown study type: {study_type}")


def select_study_words(
    words: Sequence[Word],
    study_type: StudyType = StudyType.DUE,
    limit: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[Word]:
    """Pick the candidate words for a session, capped at limit."""
    if limit is None:
        limit = settings.session.study_session_limit
    return filter_by_study_type(words, study_type, now)[:limit]
