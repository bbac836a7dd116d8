"""Models for session-related data."""
import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import List

from learndeck.models.models import Word


class PriorityBucket(Enum):
    """Urgency tier used only for ordering a study session."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StudyType(Enum):
    """Which words a study session draws from."""
    ALL = "all"
    DUE = "due"
    NEW = "new"
    LEARNING = "learning"
    REVIEW = "review"
    MASTERED = "mastered"
    FAILED = "failed"

    @property
    def description(self) -> str:
        return _STUDY_TYPE_DESCRIPTIONS[self]


_STUDY_TYPE_DESCRIPTIONS = {
    StudyType.ALL: "All words in the collection",
    StudyType.DUE: "Words due for review and words never studied",
    StudyType.NEW: "Words you haven't studied yet",
    StudyType.LEARNING: "Words you're currently learning",
    StudyType.REVIEW: "Words due for review",
    StudyType.MASTERED: "Words you've mastered",
    StudyType.FAILED: "Words with low accuracy rates",
}


@dataclass(frozen=True)
class SessionStats:
    """Snapshot of a study session's counters."""
    correct: int
    total: int
    elapsed: timedelta

    @property
    def accuracy_percent(self) -> int:
        if self.total == 0:
            return 0
        return math.floor(self.correct / self.total * 100 + 0.5)

    @property
    def elapsed_minutes(self) -> int:
        """Whole minutes spent so far, rounded down."""
        return math.floor(self.elapsed.total_seconds() / 60)

    @property
    def total_time_minutes(self) -> int:
        """Minutes credited for a finished session, rounded up."""
        return math.ceil(self.elapsed.total_seconds() / 60)


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple choice question asking for a word's definition."""
    word: Word
    choices: List[str]
    correct_index: int

    def is_correct(self, choice_index: int) -> bool:
        return choice_index == self.correct_index
