"""Word model shared by the study and quiz features."""
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from enum import Enum
from typing import Any, Optional

from learndeck.config import settings


class Difficulty(str, Enum):
    """Mastery state of a flashcard."""
    NEW = "new"
    LEARNING = "learning"
    REVIEW = "review"
    MASTERED = "mastered"
    FAILED = "failed"


@dataclass(frozen=True)
class Word:
    """Immutable snapshot of a flashcard's study state.

    Counters are expected to be non-negative with correct_count <= review_count.
    The persistence layer owns that invariant; it is not checked here.
    """

    id: Any
    definition: str
    next_review: datetime
    difficulty: Difficulty = Difficulty.NEW
    review_count: int = 0
    correct_count: int = 0
    last_reviewed: Optional[datetime] = None
    text: str = ""

    def __post_init__(self) -> None:
        # Records coming from storage carry the difficulty as plain text
        if not isinstance(self.difficulty, Difficulty):
            object.__setattr__(self, "difficulty", Difficulty(self.difficulty))

    @classmethod
    def create(
        cls,
        id: Any,
        definition: str,
        text: str = "",
        now: Optional[datetime] = None,
    ) -> "Word":
        """Create a word that has never been answered."""
        now = now or datetime.now(UTC)
        return cls(
            id=id,
            text=text,
            definition=definition,
            next_review=now + timedelta(days=settings.scheduling.new_word_interval_days),
        )

    @property
    def accuracy(self) -> Optional[float]:
        """Share of correct answers, None before the first answer."""
        if self.review_count <= 0:
            return None
        return self.correct_count / self.review_count
