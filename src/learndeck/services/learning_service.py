"""Learning service tying word selection, ordering, answers and stats together."""
import logging
import random
from datetime import datetime, UTC
from typing import List, Optional, Sequence

from learndeck.models.models import Word
from learndeck.models.session_models import QuizQuestion, SessionStats, StudyType
from learndeck.monitoring import session_words, sessions_built
from learndeck.services import quiz_builder
from learndeck.services.prioritizer import prioritize
from learndeck.services.random_utils import get_rng
from learndeck.services.scheduling import record_answer
from learndeck.services.session_stats import SessionStatsTracker
from learndeck.services.study_filters import select_study_words

logger = logging.getLogger(__name__)


class LearningService:
    """Service for running a study session over words supplied by the caller.

    Persisting the returned word snapshots is left to the caller.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the service with an optional random source."""
        self.rng = get_rng(rng)
        self.stats = SessionStatsTracker()

    def start_session(
        self,
        words: Sequence[Word],
        study_type: StudyType = StudyType.DUE,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[Word]:
        """Choose the session's words and return them in study order."""
        now = now or datetime.now(UTC)
        candidates = select_study_words(words, study_type, limit, now)
        logger.info(
            f"Starting {study_type.value} session with {len(candidates)} of {len(words)} words"
        )

        self.stats.start(now)
        ordered = prioritize(candidates, now, self.rng)

        sessions_built.inc()
        session_words.observe(len(ordered))
        return ordered

    def answer(self, word: Word, is_correct: bool, now: Optional[datetime] = None) -> Word:
        """Apply an answer to a word and count it in the session stats."""
        updated = record_answer(word, is_correct, now)
        self.stats.record(is_correct)
        return updated

    def session_stats(self, now: Optional[datetime] = None) -> SessionStats:
        """Stats of the running session."""
        return self.stats.snapshot(now)

    def complete_session(self, now: Optional[datetime] = None) -> SessionStats:
        """Finish the session and return its final stats."""
        return self.stats.complete(now)

    def build_quiz(
        self, words: Sequence[Word], num_questions: Optional[int] = None
    ) -> List[QuizQuestion]:
        """Build a quiz from the caller's words."""
        if not quiz_builder.can_build_quiz(words):
            logger.warning(f"Quiz requested with too few eligible words ({len(words)} words given)")
        return quiz_builder.build_quiz(words, num_questions, self.rng)
