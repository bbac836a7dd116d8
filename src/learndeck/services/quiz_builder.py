"""Multiple choice quiz generation."""
import logging
import random
from typing import List, Optional, Sequence

from learndeck.config import settings
from learndeck.models.models import Word
from learndeck.models.session_models import QuizQuestion
from learndeck.monitoring import quiz_questions_built
from learndeck.services.random_utils import get_rng, sample_without_replacement, shuffle

logger = logging.getLogger(__name__)


def eligible_words(words: Sequence[Word]) -> List[Word]:
    """Words with a non-blank definition."""
    return [word for word in words if word.definition and word.definition.strip()]


def can_build_quiz(words: Sequence[Word]) -> bool:
    """Whether there are enough eligible words to offer a quiz."""
    return len(eligible_words(words)) >= settings.quiz.min_words


def _distractor_definitions(pool: List[Word]) -> List[str]:
    # Large libraries only contribute their first words as distractors
    cap = settings.quiz.distractor_pool_cap
    candidates = pool[:cap] if len(pool) > cap else pool
    return [word.definition for word in candidates]


def build_question(
    word: Word, candidate_definitions: List[str], rng: Optional[random.Random] = None
) -> QuizQuestion:
    """Build one question: the word's definition plus sampled distractors."""
    rng = get_rng(rng)
    distractor_pool = [definition for definition in candidate_definitions if definition != word.definition]
    incorrect = sample_without_replacement(distractor_pool, settings.quiz.choices - 1, rng)
    choices = shuffle([word.definition] + incorrect, rng)
    return QuizQuestion(word=word, choices=choices, correct_index=choices.index(word.definition))


def build_quiz(
    words: Sequence[Word],
    num_questions: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[QuizQuestion]:
    """Build up to num_questions questions from the eligible words.

    Callers are expected to check can_build_quiz first; a pool too small for a
    full set of distractors yields questions with fewer choices.
    """
    if num_questions is None:
        num_questions = settings.quiz.questions
    rng = get_rng(rng)

    pool = eligible_words(words)
    count = min(num_questions, len(pool))
    base = sample_without_replacement(pool, count, rng)
    candidate_definitions = _distractor_definitions(pool)

    questions = [build_question(word, candidate_definitions, rng) for word in base]
    quiz_questions_built.inc(len(questions))
    logger.info(f"Built quiz with {len(questions)} questions from {len(pool)} eligible words")
    return questions
