"""Tests for data models."""
import dataclasses
from datetime import datetime, timedelta
from typing import Callable

import pytest
from faker import Faker

from learndeck.models.models import Difficulty, Word
from learndeck.models.session_models import QuizQuestion

fake = Faker()


def test_create_word(now: datetime) -> None:
    """Test the initial state of a new word."""
    word = Word.create(fake.random_int(), "a greeting", text="hello", now=now)

    assert word.difficulty == Difficulty.NEW
    assert word.review_count == 0
    assert word.correct_count == 0
    assert word.last_reviewed is None
    assert word.next_review == now + timedelta(days=1)
    assert word.text == "hello"
    assert word.definition == "a greeting"


def test_difficulty_from_text(now: datetime) -> None:
    """Test that stored difficulty strings become enum members."""
    word = Word(id=1, definition="x", next_review=now, difficulty="mastered")
    assert word.difficulty is Difficulty.MASTERED
    assert word.difficulty == "mastered"


def test_unknown_difficulty(now: datetime) -> None:
    """Test that an unknown difficulty is rejected."""
    with pytest.raises(ValueError):
        Word(id=1, definition="x", next_review=now, difficulty="expert")


def test_word_is_immutable(make_word: Callable[..., Word]) -> None:
    """Test that words cannot be changed in place."""
    word = make_word()
    with pytest.raises(dataclasses.FrozenInstanceError):
        word.review_count = 5


def test_word_accuracy(make_word: Callable[..., Word]) -> None:
    """Test the accuracy property."""
    assert make_word().accuracy is None
    assert make_word(review_count=4, correct_count=3).accuracy == 0.75


def test_quiz_question_is_correct(make_word: Callable[..., Word]) -> None:
    """Test answer checking on a quiz question."""
    word = make_word(definition="right")
    question = QuizQuestion(word=word, choices=["wrong", "right"], correct_index=1)
    assert question.is_correct(1)
    assert not question.is_correct(0)


if __name__ == "__main__":
    pytest.main([__file__])
