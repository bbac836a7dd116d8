"""Test configuration."""
import logging
import os
import random
from datetime import datetime, timedelta, UTC
from pathlib import Path
from typing import Callable

import pytest
from dotenv import load_dotenv
from faker import Faker

# Set test environment before any imports
os.environ["ENV"] = "test"

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from learndeck.models.models import Difficulty, Word

logging.getLogger("faker").setLevel(logging.WARNING)

fake = Faker()


class FixedRandom(random.Random):
    """Random source whose draws always return the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def now() -> datetime:
    """A fixed evaluation instant."""
    return datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def fixed_random() -> Callable[[float], random.Random]:
    """Factory for random sources with a constant draw."""
    return FixedRandom


@pytest.fixture
def make_word(now: datetime) -> Callable[..., Word]:
    """Factory for words with fake text and definitions."""

    def _make_word(
        difficulty: Difficulty = Difficulty.NEW,
        review_count: int = 0,
        correct_count: int = 0,
        last_reviewed: datetime = None,
        next_review: datetime = None,
        definition: str = None,
        **kwargs,
    ) -> Word:
        return Word(
            id=kwargs.pop("id", fake.uuid4()),
            text=kwargs.pop("text", fake.word()),
            definition=definition if definition is not None else fake.unique.sentence(),
            difficulty=difficulty,
            review_count=review_count,
            correct_count=correct_count,
            last_reviewed=last_reviewed,
            next_review=next_review or now + timedelta(days=1),
        )

    return _make_word
