"""Tests for configuration settings."""
import os

import pytest

from learndeck.config import REVIEW_INTERVALS, Settings, settings


def test_settings_defaults():
    """Test default settings values."""
    assert settings.scheduling.learning_to_review_correct == 3
    assert settings.scheduling.review_to_mastered_correct == 10
    assert settings.scheduling.failed_min_reviews == 3
    assert settings.scheduling.failed_accuracy_threshold == 0.3
    assert settings.scheduling.review_intervals == REVIEW_INTERVALS
    assert settings.session.small_session_size == 5
    assert settings.session.high_position_cutoff == 0.7
    assert settings.session.high_draw_probability == 0.4
    assert settings.session.medium_draw_probability == 0.5
    assert settings.session.study_session_limit == 20
    assert settings.quiz.questions == 10
    assert settings.quiz.choices == 4
    assert settings.quiz.distractor_pool_cap == 500


def test_review_intervals_cover_every_difficulty():
    """Test that the interval table has an entry per difficulty."""
    assert set(REVIEW_INTERVALS) == {"new", "learning", "review", "mastered", "failed"}


def test_validate_rejects_bad_probability():
    """Test validation of probability settings."""
    test_settings = Settings()
    test_settings.session.medium_draw_probability = 1.5
    with pytest.raises(ValueError):
        test_settings.validate()


def test_validate_rejects_non_positive_interval():
    """Test validation of the interval table."""
    test_settings = Settings()
    test_settings.scheduling.review_intervals["failed"] = (1, 0)
    with pytest.raises(ValueError):
        test_settings.validate()
    assert settings.scheduling.review_intervals["failed"] == (1, 0.25)


def test_validate_rejects_small_distractor_pool():
    """Test validation of quiz settings."""
    test_settings = Settings()
    test_settings.quiz.distractor_pool_cap = 2
    with pytest.raises(ValueError):
        test_settings.validate()


def test_monitoring_disabled_by_default():
    """Test that the metrics exporter is opt-in."""
    if "METRICS_ENABLED" in os.environ:
        pytest.skip("METRICS_ENABLED set in environment")
    assert settings.monitoring.enabled is False


if __name__ == "__main__":
    pytest.main([__file__])
