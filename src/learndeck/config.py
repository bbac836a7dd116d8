"""Configuration settings for the scheduling core."""
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Review intervals in days, keyed by the pre-answer difficulty:
# difficulty -> (correct, incorrect)
REVIEW_INTERVALS = {
    "new": (1, 0.5),
    "learning": (3, 1),
    "review": (7, 2),
    "mastered": (30, 7),
    "failed": (1, 0.25),
}

# Order in which difficulty groups are concatenated
DIFFICULTY_STUDY_ORDER = ["failed", "learning", "new", "review", "mastered"]


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class SchedulingSettings:
    """Difficulty transition and review interval settings."""
    learning_to_review_correct: int = int(os.getenv("LEARNING_TO_REVIEW_CORRECT", "3"))
    review_to_mastered_correct: int = int(os.getenv("REVIEW_TO_MASTERED_CORRECT", "10"))
    failed_min_reviews: int = int(os.getenv("FAILED_MIN_REVIEWS", "3"))
    failed_accuracy_threshold: float = float(os.getenv("FAILED_ACCURACY_THRESHOLD", "0.3"))
    new_word_interval_days: float = float(os.getenv("NEW_WORD_INTERVAL_DAYS", "1"))
    review_intervals: dict[str, tuple[float, float]] = field(
        default_factory=lambda: dict(REVIEW_INTERVALS)
    )


@dataclass
class SessionSettings:
    """Study session ordering settings."""
    low_accuracy_threshold: float = float(os.getenv("LOW_ACCURACY_THRESHOLD", "0.6"))
    overdue_days: int = int(os.getenv("OVERDUE_DAYS", "2"))
    small_session_size: int = int(os.getenv("SMALL_SESSION_SIZE", "5"))
    high_position_cutoff: float = float(os.getenv("HIGH_POSITION_CUTOFF", "0.7"))
    high_draw_probability: float = float(os.getenv("HIGH_DRAW_PROBABILITY", "0.4"))
    medium_draw_probability: float = float(os.getenv("MEDIUM_DRAW_PROBABILITY", "0.5"))
    study_session_limit: int = int(os.getenv("STUDY_SESSION_LIMIT", "20"))
    failed_study_accuracy: float = float(os.getenv("FAILED_STUDY_ACCURACY", "0.5"))
    difficulty_order: list[str] = field(default_factory=lambda: list(DIFFICULTY_STUDY_ORDER))


@dataclass
class QuizSettings:
    """Quiz generation settings."""
    questions: int = int(os.getenv("QUIZ_QUESTIONS", "10"))
    choices: int = int(os.getenv("QUIZ_CHOICES", "4"))
    distractor_pool_cap: int = int(os.getenv("DISTRACTOR_POOL_CAP", "500"))
    min_words: int = int(os.getenv("QUIZ_MIN_WORDS", "4"))


@dataclass
class MonitoringSettings:
    """Prometheus exporter settings."""
    enabled: bool = os.getenv("METRICS_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("METRICS_PORT", "9090"))


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_scheduling_settings() -> SchedulingSettings:
    """Get scheduling settings."""
    return SchedulingSettings()


def get_session_settings() -> SessionSettings:
    """Get session settings."""
    return SessionSettings()


def get_quiz_settings() -> QuizSettings:
    """Get quiz settings."""
    return QuizSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


def _is_probability(value: float) -> bool:
    return 0 <= value <= 1


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    scheduling: SchedulingSettings = field(default_factory=get_scheduling_settings)
    session: SessionSettings = field(default_factory=get_session_settings)
    quiz: QuizSettings = field(default_factory=get_quiz_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if self.scheduling.learning_to_review_correct > self.scheduling.review_to_mastered_correct:
            raise ValueError(
                "LEARNING_TO_REVIEW_CORRECT cannot be greater than REVIEW_TO_MASTERED_CORRECT"
            )

        if not _is_probability(self.scheduling.failed_accuracy_threshold):
            raise ValueError("FAILED_ACCURACY_THRESHOLD must be between 0 and 1")

        if self.scheduling.new_word_interval_days <= 0:
            raise ValueError("NEW_WORD_INTERVAL_DAYS must be positive")

        for difficulty, days in self.scheduling.review_intervals.items():
            if min(days) <= 0:
                raise ValueError(f"Review intervals for '{difficulty}' must be positive")

        for name in (
            "low_accuracy_threshold",
            "high_position_cutoff",
            "high_draw_probability",
            "medium_draw_probability",
            "failed_study_accuracy",
        ):
            if not _is_probability(getattr(self.session, name)):
                raise ValueError(f"{name.upper()} must be between 0 and 1")

        if self.session.study_session_limit < 1:
            raise ValueError("STUDY_SESSION_LIMIT must be positive")

        if self.quiz.choices < 2:
            raise ValueError("QUIZ_CHOICES must be at least 2")

        if self.quiz.distractor_pool_cap < self.quiz.choices:
            raise ValueError("DISTRACTOR_POOL_CAP cannot be smaller than QUIZ_CHOICES")


# Create global settings instance
settings = Settings()
settings.validate()
