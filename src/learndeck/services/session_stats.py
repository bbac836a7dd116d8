"""Per-session answer counters."""
import logging
from datetime import datetime, UTC
from typing import Optional

from learndeck.models.session_models import SessionStats
from learndeck.monitoring import session_duration

logger = logging.getLogger(__name__)


class SessionStatsTracker:
    """Accumulates correct/total answers and elapsed time for one study session.

    A tracker belongs to a single session and is not meant to be shared.
    """

    def __init__(self, now: Optional[datetime] = None):
        self.start(now)

    def start(self, now: Optional[datetime] = None) -> None:
        """Reset counters and restart the clock."""
        self.correct = 0
        self.total = 0
        self.started_at = now or datetime.now(UTC)

    def record(self, is_correct: bool) -> None:
        """Count one answer."""
        self.total += 1
        if is_correct:
            self.correct += 1

    def snapshot(self, now: Optional[datetime] = None) -> SessionStats:
        """Current counters and time spent so far."""
        now = now or datetime.now(UTC)
        return SessionStats(
            correct=self.correct,
            total=self.total,
            elapsed=now - self.started_at,
        )

    def complete(self, now: Optional[datetime] = None) -> SessionStats:
        """Final snapshot of the session."""
        stats = self.snapshot(now)
        session_duration.observe(stats.elapsed.total_seconds())
        logger.info(
            f"Session completed: {stats.correct}/{stats.total} correct "
            f"({stats.accuracy_percent}%) in {stats.total_time_minutes} min"
        )
        return stats
