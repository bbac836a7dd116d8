"""Monitoring configuration for the scheduling core."""
from prometheus_client import Counter, Histogram, start_http_server

# Answer metrics
answers_recorded = Counter(
    "learndeck_answers_total",
    "Total number of answers recorded against words",
    ["outcome"],
)

difficulty_transitions = Counter(
    "learndeck_difficulty_transitions_total",
    "Total number of difficulty changes caused by answers",
    ["from_difficulty", "to_difficulty"],
)

# Session metrics
sessions_built = Counter(
    "learndeck_sessions_built_total",
    "Total number of study sessions ordered",
)

session_words = Histogram(
    "learndeck_session_words",
    "Number of words in an ordered study session",
    buckets=[1, 5, 10, 20, 50, 100],
)

session_duration = Histogram(
    "learndeck_session_duration_seconds",
    "Duration of completed study sessions in seconds",
    buckets=[60, 300, 600, 1800, 3600],  # 1min, 5min, 10min, 30min, 1hour
)

# Quiz metrics
quiz_questions_built = Counter(
    "learndeck_quiz_questions_total",
    "Total number of quiz questions generated",
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
