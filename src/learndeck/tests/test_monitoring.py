"""Tests for logging and metrics setup."""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY

from learndeck import logging_config, monitoring
from learndeck.config import settings


@pytest.fixture
def root_logger():
    """Root logger, cleaned of handlers installed by the test."""
    logger = logging.getLogger()
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _file_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if isinstance(h, TimedRotatingFileHandler)]


def test_setup_logging_console(root_logger: logging.Logger, monkeypatch) -> None:
    """Test console logging setup."""
    monkeypatch.setattr(settings.logging, "dir", None)
    logging_config.setup_logging("Starting tests", level="debug")

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert _file_handlers(root_logger) == []


def test_setup_logging_file(root_logger: logging.Logger, monkeypatch, tmp_path: Path) -> None:
    """Test that a log file is written under LOG_DIR."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(settings.logging, "dir", str(log_dir))
    logging_config.setup_logging(level=logging.INFO)

    logging_config.get_logger("learndeck.test").info("hello")
    assert len(_file_handlers(root_logger)) == 1
    assert (log_dir / "learndeck.log").exists()


def test_start_monitoring() -> None:
    """Test that the exporter is started on the requested port."""
    with patch.object(monitoring, "start_http_server") as start_http_server:
        monitoring.start_monitoring(9100)
    start_http_server.assert_called_once_with(9100)


def test_answer_metric_counts(make_word, now) -> None:
    """Test that recorded answers show up in the metrics."""
    from learndeck.services.scheduling import record_answer

    labels = {"outcome": "correct"}
    before = REGISTRY.get_sample_value("learndeck_answers_total", labels) or 0
    record_answer(make_word(), True, now)
    assert REGISTRY.get_sample_value("learndeck_answers_total", labels) == before + 1


if __name__ == "__main__":
    pytest.main([__file__])
