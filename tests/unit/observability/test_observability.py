"""
Unit tests for logging configuration and metric helpers.
"""

import importlib
import json
import logging

import pytest
import structlog

from articlecore.config import MonitoringConfig
from articlecore.observability import METRICS, configure_logging, histogram, increment
from articlecore.observability import metrics as metrics_module

from tests.helpers import get_histogram_count, metric_delta


@pytest.fixture
def clean_root_logger():
    """Detach root handlers so basicConfig installs ours, then restore them."""
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved
    root.setLevel(saved_level)


@pytest.mark.unit
class TestLogging:
    """structlog configuration."""

    def test_json_lines_written_to_file(self, tmp_path, clean_root_logger):
        log_file = tmp_path / "logs" / "articlecore.log"
        configure_logging(MonitoringConfig(log_level="INFO", log_file=str(log_file)))

        with structlog.contextvars.bound_contextvars(document_url="https://example.com/a"):
            structlog.get_logger("articlecore.test").info("Article extracted", candidates=3)
        for handler in clean_root_logger.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        events = [json.loads(line) for line in lines if line.startswith("{")]
        extracted = [event for event in events if event["event"] == "Article extracted"]
        assert extracted[0]["candidates"] == 3
        assert extracted[0]["document_url"] == "https://example.com/a"
        assert extracted[0]["level"] == "info"

    def test_console_logging(self, clean_root_logger):
        configure_logging(MonitoringConfig(log_level="WARNING"))
        assert clean_root_logger.level == logging.WARNING
        assert any(isinstance(handler, logging.StreamHandler) for handler in clean_root_logger.handlers)


@pytest.mark.unit
class TestMetrics:
    """Prometheus metric helpers."""

    def test_metrics_are_registered(self):
        assert set(METRICS) == {"extractions_total", "extraction_duration_seconds", "candidate_nodes"}

    def test_increment_with_labels(self):
        with metric_delta(METRICS["extractions_total"].labels(outcome="success"), 2):
            increment("extractions_total", 2, labels={"outcome": "success"})

    def test_histogram_observe(self):
        before = get_histogram_count(METRICS["candidate_nodes"])
        histogram("candidate_nodes", 7)
        assert get_histogram_count(METRICS["candidate_nodes"]) == before + 1

    def test_unknown_metric_is_ignored(self):
        increment("does_not_exist")
        histogram("does_not_exist", 1.0)

    def test_reload_reuses_collectors(self):
        counter = METRICS["extractions_total"]
        reloaded = importlib.reload(metrics_module)
        assert reloaded.METRICS["extractions_total"] is counter
