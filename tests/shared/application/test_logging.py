"""Tests for the log handlers set up at application start."""

import json
import logging
from dataclasses import replace

import pytest
import structlog
from shared.config import get_settings
from shared.logging import ERROR_LOG_FILE, LOG_FILE, add_context, clear_context, configure_logging


@pytest.fixture()
def log_dir(tmp_path):
    directory = tmp_path / "app-logs"
    configure_logging(replace(get_settings(), log_dir=str(directory), log_level="INFO"))
    yield directory
    clear_context()


def _lines(path):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestConfigureLogging:
    def test_creates_log_files(self, log_dir):
        assert (log_dir / LOG_FILE).exists()
        assert (log_dir / ERROR_LOG_FILE).exists()

    def test_structlog_events_are_json_lines_with_context(self, log_dir):
        add_context(request_id="abc123")
        structlog.get_logger("ordering").info("order_placed", order_id="ORD-1")

        record = _lines(log_dir / LOG_FILE)[-1]
        assert record["event"] == "order_placed"
        assert record["order_id"] == "ORD-1"
        assert record["request_id"] == "abc123"
        assert record["level"] == "info"

    def test_library_records_share_the_format(self, log_dir):
        logging.getLogger("uvicorn.error").warning("Menu %s", "siap")

        record = _lines(log_dir / LOG_FILE)[-1]
        assert record["event"] == "Menu siap"
        assert record["logger"] == "uvicorn.error"

    def test_errors_also_go_to_error_file(self, log_dir):
        structlog.get_logger("payments").info("qris_payment_started")
        structlog.get_logger("payments").error("qris_payment_failed", reason="Saldo tidak cukup")

        events = [record["event"] for record in _lines(log_dir / ERROR_LOG_FILE)]
        assert events == ["qris_payment_failed"]

    def test_reconfiguring_replaces_handlers(self, log_dir, tmp_path):
        configure_logging(replace(get_settings(), log_dir=str(tmp_path / "other"), log_level="INFO"))
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 2
