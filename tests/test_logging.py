"""Tests for logging configuration"""
import tempfile
import os
import logging
from pathlib import Path
from unittest.mock import patch
import httpx
import structlog

from receivermock import ReceiverMockClient
from receivermock.config import Config
from receivermock.logging_config import (
    setup_structured_logging,
    get_logger,
    log_receiver_request,
    log_receiver_response,
    log_error
)


class TestLoggingConfig:
    """Test logging configuration and structured logging"""

    def test_setup_structured_logging(self):
        """Test structured logging setup"""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_file = Path(tmp_dir) / "logs" / "test.log"

            config = Config()
            config.log_file = log_file
            config.log_level = "DEBUG"

            setup_structured_logging(config)

            assert log_file.parent.exists()
            logger = logging.getLogger("test")
            assert logger.isEnabledFor(logging.DEBUG)

            logging.getLogger().handlers.clear()

    def test_setup_without_log_file(self):
        config = Config()
        config.log_file = None
        config.log_level = "WARNING"

        setup_structured_logging(config)

        assert not logging.getLogger("test").isEnabledFor(logging.INFO)
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_httpx_logging_is_quieted(self):
        config = Config()
        config.log_level = "DEBUG"

        setup_structured_logging(config)

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger(self):
        """Test getting structured logger"""
        logger = get_logger("test_logger")

        assert logger is not None
        assert hasattr(logger, 'info')
        assert hasattr(logger, 'error')
        assert hasattr(logger, 'debug')

    def test_log_receiver_request_and_response(self):
        logger = get_logger("test")

        # This should not raise an exception
        log_receiver_request(logger, "metrics-samples", "http://receiver-mock:3000/metrics-samples", {"pod": "x"})
        log_receiver_request(logger, "metrics-list", "http://receiver-mock:3000/metrics-list")
        log_receiver_response(logger, "metrics-list", 200, 12)

    def test_log_error(self):
        """Test structured error logging"""
        logger = get_logger("test")
        error = ValueError("Test error")

        log_error(logger, error, {"endpoint": "metrics-list"})
        log_error(logger, error)

    def test_development_vs_production_logging(self):
        """Test different logging configurations for development vs production"""
        config = Config()

        with patch.dict(os.environ, {"ENVIRONMENT": "development"}):
            setup_structured_logging(config)
            get_logger("test").info("Test development log")

        with patch.dict(os.environ, {"ENVIRONMENT": "production"}):
            setup_structured_logging(config)
            get_logger("test").info("Test production log")


class TestUnconfiguredLogging:
    """Test that the client stays quiet when the application configures nothing"""

    def setup_method(self):
        structlog.reset_defaults()
        root = logging.getLogger()
        self._saved_handlers = root.handlers[:]
        self._saved_level = root.level
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def teardown_method(self):
        root = logging.getLogger()
        root.handlers[:] = self._saved_handlers
        root.setLevel(self._saved_level)
        structlog.reset_defaults()

    def test_debug_events_are_not_printed(self, capsys):
        logger = get_logger("receivermock.client")

        log_receiver_request(logger, "metrics-list", "http://receiver-mock:3000/metrics-list")
        log_receiver_response(logger, "metrics-list", 200, 3)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_client_request_is_silent(self, capsys):
        mock_transport_client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="up:1\n"))
        )
        client = ReceiverMockClient("http://receiver-mock:3000/", http_client=mock_transport_client)

        assert client.get_metric_counts() == {"up": 1}

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_reach_stdlib_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="receivermock.client"):
            log_receiver_request(get_logger("receivermock.client"), "metrics-list", "http://receiver-mock:3000/metrics-list")

        assert any("Querying receiver-mock" in record.getMessage() for record in caplog.records)
