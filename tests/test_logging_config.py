"""Unit tests for logging setup."""

import logging
import sys

from fsnode.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Test handler configuration."""

    def test_adds_single_stdout_handler(self):
        logger = setup_logging('fsnode-test-single')
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stdout
        assert logger.propagate is False

    def test_idempotent(self):
        first = setup_logging('fsnode-test-idempotent')
        second = setup_logging('fsnode-test-idempotent')
        assert first is second
        assert len(second.handlers) == 1

    def test_level_from_argument(self):
        logger = setup_logging('fsnode-test-level', log_level='debug')
        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'WARNING')
        logger = setup_logging('fsnode-test-env')
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging('fsnode-test-bogus', log_level='chatty')
        assert logger.level == logging.INFO

    def test_decoder_logs_through_package_logger(self, caplog):
        from fsnode import decode

        with caplog.at_level(logging.DEBUG, logger='fsnode.decoder'):
            decode(b"\x30\x01")
        assert any('Skipped 1 unknown field' in r.getMessage() for r in caplog.records)


class TestGetLogger:
    """Test named logger lookup."""

    def test_returns_named_logger(self):
        assert get_logger('fsnode.encoder') is logging.getLogger('fsnode.encoder')
