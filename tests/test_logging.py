"""Ensure logging setup does not crash and sets level."""

import logging

from s3bucket.core.logging import setup_logging


def test_setup_logging():
    setup_logging()
    logger = logging.getLogger()
    # Should configure without raising; ensure at least one handler attached
    assert logger.handlers


def test_setup_logging_quiets_botocore_at_debug(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    setup_logging()

    assert logging.getLogger("botocore").level == logging.INFO
