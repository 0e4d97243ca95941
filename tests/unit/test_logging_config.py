"""Unit tests for the logging setup helpers."""

import json
import logging

import pytest

from jwt_util.core.logging_config import (
    StructuredJsonFormatter,
    TEXT_LOG_FORMAT,
    configure_logging,
)


@pytest.fixture
def restore_root_logger(monkeypatch):
    """Put the root logger back the way pytest configured it."""
    monkeypatch.delenv("TESTING", raising=False)
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="jwt_util.services.token_inspector",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Unable to parse JWT without verification",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    output = json.loads(StructuredJsonFormatter().format(_record(error="Not enough segments")))

    assert output["message"] == "Unable to parse JWT without verification"
    assert output["level"] == "WARNING"
    assert output["logger"] == "jwt_util.services.token_inspector"
    assert output["error"] == "Not enough segments"
    assert "timestamp" in output


def test_json_formatter_skips_private_attributes():
    output = json.loads(StructuredJsonFormatter().format(_record(_internal="hidden")))

    assert "_internal" not in output


def test_configure_json_logging(restore_root_logger):
    configure_logging(level="debug", json_output=True)

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, StructuredJsonFormatter)


def test_configure_text_logging(restore_root_logger):
    configure_logging(level="WARNING", json_output=False)

    assert restore_root_logger.level == logging.WARNING
    assert restore_root_logger.handlers[0].formatter._fmt == TEXT_LOG_FORMAT


def test_testing_env_forces_text(restore_root_logger, monkeypatch):
    monkeypatch.setenv("TESTING", "true")

    configure_logging(level="INFO", json_output=True)

    assert not isinstance(restore_root_logger.handlers[0].formatter, StructuredJsonFormatter)
