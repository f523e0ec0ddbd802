"""Tests for the structured log formatter."""

import logging
from unittest.mock import MagicMock, patch

from app.core.logging import StructuredFormatter, get_logger, log_with_context


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("quiz", logging.INFO, __file__, 1, msg, None, None, func="submit")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_key_value_pairs():
    line = StructuredFormatter().format(_record("saved"))
    assert "level=INFO" in line
    assert "function=submit" in line
    assert "message=saved" in line


def test_includes_submission_id_and_extra_fields():
    record = _record("saved", submission_id="r1", extra_data={"score_band": "ready"})
    line = StructuredFormatter().format(record)
    assert "submission_id=r1" in line
    assert "score_band=ready" in line


def test_log_with_context_moves_submission_id(caplog):
    logger = get_logger("tests.logging")
    logger.propagate = True
    with caplog.at_level(logging.INFO, logger="tests.logging"):
        log_with_context(logger, logging.INFO, "saved", submission_id="r9", base_score=78)

    record = caplog.records[-1]
    assert record.submission_id == "r9"
    assert record.extra_data == {"base_score": 78}


def test_get_logger_configures_once():
    first = get_logger("tests.logging.once")
    second = get_logger("tests.logging.once")
    assert first is second
    assert len(first.handlers) == 1


def test_values_with_spaces_are_quoted():
    line = StructuredFormatter().format(_record("Saved web test response", extra_data={"band": "ready"}))
    assert 'message="Saved web test response"' in line
    assert "band=ready" in line


def test_embedded_quotes_are_escaped():
    line = StructuredFormatter().format(_record('bad "value"'))
    assert 'message="bad \\"value\\""' in line


def test_get_logger_falls_back_to_info_when_settings_fail():
    with patch("app.core.config.get_settings", side_effect=ValueError("bad .env")):
        logger = get_logger("tests.logging.no_settings")
    assert logger.level == logging.INFO


def test_get_logger_level_follows_environment():
    settings = MagicMock(QUIZ_ENV="prod")
    with patch("app.core.config.get_settings", return_value=settings):
        logger = get_logger("tests.logging.prod")
    assert logger.level == logging.INFO
