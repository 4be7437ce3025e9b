# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for MakeHelp logging configuration."""

from __future__ import annotations

import io
import logging

import pytest

from makehelp.config.logging import (
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    MakehelpLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    "value, level",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, level: int | None
) -> None:
    monkeypatch.setenv("MAKEHELP_LOG_LEVEL", value)
    assert resolve_env_log_level() == level


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("makehelp.tests.trace")
    assert isinstance(logger, MakehelpLogger)
    with caplog.at_level(TRACE_LEVEL, logger="makehelp.tests.trace"):
        logger.trace("tracing %s", "works")
    assert "tracing works" in caplog.text
    assert caplog.records[-1].levelname == "TRACE"


def test_setup_logging_defaults_to_critical() -> None:
    try:
        setup_logging()
        assert logging.getLogger().level == logging.CRITICAL
        assert len(logging.getLogger().handlers) == 1
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_resolve_env_log_level_from_mapping() -> None:
    assert resolve_env_log_level({"MAKEHELP_LOG_LEVEL": "info"}) == logging.INFO
    assert resolve_env_log_level({}) is None


def test_setup_logging_writes_to_stream() -> None:
    stream = io.StringIO()
    try:
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("makehelp.tests.stream").warning("model %s skipped", "help.json")
        get_logger("makehelp.tests.stream").debug("not shown")
    finally:
        setup_logging(level=TRACE_LEVEL)
    assert "[WARNING] model help.json skipped" in stream.getvalue()
    assert "not shown" not in stream.getvalue()


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("makehelp", logging.ERROR, __file__, 1, "broken %s", ("sink",), None)
    assert "[ERROR] broken sink" in ChalkFormatter(LOG_FORMAT).format(record)
