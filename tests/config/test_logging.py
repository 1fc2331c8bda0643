# topmark:header:start
#
#   project      : tgcom
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Logging setup: TRACE level, environment override and stderr handler."""

from __future__ import annotations

import logging
import sys

import pytest

from tests.conftest import parametrize
from tgcom.config.logging import (
    TRACE_LEVEL,
    TgcomLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tgcom.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_installs_single_stderr_handler() -> None:
    setup_logging(level=logging.INFO)
    setup_logging(level=TRACE_LEVEL)

    root = logging.getLogger()
    assert root.level == TRACE_LEVEL
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_get_logger_returns_trace_capable_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("tgcom.tests.trace")
    assert isinstance(logger, TgcomLogger)

    with caplog.at_level(TRACE_LEVEL, logger="tgcom.tests.trace"):
        logger.trace("scanned %d line(s)", 3)

    assert caplog.records[-1].levelname == "TRACE"
    assert caplog.records[-1].getMessage() == "scanned 3 line(s)"
