from __future__ import annotations

import io
import logging

import pytest

from finance_dashboard.logging_setup import (
    LEVEL_ENV_VAR,
    configure_logging,
    get_logger,
    reset_logging,
)


def test_get_logger_is_silent_until_configured():
    logger = get_logger("finance_dashboard.tests")
    pkg = logging.getLogger("finance_dashboard")

    assert logger.name == "finance_dashboard.tests"
    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)


def test_configure_logging_once_with_explicit_level():
    stream = io.StringIO()
    configure_logging("debug", fmt="%(levelname)s %(message)s", stream=stream)
    configure_logging("error", stream=io.StringIO())

    get_logger("finance_dashboard.api").debug("overview_metrics:done count=%d", 3)

    pkg = logging.getLogger("finance_dashboard")
    assert pkg.level == logging.DEBUG
    assert len(pkg.handlers) == 1
    assert stream.getvalue() == "DEBUG overview_metrics:done count=3\n"


@pytest.mark.parametrize(
    ("env", "expected"),
    [("WARNING", logging.WARNING), ("10", 10), ("nope", logging.INFO)],
)
def test_level_from_environment(monkeypatch: pytest.MonkeyPatch, env, expected):
    monkeypatch.setenv(LEVEL_ENV_VAR, env)
    configure_logging(stream=io.StringIO())

    assert logging.getLogger("finance_dashboard").level == expected


def test_unknown_explicit_level_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LEVEL_ENV_VAR, "error")
    configure_logging("chatty", stream=io.StringIO())

    assert logging.getLogger("finance_dashboard").level == logging.ERROR


def test_reset_allows_reconfiguring():
    first = io.StringIO()
    configure_logging("info", fmt="%(message)s", stream=first)
    reset_logging()
    second = io.StringIO()
    configure_logging("info", fmt="%(message)s", stream=second)

    get_logger("finance_dashboard.cli").info("cli:ready")

    assert first.getvalue() == ""
    assert second.getvalue() == "cli:ready\n"
    assert len(logging.getLogger("finance_dashboard").handlers) == 1
