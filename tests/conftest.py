"""Pytest configuration for test isolation.

The CLI reads ``FINANCE_DASHBOARD_*`` environment variables, loads ``.env``
from the working directory and configures the package logger once per
process. To keep tests hermetic each test runs in its own temporary working
directory with those variables cleared, and logging is reset afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from finance_dashboard import Transaction
from finance_dashboard.logging_setup import reset_logging
from tests.helpers.factories import expense, income

_ENV_VARS = (
    "FINANCE_DASHBOARD_LOG_LEVEL",
    "FINANCE_DASHBOARD_SEED",
    "FINANCE_DASHBOARD_MOCK_COUNT",
    "FINANCE_DASHBOARD_CURRENCY",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear package env vars, run from ``tmp_path``, and reset logging after."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


@pytest.fixture
def march_2025() -> list[Transaction]:
    """One income and two same-category expenses with mixed signs."""

    return [
        income(1000, "2025-03-01", id="salary"),
        expense(-40, "2025-03-02", category="Food & Dining", id="groceries"),
        expense(60, "2025-03-15", category="Food & Dining", id="dinner"),
    ]
