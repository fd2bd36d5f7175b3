"""Logging wiring for ``finance_dashboard``.

Every module logs through a child of the ``"finance_dashboard"`` logger,
obtained with :func:`get_logger`. Nothing is printed until a host calls
:func:`configure_logging`; the CLI does so from its root callback. Before
that, the package logger only carries a ``NullHandler``.

Messages follow an ``"<operation>:<event> key=value"`` shape, for example
``overview_metrics:done year=2025 month=2 count=3``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_ROOT = "finance_dashboard"
LEVEL_ENV_VAR = "FINANCE_DASHBOARD_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Handler installed by configure_logging; None while unconfigured.
_handler: logging.Handler | None = None


def _level_from_name(value: str) -> int | None:
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    numeric = getattr(logging, value, None)
    return numeric if isinstance(numeric, int) else None


def _resolve_level(level: int | str | None) -> int:
    """Explicit level, then the environment, then ``INFO``.

    Unrecognized names are skipped rather than raising.
    """

    if isinstance(level, int):
        return level
    for candidate in (level, os.getenv(LEVEL_ENV_VAR)):
        if candidate:
            parsed = _level_from_name(candidate)
            if parsed is not None:
                return parsed
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send package log records to ``stream``.

    Only the first call has an effect until :func:`reset_logging` runs.
    ``level`` may be an int or a level name; when omitted,
    ``FINANCE_DASHBOARD_LOG_LEVEL`` is consulted.
    """

    global _handler
    if _handler is not None:
        return

    root = logging.getLogger(_ROOT)
    for h in [h for h in root.handlers if isinstance(h, logging.NullHandler)]:
        root.removeHandler(h)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    root.setLevel(resolved)
    root.addHandler(handler)
    root.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Undo :func:`configure_logging` so it can run again."""

    global _handler
    root = logging.getLogger(_ROOT)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if _handler is None and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["DEFAULT_FORMAT", "LEVEL_ENV_VAR", "configure_logging", "get_logger", "reset_logging"]
