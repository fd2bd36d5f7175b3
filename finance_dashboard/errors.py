"""Exceptions raised by ``finance_dashboard``.

All domain errors derive from :class:`FinanceDashboardError` and also from
``ValueError`` so callers that only guard against bad input keep working.
"""

from __future__ import annotations


class FinanceDashboardError(Exception):
    """Base class for errors raised by this package."""


class InvalidPeriod(FinanceDashboardError, ValueError):
    """A year/month pair that does not name a calendar month.

    Months are 0-indexed (0 = January). Out-of-range values are rejected
    instead of rolling over into an adjacent month or year.
    """

    def __init__(self, year: object, month: object, reason: str) -> None:
        self.year = year
        self.month = month
        self.reason = reason
        super().__init__(f"invalid period year={year!r} month={month!r}: {reason}")


class MalformedTransaction(FinanceDashboardError, ValueError):
    """A transaction whose date cannot be interpreted.

    Raised for the whole aggregation call so that callers can tell "no data"
    apart from "bad data".
    """

    def __init__(self, transaction_id: str, value: object, reason: str | None = None) -> None:
        self.transaction_id = transaction_id
        self.value = value
        msg = f"transaction {transaction_id!r} has an unparsable date {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DuplicateTransaction(FinanceDashboardError, ValueError):
    """Two transactions share the same ``id`` within one source."""

    def __init__(self, transaction_id: str) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"duplicate transaction id: {transaction_id!r}")


__all__ = [
    "DuplicateTransaction",
    "FinanceDashboardError",
    "InvalidPeriod",
    "MalformedTransaction",
]
