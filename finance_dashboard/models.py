"""Data models for ``finance_dashboard``.

``Transaction`` is the validated input record (pydantic, frozen). Everything
the aggregation engine produces (``CategorySummary``, ``DailyBalance``,
``OverviewMetrics``) is a frozen dataclass computed fresh on every call and
never cached. ``MonthPeriod`` is the only supported aggregation window.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date as _date
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidPeriod

TransactionType: TypeAlias = Literal["income", "expense"]

INCOME: TransactionType = "income"
EXPENSE: TransactionType = "expense"

# datetime.date supports years 1..9999; the period must stay constructible.
MIN_YEAR = 1
MAX_YEAR = 9999


# ---------------------------------------------------------------------------
# Core record
# ---------------------------------------------------------------------------


class Transaction(BaseModel):
    """A single income or expense record.

    ``type`` alone decides whether the record counts as income or expense.
    ``amount`` keeps its stored sign; expense aggregation always uses the
    absolute value. ``date`` is kept as the ISO string it arrived as and is
    parsed by the engine, which reports unparsable values as
    :class:`~finance_dashboard.errors.MalformedTransaction`.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    id: str
    description: str = ""
    amount: Decimal
    type: TransactionType
    category: str = ""
    date: str
    created_at: str | None = Field(default=None, alias="createdAt")

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("id must be non-empty")
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v: object) -> object:
        if isinstance(v, bool):
            raise ValueError("amount must be a number, not a boolean")
        # Go through the shortest repr so 0.1 stays Decimal("0.1").
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("amount")
    @classmethod
    def _amount_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("amount must be finite")
        return v

    @field_validator("date", "created_at", mode="before")
    @classmethod
    def _iso_string(cls, v: object) -> object:
        if isinstance(v, (datetime, _date)):
            return v.isoformat()
        return v

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE


Transactions: TypeAlias = Iterable[Transaction]
"""Any iterable of transactions; the engine never mutates it."""


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Spending for one expense category within a window.

    ``total`` is the sum of absolute expense amounts and ``count`` the number
    of contributing transactions.
    """

    category: str
    total: Decimal
    count: int


@dataclass(frozen=True, slots=True)
class DailyBalance:
    """Activity for one calendar day plus the running net since day one.

    ``balance`` is cumulative movement within the month, starting from zero;
    it is not an absolute account balance.
    """

    date: _date
    income: Decimal
    expense: Decimal
    balance: Decimal


@dataclass(frozen=True, slots=True)
class OverviewMetrics:
    total_income: Decimal
    total_expense: Decimal
    net_amount: Decimal
    transaction_count: int


# ---------------------------------------------------------------------------
# Aggregation window
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MonthPeriod:
    """A calendar month in local time.

    Attributes
    ----------
    year:
        Four-digit calendar year (``1..9999``).
    month:
        0-indexed month, ``0`` for January through ``11`` for December.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        """Reject anything that is not an existing calendar month.

        Booleans are ints; disallow them explicitly.
        """

        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise InvalidPeriod(self.year, self.month, "year must be an integer")
        if isinstance(self.month, bool) or not isinstance(self.month, int):
            raise InvalidPeriod(self.year, self.month, "month must be an integer")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidPeriod(
                self.year, self.month, f"year must be within {MIN_YEAR}..{MAX_YEAR}"
            )
        if not 0 <= self.month <= 11:
            raise InvalidPeriod(self.year, self.month, "month must be within 0..11")

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month + 1)[1]

    @property
    def first_day(self) -> _date:
        return _date(self.year, self.month + 1, 1)

    @property
    def last_day(self) -> _date:
        return _date(self.year, self.month + 1, self.days_in_month)

    @property
    def key(self) -> str:
        """``YYYY-MM`` label with a 1-based month."""

        return f"{self.year:04d}-{self.month + 1:02d}"

    def contains(self, day: _date) -> bool:
        return self.first_day <= day <= self.last_day

    def days(self) -> Iterator[_date]:
        """Yield every calendar day of the month in order."""

        first = self.first_day
        for offset in range(self.days_in_month):
            yield first + timedelta(days=offset)


__all__ = [
    "EXPENSE",
    "INCOME",
    "CategorySummary",
    "DailyBalance",
    "MonthPeriod",
    "OverviewMetrics",
    "Transaction",
    "TransactionType",
    "Transactions",
]
