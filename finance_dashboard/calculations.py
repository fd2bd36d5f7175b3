"""Transaction aggregation engine.

Pure functions over an in-memory collection of :class:`Transaction` records.
Nothing here performs I/O, caches results, or mutates its input; each call
allocates fresh output, so the functions are safe to call from any number of
request contexts at once as long as the input itself is a stable snapshot.

All month/day bucketing is done on the local calendar. Date-only strings are
local midnight, naive date-times are local wall clock, and offset-aware
date-times are converted to the local timezone before bucketing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime
from decimal import Decimal

from .errors import MalformedTransaction
from .models import CategorySummary, DailyBalance, MonthPeriod, Transaction

FALLBACK_CATEGORY = "Other"

_ZERO = Decimal(0)


# ---------------------------------------------------------------------------
# Dates and periods
# ---------------------------------------------------------------------------


def parse_transaction_date(transaction: Transaction) -> date:
    """Return the local calendar date of ``transaction``.

    Raises :class:`MalformedTransaction` naming the record when its ``date``
    is not an ISO 8601 date or date-time.
    """

    raw = transaction.date
    try:
        parsed = datetime.fromisoformat(raw)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise MalformedTransaction(transaction.id, raw, str(exc)) from exc
    return parsed.date()


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (0-indexed) of ``year``."""

    return MonthPeriod(year, month).days_in_month


def _dated_in_period(
    transactions: Iterable[Transaction], period: MonthPeriod
) -> Iterator[tuple[date, Transaction]]:
    for t in transactions:
        day = parse_transaction_date(t)
        if period.contains(day):
            yield day, t


def filter_by_month(
    transactions: Iterable[Transaction], year: int, month: int
) -> list[Transaction]:
    """Return the transactions dated within the given calendar month.

    ``month`` is 0-indexed. Both the first and the last day of the month are
    included in full. Input order is preserved; it is not sorted.
    """

    period = MonthPeriod(year, month)
    return [t for _, t in _dated_in_period(transactions, period)]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of ``amount`` over income transactions, taken as stored."""

    return sum((t.amount for t in transactions if t.is_income), _ZERO)


def total_expense(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of ``abs(amount)`` over expense transactions.

    Expense amounts may be stored with either sign; the total is always a
    non-negative magnitude.
    """

    return sum((abs(t.amount) for t in transactions if t.is_expense), _ZERO)


def net_amount(transactions: Iterable[Transaction]) -> Decimal:
    """``total_income - total_expense`` over one snapshot of ``transactions``."""

    snapshot = tuple(transactions)
    return total_income(snapshot) - total_expense(snapshot)


# ---------------------------------------------------------------------------
# Breakdowns
# ---------------------------------------------------------------------------


def spending_by_category(transactions: Iterable[Transaction]) -> list[CategorySummary]:
    """Group expense transactions by category.

    Blank categories fall back to ``"Other"``. Output is in order of first
    encounter; categories without expenses are not listed.
    """

    totals: dict[str, list] = {}
    for t in transactions:
        if not t.is_expense:
            continue
        bucket = totals.setdefault(t.category or FALLBACK_CATEGORY, [_ZERO, 0])
        bucket[0] += abs(t.amount)
        bucket[1] += 1
    return [
        CategorySummary(category=category, total=total, count=count)
        for category, (total, count) in totals.items()
    ]


def daily_balances(
    transactions: Iterable[Transaction], year: int, month: int
) -> list[DailyBalance]:
    """One entry per day of the month with a running net from day one.

    Days without activity are zero-filled. The running balance starts at zero
    on the first of the month; nothing is carried over from earlier months.
    """

    period = MonthPeriod(year, month)
    by_day: dict[date, list[Decimal]] = {day: [_ZERO, _ZERO] for day in period.days()}

    for day, t in _dated_in_period(transactions, period):
        if t.is_income:
            by_day[day][0] += t.amount
        else:
            by_day[day][1] += abs(t.amount)

    running = _ZERO
    series: list[DailyBalance] = []
    for day, (income, expense) in by_day.items():
        running += income - expense
        series.append(DailyBalance(date=day, income=income, expense=expense, balance=running))
    return series


__all__ = [
    "FALLBACK_CATEGORY",
    "daily_balances",
    "days_in_month",
    "filter_by_month",
    "net_amount",
    "parse_transaction_date",
    "spending_by_category",
    "total_expense",
    "total_income",
]
