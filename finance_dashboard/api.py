"""Query layer for the ``finance_dashboard`` package.

One function per dashboard query. Each takes the transaction source
explicitly, reads exactly one snapshot from it, and delegates filtering and
aggregation to :mod:`finance_dashboard.calculations`. There is no module-level
dataset; callers own the source and may pass any fixture they like.

Returned lists are freshly allocated but the transactions inside them are the
source's own records. Callers must treat all results as read-only.
"""

from __future__ import annotations

from .calculations import (
    daily_balances,
    filter_by_month,
    net_amount,
    parse_transaction_date,
    spending_by_category,
    total_expense,
    total_income,
)
from .logging_setup import get_logger
from .models import EXPENSE, INCOME, CategorySummary, DailyBalance, OverviewMetrics, Transaction
from .source import TransactionSource

_logger = get_logger("finance_dashboard.api")


def _newest_first(transactions: list[Transaction]) -> list[Transaction]:
    # Key by parsed calendar date so mixed date/date-time strings order correctly.
    keyed = [(parse_transaction_date(t), t) for t in transactions]
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [t for _, t in keyed]


def list_transactions(source: TransactionSource, *, limit: int | None = None) -> list[Transaction]:
    """Return every transaction, newest first, optionally truncated to ``limit``."""

    if limit is not None and (isinstance(limit, bool) or limit < 0):
        raise ValueError("limit must be a non-negative integer")
    snapshot = source.all_transactions()
    ordered = _newest_first(list(snapshot))
    _logger.debug("list_transactions:done total=%d limit=%s", len(ordered), limit)
    return ordered if limit is None else ordered[:limit]


def transactions_by_month(source: TransactionSource, year: int, month: int) -> list[Transaction]:
    """Transactions dated within ``month`` (0-indexed) of ``year``, newest first."""

    month_tx = filter_by_month(source.all_transactions(), year, month)
    _logger.debug(
        "transactions_by_month:done year=%d month=%d count=%d", year, month, len(month_tx)
    )
    return _newest_first(month_tx)


def overview_metrics(source: TransactionSource, year: int, month: int) -> OverviewMetrics:
    """Income, expense and net totals for one month plus its transaction count."""

    month_tx = filter_by_month(source.all_transactions(), year, month)
    metrics = OverviewMetrics(
        total_income=total_income(month_tx),
        total_expense=total_expense(month_tx),
        net_amount=net_amount(month_tx),
        transaction_count=len(month_tx),
    )
    _logger.debug(
        "overview_metrics:done year=%d month=%d count=%d", year, month, metrics.transaction_count
    )
    return metrics


def category_spending(source: TransactionSource, year: int, month: int) -> list[CategorySummary]:
    """Per-category expense summaries for one month, in first-encounter order."""

    month_tx = filter_by_month(source.all_transactions(), year, month)
    return spending_by_category(month_tx)


def balance_series(source: TransactionSource, year: int, month: int) -> list[DailyBalance]:
    """Daily income/expense and running net for every day of one month."""

    return daily_balances(source.all_transactions(), year, month)


def filter_transactions(
    transactions: list[Transaction],
    *,
    tx_type: str | None = None,
    category: str | None = None,
    search: str | None = None,
) -> list[Transaction]:
    """Narrow an already fetched list, keeping its order.

    ``tx_type`` keeps only income or only expense records, ``category`` is an
    exact match, and ``search`` is a case-insensitive substring of the
    description or the category. A blank ``search`` matches everything.
    """

    if tx_type is not None and tx_type not in (INCOME, EXPENSE):
        raise ValueError(f"type must be 'income' or 'expense', got {tx_type!r}")
    needle = search.casefold() if search and search.strip() else ""

    kept = []
    for t in transactions:
        if tx_type is not None and t.type != tx_type:
            continue
        if category is not None and t.category != category:
            continue
        if needle and not (
            needle in t.description.casefold() or needle in t.category.casefold()
        ):
            continue
        kept.append(t)
    return kept


__all__ = [
    "balance_series",
    "category_spending",
    "filter_transactions",
    "list_transactions",
    "overview_metrics",
    "transactions_by_month",
]
