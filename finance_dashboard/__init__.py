"""Public interface for the ``finance_dashboard`` package.

Re-exports the aggregation engine, the query layer, the transaction sources
and the public models/errors as the stable import surface. There is no
runtime logic here, only symbol re-exports.
"""

from .api import (
    balance_series,
    category_spending,
    filter_transactions,
    list_transactions,
    overview_metrics,
    transactions_by_month,
)
from .calculations import (
    daily_balances,
    days_in_month,
    filter_by_month,
    net_amount,
    parse_transaction_date,
    spending_by_category,
    total_expense,
    total_income,
)
from .errors import (
    DuplicateTransaction,
    FinanceDashboardError,
    InvalidPeriod,
    MalformedTransaction,
)
from .mock_data import generate_mock_transactions
from .models import (
    CategorySummary,
    DailyBalance,
    MonthPeriod,
    OverviewMetrics,
    Transaction,
    TransactionType,
    Transactions,
)
from .source import InMemoryTransactionSource, TransactionSource, mock_source

__all__ = [
    # Engine
    "daily_balances",
    "days_in_month",
    "filter_by_month",
    "net_amount",
    "parse_transaction_date",
    "spending_by_category",
    "total_expense",
    "total_income",
    # Query layer
    "balance_series",
    "category_spending",
    "filter_transactions",
    "list_transactions",
    "overview_metrics",
    "transactions_by_month",
    # Sources
    "InMemoryTransactionSource",
    "TransactionSource",
    "generate_mock_transactions",
    "mock_source",
    # Models / types
    "CategorySummary",
    "DailyBalance",
    "MonthPeriod",
    "OverviewMetrics",
    "Transaction",
    "TransactionType",
    "Transactions",
    # Errors
    "DuplicateTransaction",
    "FinanceDashboardError",
    "InvalidPeriod",
    "MalformedTransaction",
]
