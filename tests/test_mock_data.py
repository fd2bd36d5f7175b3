from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from finance_dashboard import MonthPeriod, generate_mock_transactions, parse_transaction_date
from finance_dashboard.categories import EXPENSE_CATEGORIES
from finance_dashboard.mock_data import EXPENSE_MERCHANTS, INCOME_MERCHANTS

NOW = datetime(2025, 1, 20, 9, 30)


@pytest.fixture
def dataset():
    return generate_mock_transactions(200, seed=11, now=NOW)


def test_count_ids_and_ordering(dataset):
    assert len(dataset) == 200
    assert len({t.id for t in dataset}) == 200
    dates = [t.date for t in dataset]
    assert dates == sorted(dates, reverse=True)


def test_dates_cover_current_and_six_previous_months(dataset):
    first = MonthPeriod(2024, 6).first_day
    last = MonthPeriod(2025, 0).last_day
    days = [parse_transaction_date(t) for t in dataset]

    assert min(days) >= first
    assert max(days) <= last


def test_income_records_per_month(dataset):
    incomes = [t for t in dataset if t.type == "income"]
    per_month: dict[str, int] = {}
    for t in incomes:
        per_month[t.date[:7]] = per_month.get(t.date[:7], 0) + 1

    assert len(per_month) == 7
    assert all(2 <= n <= 4 for n in per_month.values())
    assert all(t.category == "Income" for t in incomes)
    assert all(t.description in INCOME_MERCHANTS for t in incomes)
    assert all(Decimal(800) <= t.amount <= Decimal(4500) for t in incomes)


def test_expense_records_are_negative_and_categorized(dataset):
    expenses = [t for t in dataset if t.type == "expense"]

    assert expenses
    for t in expenses:
        assert t.category in EXPENSE_CATEGORIES
        assert t.description in EXPENSE_MERCHANTS[t.category]
        assert Decimal(-350) <= t.amount <= Decimal(-5)
        assert t.amount == t.amount.quantize(Decimal("0.01"))


def test_created_at_matches_transaction_day(dataset):
    for t in dataset:
        assert t.created_at is not None
        assert datetime.fromisoformat(t.created_at).date() == date.fromisoformat(t.date)


def test_same_seed_same_dataset():
    a = generate_mock_transactions(40, seed=5, now=NOW)
    b = generate_mock_transactions(40, seed=5, now=NOW)
    c = generate_mock_transactions(40, seed=6, now=NOW)

    assert a == b
    assert a != c


def test_small_count_returns_only_income_records():
    txs = generate_mock_transactions(0, seed=1, now=NOW)
    assert txs
    assert all(t.type == "income" for t in txs)


@pytest.mark.parametrize("count", [-1, 2.5, True])
def test_invalid_count(count):
    with pytest.raises(ValueError):
        generate_mock_transactions(count)
