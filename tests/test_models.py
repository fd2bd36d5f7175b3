from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from finance_dashboard import InvalidPeriod, MonthPeriod, Transaction


def _payload(**overrides):
    base = {
        "id": "abc",
        "description": "Coffee",
        "amount": "-4.50",
        "type": "expense",
        "category": "Food & Dining",
        "date": "2025-03-02",
    }
    base.update(overrides)
    return base


def test_transaction_accepts_camel_case_created_at():
    tx = Transaction.model_validate(_payload(createdAt="2025-03-02T09:15:00"))

    assert tx.created_at == "2025-03-02T09:15:00"
    assert tx.model_dump(by_alias=True)["createdAt"] == "2025-03-02T09:15:00"


def test_transaction_amount_is_decimal_and_float_keeps_shortest_form():
    assert Transaction(**_payload(amount=0.1)).amount == Decimal("0.1")
    assert Transaction(**_payload(amount=12)).amount == Decimal(12)
    assert Transaction(**_payload()).amount == Decimal("-4.50")


@pytest.mark.parametrize("amount", [True, "abc", "NaN", float("inf")])
def test_transaction_rejects_non_numeric_amounts(amount):
    with pytest.raises(ValidationError):
        Transaction(**_payload(amount=amount))


def test_transaction_rejects_unknown_type_and_fields():
    with pytest.raises(ValidationError):
        Transaction(**_payload(type="transfer"))
    with pytest.raises(ValidationError):
        Transaction(**_payload(merchant="Blue Bottle"))


def test_transaction_requires_non_empty_id():
    with pytest.raises(ValidationError):
        Transaction(**_payload(id="   "))


def test_transaction_stores_date_objects_as_iso_strings():
    assert Transaction(**_payload(date=date(2025, 3, 2))).date == "2025-03-02"
    assert (
        Transaction(**_payload(date=datetime(2025, 3, 2, 18, 30))).date == "2025-03-02T18:30:00"
    )


def test_transaction_is_frozen():
    tx = Transaction(**_payload())
    with pytest.raises(ValidationError):
        tx.amount = Decimal(1)  # type: ignore[misc]


def test_transaction_type_helpers():
    tx = Transaction(**_payload(type="income", amount=10, category="Income"))
    assert tx.is_income and not tx.is_expense


def test_month_period_bounds_and_days():
    feb = MonthPeriod(2024, 1)

    assert feb.first_day == date(2024, 2, 1)
    assert feb.last_day == date(2024, 2, 29)
    assert feb.days_in_month == 29
    assert feb.key == "2024-02"
    assert list(feb.days())[-1] == date(2024, 2, 29)
    assert feb.contains(date(2024, 2, 29))
    assert not feb.contains(date(2024, 3, 1))


def test_month_period_error_carries_inputs():
    with pytest.raises(InvalidPeriod) as excinfo:
        MonthPeriod(2025, 12)

    assert excinfo.value.year == 2025
    assert excinfo.value.month == 12
    assert isinstance(excinfo.value, ValueError)
