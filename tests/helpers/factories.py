"""Transaction builders shared by the test modules."""

from __future__ import annotations

import itertools
from decimal import Decimal
from typing import Any

from finance_dashboard import Transaction

_ids = itertools.count(1)


def make_tx(
    *,
    amount: Decimal | int | float | str,
    date: str,
    type: str = "expense",
    category: str = "Food & Dining",
    description: str = "",
    id: str | None = None,
    **extra: Any,
) -> Transaction:
    """Build a :class:`Transaction` with terse defaults and a fresh id."""

    return Transaction(
        id=id or f"t{next(_ids)}",
        description=description,
        amount=amount,
        type=type,
        category=category,
        date=date,
        **extra,
    )


def income(amount: Decimal | int | float | str, date: str, **kw: Any) -> Transaction:
    kw.setdefault("category", "Income")
    return make_tx(amount=amount, date=date, type="income", **kw)


def expense(amount: Decimal | int | float | str, date: str, **kw: Any) -> Transaction:
    return make_tx(amount=amount, date=date, type="expense", **kw)
