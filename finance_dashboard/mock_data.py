"""Seeded demo dataset generator.

Produces a plausible mix of income and expense transactions covering the
current month and the six months before it. A fixed ``seed`` yields the same
dataset, ids included, for a given ``now``.
"""

from __future__ import annotations

import random
import uuid
from datetime import date, datetime, time
from decimal import Decimal

from .categories import EXPENSE_CATEGORIES, INCOME_CATEGORY
from .models import EXPENSE, INCOME, MonthPeriod, Transaction

MONTHS_BACK = 6

INCOME_MERCHANTS: tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Dividends",
    "Refund",
    "Side gig",
    "Bonus",
)

EXPENSE_MERCHANTS: dict[str, tuple[str, ...]] = {
    "Food & Dining": ("Restaurant", "Grocery", "Coffee", "Uber Eats", "Supermarket"),
    "Transportation": ("Gas", "Uber", "Parking", "Transit", "Car maintenance"),
    "Shopping": ("Amazon", "Target", "Online", "Mall"),
    "Entertainment": ("Netflix", "Spotify", "Games", "Concert", "Movies"),
    "Bills & Utilities": ("Electric", "Internet", "Rent", "Phone", "Insurance"),
    "Healthcare": ("Pharmacy", "Doctor", "Gym", "Dental"),
    "Other": ("ATM", "Transfer", "Misc"),
}


def _months_back(now: datetime, offset: int) -> MonthPeriod:
    year, month = divmod(now.year * 12 + now.month - 1 - offset, 12)
    return MonthPeriod(year, month)


def _random_amount(rng: random.Random, low: int, high: int) -> Decimal:
    # Whole cents so amounts are exact two-decimal values.
    return Decimal(rng.randint(low * 100, high * 100)).scaleb(-2)


def _random_day(rng: random.Random, period: MonthPeriod) -> date:
    return period.first_day.replace(day=rng.randint(1, period.days_in_month))


def _record(
    rng: random.Random,
    *,
    day: date,
    description: str,
    amount: Decimal,
    kind: str,
    category: str,
) -> Transaction:
    created = datetime.combine(
        day, time(rng.randrange(24), rng.randrange(60), rng.randrange(60))
    )
    return Transaction(
        id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
        description=description,
        amount=amount,
        type=kind,
        category=category,
        date=day.isoformat(),
        created_at=created.isoformat(),
    )


def generate_mock_transactions(
    count: int = 200,
    *,
    seed: int | None = None,
    now: datetime | None = None,
) -> list[Transaction]:
    """Generate ``count`` demo transactions, newest first.

    Two to four income records are created for every month in range; the
    rest of ``count`` is filled with expenses carrying negative amounts. When
    ``count`` is smaller than the number of income records only the income
    records are returned.
    """

    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError("count must be a non-negative integer")

    rng = random.Random(seed)
    now = now or datetime.now()
    periods = [_months_back(now, m) for m in range(MONTHS_BACK + 1)]

    transactions: list[Transaction] = []
    for period in periods:
        for _ in range(rng.randint(2, 4)):
            transactions.append(
                _record(
                    rng,
                    day=_random_day(rng, period),
                    description=rng.choice(INCOME_MERCHANTS),
                    amount=_random_amount(rng, 800, 4500),
                    kind=INCOME,
                    category=INCOME_CATEGORY,
                )
            )

    for _ in range(count - len(transactions)):
        period = rng.choice(periods)
        category = rng.choice(EXPENSE_CATEGORIES)
        merchants = EXPENSE_MERCHANTS.get(category, ("Other",))
        transactions.append(
            _record(
                rng,
                day=_random_day(rng, period),
                description=rng.choice(merchants),
                amount=-_random_amount(rng, 5, 350),
                kind=EXPENSE,
                category=category,
            )
        )

    return sorted(transactions, key=lambda t: t.date, reverse=True)


__all__ = ["EXPENSE_MERCHANTS", "INCOME_MERCHANTS", "MONTHS_BACK", "generate_mock_transactions"]
