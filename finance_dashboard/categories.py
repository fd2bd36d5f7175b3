"""Category and budget presentation config.

Colors and budgets are plain mappings with explicit defaults. The lookups
here are for renderers; the aggregation engine never consults them.

Exports
-------
- ``CATEGORY_COLORS`` / ``category_color(...)``: chart color per category.
- ``DEFAULT_BUDGETS`` / ``budget_for(...)`` / ``merge_budgets(...)``: monthly
  budget per expense category with user overrides.
- ``budget_pace(...)`` and ``top_budget_categories(...)``: spend-versus-budget
  views built from overview metrics and category summaries.
- ``budget_status(...)`` / ``over_budget_alerts(...)``: one status row per
  expense category and the rows that are over or on track to go over.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .calculations import FALLBACK_CATEGORY
from .models import CategorySummary, MonthPeriod

INCOME_CATEGORY = "Income"

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    FALLBACK_CATEGORY,
)

CATEGORIES: tuple[str, ...] = (INCOME_CATEGORY, *EXPENSE_CATEGORIES)

CATEGORY_COLORS: Mapping[str, str] = {
    INCOME_CATEGORY: "#10b981",
    "Food & Dining": "#f59e0b",
    "Transportation": "#3b82f6",
    "Shopping": "#ec4899",
    "Entertainment": "#8b5cf6",
    "Bills & Utilities": "#6366f1",
    "Healthcare": "#ef4444",
    FALLBACK_CATEGORY: "#6b7280",
}

DEFAULT_CATEGORY_COLOR = CATEGORY_COLORS[FALLBACK_CATEGORY]

DEFAULT_BUDGETS: Mapping[str, Decimal] = {
    "Food & Dining": Decimal(500),
    "Transportation": Decimal(300),
    "Shopping": Decimal(400),
    "Entertainment": Decimal(200),
    "Bills & Utilities": Decimal(600),
    "Healthcare": Decimal(250),
    FALLBACK_CATEGORY: Decimal(200),
}

_ZERO = Decimal(0)
_CENT = Decimal("0.01")

# Used by the pace view when no category carries a positive budget.
FALLBACK_TOTAL_BUDGET = Decimal(1500)


def normalize_name(name: str) -> str:
    """Return a trimmed, single-spaced representation of ``name``."""

    return " ".join(name.strip().split())


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


# ---------------------------
# Budgets
# ---------------------------


def _to_amount(value: object) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"budget must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"budget must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"budget must be finite, got {value!r}")
    return max(_ZERO, amount)


def merge_budgets(overrides: Mapping[str, object] | None = None) -> dict[str, Decimal]:
    """Return the default budgets updated with ``overrides``.

    Category names are whitespace-normalized, negative amounts clamp to zero,
    and values that are not numbers raise ``ValueError``.
    """

    merged = dict(DEFAULT_BUDGETS)
    for name, value in (overrides or {}).items():
        category = normalize_name(name)
        if not category:
            raise ValueError("budget category cannot be empty")
        merged[category] = _to_amount(value)
    return merged


def budget_for(category: str, budgets: Mapping[str, Decimal] | None = None) -> Decimal:
    """User budget for ``category``, else its default, else zero."""

    if budgets is not None and category in budgets:
        return budgets[category]
    return DEFAULT_BUDGETS.get(category, _ZERO)


@dataclass(frozen=True, slots=True)
class BudgetPace:
    spent: Decimal
    budget: Decimal
    percent_used: int
    days_elapsed: int
    days_in_month: int
    daily_rate: Decimal
    projected: Decimal


@dataclass(frozen=True, slots=True)
class CategoryBudget:
    category: str
    spent: Decimal
    budget: Decimal
    percent_used: int


@dataclass(frozen=True, slots=True)
class BudgetStatus:
    """Spend against budget for one expense category in one month.

    ``projected`` extrapolates the spend so far over the whole month;
    ``projected_over`` compares it with the budget, so a category with a zero
    budget and any spend is always projected over.
    """

    category: str
    spent: Decimal
    budget: Decimal
    remaining: Decimal
    percent_used: int
    over_budget: bool
    projected: Decimal
    projected_over: bool
    color: str


def _percent(part: Decimal, whole: Decimal) -> int:
    if whole <= 0:
        return 0
    return int((part / whole * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _elapsed_days(period: MonthPeriod, today: date) -> int:
    return today.day if period.contains(today) else period.days_in_month


def budget_pace(
    spent: Decimal,
    total_budget: Decimal,
    year: int,
    month: int,
    *,
    today: date,
) -> BudgetPace:
    """Project month-end spending from the spend rate so far.

    For the month containing ``today`` the elapsed days are ``today.day``;
    any other month counts as fully elapsed. A non-positive ``total_budget``
    is replaced by ``FALLBACK_TOTAL_BUDGET``.
    """

    period = MonthPeriod(year, month)
    n_days = period.days_in_month
    elapsed = _elapsed_days(period, today)
    daily_rate = spent / elapsed if elapsed > 0 else _ZERO
    if total_budget <= 0:
        total_budget = FALLBACK_TOTAL_BUDGET
    return BudgetPace(
        spent=spent,
        budget=total_budget,
        percent_used=_percent(spent, total_budget),
        days_elapsed=elapsed,
        days_in_month=n_days,
        daily_rate=daily_rate.quantize(_CENT, rounding=ROUND_HALF_UP),
        projected=(daily_rate * n_days).quantize(Decimal(1), rounding=ROUND_HALF_UP),
    )


def top_budget_categories(
    summaries: Iterable[CategorySummary],
    budgets: Mapping[str, Decimal] | None = None,
    *,
    limit: int = 3,
) -> list[CategoryBudget]:
    """Categories that have a positive budget, largest spend first."""

    rows = []
    for s in summaries:
        cat_budget = budget_for(s.category, budgets)
        if cat_budget <= 0:
            continue
        rows.append(
            CategoryBudget(
                category=s.category,
                spent=s.total,
                budget=cat_budget,
                percent_used=_percent(s.total, cat_budget),
            )
        )
    rows.sort(key=lambda r: r.spent, reverse=True)
    return rows[:limit]


def budget_status(
    summaries: Iterable[CategorySummary],
    budgets: Mapping[str, Decimal] | None,
    year: int,
    month: int,
    *,
    today: date,
) -> list[BudgetStatus]:
    """One row per entry of ``EXPENSE_CATEGORIES``, in that order.

    Categories without spending report zero spent. Spending in categories
    outside ``EXPENSE_CATEGORIES`` is not listed here.
    """

    period = MonthPeriod(year, month)
    n_days = period.days_in_month
    elapsed = _elapsed_days(period, today)
    spent_by_category = {s.category: s.total for s in summaries}

    rows = []
    for category in EXPENSE_CATEGORIES:
        spent = spent_by_category.get(category, _ZERO)
        cat_budget = budget_for(category, budgets)
        projected = (spent / elapsed * n_days).quantize(_CENT, rounding=ROUND_HALF_UP)
        rows.append(
            BudgetStatus(
                category=category,
                spent=spent,
                budget=cat_budget,
                remaining=cat_budget - spent,
                percent_used=_percent(spent, cat_budget),
                over_budget=cat_budget > 0 and spent > cat_budget,
                projected=projected,
                projected_over=projected > cat_budget,
                color=category_color(category),
            )
        )
    return rows


def over_budget_alerts(rows: Iterable[BudgetStatus]) -> list[BudgetStatus]:
    """Rows already over budget or projected to end the month over it."""

    return [r for r in rows if r.over_budget or r.projected_over]


__all__ = [
    "CATEGORIES",
    "CATEGORY_COLORS",
    "DEFAULT_BUDGETS",
    "DEFAULT_CATEGORY_COLOR",
    "EXPENSE_CATEGORIES",
    "FALLBACK_TOTAL_BUDGET",
    "INCOME_CATEGORY",
    "BudgetPace",
    "BudgetStatus",
    "CategoryBudget",
    "budget_for",
    "budget_pace",
    "budget_status",
    "category_color",
    "merge_budgets",
    "normalize_name",
    "over_budget_alerts",
    "top_budget_categories",
]
