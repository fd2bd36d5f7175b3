"""Display formatting for amounts, dates and month labels (en-US style)."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from .models import MonthPeriod

_CENT = Decimal("0.01")


def format_currency(amount: Decimal | int | float, *, sign: bool = False, symbol: str = "$") -> str:
    """Format ``amount`` as ``$1,234.50``.

    Without ``sign`` only the magnitude is shown, which is how expense totals
    are displayed. With ``sign=True`` non-zero amounts carry ``+`` or ``-``.
    """

    value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    prefix = ""
    if sign and value:
        prefix = "+" if value > 0 else "-"
    magnitude = abs(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{prefix}{symbol}{magnitude:,.2f}"


def _as_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


def format_date(value: str | date) -> str:
    """``Mar 2, 2025``"""

    d = _as_date(value)
    return f"{d:%b} {d.day}, {d.year}"


def format_date_short(value: str | date) -> str:
    """``Mar 2``"""

    d = _as_date(value)
    return f"{d:%b} {d.day}"


def format_month(year: int, month: int) -> str:
    """``March 2025`` for a 0-indexed ``month``."""

    first = MonthPeriod(year, month).first_day
    return f"{first:%B} {first.year}"


__all__ = ["format_currency", "format_date", "format_date_short", "format_month"]
