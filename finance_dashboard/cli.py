"""CLI for the ``finance_dashboard`` package.

A Typer console interface over the query layer. Environment variables are
loaded from a local ``.env`` with ``python-dotenv`` before any command runs.
The CLI always reads the generated demo dataset; ``--seed`` (or
``FINANCE_DASHBOARD_SEED``) makes it reproducible.

Months on the command line are human 1-12 and converted to the engine's
0-indexed months here.
"""

from __future__ import annotations

import csv
import io
import json
import os
import sys
from dataclasses import asdict, dataclass
from datetime import date
from pathlib import Path
from typing import Any, NoReturn

import typer
from dotenv import load_dotenv

from . import api
from .categories import (
    budget_pace,
    budget_status,
    category_color,
    merge_budgets,
    over_budget_alerts,
    top_budget_categories,
)
from .errors import FinanceDashboardError, InvalidPeriod
from .formatters import format_currency, format_date, format_month
from .logging_setup import configure_logging, get_logger
from .models import MonthPeriod, Transaction
from .source import InMemoryTransactionSource, mock_source

_logger = get_logger("finance_dashboard.cli")

DEFAULT_MOCK_COUNT = 200


# ---- Small module-level helpers used by CLI commands -------------------------


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        _logger.warning("cli:ignored_env name=%s value=%r", name, raw)
        return None


def _resolve_seed(explicit: int | None) -> int | None:
    """CLI option first, then ``FINANCE_DASHBOARD_SEED``, else unseeded."""

    if explicit is not None:
        return explicit
    return _env_int("FINANCE_DASHBOARD_SEED")


def _resolve_count(explicit: int | None) -> int:
    """CLI option first, then ``FINANCE_DASHBOARD_MOCK_COUNT``, else 200.

    Negative values fall back to the default.
    """

    for candidate in (explicit, _env_int("FINANCE_DASHBOARD_MOCK_COUNT")):
        if candidate is not None and candidate >= 0:
            return candidate
    return DEFAULT_MOCK_COUNT


def _resolve_currency() -> str:
    return os.getenv("FINANCE_DASHBOARD_CURRENCY") or "$"


def _resolve_period(year: int | None, month: int | None) -> tuple[int, int]:
    """Return ``(year, 0-indexed month)``, defaulting to the current local month.

    Bad values are reported in the 1-12 terms the user typed.
    """

    today = date.today()
    if month is not None and not 1 <= month <= 12:
        _fail(f"invalid month {month}: month must be within 1..12")
    resolved = (
        today.year if year is None else year,
        today.month - 1 if month is None else month - 1,
    )
    try:
        MonthPeriod(*resolved)
    except InvalidPeriod as e:
        _fail(f"invalid period {resolved[0]}-{resolved[1] + 1:02d}: {e.reason}")
    return resolved


def _parse_budget_options(values: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for raw in values:
        name, sep, amount = raw.partition("=")
        if not sep:
            raise ValueError(f"budget must look like 'Category=Amount', got {raw!r}")
        overrides[name] = amount.strip()
    return overrides


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


CSV_HEADER = ("Date", "Description", "Category", "Type", "Amount")


def _echo_csv(rows: list[Transaction]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in rows:
        writer.writerow((t.date, t.description, t.category, t.type, str(t.amount)))
    typer.echo(buf.getvalue(), nl=False)


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    raise typer.Exit(1)


@dataclass(slots=True)
class _State:
    source: InMemoryTransactionSource
    currency: str


def _state(ctx: typer.Context) -> _State:
    state = ctx.obj
    if not isinstance(state, _State):  # pragma: no cover - wiring guard
        raise RuntimeError("CLI state missing; root callback did not run")
    return state


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Summaries of a demo transaction dataset: totals, categories, daily balances.",
)

YEAR_OPTION = typer.Option(None, "--year", help="Calendar year (defaults to the current year).")
MONTH_OPTION = typer.Option(
    None, "--month", help="Calendar month 1-12 (defaults to the current month)."
)
JSON_OPTION = typer.Option(False, "--json", help="Emit JSON instead of text.")


@app.command("transactions")
def transactions_cmd(
    ctx: typer.Context,
    year: int | None = YEAR_OPTION,
    month: int | None = MONTH_OPTION,
    limit: int | None = typer.Option(None, "--limit", help="Show at most N transactions."),
    tx_type: str | None = typer.Option(
        None, "--type", help="Only 'income' or only 'expense' transactions."
    ),
    category: str | None = typer.Option(None, "--category", help="Exact category match."),
    search: str | None = typer.Option(
        None, "--search", help="Case-insensitive match on description or category."
    ),
    as_json: bool = JSON_OPTION,
    as_csv: bool = typer.Option(False, "--csv", help="Emit CSV instead of text."),
) -> None:
    """List transactions newest first, optionally restricted to one month.

    Filters apply before ``--limit``.
    """

    state = _state(ctx)
    if as_json and as_csv:
        _fail("choose at most one of --json and --csv")
    if limit is not None and limit < 0:
        _fail("limit must be a non-negative integer")
    try:
        if year is None and month is None:
            rows = api.list_transactions(state.source)
        else:
            y, m = _resolve_period(year, month)
            rows = api.transactions_by_month(state.source, y, m)
        rows = api.filter_transactions(rows, tx_type=tx_type, category=category, search=search)
    except (FinanceDashboardError, ValueError) as e:
        _fail(str(e))
    if limit is not None:
        rows = rows[:limit]

    if as_json:
        _echo_json([t.model_dump(mode="json", by_alias=True) for t in rows])
        return
    if as_csv:
        _echo_csv(rows)
        return
    if not rows:
        typer.echo("No transactions.")
        return
    for t in rows:
        signed = t.amount if t.is_income else -abs(t.amount)
        amount = format_currency(signed, sign=True, symbol=state.currency)
        typer.echo(f"{format_date(t.date)}\t{t.type}\t{t.category}\t{amount}\t{t.description}")


@app.command("overview")
def overview_cmd(
    ctx: typer.Context,
    year: int | None = YEAR_OPTION,
    month: int | None = MONTH_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Income, expense and net totals for one month."""

    state = _state(ctx)
    y, m = _resolve_period(year, month)
    try:
        metrics = api.overview_metrics(state.source, y, m)
        label = format_month(y, m)
    except (FinanceDashboardError, ValueError) as e:
        _fail(str(e))

    if as_json:
        _echo_json(asdict(metrics))
        return
    cur = state.currency
    typer.echo(f"Month\t{label}")
    typer.echo(f"Income\t{format_currency(metrics.total_income, symbol=cur)}")
    typer.echo(f"Expenses\t{format_currency(metrics.total_expense, symbol=cur)}")
    typer.echo(f"Net\t{format_currency(metrics.net_amount, sign=True, symbol=cur)}")
    typer.echo(f"Transactions\t{metrics.transaction_count}")


@app.command("categories")
def categories_cmd(
    ctx: typer.Context,
    year: int | None = YEAR_OPTION,
    month: int | None = MONTH_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Spending per category for one month, largest first."""

    state = _state(ctx)
    y, m = _resolve_period(year, month)
    try:
        summaries = api.category_spending(state.source, y, m)
    except (FinanceDashboardError, ValueError) as e:
        _fail(str(e))

    # Engine output is unordered; sorting is a display concern.
    summaries = sorted(summaries, key=lambda s: s.total, reverse=True)
    if as_json:
        _echo_json(
            [asdict(s) | {"color": category_color(s.category)} for s in summaries]
        )
        return
    if not summaries:
        typer.echo("No spending.")
        return
    for s in summaries:
        total = format_currency(s.total, symbol=state.currency)
        typer.echo(f"{s.category}\t{total}\t{s.count}\t{category_color(s.category)}")


@app.command("daily")
def daily_cmd(
    ctx: typer.Context,
    year: int | None = YEAR_OPTION,
    month: int | None = MONTH_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Daily income, expense and running balance for one month."""

    state = _state(ctx)
    y, m = _resolve_period(year, month)
    try:
        series = api.balance_series(state.source, y, m)
    except (FinanceDashboardError, ValueError) as e:
        _fail(str(e))

    if as_json:
        _echo_json([asdict(d) for d in series])
        return
    cur = state.currency
    for d in series:
        typer.echo(
            f"{d.date.isoformat()}\t{format_currency(d.income, symbol=cur)}"
            f"\t{format_currency(d.expense, symbol=cur)}"
            f"\t{format_currency(d.balance, sign=True, symbol=cur)}"
        )


@app.command("budgets")
def budgets_cmd(
    ctx: typer.Context,
    year: int | None = YEAR_OPTION,
    month: int | None = MONTH_OPTION,
    budget: list[str] = typer.Option(
        [], "--budget", help="Override a category budget, e.g. --budget 'Shopping=250'."
    ),
    top: int = typer.Option(3, "--top", min=0, help="Number of categories to show."),
    as_json: bool = JSON_OPTION,
) -> None:
    """Spend against budget, projected month-end spend and per-category status."""

    state = _state(ctx)
    y, m = _resolve_period(year, month)
    try:
        budgets = merge_budgets(_parse_budget_options(budget))
        metrics = api.overview_metrics(state.source, y, m)
        summaries = api.category_spending(state.source, y, m)
    except (FinanceDashboardError, ValueError) as e:
        _fail(str(e))

    today = date.today()
    pace = budget_pace(metrics.total_expense, sum(budgets.values()), y, m, today=today)
    rows = top_budget_categories(summaries, budgets, limit=top)
    status = budget_status(summaries, budgets, y, m, today=today)
    alerts = over_budget_alerts(status)

    if as_json:
        _echo_json(
            {
                "pace": asdict(pace),
                "categories": [asdict(r) for r in rows],
                "status": [asdict(s) for s in status],
                "alerts": [s.category for s in alerts],
            }
        )
        return
    cur = state.currency
    typer.echo(
        f"Spent\t{format_currency(pace.spent, symbol=cur)} of "
        f"{format_currency(pace.budget, symbol=cur)} ({pace.percent_used}%)"
    )
    typer.echo(
        f"Pace\t{format_currency(pace.daily_rate, symbol=cur)}/day over "
        f"{pace.days_elapsed}/{pace.days_in_month} days"
    )
    typer.echo(f"Projected\t{format_currency(pace.projected, symbol=cur)}")
    for r in rows:
        typer.echo(
            f"{r.category}\t{format_currency(r.spent, symbol=cur)}"
            f"\t{format_currency(r.budget, symbol=cur)}\t{r.percent_used}%"
        )
    typer.echo("")
    for s in status:
        flag = "OVER" if s.over_budget else "PACE" if s.projected_over else "ok"
        typer.echo(
            f"{s.category}\t{format_currency(s.spent, symbol=cur)}"
            f"\t{format_currency(s.budget, symbol=cur)}"
            f"\t{format_currency(s.remaining, sign=True, symbol=cur)}"
            f"\t{format_currency(s.projected, symbol=cur)}\t{flag}"
        )
    if alerts:
        typer.echo(f"Alerts\t{', '.join(s.category for s in alerts)}")


@app.callback()
def _root(
    ctx: typer.Context,
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for the demo dataset (falls back to FINANCE_DASHBOARD_SEED)."
    ),
    count: int | None = typer.Option(
        None,
        "--count",
        help="Number of demo transactions (falls back to FINANCE_DASHBOARD_MOCK_COUNT).",
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables), configures logging and builds the
    demo transaction source shared by every subcommand.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()

    resolved_seed = _resolve_seed(seed)
    ctx.obj = _State(
        source=mock_source(_resolve_count(count), seed=resolved_seed),
        currency=_resolve_currency(),
    )
    _logger.debug("cli:ready seed=%s count=%d", resolved_seed, len(ctx.obj.source))


def main() -> None:  # pragma: no cover - console entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m finance_dashboard.cli`
    app()
