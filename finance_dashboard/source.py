"""Transaction sources consumed by the query layer.

A source exposes a single capability, "return all transactions", as an
immutable snapshot. The query layer reads exactly one snapshot per call, so a
writer swapping in new data can never produce a torn read inside one
aggregation.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Protocol, runtime_checkable

from .errors import DuplicateTransaction
from .logging_setup import get_logger
from .models import Transaction

_logger = get_logger("finance_dashboard.source")


@runtime_checkable
class TransactionSource(Protocol):
    def all_transactions(self) -> Sequence[Transaction]:
        """Return the full collection as a snapshot the caller must not mutate."""
        ...


def _unique_snapshot(transactions: Iterable[Transaction]) -> tuple[Transaction, ...]:
    snapshot = tuple(transactions)
    seen: set[str] = set()
    for t in snapshot:
        if t.id in seen:
            raise DuplicateTransaction(t.id)
        seen.add(t.id)
    return snapshot


class InMemoryTransactionSource:
    """Copy-on-write, in-process transaction store.

    Reads return the current tuple without locking. Writers build a new tuple
    under a lock and swap the reference, so every snapshot handed out stays
    unchanged for its whole lifetime.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._lock = threading.Lock()
        self._snapshot: tuple[Transaction, ...] = _unique_snapshot(transactions)

    def __len__(self) -> int:
        return len(self._snapshot)

    def all_transactions(self) -> tuple[Transaction, ...]:
        return self._snapshot

    def add(self, transaction: Transaction) -> None:
        with self._lock:
            if any(t.id == transaction.id for t in self._snapshot):
                raise DuplicateTransaction(transaction.id)
            self._snapshot = (*self._snapshot, transaction)
        _logger.debug("source:add id=%s size=%d", transaction.id, len(self._snapshot))

    def replace(self, transactions: Iterable[Transaction]) -> None:
        snapshot = _unique_snapshot(transactions)
        with self._lock:
            self._snapshot = snapshot
        _logger.debug("source:replace size=%d", len(snapshot))


def mock_source(
    count: int = 200,
    *,
    seed: int | None = None,
    now: datetime | None = None,
) -> InMemoryTransactionSource:
    """Build an in-memory source filled with generated demo transactions."""

    from .mock_data import generate_mock_transactions

    transactions = generate_mock_transactions(count, seed=seed, now=now)
    _logger.info("source:mock_generated count=%d seed=%s", len(transactions), seed)
    return InMemoryTransactionSource(transactions)


__all__ = ["InMemoryTransactionSource", "TransactionSource", "mock_source"]
