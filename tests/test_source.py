from __future__ import annotations

import threading
from datetime import datetime

import pytest

from finance_dashboard import (
    DuplicateTransaction,
    InMemoryTransactionSource,
    TransactionSource,
    mock_source,
    net_amount,
)
from tests.helpers.factories import expense, income


def test_in_memory_source_satisfies_protocol():
    assert isinstance(InMemoryTransactionSource(), TransactionSource)


def test_snapshot_is_unaffected_by_later_writes():
    source = InMemoryTransactionSource([income(100, "2025-03-01", id="a")])
    snapshot = source.all_transactions()

    source.add(expense(30, "2025-03-02", id="b"))
    source.replace([])

    assert [t.id for t in snapshot] == ["a"]
    assert source.all_transactions() == ()
    assert len(source) == 0


def test_duplicate_ids_are_rejected():
    with pytest.raises(DuplicateTransaction):
        InMemoryTransactionSource(
            [expense(1, "2025-03-01", id="x"), expense(2, "2025-03-02", id="x")]
        )

    source = InMemoryTransactionSource([expense(1, "2025-03-01", id="x")])
    with pytest.raises(DuplicateTransaction) as excinfo:
        source.add(expense(9, "2025-03-05", id="x"))
    assert excinfo.value.transaction_id == "x"
    assert len(source) == 1


def test_concurrent_adds_keep_every_record():
    source = InMemoryTransactionSource()

    def writer(prefix: str) -> None:
        for i in range(50):
            source.add(expense(1, "2025-03-01", id=f"{prefix}-{i}"))

    threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(source) == 200
    assert net_amount(source.all_transactions()) == -200


def test_mock_source_is_reproducible_with_seed():
    now = datetime(2025, 3, 15)
    first = mock_source(50, seed=3, now=now).all_transactions()
    second = mock_source(50, seed=3, now=now).all_transactions()

    assert first == second
    assert len(first) == 50
