"""Asserções de invariantes compartilhadas pelos testes."""
import pytest


def check_invariants(store, allow_zero_stock: bool = False):
    snap = store.snapshot()
    ids = [it.id for it in snap.items]
    assert len(ids) == len(set(ids))
    for it in snap.items:
        assert it.qty >= 1
        if not (allow_zero_stock and it.stock == 0):
            assert it.qty <= it.stock
    assert snap.total_unique == len(snap.items)
    assert snap.total_qty == sum(it.qty for it in snap.items)
    assert snap.total_price == pytest.approx(sum(it.price * it.qty for it in snap.items))
    return snap
