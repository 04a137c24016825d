
"""Agregados derivados do carrinho (sempre recalculados a partir dos itens)."""
from __future__ import annotations
from functools import lru_cache
from typing import Iterable
from ...ports.interfaces import CartLineItem, CartTotals

@lru_cache(maxsize=64)
def _totals(items: tuple[CartLineItem, ...]) -> CartTotals:
    return CartTotals(
        total_unique=len(items),
        total_qty=sum(i.qty for i in items),
        total_price=sum(i.price * i.qty for i in items),
    )

def compute_totals(items: Iterable[CartLineItem]) -> CartTotals:
    """Calcula total_unique, total_qty e total_price.

    Função pura; memoizada pela tupla (imutável) de itens, então leituras
    repetidas do mesmo estado não recalculam.
    """
    return _totals(tuple(items))
