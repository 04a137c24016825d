
"""Fachada de acesso ao carrinho: única superfície pública para consumidores.

Várias fachadas sobre o mesmo CartStore compartilham o estado; toda leitura
depois de uma mutação vê o snapshot pós-mutação.
"""
from __future__ import annotations
from typing import Any, Callable, Dict
from kink import di
from ..core.logging import get_logger, set_session_id
from ..domain.results import CartResult
from ..domain.services.cart_service import CartStore
from ..ports.interfaces import CatalogItem, CatalogPort, CartLineItem, CartListener, CartSnapshot, CheckoutReceipt
from ..runtime.actions import ActionRegistry, build_cart_actions

log = get_logger("cart_facade")

class CartFacade:
    def __init__(self, store: CartStore, catalog: CatalogPort | None = None):
        self._store = store
        self._catalog = catalog
        self._actions: ActionRegistry = build_cart_actions(store)

    # --- Leitura ---
    @property
    def snapshot(self) -> CartSnapshot:
        return self._store.snapshot()

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return self._store.items()

    @property
    def total_unique(self) -> int:
        return self._store.totals().total_unique

    @property
    def total_qty(self) -> int:
        return self._store.totals().total_qty

    @property
    def total_price(self) -> float:
        return self._store.totals().total_price

    def qty_of(self, item_id: int) -> int:
        return self._store.qty_of(item_id)

    def can_inc(self, item_id: int) -> bool:
        return self._store.can_inc(item_id)

    # --- Escrita ---
    def add_one(self, item: CatalogItem) -> CartResult:
        return self._store.add_one(item)

    def add_by_id(self, item_id: int) -> CartResult:
        """Resolve o produto no catálogo e adiciona 1 unidade."""
        item = self._catalog.get_item(item_id) if self._catalog else None
        if item is None:
            log.info("cart_catalog_miss", item_id=item_id)
            return CartResult.NOT_FOUND
        return self._store.add_one(item)

    def inc(self, item_id: int) -> CartResult:
        return self._store.inc(item_id)

    def dec(self, item_id: int) -> CartResult:
        return self._store.dec(item_id)

    def remove(self, item_id: int) -> CartResult:
        return self._store.remove(item_id)

    def clear(self) -> None:
        self._store.clear()

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        return self._store.subscribe(listener)

    def dispatch(self, action: str, arguments: dict | None = None) -> Any:
        """Executa ação nomeada (add_one, inc, dec, remove, clear) com argumentos validados."""
        return self._actions.execute(action, arguments)

    def dispatch_json(self, action: str, arguments_json: str) -> str:
        return self._actions.execute_json(action, arguments_json)

    def checkout(self, customer: Dict[str, Any] | None = None) -> CheckoutReceipt | None:
        """Fecha a compra: devolve o resumo e esvazia o carrinho. Carrinho vazio: None."""
        snap = self._store.drain()
        if not snap.items:
            log.info("checkout_empty_cart")
            return None
        receipt = CheckoutReceipt(
            customer=dict(customer or {}),
            items=snap.items,
            total_qty=snap.total_qty,
            total_price=snap.total_price,
        )
        log.info("checkout", customer=receipt.customer, items=[i.model_dump() for i in receipt.items], total_price=receipt.total_price)
        return receipt

def use_cart(container=di) -> CartFacade:
    """Fachada ligada ao CartStore e ao catálogo registrados no container (ver bootstrap_di)."""
    if "session_id" in container:
        set_session_id(container["session_id"])
    catalog = container["catalog"] if "catalog" in container else None
    return CartFacade(container[CartStore], catalog)
