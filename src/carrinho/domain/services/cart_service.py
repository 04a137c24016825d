
"""Serviço de carrinho: estado em memória com quantidade limitada ao estoque.

Único dono do estado do carrinho. Toda mutação passa por aqui e preserva
`1 <= qty <= stock` por construção (exceção documentada: inserção com
stock = 0). Leituras devolvem snapshots imutáveis.
"""
from __future__ import annotations
import threading
from typing import Callable, Dict, List
from ...ports.interfaces import CatalogItem, CartLineItem, CartSnapshot, CartTotals, CartListener
from ...core.logging import get_logger
from ..results import CartResult
from .aggregates import compute_totals

log = get_logger("cart_store")

class CartStore:
    """Fonte única da verdade do carrinho de uma sessão.

    Listeners recebem snapshots em ordem crescente de versão; com várias
    threads, um snapshot superado antes da entrega é pulado. Um listener que
    muta o carrinho durante a entrega faz os listeners restantes verem só a
    versão mais nova.
    """

    def __init__(self) -> None:
        self._items: Dict[int, CartLineItem] = {}
        self._version = 0
        self._lock = threading.RLock()
        self._listeners: List[CartListener] = []
        self._notify_lock = threading.RLock()
        self._delivered_version = 0

    # --- Mutações ---
    def add_one(self, item: CatalogItem) -> CartResult:
        """Adiciona 1 unidade; se o item já existe, equivale a inc(item.id)."""
        with self._lock:
            if item.id in self._items:
                result, snap = self._inc(item.id)
            else:
                if item.stock == 0:
                    # comportamento herdado: entra com qty=1 mesmo sem estoque
                    log.warning("cart_zero_stock_insert", item_id=item.id)
                self._items[item.id] = CartLineItem(**item.model_dump(exclude={"qty"}), qty=1)
                result, snap = CartResult.OK, self._commit()
                log.info("cart_item_added", item_id=item.id, qty=1)
        if snap is not None:
            self._notify(snap)
        return result

    def inc(self, item_id: int) -> CartResult:
        """Incrementa qty em 1 se houver estoque; caso contrário não altera nada."""
        with self._lock:
            result, snap = self._inc(item_id)
        if snap is not None:
            self._notify(snap)
        return result

    def dec(self, item_id: int) -> CartResult:
        """Decrementa item e remove se zerar."""
        with self._lock:
            row = self._items.get(item_id)
            if row is None:
                return CartResult.NOT_FOUND
            if row.qty <= 1:
                del self._items[item_id]
            else:
                self._items[item_id] = row.model_copy(update={"qty": row.qty - 1})
            snap = self._commit()
        log.info("cart_item_decremented", item_id=item_id, qty=row.qty - 1)
        self._notify(snap)
        return CartResult.OK

    def remove(self, item_id: int) -> CartResult:
        with self._lock:
            if self._items.pop(item_id, None) is None:
                return CartResult.NOT_FOUND
            snap = self._commit()
        log.info("cart_item_removed", item_id=item_id)
        self._notify(snap)
        return CartResult.OK

    def clear(self) -> None:
        """Esvazia carrinho."""
        self.drain()

    def drain(self) -> CartSnapshot:
        """Devolve o snapshot atual e esvazia o carrinho numa única seção crítica."""
        with self._lock:
            before = self._build_snapshot()
            if not self._items:
                return before
            self._items.clear()
            snap = self._commit()
        log.info("cart_cleared", items=before.total_unique)
        self._notify(snap)
        return before

    # --- Consultas (nunca alteram estado) ---
    def qty_of(self, item_id: int) -> int:
        row = self._items.get(item_id)
        return row.qty if row else 0

    def get(self, item_id: int) -> CartLineItem | None:
        return self._items.get(item_id)

    def items(self) -> tuple[CartLineItem, ...]:
        """Lista itens atuais do carrinho em ordem de inserção."""
        with self._lock:
            return tuple(self._items.values())

    def can_inc(self, item_id: int) -> bool:
        row = self._items.get(item_id)
        return row is not None and row.qty < row.stock

    def totals(self) -> CartTotals:
        return compute_totals(self.items())

    def snapshot(self) -> CartSnapshot:
        """Snapshot consistente (itens + agregados) tirado sob o lock."""
        with self._lock:
            return self._build_snapshot()

    @property
    def version(self) -> int:
        return self._version

    # --- Assinaturas ---
    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Registra listener chamado após cada mutação efetiva; retorna função para cancelar."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return unsubscribe

    # --- Internos ---
    def _inc(self, item_id: int) -> tuple[CartResult, CartSnapshot | None]:
        row = self._items.get(item_id)
        if row is None:
            return CartResult.NOT_FOUND, None
        if row.qty >= row.stock:
            log.info("cart_out_of_stock", item_id=item_id, qty=row.qty, stock=row.stock)
            return CartResult.OUT_OF_STOCK, None
        self._items[item_id] = row.model_copy(update={"qty": row.qty + 1})
        log.info("cart_item_incremented", item_id=item_id, qty=row.qty + 1)
        return CartResult.OK, self._commit()

    def _build_snapshot(self) -> CartSnapshot:
        items = tuple(self._items.values())
        totals = compute_totals(items)
        return CartSnapshot(
            items=items,
            total_unique=totals.total_unique,
            total_qty=totals.total_qty,
            total_price=totals.total_price,
            version=self._version,
        )

    def _commit(self) -> CartSnapshot:
        self._version += 1
        return self._build_snapshot()

    def _notify(self, snap: CartSnapshot) -> None:
        # entrega em ordem de versão; snapshot mais antigo que o último entregue é descartado
        with self._notify_lock:
            if snap.version <= self._delivered_version:
                return
            self._delivered_version = snap.version
            with self._lock:
                listeners = list(self._listeners)
            for listener in listeners:
                if snap.version < self._delivered_version:
                    break
                listener(snap)
