
"""Portas hexagonais (interfaces) e DTOs do carrinho."""
from __future__ import annotations
from typing import Any, Protocol
from pydantic import BaseModel, ConfigDict, Field

class CatalogItem(BaseModel):
    """Produto fornecido pelo catálogo externo (somente leitura para o carrinho)."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str
    price: float = Field(ge=0)
    thumbnail: str = ""
    stock: int = Field(ge=0)

class CartLineItem(CatalogItem):
    """Item do carrinho: snapshot do produto no momento da inserção + quantidade.

    `stock` é o valor capturado na inserção; o carrinho não revalida.
    """
    qty: int = Field(ge=1)

class CartTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_unique: int = 0
    total_qty: int = 0
    total_price: float = 0.0

class CartSnapshot(BaseModel):
    """Estado imutável do carrinho após a última mutação."""
    model_config = ConfigDict(frozen=True)

    items: tuple[CartLineItem, ...] = ()
    total_unique: int = 0
    total_qty: int = 0
    total_price: float = 0.0
    version: int = 0

class CheckoutReceipt(BaseModel):
    """Resumo devolvido ao fechar a compra (o carrinho é esvaziado em seguida)."""
    model_config = ConfigDict(frozen=True)

    customer: dict[str, Any] = Field(default_factory=dict)
    items: tuple[CartLineItem, ...]
    total_qty: int
    total_price: float

class CatalogPort(Protocol):
    def get_item(self, item_id: int) -> CatalogItem | None: ...

class CartListener(Protocol):
    def __call__(self, snapshot: CartSnapshot) -> None: ...
