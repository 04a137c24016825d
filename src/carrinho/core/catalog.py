
"""Carregador de catálogo (JSON) e mapeamento de produtos para CatalogItem.

- Fonte: config/catalog.json (formato {"products": [...]}, como a API de produtos)
- Fornece: map_product(), map_products(), load_catalog(), InMemoryCatalog
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List
import json
from pydantic import ValidationError
from ..ports.interfaces import CatalogItem
from .logging import get_logger

log = get_logger("catalog")

def map_product(raw: Dict[str, Any]) -> CatalogItem:
    """Converte um produto cru (com campos extras: rating, brand, ...) em CatalogItem."""
    return CatalogItem.model_validate(raw)

def map_products(raws: Iterable[Dict[str, Any]]) -> List[CatalogItem]:
    return [map_product(r) for r in raws]

def load_catalog(path: str) -> List[CatalogItem]:
    """Carrega o catálogo do disco. Arquivo ausente ou inválido resulta em catálogo vazio."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("catalog_load_failed", path=path, error=str(exc))
        return []
    if isinstance(data, dict):
        raws = data.get("products", [])
    else:
        raws = data
    if not isinstance(raws, list):
        log.warning("catalog_load_failed", path=path, error="documento sem lista de produtos")
        return []
    try:
        return map_products(raws)
    except ValidationError as exc:
        # um registro inválido descarta o arquivo inteiro
        log.warning("catalog_load_failed", path=path, error=str(exc))
        return []

class InMemoryCatalog:
    """CatalogPort sobre uma lista de produtos já carregada."""
    def __init__(self, items: Iterable[CatalogItem] = ()):
        self._by_id: Dict[int, CatalogItem] = {it.id: it for it in items}

    def get_item(self, item_id: int) -> CatalogItem | None:
        return self._by_id.get(item_id)

    def __len__(self) -> int:
        return len(self._by_id)
