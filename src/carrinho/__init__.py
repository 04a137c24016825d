"""Motor de estado do carrinho de compras (em memória, uma sessão por store)."""
from .domain.results import CartResult
from .domain.services.cart_service import CartStore
from .ports.interfaces import CatalogItem, CartLineItem, CartSnapshot
from .api.facade import CartFacade, use_cart

__all__ = ["CartResult", "CartStore", "CatalogItem", "CartLineItem", "CartSnapshot", "CartFacade", "use_cart"]
