import json
import pytest
from kink import Container

from carrinho.core.catalog import InMemoryCatalog
from carrinho.core.settings import Settings
from carrinho.domain.services.cart_service import CartStore
from carrinho.api.facade import CartFacade
from carrinho.ports.interfaces import CatalogItem


@pytest.fixture
def item_a() -> CatalogItem:
    return CatalogItem(id=1, title="iPhone 15", price=10, thumbnail="iphone.jpg", stock=5)


@pytest.fixture
def item_b() -> CatalogItem:
    return CatalogItem(id=2, title="MacBook Pro", price=20, thumbnail="macbook.jpg", stock=3)


@pytest.fixture
def sold_out() -> CatalogItem:
    return CatalogItem(id=9, title="Powder Canister", price=14.99, thumbnail="powder.jpg", stock=0)


@pytest.fixture
def store() -> CartStore:
    return CartStore()


@pytest.fixture
def catalog(item_a, item_b, sold_out) -> InMemoryCatalog:
    return InMemoryCatalog([item_a, item_b, sold_out])


@pytest.fixture
def facade(store, catalog) -> CartFacade:
    return CartFacade(store, catalog)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "products": [
            {"id": 1, "title": "Mascara", "price": 9.99, "thumbnail": "m.png", "stock": 5, "brand": "Essence", "rating": 4.9},
            {"id": 2, "title": "Palette", "price": 19.99, "thumbnail": "p.png", "stock": 3, "category": "beauty"},
        ]
    }), encoding="utf-8")
    return path


@pytest.fixture
def container(catalog_file) -> Container:
    from carrinho.core.di import bootstrap_di
    return bootstrap_di(Container(), Settings(_env_file=None, catalog_path=str(catalog_file)))
