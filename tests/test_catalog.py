import pytest
from kink import Container
from pydantic import ValidationError
from structlog.testing import capture_logs

from carrinho.core.catalog import InMemoryCatalog, load_catalog, map_product, map_products
from carrinho.core.di import bootstrap_di
from carrinho.core.settings import Settings
from carrinho.domain.services.cart_service import CartStore


def test_map_product_drops_extra_fields():
    item = map_product({"id": 7, "title": "Lamp", "price": 30, "thumbnail": "l.png", "stock": 4,
                        "brand": "Acme", "rating": 4.1, "description": "..."})
    assert item.model_dump() == {"id": 7, "title": "Lamp", "price": 30.0, "thumbnail": "l.png", "stock": 4}


def test_map_product_rejects_negative_stock():
    with pytest.raises(ValidationError):
        map_product({"id": 7, "title": "Lamp", "price": 30, "thumbnail": "", "stock": -1})


def test_map_products_keeps_order():
    raws = [{"id": i, "title": str(i), "price": 1, "thumbnail": "", "stock": 1} for i in (3, 1, 2)]
    assert [p.id for p in map_products(raws)] == [3, 1, 2]


def test_load_catalog_from_file(catalog_file):
    items = load_catalog(str(catalog_file))
    assert [i.id for i in items] == [1, 2]
    assert items[0].price == pytest.approx(9.99)


def test_load_catalog_missing_or_broken_file(tmp_path):
    assert load_catalog(str(tmp_path / "missing.json")) == []
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_catalog(str(broken)) == []


def test_in_memory_catalog(catalog_file):
    catalog = InMemoryCatalog(load_catalog(str(catalog_file)))
    assert len(catalog) == 2
    assert catalog.get_item(2).title == "Palette"
    assert catalog.get_item(99) is None


@pytest.mark.parametrize("content", [
    "null",
    "42",
    '"products"',
    '{"products": {"id": 1}}',
    '{"products": [{"id": 1, "title": "Lamp", "price": 10, "thumbnail": "", "stock": -1}]}',
    '{"products": [{"id": 1, "title": "Lamp", "price": -5, "thumbnail": "", "stock": 2}]}',
    '[1, 2]',
])
def test_load_catalog_invalid_documents_yield_empty(tmp_path, content):
    path = tmp_path / "catalog.json"
    path.write_text(content, encoding="utf-8")

    with capture_logs() as logs:
        assert load_catalog(str(path)) == []

    assert [e["event"] for e in logs] == ["catalog_load_failed"]
    assert logs[0]["log_level"] == "warning"


def test_load_catalog_accepts_bare_list(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text('[{"id": 5, "title": "Lamp", "price": 10, "thumbnail": "", "stock": 2}]', encoding="utf-8")
    assert [i.id for i in load_catalog(str(path))] == [5]


def test_bootstrap_di_survives_invalid_record(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text('{"products": [{"id": 1, "title": "Lamp", "price": -5, "thumbnail": "", "stock": 2}]}', encoding="utf-8")
    container = bootstrap_di(Container(), Settings(_env_file=None, catalog_path=str(path)))
    assert len(container["catalog"]) == 0
    assert isinstance(container[CartStore], CartStore)
