"""
Unit tests for InMemoryProductRepository
"""
from decimal import Decimal

from products_api.domain.product import ProductData
from products_api.repositories.memory_repository import InMemoryProductRepository


def _data(name="Granola", price="4.50", category="GRANOLAS"):
    return ProductData(name=name, price=Decimal(price), category=category)


class TestInMemoryProductRepository:
    """Test the in-memory store against the ProductStore contract"""

    def test_create_assigns_increasing_ids(self):
        repo = InMemoryProductRepository()

        first = repo.create_product(_data())
        second = repo.create_product(_data(name="Barra"))

        assert (first.id, second.id) == (1, 2)
        assert [product.name for product in repo.get_all_products()] == ["Granola", "Barra"]

    def test_ids_are_not_reused_after_delete(self):
        repo = InMemoryProductRepository()
        repo.create_product(_data())
        repo.delete_product("1")

        assert repo.create_product(_data()).id == 2

    def test_update_keeps_id(self):
        repo = InMemoryProductRepository()
        repo.create_product(_data())

        updated = repo.update_product("1", _data(name="Granola Cacao", price="5"))

        assert updated.id == 1
        assert repo.get_product_by_id("1").name == "Granola Cacao"

    def test_missing_ids(self):
        repo = InMemoryProductRepository()

        assert repo.get_product_by_id("1") is None
        assert repo.update_product("1", _data()) is None
        assert repo.delete_product("1") is False
        assert repo.get_product_by_id("abc") is None
