"""
FastAPI dependencies shared by the routers
"""
from functools import lru_cache

from products_api.core.config import settings
from products_api.repositories.base import ProductStore
from products_api.repositories.memory_repository import InMemoryProductRepository
from products_api.repositories.product_repository import ProductRepository


@lru_cache(maxsize=1)
def _memory_store() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def get_product_store() -> ProductStore:
    """
    FastAPI dependency returning the configured product store

    Usage:
        @router.get("/products")
        def list_products(store: ProductStore = Depends(get_product_store)):
            ...
    """
    if settings.PRODUCT_STORE == "memory":
        return _memory_store()
    return ProductRepository()
