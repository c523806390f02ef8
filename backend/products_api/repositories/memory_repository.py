"""
In-memory product store

Keeps products in a process-local dictionary. Used for local development
(PRODUCT_STORE=memory) and as the store behind the API tests.
"""
import itertools
import logging
import threading
from typing import Dict, List, Optional

from products_api.domain.product import Product, ProductData
from products_api.repositories.base import ProductStore, coerce_product_id

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductStore):
    """Product store backed by a dictionary, ids assigned from 1 upwards"""

    def __init__(self):
        self._store: Dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        logger.info("Using in-memory product store")

    def get_all_products(self) -> List[Product]:
        with self._lock:
            return [self._store[key] for key in sorted(self._store)]

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        key = coerce_product_id(product_id)
        if key is None:
            return None
        with self._lock:
            return self._store.get(key)

    def create_product(self, data: ProductData) -> Product:
        with self._lock:
            product = Product(id=next(self._ids), **data.model_dump())
            self._store[product.id] = product
        logger.info(f"Created product {product.id}")
        return product

    def update_product(self, product_id: str, data: ProductData) -> Optional[Product]:
        key = coerce_product_id(product_id)
        if key is None:
            return None
        with self._lock:
            if key not in self._store:
                return None
            product = Product(id=key, **data.model_dump())
            self._store[key] = product
        logger.info(f"Updated product {key}")
        return product

    def delete_product(self, product_id: str) -> bool:
        key = coerce_product_id(product_id)
        if key is None:
            return False
        with self._lock:
            removed = self._store.pop(key, None) is not None
        if removed:
            logger.info(f"Deleted product {key}")
        return removed

    def ping(self) -> None:
        return None
