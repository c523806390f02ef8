"""
Product store interface

Every data-access collaborator used by the products router implements
this contract. Identifiers arrive from the URL as opaque strings; a store
reports an identifier it cannot interpret as absent, never as an error.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from products_api.domain.product import Product, ProductData

# Upper bound of a PostgreSQL SERIAL column
MAX_PRODUCT_ID = 2 ** 31 - 1


def coerce_product_id(product_id) -> Optional[int]:
    """
    Convert an opaque identifier to the integer key used by the bundled stores

    Returns:
        Integer id, or None if the value can never match a stored product
    """
    if isinstance(product_id, bool):
        return None
    try:
        value = int(str(product_id).strip())
    except (TypeError, ValueError):
        return None
    if value < 1 or value > MAX_PRODUCT_ID:
        return None
    return value


class ProductStore(ABC):
    """Base class for product data-access collaborators"""

    @abstractmethod
    def get_all_products(self) -> List[Product]:
        """Return every stored product"""

    @abstractmethod
    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find one product

        Returns:
            Product or None if not found
        """

    @abstractmethod
    def create_product(self, data: ProductData) -> Product:
        """Store a new product and return it with its assigned id"""

    @abstractmethod
    def update_product(self, product_id: str, data: ProductData) -> Optional[Product]:
        """
        Replace the fields of an existing product

        Returns:
            Updated product or None if not found
        """

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        """
        Delete a product

        Returns:
            True if a product was removed, False if it did not exist
        """

    @abstractmethod
    def ping(self) -> None:
        """Raise if the backing store is unreachable"""
