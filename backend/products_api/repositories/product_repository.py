"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
Expects a `products` table with columns id (SERIAL), name, price (NUMERIC)
and category.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import List, Optional

from products_api.core.database import get_db_connection_dict_with_retry
from products_api.domain.product import Product, ProductData
from products_api.repositories.base import ProductStore, coerce_product_id

logger = logging.getLogger(__name__)


class ProductRepository(ProductStore):
    """
    PostgreSQL repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Helper method to map database row to Product domain model"""
        return Product(
            id=row['id'],
            name=row['name'],
            price=row['price'],
            category=row['category'],
        )

    def get_all_products(self) -> List[Product]:
        """
        Find all products

        Returns:
            List of products ordered by id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, price, category
                FROM products
                ORDER BY id
            """)

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product ID as received in the URL

        Returns:
            Product or None if not found
        """
        key = coerce_product_id(product_id)
        if key is None:
            return None

        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, price, category
                FROM products
                WHERE id = %s
            """, (key,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_product(row)

        finally:
            cursor.close()
            conn.close()

    def create_product(self, data: ProductData) -> Product:
        """
        Insert a new product

        Args:
            data: Validated product fields

        Returns:
            The stored product, including its new id
        """
        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO products (name, price, category)
                VALUES (%s, %s, %s)
                RETURNING id, name, price, category
            """, (data.name, data.price, data.category))

            row = cursor.fetchone()
            conn.commit()

            product = self._map_row_to_product(row)
            logger.info(f"Created product {product.id}")
            return product

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update_product(self, product_id: str, data: ProductData) -> Optional[Product]:
        """
        Replace name, price and category of an existing product

        Args:
            product_id: Product ID as received in the URL
            data: Validated product fields

        Returns:
            Updated product or None if not found
        """
        key = coerce_product_id(product_id)
        if key is None:
            return None

        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE products
                SET name = %s,
                    price = %s,
                    category = %s
                WHERE id = %s
                RETURNING id, name, price, category
            """, (data.name, data.price, data.category, key))

            row = cursor.fetchone()
            conn.commit()

            if not row:
                return None

            logger.info(f"Updated product {key}")
            return self._map_row_to_product(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete_product(self, product_id: str) -> bool:
        """
        Delete a product by ID

        Returns:
            True if a row was deleted
        """
        key = coerce_product_id(product_id)
        if key is None:
            return False

        conn = get_db_connection_dict_with_retry()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM products WHERE id = %s", (key,))
            deleted = cursor.rowcount > 0
            conn.commit()

            if deleted:
                logger.info(f"Deleted product {key}")
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def ping(self) -> None:
        """Run a trivial query to confirm the database answers"""
        conn = get_db_connection_dict_with_retry(max_retries=1)
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        finally:
            cursor.close()
            conn.close()
