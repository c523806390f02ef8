"""
Repository Layer - Data Access

This layer handles all storage access and returns domain models.
Repositories abstract away SQL details from the request handlers.

Author: TM3
Date: 2025-10-17
"""
from products_api.repositories.base import ProductStore
from products_api.repositories.memory_repository import InMemoryProductRepository
from products_api.repositories.product_repository import ProductRepository

__all__ = [
    'ProductStore',
    'ProductRepository',
    'InMemoryProductRepository',
]
