"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities
and the field rules applied to incoming product payloads.

Author: TM3
Date: 2025-10-17
"""
from products_api.domain.product import Product, ProductData
from products_api.domain.validation import ProductValidationError, parse_product, validate_product

__all__ = ['Product', 'ProductData', 'ProductValidationError', 'parse_product', 'validate_product']
