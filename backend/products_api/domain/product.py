"""
Product Domain Model

Represents a product record managed by the API.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product domain model - a stored product record

    Fields:
        id: Identifier assigned by the persistence layer
        name: Product name
        price: Unit price (always positive)
        category: Product category
    """

    id: int = Field(..., description="Identifier assigned by the store")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price", gt=0)
    category: str = Field(..., description="Product category")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """
        Convert to a JSON-ready dictionary

        Decimal price is converted to float for JSON compatibility
        """
        data = self.model_dump()
        data['price'] = float(data['price'])
        return data


class ProductData(BaseModel):
    """Validated payload for creating or replacing a product"""
    name: str
    price: Decimal = Field(..., gt=0)
    category: str
