"""
Products API Endpoints
Handles product listing, lookup, creation, update and deletion

Every handler delegates to the configured ProductStore. Store failures are
logged and reported with a generic message; the client never sees the
underlying error.

Author: TM3
Date: 2025-10-03
Updated: 2025-10-17 (refactor: use ProductStore for data access)
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from products_api.api.deps import get_product_store
from products_api.domain.product import ProductData
from products_api.domain.validation import parse_product
from products_api.repositories.base import ProductStore

logger = logging.getLogger(__name__)

router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


def validated_product(payload: Any = Body(None)) -> ProductData:
    """
    Dependency that validates the request body before the handler runs

    Raises ProductValidationError (rendered as 400) listing every violated rule
    """
    return parse_product(payload)


@router.get("")
def get_products(store: ProductStore = Depends(get_product_store)):
    """Get all products"""
    try:
        products = store.get_all_products()
        return [product.to_dict() for product in products]

    except Exception as e:
        logger.error(f"Error fetching products: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to retrieve products")


@router.get("/{product_id}")
def get_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Get a single product by ID"""
    try:
        product = store.get_product_by_id(product_id)

        if not product:
            raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)

        return product.to_dict()

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to retrieve product")


@router.post("", status_code=201)
def create_product(
    data: ProductData = Depends(validated_product),
    store: ProductStore = Depends(get_product_store),
):
    """
    Create a new product

    Body must carry a non-empty name and category and a positive price.
    Returns the stored product, including the id assigned by the store.
    """
    try:
        product = store.create_product(data)
        return product.to_dict()

    except Exception as e:
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create product")


@router.put("/{product_id}")
def update_product(
    product_id: str,
    data: ProductData = Depends(validated_product),
    store: ProductStore = Depends(get_product_store),
):
    """
    Replace name, price and category of an existing product

    The body is validated with the same rules as creation.
    """
    try:
        product = store.update_product(product_id, data)

        if not product:
            raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)

        return product.to_dict()

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update product")


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Delete a product by ID"""
    try:
        deleted = store.delete_product(product_id)

        if not deleted:
            raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)

        return Response(status_code=204)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete product")
