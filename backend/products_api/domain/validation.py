"""
Product payload validation

Checks the incoming request body before anything reaches the store and
collects every violated rule, so a client sees all problems in one response.
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any, List

from products_api.domain.product import ProductData

NAME_REQUIRED = "Product name is required"
PRICE_INVALID = "Product price must be a positive number"
CATEGORY_REQUIRED = "Product category is required"


class ProductValidationError(Exception):
    """Raised when a product payload breaks one or more field rules"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _to_positive_decimal(value: Any):
    """Return the value as a positive finite Decimal, or None if it isn't one"""
    # bool is an int subclass; True must not count as a price of 1
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # Decimal accepts "1_000"; a price string must be a plain number
        if not value or "_" in value:
            return None
    elif not isinstance(value, (int, float, Decimal)):
        return None

    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None

    if not number.is_finite() or number <= 0:
        return None
    # Prices are served as JSON floats, so they must fit one
    as_float = float(number)
    if not math.isfinite(as_float) or as_float <= 0:
        return None
    return number


def validate_product(payload: Any) -> List[str]:
    """
    Check a product payload and return the list of violated rules

    Args:
        payload: Decoded request body (anything other than a dict counts as empty)

    Returns:
        Error messages in rule order: name, price, category. Empty when valid.
    """
    if not isinstance(payload, dict):
        payload = {}

    errors = []

    if not _is_non_blank_string(payload.get('name')):
        errors.append(NAME_REQUIRED)

    if _to_positive_decimal(payload.get('price')) is None:
        errors.append(PRICE_INVALID)

    if not _is_non_blank_string(payload.get('category')):
        errors.append(CATEGORY_REQUIRED)

    return errors


def parse_product(payload: Any) -> ProductData:
    """
    Validate a payload and build the ProductData handed to the store

    Raises:
        ProductValidationError: with every violated rule
    """
    errors = validate_product(payload)
    if errors:
        raise ProductValidationError(errors)

    return ProductData(
        name=payload['name'],
        price=_to_positive_decimal(payload['price']),
        category=payload['category'],
    )
