"""Required-field check run before every create."""

from __future__ import annotations

from typing import Any, Optional

from modules.products.models import PRODUCT_FIELDS

REQUIRED_FIELDS_MESSAGE = "All fields are required!"


def validate_product(product: Any) -> Optional[str]:
    """Return an error message if any product field is missing or falsy."""
    if not isinstance(product, dict):
        return REQUIRED_FIELDS_MESSAGE
    if not all(product.get(field) for field in PRODUCT_FIELDS):
        return REQUIRED_FIELDS_MESSAGE
    return None
