"""Product repository interface.

Extends ``IRepository[Product, int]``: products are keyed by their
application-level integer ``id``, never by the store's internal ``_id``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product aggregate."""
