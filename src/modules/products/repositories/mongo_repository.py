"""MongoDB implementation of the Product repository.

Satisfies ``IProductRepository`` using mongoengine querysets.
Error handling follows the Null Object pattern: look-ups and updates
return ``None`` instead of raising HTTP-level exceptions; the Service
Layer decides how to translate a missing entity into an API response.
Every call is a single-document operation, atomic in MongoDB.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from mongoengine.errors import NotUniqueError

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _to_document_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Rename the public ``id`` key to the document attribute."""
    fields = dict(data)
    if "id" in fields:
        fields["product_id"] = fields.pop("id")
    return fields


class ProductMongoRepository(IProductRepository):
    """Concrete Product repository backed by a mongoengine ``Document``."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects(product_id=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects)

    def create(self, data: Dict[str, Any]) -> Product:
        """Insert a new product document.

        Raises:
            ProductAlreadyExists: if the unique index on ``id`` rejects it.
        """
        product = Product(**_to_document_fields(data))
        try:
            product.save(force_insert=True)
        except NotUniqueError as exc:
            raise ProductAlreadyExists(
                f"Product {data.get('id')} already exists."
            ) from exc
        logger.info("product.saved", product_id=product.product_id)
        return product

    def update(self, id: int, changes: Dict[str, Any]) -> Optional[Product]:
        """Set ``changes`` on the matching document and return it.

        Top-level fields are replaced as a whole.  With no changes the
        current document is returned untouched.
        """
        if not changes:
            return self.get_by_id(id)
        update = {
            f"set__{field}": value
            for field, value in _to_document_fields(changes).items()
        }
        try:
            product = Product.objects(product_id=id).modify(new=True, **update)
        except NotUniqueError as exc:
            raise ProductAlreadyExists(
                f"Product {changes.get('id')} already exists."
            ) from exc
        if product is not None:
            logger.info("product.modified", product_id=product.product_id)
        return product

    def delete(self, id: int) -> int:
        deleted = Product.objects(product_id=id).delete()
        logger.info("product.removed", product_id=id, deleted=deleted)
        return deleted
