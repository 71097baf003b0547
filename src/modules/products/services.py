"""Product service layer (Use Cases).

Orchestrates the Product aggregate, delegating persistence to the
injected ``IProductRepository``.  There is no business logic beyond
pass-through and null-checking: presence validation happens at the API
boundary before ``save_product`` is called.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.exceptions import ProductAlreadyExists

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save_product(self, dto: CreateProductDTO) -> Product:
        """Persist a new product.  Does not re-validate ``dto``.

        Raises:
            ProductAlreadyExists: if ``id`` is already taken.
        """
        log = logger.bind(product_id=dto.id)

        if self._repo.get_by_id(dto.id):
            log.warning("product.duplicate_id")
            raise ProductAlreadyExists(f"Product {dto.id} already exists.")

        product = self._repo.create(dto.model_dump())
        log.info("product.created")
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Optional[Product]:
        """Replace the supplied fields of product ``id``.

        Returns ``None`` when no product matches.
        """
        log = logger.bind(product_id=id)
        product = self._repo.update(id, dto.changes())
        if product is None:
            log.info("product.update_missed")
            return None
        log.info("product.updated", fields=sorted(dto.changes()))
        return product

    def delete_product(self, id: int) -> bool:
        """Delete product ``id``.

        Always returns ``True``: a delete that matched nothing is not
        reported as a miss.
        """
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_products(self) -> List[Product]:
        """Return every product, unfiltered and unpaginated."""
        return self._repo.list()

    def get_product_by_id(self, id: int) -> Optional[Product]:
        """Return product ``id`` or ``None``."""
        product = self._repo.get_by_id(id)
        if product is not None:
            logger.info("product.retrieved", product_id=id)
        return product
