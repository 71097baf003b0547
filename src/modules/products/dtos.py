"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modules.products.models import MAX_PRODUCT_ID, MIN_PRODUCT_ID

ProductId = Annotated[int, Field(ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID)]


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Presence of every field is checked beforehand by
    ``validators.validate_product``; this model only enforces types.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: ProductId
    name: str
    price: float
    currency: str
    image: str


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: ProductId | None = None
    name: str | None = None
    price: float | None = None
    currency: str | None = None
    image: str | None = None

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly present in the request body."""
        return self.model_dump(exclude_unset=True)


def describe_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic error into one message naming the first field."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "body"
    return f"Invalid value for '{field}': {error['msg']}"
