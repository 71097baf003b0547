"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain outcomes are translated into HTTP status codes here; anything
unexpected propagates to ``modules.core.exceptions.api_exception_handler``,
which logs it and answers a generic 500.
"""

from __future__ import annotations

import re

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.permissions import IsAdmin
from modules.products.dtos import (
    CreateProductDTO,
    UpdateProductDTO,
    describe_validation_error,
)
from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import MAX_PRODUCT_ID, MIN_PRODUCT_ID
from modules.products.repositories.mongo_repository import ProductMongoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import validate_product

INVALID_ID_MESSAGE = "Invalid Product Id"
NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted successfully!"

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_product_id(raw: str | None) -> int | None:
    """Strict base-10 integer parsing of a path parameter."""
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)


def is_storable_id(product_id: int) -> bool:
    """Whether ``product_id`` fits the store's 8-byte integers.

    A well-formed id outside that range cannot match any document.
    """
    return MIN_PRODUCT_ID <= product_id <= MAX_PRODUCT_ID


def _error(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductMongoRepository`` (DIP).
    Listing and reading are public; writes require the admin role.
    """

    serializer_class = ProductSerializer
    admin_actions = frozenset({"create", "update", "destroy"})

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductMongoRepository())

    def get_permissions(self):
        if self.action in self.admin_actions:
            return [IsAdmin()]
        return [AllowAny()]

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products/all"""
        products = self._service.get_all_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product_id = parse_product_id(pk)
        if product_id is None:
            return _error(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)
        if not is_storable_id(product_id):
            return _error(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

        product = self._service.get_product_by_id(product_id)
        if product is None:
            return _error(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products/save"""
        data = request.data

        validation_error = validate_product(data)
        if validation_error:
            return _error(validation_error, status.HTTP_400_BAD_REQUEST)

        try:
            dto = CreateProductDTO.model_validate(data)
        except PydanticValidationError as exc:
            return _error(describe_validation_error(exc), status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.save_product(dto)
        except ProductAlreadyExists as exc:
            return _error(str(exc), status.HTTP_409_CONFLICT)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/update/{pk}"""
        product_id = parse_product_id(pk)
        if product_id is None:
            return _error(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)

        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _error(describe_validation_error(exc), status.HTTP_400_BAD_REQUEST)

        if not is_storable_id(product_id):
            return _error(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

        try:
            product = self._service.update_product(product_id, dto)
        except ProductAlreadyExists as exc:
            return _error(str(exc), status.HTTP_409_CONFLICT)

        if product is None:
            return _error(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/delete/{pk}"""
        product_id = parse_product_id(pk)
        if product_id is None:
            return _error(INVALID_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)
        if not is_storable_id(product_id):
            return Response({"message": DELETED_MESSAGE})

        # The service reports success even when nothing matched.
        if not self._service.delete_product(product_id):
            return _error(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response({"message": DELETED_MESSAGE})
