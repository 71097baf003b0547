"""Unit tests for the Product document schema."""

from __future__ import annotations

import pytest
from mongoengine.errors import NotUniqueError, ValidationError

from modules.products.models import Product

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {
        "product_id": 1,
        "name": "Widget",
        "price": 19.99,
        "currency": "USD",
        "image": "widget.png",
    }
    defaults.update(overrides)
    return Product(**defaults)


class TestProductDocument:
    def test_collection_name(self):
        assert Product._get_collection_name() == "products"

    def test_application_id_stored_as_id(self):
        son = _make_product(product_id=9).to_mongo()
        assert son["id"] == 9

    @pytest.mark.parametrize(
        "field", ["product_id", "name", "price", "currency", "image"]
    )
    def test_required_fields(self, field):
        product = _make_product(**{field: None})
        with pytest.raises(ValidationError):
            product.validate()

    def test_unique_id_index(self):
        _make_product().save()
        with pytest.raises(NotUniqueError):
            _make_product(name="Clone").save()

    def test_str(self):
        assert str(_make_product()) == "1 - Widget"
