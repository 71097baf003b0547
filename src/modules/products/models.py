"""Product document stored in MongoDB.

The schema mirrors the public resource one to one.  ``product_id`` is the
application-level identifier, stored under the ``id`` key with a unique
index; the store's own ``_id`` never leaves the persistence layer.
"""

from __future__ import annotations

from mongoengine import Document, FloatField, IntField, StringField

PRODUCT_FIELDS = ("id", "name", "price", "currency", "image")

# BSON stores integers in at most 8 bytes
MIN_PRODUCT_ID = -(2**63)
MAX_PRODUCT_ID = 2**63 - 1


class Product(Document):
    """Product aggregate root."""

    product_id = IntField(
        db_field="id",
        required=True,
        unique=True,
        min_value=MIN_PRODUCT_ID,
        max_value=MAX_PRODUCT_ID,
    )
    name = StringField(required=True)
    price = FloatField(required=True)
    currency = StringField(required=True)
    image = StringField(required=True)

    meta = {"collection": "products"}

    def __str__(self) -> str:
        return f"{self.product_id} - {self.name}"
