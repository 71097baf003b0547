"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Input goes through the Pydantic DTOs in ``dtos.py`` instead.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read-only representation of a Product document."""

    id = serializers.IntegerField(source="product_id", read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.FloatField(read_only=True)
    currency = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)
