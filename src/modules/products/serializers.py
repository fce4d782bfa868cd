"""Product DRF serializers for API output.

Input never goes through these serializers: requests are checked by
``modules.products.validators`` and handed to the Service Layer as
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Single-product representation, bookkeeping timestamps included."""

    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductListSerializer(ProductSerializer):
    """Collection item representation, without bookkeeping timestamps."""

    class Meta(ProductSerializer.Meta):
        fields = ["id", "name", "price", "availability"]
        read_only_fields = fields
