"""Unit tests for the Product model.

Covers:
- Valid creation and defaults.
- Price > 0 validation (application + DB constraint).
- Empty or over-long name rejected by full_clean.
- Timestamp bookkeeping on partial saves.
- __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Cemento Holcim", price=Decimal("5900"))
        assert isinstance(p.id, int)
        assert p.name == "Cemento Holcim"
        assert p.price == Decimal("5900")
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_availability_defaults_to_true(self):
        p = Product.objects.create(name="Cal", price=Decimal("1.00"))
        p.refresh_from_db()
        assert p.availability is True

    def test_ids_are_increasing(self):
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        assert b.id > a.id

    def test_default_ordering_is_by_id(self):
        b = Product.objects.create(name="B", price=Decimal("1.00"))
        a = Product.objects.create(name="A", price=Decimal("1.00"))
        assert list(Product.objects.values_list("id", flat=True)) == [b.id, a.id]


class TestProductValidation:
    def test_full_clean_accepts_valid_product(self):
        Product(name="Arena", price=Decimal("10.00")).full_clean()

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_full_clean_rejects_non_positive_price(self, price):
        with pytest.raises(ValidationError) as exc_info:
            Product(name="Arena", price=price).full_clean()
        assert "price" in exc_info.value.message_dict

    def test_full_clean_rejects_blank_name(self):
        with pytest.raises(ValidationError) as exc_info:
            Product(name="   ", price=Decimal("1.00")).full_clean()
        assert "name" in exc_info.value.message_dict

    def test_full_clean_rejects_name_longer_than_column(self):
        with pytest.raises(ValidationError) as exc_info:
            Product(name="a" * 256, price=Decimal("1.00")).full_clean()
        assert "name" in exc_info.value.message_dict

    def test_db_constraint_rejects_non_positive_price(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Bad", price=Decimal("0"))


class TestTimestamps:
    def test_update_fields_refreshes_updated_at(self):
        p = Product.objects.create(name="Cal", price=Decimal("1.00"))
        before = p.updated_at
        p.availability = False
        p.save(update_fields=["availability"])
        p.refresh_from_db()
        assert p.availability is False
        assert p.updated_at >= before


def test_str():
    p = Product(id=3, name="Yeso", price=Decimal("1.00"))
    assert str(p) == "#3 - Yeso"
