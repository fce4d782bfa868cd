from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import CATALOG
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestSeedProducts:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_products", stdout=out)
        assert Product.objects.count() == len(CATALOG)
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_products", stdout=StringIO())
        call_command("seed_products", stdout=StringIO())
        assert Product.objects.count() == len(CATALOG)

    def test_clear_removes_existing_products(self, make_product):
        make_product(name="Temporal")
        call_command("seed_products", "--clear", stdout=StringIO())
        assert not Product.objects.filter(name="Temporal").exists()
        assert Product.objects.filter(availability=True).count() == len(CATALOG)
