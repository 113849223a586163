"""
Integration tests for the seed_products management command.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from products.infrastructure.models import Product


@pytest.mark.django_db
@pytest.mark.integration
class TestSeedProductsCommand:
    """Integration tests for seed_products."""

    def test_seed_products(self):
        """Test the sample catalog is created."""
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert list(Product.objects.values_list("name", "brand_name")) == [
            ("Laptop", "Dell"),
            ("Docking Station", "HP"),
            ("Hard Drive", "Intel"),
            ("Monitor", "Dell"),
        ]
        assert "Seeded 4 product(s)" in out.getvalue()

    def test_seed_products_skips_existing(self, seeded_products):
        """Test products already in the catalog are skipped."""
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == 4
        assert "Seeded 0 product(s)" in out.getvalue()
