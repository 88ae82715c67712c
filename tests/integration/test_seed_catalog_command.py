"""
Integration tests for the seed_catalog management command.
"""
from io import StringIO

import pytest
from django.core.management import call_command

from brands.infrastructure.models import Brand as BrandModel
from categories.infrastructure.models import Category as CategoryModel
from products.infrastructure.models import Product as ProductModel


@pytest.mark.django_db
@pytest.mark.integration
class TestSeedCatalogCommand:
    """Tests for seed_catalog."""

    def test_seeds_catalog(self):
        """Test the command creates a brand, a category tree and a product."""
        out = StringIO()

        call_command("seed_catalog", stdout=out)

        product = ProductModel.objects.get(name="Sample Phone")
        assert product.brand.name == "Sample Brand"
        assert product.category.name == "Phones"
        assert product.category.parent_category.name == "Electronics"
        assert product.price == 499.99
        assert product.quantity == 10
        assert "Catalog Seed Summary" in out.getvalue()

    def test_custom_options(self):
        """Test names and stock figures come from the options."""
        call_command(
            "seed_catalog",
            brand_name="Acme",
            product_name="Anvil",
            price=12.5,
            quantity=0,
            stdout=StringIO(),
        )

        product = ProductModel.objects.get(name="Anvil")
        assert product.brand.name == "Acme"
        assert product.price == 12.5
        assert product.quantity == 0

    def test_rerun_reuses_existing(self):
        """Test a second run creates nothing new."""
        call_command("seed_catalog", stdout=StringIO())
        out = StringIO()

        call_command("seed_catalog", stdout=out)

        assert BrandModel.objects.count() == 1
        assert CategoryModel.objects.count() == 2
        assert ProductModel.objects.count() == 1
        assert "already exists" in out.getvalue()
