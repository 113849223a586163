"""
Unit tests for Product domain entity.
"""

from decimal import Decimal

import pytest

from core.domain.value_objects import Price
from products.domain.product import Product


class TestProductEntity:
    """Tests for Product domain entity."""

    def test_create_product(self):
        """Test creating a product entity."""
        product = Product.create(name="Laptop", brand_name="Dell", price=Decimal("1000.00"))

        assert product.id is None
        assert product.name == "Laptop"
        assert product.brand_name == "Dell"
        assert product.price == Price(Decimal("1000.00"))
        assert product.is_deleted is False

    def test_create_product_with_id(self):
        """Test creating a product with specific ID."""
        product = Product.create(name="Laptop", brand_name="Dell", price="1000.00", product_id=7)

        assert product.id == 7

    def test_create_product_strips_whitespace(self):
        """Test names are trimmed."""
        product = Product.create(name="  Monitor ", brand_name=" Dell ", price="400.00")

        assert product.name == "Monitor"
        assert product.brand_name == "Dell"

    def test_empty_name(self):
        """Test empty name is rejected."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            Product.create(name="   ", brand_name="Dell", price="1.00")

    def test_missing_name(self):
        """Test missing name is rejected."""
        with pytest.raises(ValueError, match="required"):
            Product.create(name=None, brand_name="Dell", price="1.00")

    def test_empty_brand_name(self):
        """Test empty brand name is rejected."""
        with pytest.raises(ValueError, match="Brand name cannot be empty"):
            Product.create(name="Laptop", brand_name="", price="1.00")

    def test_name_too_long(self):
        """Test name longer than 100 characters is rejected."""
        with pytest.raises(ValueError, match="name too long"):
            Product.create(name="x" * 101, brand_name="Dell", price="1.00")

    def test_brand_name_too_long(self):
        """Test brand name longer than 100 characters is rejected."""
        with pytest.raises(ValueError, match="Brand name too long"):
            Product.create(name="Laptop", brand_name="x" * 101, price="1.00")

    def test_name_at_limit(self):
        """Test 100 character names are accepted."""
        product = Product.create(name="x" * 100, brand_name="y" * 100, price="1.00")
        assert len(product.name) == 100

    def test_invalid_price(self):
        """Test non-positive price is rejected."""
        with pytest.raises(ValueError, match="greater than zero"):
            Product.create(name="Laptop", brand_name="Dell", price="0.00")

    def test_product_is_immutable(self):
        """Test product cannot be modified in place."""
        product = Product.create(name="Laptop", brand_name="Dell", price="1000.00")
        with pytest.raises(AttributeError):
            product.name = "Desktop"

    def test_with_id(self):
        """Test copying a product with an id."""
        product = Product.create(name="Laptop", brand_name="Dell", price="1000.00")
        saved = product.with_id(3)

        assert saved.id == 3
        assert saved.name == product.name
        assert product.id is None
