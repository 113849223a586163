"""
Pytest configuration and shared fixtures.
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from products.domain.product import Product
from products.infrastructure.database_context import ProductDatabaseContext
from products.infrastructure.models import Product as ProductModel
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

SEED_PRODUCTS = [
    ("Laptop", "Dell", Decimal("1000.00")),
    ("Docking Station", "HP", Decimal("255.70")),
    ("Hard Drive", "Intel", Decimal("375.00")),
    ("Monitor", "Dell", Decimal("400.00")),
]


@pytest.fixture
def database_context():
    """Fixture for a soft-deleting ProductDatabaseContext."""
    return ProductDatabaseContext(soft_delete=True)


@pytest.fixture
def hard_delete_context():
    """Fixture for a ProductDatabaseContext that removes rows."""
    return ProductDatabaseContext(soft_delete=False)


@pytest.fixture
def product_repository(database_context):
    """Fixture for ProductRepository."""
    return DjangoProductRepository(database_context)


@pytest.fixture
def sample_product():
    """Fixture for a sample Product entity."""
    return Product.create(name="Keyboard", brand_name="Logitech", price=Decimal("49.99"))


@pytest.fixture
def seeded_products(db):
    """Fixture for the sample catalog saved in database."""
    return [
        ProductModel.objects.create(name=name, brand_name=brand_name, price=price)
        for name, brand_name, price in SEED_PRODUCTS
    ]


@pytest.fixture
def brand_fixture_products(db):
    """Fixture for five products, two of them under 'Brand Name Three'."""
    rows = [
        ("Product One", "Brand Name One", Decimal("10.00")),
        ("Product Two", "Brand Name Two", Decimal("20.00")),
        ("Product Three", "Brand Name Three", Decimal("30.00")),
        ("Product Four", "brand name three", Decimal("40.00")),
        ("Product Five", "Brand Name Five", Decimal("50.00")),
    ]
    return [
        ProductModel.objects.create(name=name, brand_name=brand_name, price=price)
        for name, brand_name, price in rows
    ]


@pytest.fixture
def api_client():
    """Fixture for API client."""
    return APIClient()
