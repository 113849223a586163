"""
Django management command to seed the product catalog.

Creates the sample catalog (skipping products that already exist):
- Laptop (Dell)
- Docking Station (HP)
- Hard Drive (Intel)
- Monitor (Dell)
"""

import logging
from decimal import Decimal

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand
from django.db import transaction

from products.application.dto.product_dto import ProductDTO
from products.application.services.product_service import ProductService
from products.infrastructure.database_context import ProductDatabaseContext
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("Laptop", "Dell", Decimal("1000.00")),
    ("Docking Station", "HP", Decimal("255.70")),
    ("Hard Drive", "Intel", Decimal("375.00")),
    ("Monitor", "Dell", Decimal("400.00")),
]


class Command(BaseCommand):
    """Command to seed sample products."""

    help = "Seed the catalog with sample products"

    def handle(self, *args, **options):
        """Execute the command."""
        with transaction.atomic():
            created = async_to_sync(self.seed_products)()

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} product(s)"))

    async def seed_products(self) -> int:
        """Create each sample product that is not in the catalog yet."""
        service = ProductService(DjangoProductRepository(ProductDatabaseContext()))
        created = 0

        for name, brand_name, price in SAMPLE_PRODUCTS:
            existing = await service.get_product_by_name_and_brand(name, brand_name)
            if existing:
                # pylint: disable=no-member
                self.stdout.write(
                    self.style.WARNING(f"Product '{name}' ({brand_name}) already exists")
                )
                continue

            product = await service.create_product(
                ProductDTO(name=name, brand_name=brand_name, price=price)
            )
            created += 1
            # pylint: disable=no-member
            self.stdout.write(
                self.style.SUCCESS(f"Created product: {product.name} ({product.brand_name})")
            )

        logger.info("Seeded %d product(s)", created)
        return created
