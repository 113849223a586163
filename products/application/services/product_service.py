"""
Product application service.

Wraps the product repository one-to-one: arguments are checked, entities are
translated to DTOs, and repository failures are logged and re-raised.
"""

import logging
from typing import List, Optional

from django.db.models import Q

from core.domain.exceptions import InvalidArgumentError
from products.application.dto.product_dto import ProductDTO
from products.application.mappers import ProductMapper
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _require(value, name: str) -> None:
    """Reject a missing or blank argument."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{name} is required")


class ProductService:
    """Service for reading and writing catalog products."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize service with repository."""
        self.product_repository = product_repository

    async def list_products(self) -> List[ProductDTO]:
        """List every product."""
        try:
            products = await self.product_repository.list()
        except Exception as e:
            logger.error("Failed to list products: %s", e)
            raise
        return [ProductMapper.to_dto(product) for product in products]

    async def list_products_by_brand_name(self, brand_name: str) -> List[ProductDTO]:
        """
        List products sold under a brand.

        Args:
            brand_name: Brand name, matched case-insensitively

        Returns:
            List of ProductDTO
        """
        _require(brand_name, "brand_name")
        try:
            products = await self.product_repository.list(Q(brand_name__iexact=brand_name))
        except Exception as e:
            logger.error("Failed to list products for brand %r: %s", brand_name, e)
            raise
        return [ProductMapper.to_dto(product) for product in products]

    async def get_product_by_id(self, product_id: int) -> Optional[ProductDTO]:
        """
        Get a product by id.

        Returns:
            ProductDTO or None if not found
        """
        _require(product_id, "product_id")
        try:
            product = await self.product_repository.get(Q(id=product_id))
        except Exception as e:
            logger.error("Failed to get product %s: %s", product_id, e)
            raise
        return ProductMapper.to_dto(product) if product else None

    async def get_product_by_name(self, name: str) -> Optional[ProductDTO]:
        """
        Get a product by name, matched case-insensitively.

        Returns:
            ProductDTO or None if not found
        """
        _require(name, "name")
        try:
            product = await self.product_repository.get(Q(name__iexact=name))
        except Exception as e:
            logger.error("Failed to get product by name %r: %s", name, e)
            raise
        return ProductMapper.to_dto(product) if product else None

    async def get_product_by_name_and_brand(
        self, name: str, brand_name: str
    ) -> Optional[ProductDTO]:
        """
        Get a product by name and brand name, both matched case-insensitively.

        Returns:
            ProductDTO or None if not found
        """
        _require(name, "name")
        _require(brand_name, "brand_name")
        try:
            product = await self.product_repository.get(
                Q(name__iexact=name) & Q(brand_name__iexact=brand_name)
            )
        except Exception as e:
            logger.error(
                "Failed to get product by name %r and brand %r: %s", name, brand_name, e
            )
            raise
        return ProductMapper.to_dto(product) if product else None

    async def create_product(self, dto: ProductDTO) -> ProductDTO:
        """
        Create a product.

        Args:
            dto: Product values; the id may be left empty

        Returns:
            ProductDTO with the store-assigned id

        Raises:
            InvalidArgumentError: If the DTO is missing or invalid
            ConstraintViolationError: If the name and brand name are taken
        """
        product = self._to_entity(dto)
        try:
            created = await self.product_repository.create(product)
        except Exception as e:
            logger.error("Failed to create product %r (%r): %s", dto.name, dto.brand_name, e)
            raise
        logger.info("Product created", extra={"product_id": created.id})
        return ProductMapper.to_dto(created)

    async def update_product(self, dto: ProductDTO) -> ProductDTO:
        """
        Replace a product, keyed by the DTO id.

        Raises:
            InvalidArgumentError: If the DTO is missing or invalid
            ConcurrencyConflictError: If no product has the id
        """
        product = self._to_entity(dto)
        _require(product.id, "id")
        try:
            updated = await self.product_repository.update(product)
        except Exception as e:
            logger.error("Failed to update product %s: %s", dto.id, e)
            raise
        logger.info("Product updated", extra={"product_id": updated.id})
        return ProductMapper.to_dto(updated)

    async def delete_product(self, dto: ProductDTO) -> bool:
        """
        Delete a product, keyed by the DTO id.

        Raises:
            InvalidArgumentError: If the DTO is missing or invalid
            ConcurrencyConflictError: If no product has the id
        """
        product = self._to_entity(dto)
        _require(product.id, "id")
        try:
            deleted = await self.product_repository.delete(product)
        except Exception as e:
            logger.error("Failed to delete product %s: %s", dto.id, e)
            raise
        logger.info("Product deleted", extra={"product_id": product.id})
        return deleted

    @staticmethod
    def _to_entity(dto: ProductDTO) -> Product:
        _require(dto, "product")
        try:
            return ProductMapper.to_entity(dto)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
