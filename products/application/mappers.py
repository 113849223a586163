"""
Mapping between Product entities and DTOs.
"""

from products.application.dto.product_dto import ProductDTO
from products.domain.product import Product


class ProductMapper:
    """Translate products across the service boundary."""

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        """Copy an entity into a DTO."""
        return ProductDTO(
            id=product.id,
            name=product.name,
            brand_name=product.brand_name,
            price=product.price.value,
        )

    @staticmethod
    def to_entity(dto: ProductDTO) -> Product:
        """
        Build an entity from a DTO.

        Raises:
            ValueError: If the DTO does not describe a valid product
        """
        return Product.create(
            name=dto.name,
            brand_name=dto.brand_name,
            price=dto.price,
            product_id=dto.id,
        )
