"""
Product domain entity.

This is the core domain entity representing a catalog product.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from core.domain.value_objects import Price

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Represents a product sold under a brand at a given price.
    This is an immutable value object; updates produce new instances.
    """

    id: Optional[int]
    name: str
    brand_name: str
    price: Price
    is_deleted: bool = False

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError("Product name too long")
        if not self.brand_name or len(self.brand_name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.brand_name) > MAX_NAME_LENGTH:
            raise ValueError("Brand name too long")
        if not isinstance(self.price, Price):
            raise ValueError("Price must be a Price value object")

    @classmethod
    def create(
        cls,
        name: str,
        brand_name: str,
        price: Union[Decimal, str, int],
        product_id: Optional[int] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            brand_name: Brand the product is sold under
            price: Positive price
            product_id: Optional id (assigned by the store if not provided)

        Returns:
            Product entity instance
        """
        if name is None or brand_name is None:
            raise ValueError("Product name and brand name are required")
        return cls(
            id=product_id,
            name=name.strip(),
            brand_name=brand_name.strip(),
            price=Price(price),
        )

    def with_id(self, product_id: int) -> "Product":
        """Return a copy of this product carrying the store-assigned id."""
        return Product(
            id=product_id,
            name=self.name,
            brand_name=self.brand_name,
            price=self.price,
            is_deleted=self.is_deleted,
        )
