"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from django.db.models import Q

from products.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Predicates are Django ``Q`` objects over the product fields.
    """

    @abstractmethod
    async def exists(self, predicate: Q, include_deleted: bool = False) -> bool:
        """
        Check if at least one product matches the predicate.

        Args:
            predicate: Filter over product fields
            include_deleted: Also consider soft-deleted products

        Returns:
            True if a product matches, False otherwise
        """
        pass

    @abstractmethod
    async def list(
        self, predicate: Optional[Q] = None, include_deleted: bool = False
    ) -> List[Product]:
        """
        List products, ordered by id.

        Args:
            predicate: Optional filter; all products when omitted
            include_deleted: Also return soft-deleted products

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def get(self, predicate: Q, include_deleted: bool = False) -> Optional[Product]:
        """
        Get the first product matching the predicate.

        Args:
            predicate: Filter over product fields (required)
            include_deleted: Also consider soft-deleted products

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Insert a product.

        Args:
            product: Product entity to insert

        Returns:
            Product entity with its store-assigned id
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """
        Replace an existing product, keyed by id.

        Args:
            product: Product entity carrying the new values

        Returns:
            Updated product entity
        """
        pass

    @abstractmethod
    async def delete(self, product: Product) -> bool:
        """
        Delete a product, keyed by id.

        Args:
            product: Product entity to delete

        Returns:
            True once the delete is saved
        """
        pass
