"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models and
writes through a ProductDatabaseContext.
"""

import logging
from contextlib import contextmanager
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db.models import Q

from core.domain.exceptions import InvalidArgumentError
from core.domain.value_objects import Price
from products.domain.product import Product
from products.infrastructure.database_context import ProductDatabaseContext
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@contextmanager
def _log_failure(operation: str):
    try:
        yield
    except Exception:
        logger.critical("Product repository %s failed", operation, exc_info=True)
        raise


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Tracks loaded and written models in its persistence context
    4. Detaches a tracked copy before attaching the caller's instance
    """

    def __init__(self, database_context: Optional[ProductDatabaseContext] = None):
        """
        Initialize repository.

        Args:
            database_context: Persistence context (a new one if not provided)
        """
        self.database_context = database_context or ProductDatabaseContext()

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            brand_name=model.brand_name,
            price=Price(model.price),
            is_deleted=model.is_deleted,
        )

    def _to_model(self, product: Product) -> ProductModel:
        """
        Convert domain entity to an unsaved Django model.

        Args:
            product: Product domain entity

        Returns:
            Django Product model
        """
        return ProductModel(
            id=product.id,
            name=product.name,
            brand_name=product.brand_name,
            price=product.price.value,
            is_deleted=product.is_deleted,
        )

    def _save(self, model: ProductModel) -> None:
        """Save pending changes, untracking the model if the write fails."""
        try:
            self.database_context.save_changes()
        except Exception:
            self.database_context.detach(model)
            raise

    def _detach_local_copy(self, product_id) -> None:
        """Detach the tracked instance sharing the product's identity, if any."""
        local = self.database_context.find_local(product_id)
        if local is not None:
            self.database_context.detach(local)

    @sync_to_async
    def exists(self, predicate: Q, include_deleted: bool = False) -> bool:
        """
        Check if at least one product matches the predicate.

        Args:
            predicate: Filter over product fields
            include_deleted: Also consider soft-deleted products

        Returns:
            True if a product matches, False otherwise
        """
        with _log_failure("exists"):
            queryset = self.database_context.products(include_deleted)
            if predicate is not None:
                queryset = queryset.filter(predicate)
            return queryset.exists()

    @sync_to_async
    def list(self, predicate: Optional[Q] = None, include_deleted: bool = False) -> List[Product]:
        """
        List products, ordered by id.

        Args:
            predicate: Optional filter; all products when omitted
            include_deleted: Also return soft-deleted products

        Returns:
            List of Product entities
        """
        with _log_failure("list"):
            queryset = self.database_context.products(include_deleted)
            if predicate is not None:
                queryset = queryset.filter(predicate)
            return [
                self._to_domain(self.database_context.track(model))
                for model in queryset.order_by("id")
            ]

    @sync_to_async
    def get(self, predicate: Q, include_deleted: bool = False) -> Optional[Product]:
        """
        Get the first product matching the predicate.

        Args:
            predicate: Filter over product fields
            include_deleted: Also consider soft-deleted products

        Returns:
            Product entity or None if not found
        """
        if predicate is None:
            raise InvalidArgumentError("A predicate is required to get a product")

        with _log_failure("get"):
            model = (
                self.database_context.products(include_deleted)
                .filter(predicate)
                .order_by("id")
                .first()
            )
            if model is None:
                return None
            return self._to_domain(self.database_context.track(model))

    @sync_to_async
    def create(self, product: Product) -> Product:
        """
        Insert a product.

        Args:
            product: Product entity to insert

        Returns:
            Product entity with its store-assigned id
        """
        with _log_failure("create"):
            model = self._to_model(product)
            self.database_context.add(model)
            self._save(model)
            return self._to_domain(model)

    @sync_to_async
    def update(self, product: Product) -> Product:
        """
        Replace an existing product, keyed by id.

        Args:
            product: Product entity carrying the new values

        Returns:
            Updated product entity
        """
        with _log_failure("update"):
            self._detach_local_copy(product.id)
            model = self._to_model(product)
            self.database_context.update(model)
            self._save(model)
            return self._to_domain(model)

    @sync_to_async
    def delete(self, product: Product) -> bool:
        """
        Delete a product, keyed by id.

        Soft-deletes unless the persistence context is configured for
        physical deletes.

        Args:
            product: Product entity to delete

        Returns:
            True once the delete is saved
        """
        with _log_failure("delete"):
            self._detach_local_copy(product.id)
            model = self._to_model(product)
            self.database_context.remove(model)
            self._save(model)
            return True
