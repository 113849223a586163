"""
Persistence context for products.

A small unit of work over the Django ORM. Model instances are attached to the
context with a pending state and written together by ``save_changes()``
inside a single transaction. The context also keeps the instances it has
loaded so that two in-memory copies of the same row are never tracked at
once.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from core.domain.exceptions import (
    ConcurrencyConflictError,
    ConstraintViolationError,
    TrackingConflictError,
)
from products.infrastructure.models import Product as ProductModel

logger = logging.getLogger(__name__)


class EntityState(Enum):
    """Tracking state of a model instance."""

    DETACHED = "detached"
    UNCHANGED = "unchanged"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


PENDING_STATES = (EntityState.ADDED, EntityState.MODIFIED, EntityState.DELETED)


@dataclass
class _Entry:
    model: ProductModel
    state: EntityState


class ProductDatabaseContext:
    """
    Unit of work over the products table.

    Build one per request; instances are not safe to share between requests.
    """

    def __init__(self, soft_delete: Optional[bool] = None, using: str = DEFAULT_DB_ALIAS):
        """
        Initialize context.

        Args:
            soft_delete: Flag deleted rows instead of removing them.
                Defaults to the CATALOG_SOFT_DELETE setting.
            using: Database alias
        """
        if soft_delete is None:
            soft_delete = getattr(settings, "CATALOG_SOFT_DELETE", True)
        self.soft_delete = soft_delete
        self.using = using
        self._entries: List[_Entry] = []

    def products(self, include_deleted: bool = False) -> QuerySet:
        """Untracked query source, without soft-deleted rows unless asked."""
        manager = ProductModel.all_objects if include_deleted else ProductModel.objects
        return manager.using(self.using).all()

    @property
    def local(self) -> List[ProductModel]:
        """Instances currently tracked by the context."""
        return [entry.model for entry in self._entries]

    def find_local(self, pk) -> Optional[ProductModel]:
        """Return the tracked instance with the given identity, if any."""
        if pk is None:
            return None
        entry = self._find_entry_by_pk(pk)
        return entry.model if entry else None

    def track(self, model: ProductModel) -> ProductModel:
        """
        Track an instance loaded from the store.

        If an instance with the same identity is already tracked, that
        instance is returned instead.
        """
        existing = self._find_entry_by_pk(model.pk)
        if existing is not None:
            return existing.model
        self._entries.append(_Entry(model=model, state=EntityState.UNCHANGED))
        return model

    def add(self, model: ProductModel) -> None:
        """Attach an instance to be inserted."""
        self._attach(model, EntityState.ADDED)

    def update(self, model: ProductModel) -> None:
        """Attach an instance to be written over its stored row."""
        self._attach(model, EntityState.MODIFIED)

    def remove(self, model: ProductModel) -> None:
        """Attach an instance to be deleted."""
        self._attach(model, EntityState.DELETED)

    def detach(self, model: ProductModel) -> None:
        """Stop tracking an instance."""
        self._entries = [entry for entry in self._entries if entry.model is not model]

    def entry_state(self, model: ProductModel) -> EntityState:
        """Return the tracking state of an instance."""
        entry = self._find_entry(model)
        return entry.state if entry else EntityState.DETACHED

    def save_changes(self) -> int:
        """
        Write all pending changes in one transaction.

        Returns:
            Number of rows affected

        Raises:
            ConcurrencyConflictError: An update or delete matched no row
            ConstraintViolationError: A row broke a field or uniqueness constraint
        """
        pending = [entry for entry in self._entries if entry.state in PENDING_STATES]
        if not pending:
            return 0

        affected = 0
        try:
            with transaction.atomic(using=self.using):
                for entry in pending:
                    affected += self._flush(entry)
        except IntegrityError as e:
            raise ConstraintViolationError(str(e)) from e
        except ValidationError as e:
            raise ConstraintViolationError("; ".join(e.messages)) from e

        for entry in pending:
            if entry.state is EntityState.DELETED:
                self.detach(entry.model)
            else:
                entry.state = EntityState.UNCHANGED

        logger.debug("Saved %d product change(s)", affected)
        return affected

    def _flush(self, entry: _Entry) -> int:
        model = entry.model

        if entry.state is EntityState.ADDED:
            model.save(force_insert=True, using=self.using)
            return 1

        if entry.state is EntityState.DELETED and self.soft_delete:
            model.is_deleted = True
            entry.state = EntityState.MODIFIED

        if entry.state is EntityState.MODIFIED:
            model.clean_fields()
            model.clean()
            rows = (
                ProductModel.all_objects.using(self.using)
                .filter(pk=model.pk, is_deleted=False)
                .update(
                    name=model.name,
                    brand_name=model.brand_name,
                    price=model.price,
                    is_deleted=model.is_deleted,
                    updated_at=timezone.now(),
                )
            )
        else:
            rows, _ = (
                ProductModel.all_objects.using(self.using)
                .filter(pk=model.pk, is_deleted=False)
                .delete()
            )

        if rows == 0:
            raise ConcurrencyConflictError()
        return rows

    def _attach(self, model: ProductModel, state: EntityState) -> None:
        entry = self._find_entry(model)
        if entry is not None:
            if entry.state is EntityState.ADDED and state is EntityState.DELETED:
                self.detach(model)
            elif entry.state is not EntityState.ADDED:
                entry.state = state
            return

        if model.pk is not None and self._find_entry_by_pk(model.pk) is not None:
            raise TrackingConflictError(
                "The instance of entity type 'Product' cannot be tracked because another "
                f"instance with the key value '{{id: {model.pk}}}' is already being tracked."
            )
        self._entries.append(_Entry(model=model, state=state))

    def _find_entry(self, model: ProductModel) -> Optional[_Entry]:
        for entry in self._entries:
            if entry.model is model:
                return entry
        return None

    def _find_entry_by_pk(self, pk) -> Optional[_Entry]:
        for entry in self._entries:
            if entry.model.pk is not None and str(entry.model.pk) == str(pk):
                return entry
        return None
