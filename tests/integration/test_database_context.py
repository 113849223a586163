"""
Integration tests for ProductDatabaseContext.
"""

from decimal import Decimal

import pytest

from core.domain.exceptions import (
    ConcurrencyConflictError,
    ConstraintViolationError,
    TrackingConflictError,
)
from products.infrastructure.database_context import EntityState, ProductDatabaseContext
from products.infrastructure.models import Product as ProductModel


def _model(**fields):
    values = {"name": "Keyboard", "brand_name": "Logitech", "price": Decimal("49.99")}
    values.update(fields)
    return ProductModel(**values)


@pytest.mark.django_db
@pytest.mark.integration
class TestTracking:
    """Tests for entity tracking."""

    def test_add_tracks_instance(self, database_context):
        """Test attached instances are tracked with their state."""
        model = _model()
        database_context.add(model)

        assert database_context.entry_state(model) is EntityState.ADDED
        assert database_context.local == [model]

    def test_untracked_instance_is_detached(self, database_context):
        """Test unknown instances report DETACHED."""
        assert database_context.entry_state(_model()) is EntityState.DETACHED

    def test_track_returns_existing_instance(self, database_context, seeded_products):
        """Test loading the same row twice yields the tracked instance."""
        first = database_context.track(database_context.products().get(pk=seeded_products[0].pk))
        second = database_context.track(database_context.products().get(pk=seeded_products[0].pk))

        assert second is first
        assert database_context.find_local(seeded_products[0].pk) is first

    def test_attaching_second_instance_conflicts(self, database_context, seeded_products):
        """Test a distinct instance with a tracked identity cannot be attached."""
        row = seeded_products[0]
        database_context.track(database_context.products().get(pk=row.pk))

        with pytest.raises(TrackingConflictError):
            database_context.update(_model(id=row.pk, name="Laptop", brand_name="Dell"))

    def test_detach_then_attach(self, database_context, seeded_products):
        """Test detaching the tracked copy allows attaching a new one."""
        row = seeded_products[0]
        tracked = database_context.track(database_context.products().get(pk=row.pk))
        database_context.detach(tracked)

        replacement = _model(id=row.pk, name="Laptop", brand_name="Dell", price=Decimal("900.00"))
        database_context.update(replacement)

        assert database_context.entry_state(tracked) is EntityState.DETACHED
        assert database_context.entry_state(replacement) is EntityState.MODIFIED

    def test_removing_added_instance_cancels_insert(self, database_context):
        """Test removing an unsaved instance just stops tracking it."""
        model = _model()
        database_context.add(model)
        database_context.remove(model)

        assert database_context.entry_state(model) is EntityState.DETACHED
        assert database_context.save_changes() == 0


@pytest.mark.django_db
@pytest.mark.integration
class TestSaveChanges:
    """Tests for flushing pending changes."""

    def test_insert(self, database_context):
        """Test added instances are inserted and become unchanged."""
        model = _model()
        database_context.add(model)

        assert database_context.save_changes() == 1
        assert model.pk is not None
        assert database_context.entry_state(model) is EntityState.UNCHANGED
        assert ProductModel.objects.filter(name="Keyboard").count() == 1

    def test_nothing_pending(self, database_context):
        """Test saving with no changes affects no rows."""
        assert database_context.save_changes() == 0

    def test_update(self, database_context, seeded_products):
        """Test modified instances are written over their row."""
        row = seeded_products[3]
        database_context.update(
            _model(id=row.pk, name="Monitor", brand_name="Dell", price=Decimal("450.00"))
        )

        assert database_context.save_changes() == 1
        assert ProductModel.objects.get(pk=row.pk).price == Decimal("450.00")

    def test_update_missing_row(self, database_context):
        """Test updating a missing row is a concurrency conflict."""
        database_context.update(_model(id=999999))

        with pytest.raises(ConcurrencyConflictError):
            database_context.save_changes()
        assert not ProductModel.all_objects.filter(pk=999999).exists()

    def test_soft_delete(self, database_context, seeded_products):
        """Test deletes flag the row instead of removing it."""
        row = seeded_products[0]
        model = database_context.products().get(pk=row.pk)
        database_context.remove(model)

        assert database_context.save_changes() == 1
        assert not database_context.products().filter(pk=row.pk).exists()
        assert database_context.products(include_deleted=True).get(pk=row.pk).is_deleted is True

    def test_soft_delete_twice(self, database_context, seeded_products):
        """Test deleting an already deleted row is a concurrency conflict."""
        row = seeded_products[0]
        ProductModel.all_objects.filter(pk=row.pk).update(is_deleted=True)
        database_context.remove(_model(id=row.pk, name="Laptop", brand_name="Dell"))

        with pytest.raises(ConcurrencyConflictError):
            database_context.save_changes()

    def test_hard_delete(self, hard_delete_context, seeded_products):
        """Test physical deletes remove the row and stop tracking it."""
        row = seeded_products[0]
        model = hard_delete_context.products().get(pk=row.pk)
        hard_delete_context.remove(model)

        assert hard_delete_context.save_changes() == 1
        assert not ProductModel.all_objects.filter(pk=row.pk).exists()
        assert hard_delete_context.entry_state(model) is EntityState.DETACHED

    def test_hard_delete_missing_row(self, hard_delete_context):
        """Test deleting a missing row is a concurrency conflict."""
        hard_delete_context.remove(_model(id=999999))

        with pytest.raises(ConcurrencyConflictError):
            hard_delete_context.save_changes()

    def test_duplicate_insert(self, database_context, seeded_products):
        """Test inserting a taken name and brand name is a constraint violation."""
        database_context.add(_model(name="Laptop", brand_name="Dell"))

        with pytest.raises(ConstraintViolationError):
            database_context.save_changes()
        assert ProductModel.objects.filter(name="Laptop", brand_name="Dell").count() == 1

    def test_duplicate_update(self, database_context, seeded_products):
        """Test renaming onto a taken name and brand name is a constraint violation."""
        monitor = seeded_products[3]
        database_context.update(_model(id=monitor.pk, name="Laptop", brand_name="Dell"))

        with pytest.raises(ConstraintViolationError):
            database_context.save_changes()
        assert ProductModel.objects.get(pk=monitor.pk).name == "Monitor"

    def test_duplicate_update_ignores_case(self, database_context, seeded_products):
        """Test renaming onto a taken name and brand name in another case is a violation."""
        monitor = seeded_products[3]
        database_context.update(_model(id=monitor.pk, name="LAPTOP", brand_name="dell"))

        with pytest.raises(ConstraintViolationError):
            database_context.save_changes()
        assert ProductModel.objects.get(pk=monitor.pk).name == "Monitor"

    def test_invalid_field(self, database_context):
        """Test field validation failures are constraint violations."""
        database_context.add(_model(name="x" * 101))

        with pytest.raises(ConstraintViolationError):
            database_context.save_changes()

    def test_name_reusable_after_soft_delete(self, database_context, seeded_products):
        """Test uniqueness only applies to rows that are not deleted."""
        row = seeded_products[0]
        database_context.remove(database_context.products().get(pk=row.pk))
        database_context.save_changes()

        database_context.add(_model(name="Laptop", brand_name="Dell", price=Decimal("999.00")))

        assert database_context.save_changes() == 1
        assert ProductModel.all_objects.filter(name="Laptop", brand_name="Dell").count() == 2

    def test_failed_batch_rolls_back(self, database_context, seeded_products):
        """Test one failing entry rolls back the whole batch."""
        database_context.add(_model(name="Mouse"))
        database_context.update(_model(id=999999))

        with pytest.raises(ConcurrencyConflictError):
            database_context.save_changes()
        assert not ProductModel.objects.filter(name="Mouse").exists()

    def test_soft_delete_defaults_to_setting(self, settings):
        """Test the delete mode follows CATALOG_SOFT_DELETE."""
        settings.CATALOG_SOFT_DELETE = False
        assert ProductDatabaseContext().soft_delete is False

        settings.CATALOG_SOFT_DELETE = True
        assert ProductDatabaseContext().soft_delete is True
