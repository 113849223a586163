"""
Product model.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Lower


class ActiveProductManager(models.Manager):
    """Manager that hides soft-deleted products."""

    def get_queryset(self):
        return super().get_queryset().filter(is_deleted=False)


class Product(models.Model):
    """
    Represents a product in the catalog (e.g., Laptop by Dell).

    A product is identified by its name and brand name; the pair is unique
    among products that have not been deleted.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100, help_text="Product display name")
    brand_name = models.CharField(max_length=100, help_text="Brand the product is sold under")
    price = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveProductManager()
    all_objects = models.Manager()

    class Meta:
        db_table = "products"
        ordering = ["id"]
        base_manager_name = "all_objects"
        constraints = [
            models.UniqueConstraint(
                Lower("name"),
                Lower("brand_name"),
                condition=models.Q(is_deleted=False),
                name="uniq_product_name_brand_name",
            ),
        ]
        indexes = [
            models.Index(fields=["brand_name"], name="products_brand_name_idx"),
        ]

    def clean(self):
        """Validate product fields."""
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if not self.brand_name or not self.brand_name.strip():
            raise ValidationError("Brand name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.brand_name} - {self.name}"
