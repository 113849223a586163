"""
Django admin configuration for products app.
"""

from django.contrib import admin

from products.infrastructure.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "brand_name", "price", "is_deleted", "created_at"]
    list_filter = ["is_deleted", "brand_name", "created_at", "updated_at"]
    search_fields = ["name", "brand_name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "brand_name", "price", "is_deleted"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def get_queryset(self, request):
        """Include soft-deleted products."""
        return Product.all_objects.all()
