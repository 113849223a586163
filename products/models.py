"""
Django models for the products app.

Models live in the infrastructure layer; they are imported here so that
Django's app registry and migrations pick them up.
"""

from products.infrastructure.models import Product

__all__ = ["Product"]
