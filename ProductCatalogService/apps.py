"""
App configuration for Product Catalog Service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class ProductCatalogServiceConfig(AppConfig):
    """App configuration for ProductCatalogService."""

    name = "ProductCatalogService"
    verbose_name = "Product Catalog Service"

    def ready(self):
        """Called when Django starts."""
        logger.info(
            "Product catalog ready (soft delete %s)",
            "enabled" if settings.CATALOG_SOFT_DELETE else "disabled",
        )
