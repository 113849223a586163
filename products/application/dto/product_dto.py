"""
Product DTOs passed between the application service and its callers.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class ProductDTO:
    """DTO for product information."""

    name: str
    brand_name: str
    price: Decimal
    id: Optional[int] = None
