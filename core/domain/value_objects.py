"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Price(ValueObject):
    """Product price value object."""

    value: Decimal

    def __post_init__(self):
        """Normalize and validate the amount."""
        try:
            amount = Decimal(str(self.value))
        except (InvalidOperation, TypeError, ValueError):
            raise ValueError(f"Invalid price: {self.value}") from None
        if not amount.is_finite():
            raise ValueError(f"Invalid price: {self.value}")
        if amount <= 0:
            raise ValueError("Price must be greater than zero")
        # frozen dataclass: bypass __setattr__ to store the normalized amount
        object.__setattr__(self, "value", amount)

    def __str__(self) -> str:
        """Return price as string."""
        return str(self.value)
