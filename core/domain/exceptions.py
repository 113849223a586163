"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidArgumentError(DomainException):
    """Raised when a required argument is missing or blank."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, code="INVALID_ARGUMENT")


class ProductException(DomainException):
    """Base exception for product persistence errors."""

    pass


class ConstraintViolationError(ProductException):
    """Raised when a write breaks a store constraint (e.g. duplicate name and brand)."""

    def __init__(self, message: str = "Product constraint violated"):
        super().__init__(message, code="CONSTRAINT_VIOLATION")


class ConcurrencyConflictError(ProductException):
    """Raised when an update or delete matches no row in the store."""

    def __init__(
        self,
        message: str = (
            "Database operation expected to affect 1 row(s) but actually affected 0 row(s). "
            "Data may have been modified or deleted since entities were loaded."
        ),
        code: str = "CONCURRENCY_CONFLICT",
    ):
        super().__init__(message, code=code)


class TrackingConflictError(ConcurrencyConflictError):
    """Raised when two in-memory instances claim the same tracked identity."""

    def __init__(
        self, message: str = "Another instance with the same key is already being tracked"
    ):
        super().__init__(message, code="TRACKING_CONFLICT")
