"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Iterable, Tuple


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


class ValidationError(DomainException):
    """Raised when a transfer object violates one or more field constraints."""

    def __init__(self, violations: Iterable, message: str = None):
        """
        Initialize validation error.

        Args:
            violations: Every ConstraintViolation found on the input
            message: Optional override for the summary message
        """
        self.violations: Tuple = tuple(violations)
        if message is None:
            message = "; ".join(str(violation) for violation in self.violations)
        super().__init__(message, code="VALIDATION_ERROR")


class NameAlreadyTakenError(DomainException):
    """Raised when creating an entity whose name is already in use."""

    def __init__(self, entity_name: str, name: str):
        super().__init__(
            f"{entity_name} name is already taken: {name}",
            code="NAME_ALREADY_TAKEN",
        )
        self.entity_name = entity_name
        self.name = name


class EntityNotFoundError(DomainException):
    """Base exception for lookups by id that find nothing."""

    def __init__(self, message: str = "Entity not found", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class BrandNotFoundError(EntityNotFoundError):
    """Raised when a brand is not found."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, message: str = "Category not found"):
        super().__init__(message, code="CATEGORY_NOT_FOUND")


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")
