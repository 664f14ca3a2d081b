"""Domain exceptions.

Errors raised by the catalog query engine when a request violates
one of its hard rules. Everything else (unknown sort keys, out-of-range
pages, filters that match nothing) degrades to a default instead of
raising.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Query Errors
# ============================================================================


class CatalogValidationError(DomainError):
    """Raised when catalog query parameters are rejected.

    Covers a non-positive page size and an inverted price range.
    """

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        """Initialize catalog validation error.

        Args:
            field: Name of the offending query parameter.
            message: Explanation of why the value was rejected.
            value: The rejected value.
        """
        super().__init__(
            message,
            details={"field": field, "value": value},
        )
        self.field = field
        self.value = value


class InvalidPageSizeError(CatalogValidationError):
    """Raised when a page size (limit) is zero or negative."""

    def __init__(self, limit: int) -> None:
        """Initialize invalid page size error.

        Args:
            limit: The rejected page size.
        """
        super().__init__(
            "limit",
            f"Invalid limit {limit}: limit must be a positive integer",
            value=limit,
        )


class InvalidPriceRangeError(CatalogValidationError):
    """Raised when the minimum price is greater than the maximum price."""

    def __init__(self, min_price: Any, max_price: Any) -> None:
        """Initialize invalid price range error.

        Args:
            min_price: Requested lower bound.
            max_price: Requested upper bound.
        """
        super().__init__(
            "minPrice",
            f"Invalid price range: minPrice {min_price} is greater than maxPrice {max_price}",
            value={"min_price": str(min_price), "max_price": str(max_price)},
        )
