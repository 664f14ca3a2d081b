"""Domain layer - catalog entities and domain errors.

Example usage:
    from lookbook.domain import CatalogItem, ItemKind

    item = CatalogItem(
        id="prod_001",
        slug="classic-trench-coat",
        name="Classic Trench Coat",
        tags=frozenset({"outerwear", "classic"}),
    )
"""

from lookbook.domain.entities import CatalogItem, ItemKind
from lookbook.domain.exceptions import (
    CatalogValidationError,
    DomainError,
    InvalidPageSizeError,
    InvalidPriceRangeError,
)

__all__ = [
    # Entities
    "CatalogItem",
    "ItemKind",
    # Exceptions
    "CatalogValidationError",
    "DomainError",
    "InvalidPageSizeError",
    "InvalidPriceRangeError",
]
