"""Sort key normalization.

Maps user-facing sort keys onto an explicit (field, direction) pair.
Only fields listed in ``SortField`` ever reach the storage layer.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import structlog

from lookbook.domain.entities import CatalogItem

logger = structlog.get_logger()


class SortField(str, Enum):
    """Fields a catalog listing can be ordered by."""

    CREATED_AT = "created_at"
    PRICE = "price"
    NAME = "name"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Normalized ordering for a catalog query.

    Ties on ``field`` are always broken by item id ascending so that
    paging through a listing is deterministic.
    """

    field: SortField
    direction: SortDirection

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


DEFAULT_SORT_KEY = "newest"
DEFAULT_SORT = SortSpec(SortField.CREATED_AT, SortDirection.DESC)

SORT_KEYS: dict[str, SortSpec] = {
    "newest": DEFAULT_SORT,
    "oldest": SortSpec(SortField.CREATED_AT, SortDirection.ASC),
    "price-low": SortSpec(SortField.PRICE, SortDirection.ASC),
    "price-high": SortSpec(SortField.PRICE, SortDirection.DESC),
    "name": SortSpec(SortField.NAME, SortDirection.ASC),
    # Field-style keys used by the moodboard listing
    "createdAt": DEFAULT_SORT,
    "created_at": DEFAULT_SORT,
}


def normalize_sort(sort_by: str | None) -> SortSpec:
    """Resolve a sort key to a SortSpec.

    Unknown keys fall back to newest-first instead of raising, since
    they come straight from URL query parameters.

    Args:
        sort_by: Sort key such as "newest" or "price-low".

    Returns:
        Normalized sort spec.
    """
    if not sort_by:
        return DEFAULT_SORT

    spec = SORT_KEYS.get(sort_by.strip())
    if spec is None:
        logger.debug("Unknown sort key, using default", sort_by=sort_by, default=DEFAULT_SORT_KEY)
        return DEFAULT_SORT
    return spec


def sort_items(items: Iterable[CatalogItem], spec: SortSpec) -> list[CatalogItem]:
    """Order items in memory according to a SortSpec.

    Null prices go last in both directions and names compare
    case-insensitively. The id tiebreak is always ascending.
    """
    # Stable sorts: tiebreak first, primary key last
    ordered = sorted(items, key=lambda item: item.id)

    if spec.field is SortField.PRICE:
        priced = [item for item in ordered if item.price is not None]
        unpriced = [item for item in ordered if item.price is None]
        priced.sort(key=lambda item: item.price, reverse=spec.descending)
        return priced + unpriced

    if spec.field is SortField.NAME:
        ordered.sort(key=lambda item: item.name.casefold(), reverse=spec.descending)
        return ordered

    ordered.sort(key=lambda item: item.created_at, reverse=spec.descending)
    return ordered
