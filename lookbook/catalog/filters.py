"""Catalog filter options and predicate composition.

FilterOptions carries the raw listing parameters. ``compose`` folds
them into a single conjunctive CatalogPredicate that can be evaluated
against an item in memory or translated into a SQL WHERE clause by the
repository.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Self

from lookbook.catalog.pagination import DEFAULT_PAGE_SIZE
from lookbook.domain.entities import CatalogItem
from lookbook.domain.exceptions import InvalidPriceRangeError


@dataclass
class FilterOptions:
    """Filter, sort and pagination parameters for a catalog listing.

    Every field is optional; ``None`` means no constraint on that
    dimension. ``page`` and ``limit`` are applied last.

    Attributes:
        category: Exact category match.
        brand: Exact brand match.
        tag: Tag the item must carry.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        sort_by: Sort key (newest, price-low, price-high, name).
        search: Free-text query.
        page: Page number (1-indexed).
        limit: Items per page.
    """

    category: str | None = None
    brand: str | None = None
    tag: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_by: str | None = None
    search: str | None = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_query(cls, params: Mapping[str, Any], default_limit: int = DEFAULT_PAGE_SIZE) -> Self:
        """Parse raw query-string values.

        Malformed values degrade to defaults. The one exception is a
        numeric limit of zero or less, which is kept as-is so the query
        layer can reject it.

        Args:
            params: Query parameters; camelCase and snake_case keys accepted.
            default_limit: Page size used when limit is missing or garbage.

        Returns:
            Parsed filter options.
        """

        def get(*keys: str) -> Any:
            for key in keys:
                value = params.get(key)
                if value is not None:
                    return value
            return None

        page = parse_int(get("page"))
        limit = parse_int(get("limit"))

        return cls(
            category=_parse_text(get("category")),
            brand=_parse_text(get("brand")),
            tag=_parse_text(get("tag")),
            min_price=_parse_decimal(get("min_price", "minPrice")),
            max_price=_parse_decimal(get("max_price", "maxPrice")),
            sort_by=_parse_text(get("sort_by", "sortBy")),
            search=_parse_text(get("search", "q")),
            page=page if page is not None and page >= 1 else 1,
            limit=limit if limit is not None else default_limit,
        )


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_int(value: Any) -> int | None:
    """Parse an integer query value, returning None for garbage."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _parse_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


# ============================================================================
# Predicate
# ============================================================================


@dataclass(frozen=True)
class CatalogPredicate:
    """Conjunction of catalog filter criteria.

    ``None`` criteria are ignored. ``published_only`` is set for every
    public query.
    """

    category: str | None = None
    brand: str | None = None
    tag: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    search: str | None = None
    featured: bool | None = None
    published_only: bool = True

    @property
    def has_price_bounds(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    def without_search(self) -> "CatalogPredicate":
        """Same criteria with the text search dropped."""
        return CatalogPredicate(
            category=self.category,
            brand=self.brand,
            tag=self.tag,
            min_price=self.min_price,
            max_price=self.max_price,
            featured=self.featured,
            published_only=self.published_only,
        )

    def matches(self, item: CatalogItem) -> bool:
        """Evaluate the predicate against a single item."""
        if self.published_only and not item.is_published:
            return False
        if self.featured is not None and item.is_featured != self.featured:
            return False
        if self.category is not None and item.category != self.category:
            return False
        if self.brand is not None and item.brand != self.brand:
            return False
        if self.tag is not None and not _has_tag(item, self.tag):
            return False
        if self.has_price_bounds:
            # A missing price cannot satisfy a numeric range
            if item.price is None:
                return False
            if self.min_price is not None and item.price < self.min_price:
                return False
            if self.max_price is not None and item.price > self.max_price:
                return False
        if self.search is not None and not matches_search(item, self.search):
            return False
        return True

    __call__ = matches


def _has_tag(item: CatalogItem, tag: str) -> bool:
    needle = tag.casefold()
    return any(t.casefold() == needle for t in item.tags)


def matches_search(item: CatalogItem, query: str) -> bool:
    """Case-insensitive substring match over name, brand, description and tags."""
    needle = query.strip().casefold()
    if not needle:
        return True

    fields = [item.name, item.brand, item.description, *item.tags]
    return any(needle in value.casefold() for value in fields if value)


def compose(options: FilterOptions, featured: bool | None = None) -> CatalogPredicate:
    """Build the predicate for a catalog listing.

    Args:
        options: Listing filters.
        featured: Restrict to featured (True) or non-featured (False) items.

    Returns:
        Conjunctive predicate with the published-only clause applied.

    Raises:
        InvalidPriceRangeError: If min_price is greater than max_price.
    """
    if (
        options.min_price is not None
        and options.max_price is not None
        and options.min_price > options.max_price
    ):
        raise InvalidPriceRangeError(options.min_price, options.max_price)

    search = options.search.strip() if options.search else None

    return CatalogPredicate(
        category=options.category,
        brand=options.brand,
        tag=options.tag,
        min_price=options.min_price,
        max_price=options.max_price,
        search=search or None,
        featured=featured,
        published_only=True,
    )
