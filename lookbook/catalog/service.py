"""Catalog service for listing, detail and related-item queries.

High-level service that sequences filter composition, storage access,
optional fuzzy re-ranking and pagination for one catalog collection.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from lookbook.catalog.filters import CatalogPredicate, FilterOptions, compose
from lookbook.catalog.pagination import (
    PaginationInfo,
    build_pagination,
    calculate_offset,
    ensure_valid_limit,
    get_page_numbers,
    get_page_range_text,
    paginate,
)
from lookbook.catalog.relatedness import related
from lookbook.catalog.search import FuzzyMatcher, SearchCandidate
from lookbook.catalog.sorting import DEFAULT_SORT, SortSpec, normalize_sort
from lookbook.catalog.store import CatalogStore
from lookbook.domain.entities import CatalogItem, ItemKind
from lookbook.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()

MAX_FEATURED_LIMIT = 100


@dataclass
class CatalogPage:
    """One page of a catalog listing.

    Attributes:
        data: Items on this page.
        pagination: Page metadata.
    """

    data: list[CatalogItem]
    pagination: PaginationInfo

    @property
    def page_numbers(self) -> list[int | str]:
        """Page list for pagination controls."""
        return get_page_numbers(self.pagination.page, self.pagination.total_pages)

    @property
    def range_text(self) -> str:
        """Human-readable range of this page."""
        return get_page_range_text(self.pagination)


class CatalogService:
    """Service for catalog queries over one collection.

    The storage collaborator and the optional fuzzy matcher are passed
    in, so the same service runs against SQL or an in-memory snapshot.

    Text search strategy: when a matcher is configured, the whole
    literal match set is ranked before paging, so a better match never
    lands on a later page than a worse one. Ranking only reorders the
    literal matches, so total and page count match a literal search.
    Items are dropped only when ``fuzzy_min_score`` is configured.
    Setting ``fuzzy_fallback_min_results`` turns on a widening mode that
    appends near-miss items after all literal matches.

    Example usage:
        service = CatalogService(InMemoryCatalogStore(items), matcher=TheFuzzMatcher())
        page = await service.list_catalog(FilterOptions(tag="classic", page=2))
    """

    def __init__(
        self,
        store: CatalogStore,
        kind: ItemKind = ItemKind.PRODUCT,
        matcher: FuzzyMatcher | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Storage collaborator for the collection.
            kind: Collection served, used for logging.
            matcher: Fuzzy matcher for search re-ranking, or None.
            settings: Query settings, defaults to application settings.
        """
        self.store = store
        self.kind = kind
        self.matcher = matcher
        self.settings = settings or default_settings

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def list_catalog(self, options: FilterOptions) -> CatalogPage:
        """List a filtered, sorted, paginated slice of the collection.

        Args:
            options: Filters, sort key and page parameters.

        Returns:
            Items on the requested page (clamped into range) and
            pagination metadata.

        Raises:
            InvalidPageSizeError: If limit is zero or negative.
            InvalidPriceRangeError: If min_price is greater than max_price.
        """
        limit = ensure_valid_limit(options.limit)
        sort = normalize_sort(options.sort_by)
        predicate = compose(options)

        query = predicate.search
        fuzzy = self.matcher is not None and self._uses_fuzzy(query)
        if fuzzy:
            result = await self._ranked_listing(
                self.matcher, query, predicate, sort, options.page, limit
            )
        else:
            result = await self._literal_listing(predicate, sort, options.page, limit)

        logger.info(
            "Catalog listing served",
            kind=self.kind.value,
            page=result.pagination.page,
            limit=limit,
            total=result.pagination.total,
            returned=len(result.data),
            sort=f"{sort.field.value}:{sort.direction.value}",
            search=query,
            fuzzy=fuzzy,
        )
        return result

    def _uses_fuzzy(self, query: str | None) -> bool:
        if not query:
            return False
        return len(query.strip()) >= self.settings.fuzzy_min_query_length

    async def _literal_listing(
        self,
        predicate: CatalogPredicate,
        sort: SortSpec,
        page: int,
        limit: int,
    ) -> CatalogPage:
        offset = calculate_offset(page, limit)

        # Count and page fetch are independent
        total, items = await asyncio.gather(
            self.store.count(predicate),
            self.store.find_page(predicate, sort, offset, limit),
        )

        pagination = build_pagination(total, page, limit)
        if pagination.offset != offset:
            # Requested page was past the end; serve the last page instead
            items = await self.store.find_page(predicate, sort, pagination.offset, limit)

        return CatalogPage(data=list(items), pagination=pagination)

    async def _ranked_listing(
        self,
        matcher: FuzzyMatcher,
        query: str,
        predicate: CatalogPredicate,
        sort: SortSpec,
        page: int,
        limit: int,
    ) -> CatalogPage:
        literal = await self.store.find_page(predicate, sort)
        ranked = _rank(matcher, query, literal, min_score=self.settings.fuzzy_min_score)

        fallback_min = self.settings.fuzzy_fallback_min_results
        if fallback_min > 0 and len(literal) < fallback_min:
            ranked += await self._typo_matches(matcher, query, predicate, sort, literal)

        ordered = [item for item, _ in ranked]
        page_slice = paginate(ordered, page, limit)
        return CatalogPage(data=page_slice.page_data, pagination=page_slice.info)

    async def _typo_matches(
        self,
        matcher: FuzzyMatcher,
        query: str,
        predicate: CatalogPredicate,
        sort: SortSpec,
        literal: Sequence[CatalogItem],
    ) -> list[tuple[CatalogItem, float]]:
        """Near-miss matches for the opt-in widening mode.

        Only items outside the literal match set are returned. They
        always follow the literal matches in the listing.
        """
        literal_ids = {item.id for item in literal}
        broader = await self.store.find_page(predicate.without_search(), sort)
        extra = [item for item in broader if item.id not in literal_ids]
        if not extra:
            return []

        cutoff = max(self.settings.fuzzy_fallback_score, self.settings.fuzzy_min_score or 0)
        typo_matches = _rank(matcher, query, extra, min_score=cutoff)
        if typo_matches:
            logger.debug(
                "Fuzzy fallback added matches",
                kind=self.kind.value,
                search=query,
                literal=len(literal),
                added=len(typo_matches),
            )
        return typo_matches

    # ------------------------------------------------------------------
    # Detail lookups
    # ------------------------------------------------------------------

    async def get_by_id(self, item_id: str) -> CatalogItem | None:
        """Get a published item by ID.

        Args:
            item_id: Item ID.

        Returns:
            Item if found and published.
        """
        item = await self.store.find_by_id(item_id)
        return item if item is not None and item.is_published else None

    async def get_by_slug(self, slug: str) -> CatalogItem | None:
        """Get a published item by slug.

        Args:
            slug: Item slug.

        Returns:
            Item if found and published.
        """
        item = await self.store.find_by_slug(slug)
        return item if item is not None and item.is_published else None

    async def get_many(self, item_ids: Sequence[str]) -> list[CatalogItem]:
        """Get published items in the order of ``item_ids``."""
        items = await self.store.find_by_ids(item_ids)
        return [item for item in items if item.is_published]

    async def get_related(self, base_id: str, limit: int | None = None) -> list[CatalogItem] | None:
        """Get items related to a base item by shared tags.

        Args:
            base_id: ID of the base item.
            limit: Maximum number of related items, defaults to
                ``settings.related_limit``.

        Returns:
            Related items best match first, or None if the base item
            does not exist or is unpublished.

        Raises:
            InvalidPageSizeError: If limit is zero or negative.
        """
        limit = self.settings.related_limit if limit is None else limit
        ensure_valid_limit(limit)

        base = await self.get_by_id(base_id)
        if base is None:
            logger.info("Related lookup for unknown item", kind=self.kind.value, base_id=base_id)
            return None

        if not base.tags:
            return []

        candidates = await self.store.find_sharing_tags(CatalogPredicate(), base.tags)
        return related(base, candidates, limit)

    # ------------------------------------------------------------------
    # Featured and facets
    # ------------------------------------------------------------------

    async def get_featured(self, limit: int = 0) -> list[CatalogItem]:
        """Get published featured items, newest first.

        Args:
            limit: Maximum items, clamped to [0, 100]; 0 means all.

        Returns:
            Featured items.
        """
        limit = max(0, min(limit, MAX_FEATURED_LIMIT))
        predicate = CatalogPredicate(featured=True)
        return await self.store.find_page(predicate, DEFAULT_SORT, 0, limit or None)

    async def get_brands(self) -> list[str]:
        """Get sorted distinct brands of published items."""
        return await self.store.distinct_values("brand")

    async def get_categories(self) -> list[str]:
        """Get sorted distinct categories of published items."""
        return await self.store.distinct_values("category")

    async def get_tags(self) -> list[str]:
        """Get sorted distinct tags of published items."""
        return await self.store.distinct_values("tag")


def _rank(
    matcher: FuzzyMatcher,
    query: str,
    items: Sequence[CatalogItem],
    min_score: float | None = None,
) -> list[tuple[CatalogItem, float]]:
    """Order items by matcher score, keeping storage order on ties.

    Items the matcher does not score are kept after the scored ones
    unless a minimum score is in force.
    """
    matches = matcher.rank(query, [SearchCandidate.from_item(item) for item in items])
    scores = {match.id: match.score for match in matches}

    scored: list[tuple[int, CatalogItem, float]] = []
    unscored: list[CatalogItem] = []
    for index, item in enumerate(items):
        score = scores.get(item.id)
        if score is None:
            unscored.append(item)
        elif min_score is None or score >= min_score:
            scored.append((index, item, score))

    scored.sort(key=lambda entry: (-entry[2], entry[0]))
    ranked = [(item, score) for _, item, score in scored]
    if min_score is None:
        ranked += [(item, 0.0) for item in unscored]
    return ranked
