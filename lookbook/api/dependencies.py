"""Service dependencies for the catalog routers.

Routers receive their CatalogService through FastAPI dependencies so
tests can swap in services over an in-memory store with
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Query

from lookbook.catalog.filters import FilterOptions
from lookbook.catalog.sample_data import sample_moodboards, sample_products
from lookbook.catalog.search import FuzzyMatcher, TheFuzzMatcher
from lookbook.catalog.service import CatalogService
from lookbook.catalog.store import CatalogStore, InMemoryCatalogStore
from lookbook.domain.entities import ItemKind
from lookbook.infrastructure.config import settings


def _build_matcher() -> FuzzyMatcher | None:
    return TheFuzzMatcher() if settings.fuzzy_search_enabled else None


@lru_cache
def _memory_store(kind: ItemKind) -> InMemoryCatalogStore:
    items = sample_products() if kind is ItemKind.PRODUCT else sample_moodboards()
    return InMemoryCatalogStore(items)


def build_store(kind: ItemKind) -> CatalogStore:
    """Create the storage collaborator for a collection.

    Args:
        kind: Collection to serve.

    Returns:
        In-memory store over the sample catalog when
        ``catalog_backend`` is "memory", otherwise the SQL repository.
    """
    if settings.catalog_backend == "memory":
        return _memory_store(kind)

    from lookbook.catalog.repository import SqlCatalogRepository
    from lookbook.infrastructure.database import async_session_factory

    return SqlCatalogRepository(async_session_factory, kind)


def get_product_service() -> CatalogService:
    """Get catalog service for products."""
    return CatalogService(
        build_store(ItemKind.PRODUCT),
        kind=ItemKind.PRODUCT,
        matcher=_build_matcher(),
        settings=settings,
    )


def get_moodboard_service() -> CatalogService:
    """Get catalog service for moodboards."""
    return CatalogService(
        build_store(ItemKind.MOODBOARD),
        kind=ItemKind.MOODBOARD,
        matcher=_build_matcher(),
        settings=settings,
    )


def get_filter_options(
    page: str | None = None,
    limit: str | None = None,
    category: str | None = None,
    brand: str | None = None,
    tag: str | None = None,
    search: str | None = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
) -> FilterOptions:
    """Parse listing query parameters.

    Parameters are declared as strings so that malformed values reach
    FilterOptions.from_query and degrade to defaults instead of failing
    request validation.
    """
    return FilterOptions.from_query(
        {
            "page": page,
            "limit": limit,
            "category": category,
            "brand": brand,
            "tag": tag,
            "search": search,
            "min_price": min_price,
            "max_price": max_price,
            "sort_by": sort_by,
        },
        default_limit=settings.default_page_size,
    )
