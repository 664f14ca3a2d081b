"""Catalog Query Engine.

Filter composition, sort normalization, pagination, related-item
selection and fuzzy search re-ranking for the product and moodboard
collections.
"""

from lookbook.catalog.filters import CatalogPredicate, FilterOptions, compose
from lookbook.catalog.pagination import (
    DEFAULT_PAGE_SIZE,
    ELLIPSIS,
    PAGE_SIZE_OPTIONS,
    PageSlice,
    PaginationInfo,
    build_pagination,
    calculate_offset,
    get_page_numbers,
    get_page_range_text,
    paginate,
    validate_page,
)
from lookbook.catalog.relatedness import RelatednessCandidate, related, score_candidates
from lookbook.catalog.search import FuzzyMatcher, RankedMatch, SearchCandidate, TheFuzzMatcher
from lookbook.catalog.service import CatalogPage, CatalogService
from lookbook.catalog.sorting import SortDirection, SortField, SortSpec, normalize_sort, sort_items
from lookbook.catalog.store import CatalogStore, InMemoryCatalogStore

__all__ = [
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "ELLIPSIS",
    "PAGE_SIZE_OPTIONS",
    "PageSlice",
    "PaginationInfo",
    "build_pagination",
    "calculate_offset",
    "get_page_numbers",
    "get_page_range_text",
    "paginate",
    "validate_page",
    # Sorting
    "SortDirection",
    "SortField",
    "SortSpec",
    "normalize_sort",
    "sort_items",
    # Filters
    "CatalogPredicate",
    "FilterOptions",
    "compose",
    # Relatedness
    "RelatednessCandidate",
    "related",
    "score_candidates",
    # Search
    "FuzzyMatcher",
    "RankedMatch",
    "SearchCandidate",
    "TheFuzzMatcher",
    # Storage
    "CatalogStore",
    "InMemoryCatalogStore",
    # Service
    "CatalogPage",
    "CatalogService",
]
