"""Catalog storage interface and in-memory implementation.

The catalog service only depends on the CatalogStore protocol. The
SQL-backed implementation lives in ``lookbook.catalog.repository``.
"""

from collections.abc import Iterable, Sequence
from typing import Literal, Protocol

from lookbook.catalog.filters import CatalogPredicate
from lookbook.catalog.sorting import SortSpec, sort_items
from lookbook.domain.entities import CatalogItem

DistinctField = Literal["brand", "category", "tag"]


class CatalogStore(Protocol):
    """Read access to one catalog collection (products or moodboards)."""

    async def count(self, predicate: CatalogPredicate) -> int:
        """Count items matching the predicate."""
        ...

    async def find_page(
        self,
        predicate: CatalogPredicate,
        sort: SortSpec,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[CatalogItem]:
        """Fetch matching items in order; ``limit=None`` fetches all."""
        ...

    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        """Fetch an item by id."""
        ...

    async def find_by_slug(self, slug: str) -> CatalogItem | None:
        """Fetch an item by slug."""
        ...

    async def find_by_ids(self, item_ids: Sequence[str]) -> list[CatalogItem]:
        """Fetch items by id, in the order of ``item_ids``."""
        ...

    async def find_sharing_tags(
        self,
        predicate: CatalogPredicate,
        tags: Iterable[str],
    ) -> list[CatalogItem]:
        """Fetch matching items carrying at least one of ``tags``."""
        ...

    async def distinct_values(self, field: DistinctField) -> list[str]:
        """Sorted distinct non-empty values of a field over published items."""
        ...


class InMemoryCatalogStore:
    """CatalogStore over a snapshot of items.

    Keeps a tag to item-id index so related-item lookups only touch
    items that share at least one tag with the base item.

    Example usage:
        store = InMemoryCatalogStore(items)
        page = await store.find_page(predicate, normalize_sort("newest"), 0, 12)
    """

    def __init__(self, items: Iterable[CatalogItem] = ()) -> None:
        """Initialize store.

        Args:
            items: Items of a single collection.
        """
        self._items: dict[str, CatalogItem] = {}
        self._by_slug: dict[str, str] = {}
        self._tag_index: dict[str, set[str]] = {}
        for item in items:
            self.add(item)

    def add(self, item: CatalogItem) -> None:
        """Add or replace an item."""
        previous = self._items.get(item.id)
        if previous is not None:
            self._by_slug.pop(previous.slug, None)
            for tag in previous.tags:
                self._tag_index.get(tag, set()).discard(item.id)

        self._items[item.id] = item
        self._by_slug[item.slug] = item.id
        for tag in item.tags:
            self._tag_index.setdefault(tag, set()).add(item.id)

    def _select(self, predicate: CatalogPredicate) -> list[CatalogItem]:
        return [item for item in self._items.values() if predicate.matches(item)]

    async def count(self, predicate: CatalogPredicate) -> int:
        return len(self._select(predicate))

    async def find_page(
        self,
        predicate: CatalogPredicate,
        sort: SortSpec,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[CatalogItem]:
        ordered = sort_items(self._select(predicate), sort)
        end = None if limit is None else offset + limit
        return ordered[offset:end]

    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        return self._items.get(item_id)

    async def find_by_slug(self, slug: str) -> CatalogItem | None:
        item_id = self._by_slug.get(slug)
        return self._items.get(item_id) if item_id is not None else None

    async def find_by_ids(self, item_ids: Sequence[str]) -> list[CatalogItem]:
        return [self._items[item_id] for item_id in item_ids if item_id in self._items]

    async def find_sharing_tags(
        self,
        predicate: CatalogPredicate,
        tags: Iterable[str],
    ) -> list[CatalogItem]:
        ids: set[str] = set()
        for tag in tags:
            ids.update(self._tag_index.get(tag, ()))
        return [
            self._items[item_id]
            for item_id in sorted(ids)
            if predicate.matches(self._items[item_id])
        ]

    async def distinct_values(self, field: DistinctField) -> list[str]:
        values: set[str] = set()
        for item in self._items.values():
            if not item.is_published:
                continue
            if field == "tag":
                values.update(item.tags)
            else:
                value = getattr(item, field)
                if value:
                    values.add(value)
        return sorted(values)
