"""Catalog repository for database operations.

SQL implementation of the CatalogStore protocol. Predicates and sort
specs are translated into SQLAlchemy clauses so that filtering, ordering
and paging happen in the database.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import exists, false, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lookbook.catalog.filters import CatalogPredicate
from lookbook.catalog.models import (
    MoodboardRecord,
    MoodboardTagRecord,
    ProductRecord,
    ProductTagRecord,
)
from lookbook.catalog.sorting import SortField, SortSpec
from lookbook.catalog.store import DistinctField
from lookbook.domain.entities import CatalogItem, ItemKind


@dataclass(frozen=True)
class _Collection:
    """Column layout of one catalog collection."""

    record: Any
    tag_record: Any
    tag_owner: Any
    name: Any
    brand: Any = None
    category: Any = None
    price: Any = None
    description: Any = None


_COLLECTIONS = {
    ItemKind.PRODUCT: _Collection(
        record=ProductRecord,
        tag_record=ProductTagRecord,
        tag_owner=ProductTagRecord.product_id,
        name=ProductRecord.name,
        brand=ProductRecord.brand,
        category=ProductRecord.category,
        price=ProductRecord.price,
        description=ProductRecord.description,
    ),
    ItemKind.MOODBOARD: _Collection(
        record=MoodboardRecord,
        tag_record=MoodboardTagRecord,
        tag_owner=MoodboardTagRecord.moodboard_id,
        name=MoodboardRecord.title,
        description=MoodboardRecord.description,
    ),
}


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlCatalogRepository:
    """Repository for one catalog collection backed by SQL.

    Opens a short-lived session per operation so that the count and
    page queries of a listing can run concurrently.

    Example usage:
        repo = SqlCatalogRepository(async_session_factory, ItemKind.PRODUCT)
        total = await repo.count(predicate)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        kind: ItemKind = ItemKind.PRODUCT,
    ) -> None:
        """Initialize repository.

        Args:
            session_factory: Async SQLAlchemy session factory.
            kind: Collection served by this repository.
        """
        self.session_factory = session_factory
        self.kind = kind
        self._collection = _COLLECTIONS[kind]

    # ------------------------------------------------------------------
    # Clause building
    # ------------------------------------------------------------------

    def _tag_exists(self, *criteria: Any) -> Any:
        c = self._collection
        return exists().where(c.tag_owner == c.record.id, *criteria)

    def _conditions(self, predicate: CatalogPredicate) -> list[Any]:
        """Translate a predicate into WHERE conditions."""
        c = self._collection
        conditions: list[Any] = []

        if predicate.published_only:
            conditions.append(c.record.is_published.is_(True))

        if predicate.featured is not None:
            conditions.append(c.record.is_featured.is_(predicate.featured))

        for column, value in ((c.category, predicate.category), (c.brand, predicate.brand)):
            if value is None:
                continue
            conditions.append(column == value if column is not None else false())

        if predicate.tag is not None:
            conditions.append(
                self._tag_exists(func.lower(c.tag_record.tag) == predicate.tag.lower())
            )

        if predicate.has_price_bounds:
            if c.price is None:
                conditions.append(false())
            else:
                conditions.append(c.price.is_not(None))
                if predicate.min_price is not None:
                    conditions.append(c.price >= predicate.min_price)
                if predicate.max_price is not None:
                    conditions.append(c.price <= predicate.max_price)

        if predicate.search:
            pattern = f"%{_escape_like(predicate.search)}%"
            columns = [col for col in (c.name, c.brand, c.description) if col is not None]
            conditions.append(
                or_(
                    *(col.ilike(pattern, escape="\\") for col in columns),
                    self._tag_exists(c.tag_record.tag.ilike(pattern, escape="\\")),
                )
            )

        return conditions

    def _order_by(self, sort: SortSpec) -> list[Any]:
        c = self._collection
        if sort.field is SortField.PRICE:
            if c.price is None:
                # Every item is unpriced, so only the tiebreak applies
                return [c.record.id.asc()]
            column = c.price.desc() if sort.descending else c.price.asc()
            primary = column.nulls_last()
        elif sort.field is SortField.NAME:
            column = func.lower(c.name)
            primary = column.desc() if sort.descending else column.asc()
        else:
            column = c.record.created_at
            primary = column.desc() if sort.descending else column.asc()
        return [primary, c.record.id.asc()]

    # ------------------------------------------------------------------
    # CatalogStore protocol
    # ------------------------------------------------------------------

    async def count(self, predicate: CatalogPredicate) -> int:
        """Count items matching the predicate."""
        c = self._collection
        query = select(func.count(c.record.id)).where(*self._conditions(predicate))

        async with self.session_factory() as session:
            result = await session.execute(query)
            return result.scalar_one()

    async def find_page(
        self,
        predicate: CatalogPredicate,
        sort: SortSpec,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[CatalogItem]:
        """Find matching items with ordering and paging.

        Args:
            predicate: Filter criteria.
            sort: Normalized ordering.
            offset: Number of items to skip.
            limit: Maximum number of items, or None for all.

        Returns:
            Matching items in order.
        """
        c = self._collection
        query = (
            select(c.record)
            .where(*self._conditions(predicate))
            .order_by(*self._order_by(sort))
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [record.to_item() for record in result.scalars().all()]

    async def find_by_id(self, item_id: str) -> CatalogItem | None:
        """Get item by ID."""
        c = self._collection
        async with self.session_factory() as session:
            result = await session.execute(select(c.record).where(c.record.id == item_id))
            record = result.scalar_one_or_none()
            return record.to_item() if record is not None else None

    async def find_by_slug(self, slug: str) -> CatalogItem | None:
        """Get item by slug."""
        c = self._collection
        async with self.session_factory() as session:
            result = await session.execute(select(c.record).where(c.record.slug == slug))
            record = result.scalar_one_or_none()
            return record.to_item() if record is not None else None

    async def find_by_ids(self, item_ids: Sequence[str]) -> list[CatalogItem]:
        """Get items by ID, preserving the requested order."""
        if not item_ids:
            return []

        c = self._collection
        async with self.session_factory() as session:
            result = await session.execute(select(c.record).where(c.record.id.in_(list(item_ids))))
            by_id = {record.id: record.to_item() for record in result.scalars().all()}

        return [by_id[item_id] for item_id in item_ids if item_id in by_id]

    async def find_sharing_tags(
        self,
        predicate: CatalogPredicate,
        tags: Iterable[str],
    ) -> list[CatalogItem]:
        """Find matching items that carry at least one of the tags."""
        tag_list = sorted(set(tags))
        if not tag_list:
            return []

        c = self._collection
        query = (
            select(c.record)
            .where(
                *self._conditions(predicate),
                self._tag_exists(c.tag_record.tag.in_(tag_list)),
            )
            .order_by(c.record.id.asc())
        )

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [record.to_item() for record in result.scalars().all()]

    async def distinct_values(self, field: DistinctField) -> list[str]:
        """Get sorted distinct values of brand, category or tag."""
        c = self._collection

        if field == "tag":
            query = (
                select(c.tag_record.tag)
                .join(c.record, c.tag_owner == c.record.id)
                .where(c.record.is_published.is_(True))
                .distinct()
                .order_by(c.tag_record.tag)
            )
        else:
            column = c.brand if field == "brand" else c.category
            if column is None:
                return []
            query = (
                select(column)
                .where(c.record.is_published.is_(True), column.is_not(None), column != "")
                .distinct()
                .order_by(column)
            )

        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())
