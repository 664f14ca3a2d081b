"""Tests for SQL clause translation in the catalog repository.

These compile statements against the PostgreSQL dialect; no database
connection is opened.
"""

from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql
from sqlalchemy.sql.elements import False_

from lookbook.catalog.filters import CatalogPredicate
from lookbook.catalog.models import MoodboardRecord, ProductRecord
from lookbook.catalog.repository import SqlCatalogRepository, _escape_like
from lookbook.catalog.sorting import normalize_sort
from lookbook.domain.entities import ItemKind


def compile_sql(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


@pytest.fixture
def products() -> SqlCatalogRepository:
    return SqlCatalogRepository(session_factory=None, kind=ItemKind.PRODUCT)


@pytest.fixture
def moodboards() -> SqlCatalogRepository:
    return SqlCatalogRepository(session_factory=None, kind=ItemKind.MOODBOARD)


class TestConditions:
    """Tests for predicate translation."""

    def test_published_only_always_applied(self, products: SqlCatalogRepository) -> None:
        sql = compile_sql(select(ProductRecord).where(*products._conditions(CatalogPredicate())))
        assert "products.is_published IS true" in sql

    def test_price_bounds_exclude_null_prices(self, products: SqlCatalogRepository) -> None:
        predicate = CatalogPredicate(min_price=Decimal("10"), max_price=Decimal("20"))
        sql = compile_sql(select(ProductRecord).where(*products._conditions(predicate)))
        assert "products.price IS NOT NULL" in sql
        assert "products.price >=" in sql
        assert "products.price <=" in sql

    def test_tag_filter_is_case_insensitive_subquery(self, products: SqlCatalogRepository) -> None:
        sql = compile_sql(select(ProductRecord).where(*products._conditions(CatalogPredicate(tag="Classic"))))
        assert "EXISTS" in sql
        assert "lower(product_tags.tag)" in sql

    def test_search_uses_escaped_ilike(self, products: SqlCatalogRepository) -> None:
        sql = compile_sql(select(ProductRecord).where(*products._conditions(CatalogPredicate(search="coat"))))
        assert "products.name ILIKE" in sql
        assert "products.brand ILIKE" in sql
        assert "product_tags.tag ILIKE" in sql
        assert "ESCAPE" in sql

    def test_product_only_filters_never_match_moodboards(self, moodboards: SqlCatalogRepository) -> None:
        for predicate in (
            CatalogPredicate(category="Outerwear"),
            CatalogPredicate(brand="Gucci"),
            CatalogPredicate(min_price=Decimal("1")),
        ):
            conditions = moodboards._conditions(predicate)
            assert any(isinstance(condition, False_) for condition in conditions)

    def test_escape_like(self) -> None:
        assert _escape_like("50%_off\\") == "50\\%\\_off\\\\"


class TestOrderBy:
    """Tests for sort translation."""

    def test_price_sorts_nulls_last_with_id_tiebreak(self, products: SqlCatalogRepository) -> None:
        sql = compile_sql(select(ProductRecord).order_by(*products._order_by(normalize_sort("price-high"))))
        assert "products.price DESC NULLS LAST" in sql
        assert sql.rstrip().endswith("products.id ASC")

    def test_name_sort_is_case_insensitive(self, moodboards: SqlCatalogRepository) -> None:
        sql = compile_sql(select(MoodboardRecord).order_by(*moodboards._order_by(normalize_sort("name"))))
        assert "lower(moodboards.title) ASC" in sql

    def test_default_sort_newest_first(self, products: SqlCatalogRepository) -> None:
        sql = compile_sql(select(ProductRecord).order_by(*products._order_by(normalize_sort(None))))
        assert "products.created_at DESC" in sql

    def test_price_sort_without_price_column_orders_by_id(
        self, moodboards: SqlCatalogRepository
    ) -> None:
        """Moodboards have no price, so a price sort keeps only the id order."""
        for key in ("price-low", "price-high"):
            sql = compile_sql(select(MoodboardRecord).order_by(*moodboards._order_by(normalize_sort(key))))
            assert sql.rstrip().endswith("ORDER BY moodboards.id ASC")
            assert "created_at" not in sql.split("ORDER BY")[1]
