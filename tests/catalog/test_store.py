"""Tests for the in-memory catalog store."""

from decimal import Decimal

import pytest

from lookbook.catalog.filters import CatalogPredicate
from lookbook.catalog.sample_data import sample_moodboards, sample_products
from lookbook.catalog.sorting import normalize_sort
from lookbook.catalog.store import InMemoryCatalogStore
from lookbook.domain.entities import CatalogItem


@pytest.fixture
def store() -> InMemoryCatalogStore:
    return InMemoryCatalogStore(sample_products())


class TestInMemoryCatalogStore:
    """Tests for InMemoryCatalogStore."""

    @pytest.mark.asyncio
    async def test_count_and_page(self, store: InMemoryCatalogStore) -> None:
        predicate = CatalogPredicate(min_price=Decimal("200"))
        assert await store.count(predicate) == 5

        page = await store.find_page(predicate, normalize_sort("price-low"), offset=1, limit=2)
        assert [item.id for item in page] == ["prod_004", "prod_002"]

    @pytest.mark.asyncio
    async def test_find_page_without_limit_returns_all(self, store: InMemoryCatalogStore) -> None:
        items = await store.find_page(CatalogPredicate(), normalize_sort("newest"))
        assert [item.id for item in items] == [
            "prod_006",
            "prod_005",
            "prod_004",
            "prod_003",
            "prod_002",
            "prod_001",
        ]

    @pytest.mark.asyncio
    async def test_lookup_by_id_slug_and_ids(self, store: InMemoryCatalogStore) -> None:
        assert (await store.find_by_id("prod_002")).slug == "silk-midi-dress"
        assert (await store.find_by_slug("leather-loafers")).id == "prod_005"
        assert await store.find_by_id("missing") is None
        assert await store.find_by_slug("missing") is None

        items = await store.find_by_ids(["prod_003", "missing", "prod_001"])
        assert [item.id for item in items] == ["prod_003", "prod_001"]

    @pytest.mark.asyncio
    async def test_find_sharing_tags_uses_tag_index(self, store: InMemoryCatalogStore) -> None:
        items = await store.find_sharing_tags(CatalogPredicate(), {"classic", "tailored"})
        assert [item.id for item in items] == ["prod_001", "prod_003", "prod_005"]

        assert await store.find_sharing_tags(CatalogPredicate(), {"unknown"}) == []

    @pytest.mark.asyncio
    async def test_add_replaces_and_reindexes(self, store: InMemoryCatalogStore) -> None:
        store.add(
            CatalogItem(
                id="prod_001",
                slug="renamed-trench",
                name="Renamed Trench",
                tags={"rainwear"},
            )
        )

        assert await store.find_by_slug("classic-trench-coat") is None
        assert (await store.find_by_slug("renamed-trench")).id == "prod_001"
        classic = await store.find_sharing_tags(CatalogPredicate(), {"classic"})
        assert [item.id for item in classic] == ["prod_005"]

    @pytest.mark.asyncio
    async def test_distinct_values_skip_unpublished(self, store: InMemoryCatalogStore) -> None:
        store.add(
            CatalogItem(
                id="prod_999",
                slug="draft",
                name="Draft",
                brand="Zara",
                category="Drafts",
                tags={"draft"},
                is_published=False,
            )
        )

        assert await store.distinct_values("brand") == [
            "Burberry",
            "Celine",
            "Gucci",
            "Reformation",
            "The Row",
            "Toteme",
        ]
        assert "Drafts" not in await store.distinct_values("category")
        assert "draft" not in await store.distinct_values("tag")

    @pytest.mark.asyncio
    async def test_moodboard_tags(self) -> None:
        store = InMemoryCatalogStore(sample_moodboards())
        assert await store.distinct_values("tag") == [
            "casual",
            "classic",
            "french",
            "minimalist",
            "neutral",
            "summer",
        ]
