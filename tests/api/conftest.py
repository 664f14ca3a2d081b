"""Shared fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from lookbook.api.dependencies import get_moodboard_service, get_product_service
from lookbook.catalog.sample_data import sample_moodboards, sample_products
from lookbook.catalog.search import TheFuzzMatcher
from lookbook.catalog.service import CatalogService
from lookbook.catalog.store import InMemoryCatalogStore
from lookbook.domain.entities import CatalogItem, ItemKind
from lookbook.infrastructure.config import Settings
from lookbook.main import app

# Present in the store but hidden from every public endpoint
DRAFT_PRODUCT = CatalogItem(
    id="prod_draft",
    slug="draft-blazer",
    name="Draft Blazer",
    brand="Unreleased",
    category="Outerwear",
    price="999.00",
    tags={"classic"},
    is_featured=True,
    is_published=False,
)


@pytest.fixture
def product_store() -> InMemoryCatalogStore:
    """Sample products plus one unpublished draft."""
    return InMemoryCatalogStore([*sample_products(), DRAFT_PRODUCT])


@pytest.fixture
def moodboard_store() -> InMemoryCatalogStore:
    """Sample moodboards."""
    return InMemoryCatalogStore(sample_moodboards())


@pytest.fixture
def client(
    product_store: InMemoryCatalogStore,
    moodboard_store: InMemoryCatalogStore,
) -> Iterator[TestClient]:
    """Create test client backed by in-memory catalog services."""
    settings = Settings()
    matcher = TheFuzzMatcher()

    app.dependency_overrides[get_product_service] = lambda: CatalogService(
        product_store, kind=ItemKind.PRODUCT, matcher=matcher, settings=settings
    )
    app.dependency_overrides[get_moodboard_service] = lambda: CatalogService(
        moodboard_store, kind=ItemKind.MOODBOARD, matcher=matcher, settings=settings
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
