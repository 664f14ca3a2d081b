"""Domain entities for the Lookbook catalog.

CatalogItem is the read-only view record shared by the product and
moodboard collections. The catalog core never mutates items; it only
filters, orders and slices them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Self


class ItemKind(str, Enum):
    """Collection a catalog item belongs to."""

    PRODUCT = "product"
    MOODBOARD = "moodboard"


# ============================================================================
# Catalog Item
# ============================================================================


@dataclass(frozen=True)
class CatalogItem:
    """A product or moodboard as seen by catalog queries.

    Attributes:
        id: Identifier, unique within its collection.
        slug: URL slug, unique and immutable after creation.
        kind: Collection the item belongs to.
        name: Product name or moodboard title.
        description: Free-text description.
        brand: Brand name (products only).
        category: Category name (products only).
        price: Price in major currency units (products only).
        image_url: Product image or moodboard cover image.
        affiliate_url: Outbound purchase link (products only).
        tags: Unordered tag set, may be empty.
        is_featured: Whether the item is promoted on featured listings.
        is_published: Unpublished items never appear in public results.
        created_at: Creation timestamp.
        styling_tips: Styling tips in display order (moodboards only).
        how_to_wear: Wear guidance (moodboards only).
        product_ids: Products on the board in display order (moodboards only).
    """

    id: str
    slug: str
    name: str
    kind: ItemKind = ItemKind.PRODUCT
    description: str | None = None
    brand: str | None = None
    category: str | None = None
    price: Decimal | None = None
    image_url: str | None = None
    affiliate_url: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    is_featured: bool = False
    is_published: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    styling_tips: tuple[str, ...] = ()
    how_to_wear: str | None = None
    product_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always store a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))
        if self.price is not None and not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))

    @classmethod
    def from_dict(cls, data: dict[str, Any], kind: ItemKind = ItemKind.PRODUCT) -> Self:
        """Build an item from a plain dictionary.

        Accepts the camelCase keys used by the seed data and the
        public API as well as snake_case keys.

        Args:
            data: Raw item fields.
            kind: Collection the item belongs to.

        Returns:
            CatalogItem instance.
        """

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        created_at = pick("created_at", "createdAt")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        if created_at is None:
            created_at = datetime.now(timezone.utc)

        return cls(
            id=str(data["id"]),
            slug=str(data["slug"]),
            kind=kind,
            name=str(pick("name", "title", default="")),
            description=pick("description"),
            brand=pick("brand"),
            category=pick("category"),
            price=pick("price"),
            image_url=pick("image_url", "imageUrl", "coverImage"),
            affiliate_url=pick("affiliate_url", "affiliateUrl"),
            tags=frozenset(pick("tags", default=())),
            is_featured=bool(pick("is_featured", "isFeatured", default=False)),
            is_published=bool(pick("is_published", "isPublished", default=True)),
            created_at=created_at,
            styling_tips=tuple(pick("styling_tips", "stylingTips", default=())),
            how_to_wear=pick("how_to_wear", "howToWear"),
            product_ids=tuple(pick("product_ids", "productIds", default=())),
        )

    @property
    def searchable_text(self) -> str:
        """Text the fuzzy matcher scores against.

        Covers the same fields as the literal search filter: name,
        brand, description and tags.
        """
        parts = [self.name, self.brand or "", self.description or "", " ".join(sorted(self.tags))]
        return " ".join(part for part in parts if part)
