"""Bundled sample catalog.

Six products and three moodboards used by the seed script and by the
in-memory catalog backend.
"""

from datetime import datetime, timedelta, timezone

from lookbook.domain.entities import CatalogItem, ItemKind

_BASE_TIME = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)

SAMPLE_PRODUCTS = [
    {
        "id": "prod_001",
        "name": "Classic Trench Coat",
        "slug": "classic-trench-coat",
        "price": "450.00",
        "imageUrl": "https://images.unsplash.com/photo-1556906781-9b8de50c1f4b",
        "affiliateUrl": "https://example.com/affiliate/burberry-trench",
        "brand": "Burberry",
        "category": "Outerwear",
        "description": "A timeless trench coat perfect for any season.",
        "isFeatured": True,
        "tags": ["outerwear", "classic"],
    },
    {
        "id": "prod_002",
        "name": "Silk Midi Dress",
        "slug": "silk-midi-dress",
        "price": "320.00",
        "imageUrl": "https://images.unsplash.com/photo-1520975918311-9d06c2a63a0e",
        "affiliateUrl": "https://example.com/affiliate/silk-midi",
        "brand": "Reformation",
        "category": "Dresses",
        "description": "A graceful silk dress for an effortlessly chic look.",
        "isFeatured": False,
        "tags": ["dress", "feminine"],
    },
    {
        "id": "prod_003",
        "name": "High Waist Trousers",
        "slug": "high-waist-trousers",
        "price": "180.00",
        "affiliateUrl": "https://example.com/affiliate/trousers",
        "brand": "Toteme",
        "category": "Bottoms",
        "description": "Elegant trousers that pair perfectly with any top.",
        "isFeatured": True,
        "tags": ["tailored"],
    },
    {
        "id": "prod_004",
        "name": "Cashmere Sweater",
        "slug": "cashmere-sweater",
        "price": "290.00",
        "brand": "The Row",
        "category": "Knitwear",
        "description": "Soft luxury cashmere sweater for minimal comfort.",
        "isFeatured": False,
        "tags": ["minimalist"],
    },
    {
        "id": "prod_005",
        "name": "Leather Loafers",
        "slug": "leather-loafers",
        "price": "230.00",
        "brand": "Gucci",
        "category": "Shoes",
        "description": "Classic loafers to elevate your day-to-day look.",
        "isFeatured": True,
        "tags": ["footwear", "classic"],
    },
    {
        "id": "prod_006",
        "name": "Structured Handbag",
        "slug": "structured-handbag",
        "price": "650.00",
        "brand": "Celine",
        "category": "Accessories",
        "description": "A polished structured bag for timeless sophistication.",
        "isFeatured": False,
        "tags": ["accessory"],
    },
]

SAMPLE_MOODBOARDS = [
    {
        "id": "mood_001",
        "title": "Parisian Chic",
        "slug": "parisian-chic",
        "description": "Effortlessly elegant French-inspired looks.",
        "coverImage": "https://images.unsplash.com/photo-1544731612-de7f96afe55f",
        "isFeatured": True,
        "howToWear": "Pair trench with neutrals and minimal accessories.",
        "tags": ["french", "minimalist", "classic"],
        "stylingTips": ["Layer with neutral pieces", "Keep accessories minimal"],
        "productIds": ["prod_001", "prod_004", "prod_005"],
    },
    {
        "id": "mood_002",
        "title": "Summer Ease",
        "slug": "summer-ease",
        "description": "Light fabrics and muted tones for easy summer styling.",
        "coverImage": "https://images.unsplash.com/photo-1593642532973-d31b6557fa68",
        "isFeatured": False,
        "howToWear": "Mix linen and cotton with flat sandals.",
        "tags": ["summer", "casual"],
        "stylingTips": ["Add a straw hat for texture", "Keep fabrics breathable"],
        "productIds": ["prod_002", "prod_003", "prod_006"],
    },
    {
        "id": "mood_003",
        "title": "Modern Minimal",
        "slug": "modern-minimal",
        "description": "Tonal layers and clean silhouettes.",
        "coverImage": "https://images.unsplash.com/photo-1512436991641-6745cdb1723f",
        "isFeatured": True,
        "howToWear": "Focus on structure and simplicity.",
        "tags": ["minimalist", "neutral"],
        "stylingTips": ["Choose structured pieces", "Stick to a neutral palette"],
        "productIds": ["prod_003", "prod_004", "prod_005"],
    },
]


def _with_timestamps(rows: list[dict], kind: ItemKind) -> list[CatalogItem]:
    # Later rows are newer so "newest" ordering is stable across runs
    return [
        CatalogItem.from_dict({**row, "createdAt": _BASE_TIME + timedelta(days=index)}, kind)
        for index, row in enumerate(rows)
    ]


def sample_products() -> list[CatalogItem]:
    """Sample products as catalog items."""
    return _with_timestamps(SAMPLE_PRODUCTS, ItemKind.PRODUCT)


def sample_moodboards() -> list[CatalogItem]:
    """Sample moodboards as catalog items."""
    return _with_timestamps(SAMPLE_MOODBOARDS, ItemKind.MOODBOARD)
