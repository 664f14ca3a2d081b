"""API schemas for the Lookbook catalog API.

Pydantic models for response serialization. Catalog payloads use
camelCase field names on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lookbook.catalog.service import CatalogPage
from lookbook.domain.entities import CatalogItem


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PaginationSchema(CamelModel):
    """Pagination metadata for a listing."""

    page: int = Field(..., description="Current page (1-based, clamped into range)")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="Number of pages")
    has_next_page: bool = Field(..., description="Whether a later page exists")
    has_prev_page: bool = Field(..., description="Whether an earlier page exists")
    page_numbers: list[int | str] = Field(
        default_factory=list, description="Page list for pagination controls"
    )
    range_text: str = Field(default="", description="e.g. 'Showing 1-12 of 52'")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(CamelModel):
    """Product representation."""

    id: str
    slug: str
    name: str
    description: str | None = None
    brand: str | None = None
    category: str | None = None
    price: float | None = Field(default=None, description="Price in major currency units")
    image_url: str | None = None
    affiliate_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_featured: bool = False
    created_at: datetime


class ProductListResponse(CamelModel):
    """Paginated product listing."""

    data: list[ProductSchema]
    pagination: PaginationSchema


class ProductsResponse(CamelModel):
    """Unpaginated product list."""

    data: list[ProductSchema]


# ============================================================================
# Moodboard Schemas
# ============================================================================


class MoodboardSchema(CamelModel):
    """Moodboard representation."""

    id: str
    slug: str
    title: str
    description: str | None = None
    cover_image: str | None = None
    how_to_wear: str | None = None
    tags: list[str] = Field(default_factory=list)
    styling_tips: list[str] = Field(default_factory=list)
    is_featured: bool = False
    created_at: datetime


class MoodboardDetailSchema(MoodboardSchema):
    """Moodboard with its products in display order."""

    products: list[ProductSchema] = Field(default_factory=list)


class MoodboardListResponse(CamelModel):
    """Paginated moodboard listing."""

    data: list[MoodboardSchema]
    pagination: PaginationSchema


class MoodboardsResponse(CamelModel):
    """Unpaginated moodboard list."""

    data: list[MoodboardSchema]


class TagsResponse(CamelModel):
    """Distinct tag list."""

    data: list[str]


class HomeFeaturedResponse(CamelModel):
    """Featured moodboards and products for the home page."""

    moodboards: list[MoodboardSchema]
    products: list[ProductSchema]


# ============================================================================
# Converters
# ============================================================================


def pagination_to_schema(page: CatalogPage) -> PaginationSchema:
    """Convert a catalog page's metadata to its response schema."""
    info = page.pagination
    return PaginationSchema(
        page=info.page,
        limit=info.limit,
        total=info.total,
        total_pages=info.total_pages,
        has_next_page=info.has_next_page,
        has_prev_page=info.has_prev_page,
        page_numbers=page.page_numbers,
        range_text=page.range_text,
    )


def product_to_schema(item: CatalogItem) -> ProductSchema:
    """Convert a catalog item to a product schema."""
    return ProductSchema(
        id=item.id,
        slug=item.slug,
        name=item.name,
        description=item.description,
        brand=item.brand,
        category=item.category,
        price=float(item.price) if item.price is not None else None,
        image_url=item.image_url,
        affiliate_url=item.affiliate_url,
        tags=sorted(item.tags),
        is_featured=item.is_featured,
        created_at=item.created_at,
    )


def moodboard_to_schema(item: CatalogItem) -> MoodboardSchema:
    """Convert a catalog item to a moodboard schema."""
    return MoodboardSchema(
        id=item.id,
        slug=item.slug,
        title=item.name,
        description=item.description,
        cover_image=item.image_url,
        how_to_wear=item.how_to_wear,
        tags=sorted(item.tags),
        styling_tips=list(item.styling_tips),
        is_featured=item.is_featured,
        created_at=item.created_at,
    )


def moodboard_to_detail(item: CatalogItem, products: list[CatalogItem]) -> MoodboardDetailSchema:
    """Convert a moodboard and its products to a detail schema."""
    return MoodboardDetailSchema(
        **moodboard_to_schema(item).model_dump(),
        products=[product_to_schema(product) for product in products],
    )
