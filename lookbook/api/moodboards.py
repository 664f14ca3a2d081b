"""Moodboard API endpoints.

Provides listing, detail and related-item endpoints for moodboards.
Detail responses embed the board's published products.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lookbook.api.dependencies import (
    get_filter_options,
    get_moodboard_service,
    get_product_service,
)
from lookbook.api.schemas import (
    ErrorResponse,
    MoodboardDetailSchema,
    MoodboardListResponse,
    MoodboardsResponse,
    ProductsResponse,
    TagsResponse,
    moodboard_to_detail,
    moodboard_to_schema,
    pagination_to_schema,
    product_to_schema,
)
from lookbook.catalog.filters import FilterOptions, parse_int
from lookbook.catalog.service import CatalogService
from lookbook.domain.entities import CatalogItem

router = APIRouter(prefix="/moodboards", tags=["Moodboards"])

DEFAULT_FEATURED_MOODBOARDS = 5

MoodboardService = Annotated[CatalogService, Depends(get_moodboard_service)]
ProductService = Annotated[CatalogService, Depends(get_product_service)]


def moodboard_not_found(key: str) -> HTTPException:
    """Build the 404 error for an unknown moodboard."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "MOODBOARD_NOT_FOUND",
            "message": f"Moodboard not found: {key}",
        },
    )


async def _detail(moodboard: CatalogItem, products: CatalogService) -> MoodboardDetailSchema:
    items = await products.get_many(moodboard.product_ids)
    return moodboard_to_detail(moodboard, items)


@router.get(
    "",
    response_model=MoodboardListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List moodboards",
)
async def list_moodboards(
    options: Annotated[FilterOptions, Depends(get_filter_options)],
    service: MoodboardService,
) -> MoodboardListResponse:
    """List published moodboards with tag, search, sort and paging."""
    page = await service.list_catalog(options)
    return MoodboardListResponse(
        data=[moodboard_to_schema(item) for item in page.data],
        pagination=pagination_to_schema(page),
    )


@router.get("/featured", response_model=MoodboardsResponse, summary="Featured moodboards")
async def get_featured_moodboards(
    service: MoodboardService,
    limit: str | None = None,
) -> MoodboardsResponse:
    """Get featured moodboards, newest first (5 by default)."""
    items = await service.get_featured(parse_int(limit) or DEFAULT_FEATURED_MOODBOARDS)
    return MoodboardsResponse(data=[moodboard_to_schema(item) for item in items])


@router.get("/tags", response_model=TagsResponse, summary="Distinct moodboard tags")
async def get_moodboard_tags(service: MoodboardService) -> TagsResponse:
    """Get sorted tags of published moodboards."""
    return TagsResponse(data=await service.get_tags())


@router.get(
    "/slug/{slug}",
    response_model=MoodboardDetailSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get moodboard by slug",
)
async def get_moodboard_by_slug(
    slug: str,
    service: MoodboardService,
    products: ProductService,
) -> MoodboardDetailSchema:
    """Get a published moodboard and its products by slug."""
    moodboard = await service.get_by_slug(slug)
    if moodboard is None:
        raise moodboard_not_found(slug)
    return await _detail(moodboard, products)


@router.get(
    "/{moodboard_id}",
    response_model=MoodboardDetailSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get moodboard by ID",
)
async def get_moodboard(
    moodboard_id: str,
    service: MoodboardService,
    products: ProductService,
) -> MoodboardDetailSchema:
    """Get a published moodboard and its products by ID."""
    moodboard = await service.get_by_id(moodboard_id)
    if moodboard is None:
        raise moodboard_not_found(moodboard_id)
    return await _detail(moodboard, products)


@router.get(
    "/{moodboard_id}/products",
    response_model=ProductsResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get moodboard products",
)
async def get_moodboard_products(
    moodboard_id: str,
    service: MoodboardService,
    products: ProductService,
) -> ProductsResponse:
    """Get the published products on a moodboard, in board order."""
    moodboard = await service.get_by_id(moodboard_id)
    if moodboard is None:
        raise moodboard_not_found(moodboard_id)
    items = await products.get_many(moodboard.product_ids)
    return ProductsResponse(data=[product_to_schema(item) for item in items])


@router.get(
    "/{moodboard_id}/related",
    response_model=MoodboardsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get related moodboards",
)
async def get_related_moodboards(
    moodboard_id: str,
    service: MoodboardService,
    limit: str | None = None,
) -> MoodboardsResponse:
    """Get moodboards sharing the most tags with the given moodboard."""
    items = await service.get_related(moodboard_id, parse_int(limit))
    if items is None:
        raise moodboard_not_found(moodboard_id)
    return MoodboardsResponse(data=[moodboard_to_schema(item) for item in items])
