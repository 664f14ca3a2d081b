"""Product API endpoints.

Provides listing, detail, related-item and facet endpoints for the
product collection.
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
    HomeFeaturedResponse,
    ProductListResponse,
    ProductSchema,
    ProductsResponse,
    moodboard_to_schema,
    pagination_to_schema,
    product_to_schema,
)
from lookbook.catalog.filters import FilterOptions, parse_int
from lookbook.catalog.service import CatalogService

router = APIRouter(prefix="/products", tags=["Products"])

HOME_FEATURED_MOODBOARDS = 3
HOME_FEATURED_PRODUCTS = 5

ProductService = Annotated[CatalogService, Depends(get_product_service)]


def product_not_found(key: str) -> HTTPException:
    """Build the 404 error for an unknown product."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error_code": "PRODUCT_NOT_FOUND",
            "message": f"Product not found: {key}",
        },
    )


# ============================================================================
# Listing
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List products",
    description="Filtered, sorted, paginated product listing with optional text search.",
)
async def list_products(
    options: Annotated[FilterOptions, Depends(get_filter_options)],
    service: ProductService,
) -> ProductListResponse:
    """List published products.

    Args:
        options: Parsed filter, sort and page parameters.
        service: Product catalog service.

    Returns:
        One page of products with pagination metadata.
    """
    page = await service.list_catalog(options)
    return ProductListResponse(
        data=[product_to_schema(item) for item in page.data],
        pagination=pagination_to_schema(page),
    )


@router.get("/home-featured", response_model=HomeFeaturedResponse, summary="Home page features")
async def get_home_featured(
    service: ProductService,
    moodboards: Annotated[CatalogService, Depends(get_moodboard_service)],
) -> HomeFeaturedResponse:
    """Get featured moodboards and products for the home page."""
    featured_moodboards = await moodboards.get_featured(HOME_FEATURED_MOODBOARDS)
    featured_products = await service.get_featured(HOME_FEATURED_PRODUCTS)
    return HomeFeaturedResponse(
        moodboards=[moodboard_to_schema(item) for item in featured_moodboards],
        products=[product_to_schema(item) for item in featured_products],
    )


@router.get("/featured", response_model=ProductsResponse, summary="Featured products")
async def get_featured_products(
    service: ProductService,
    limit: str | None = None,
) -> ProductsResponse:
    """Get featured products, newest first.

    Args:
        service: Product catalog service.
        limit: Maximum items (0-100); missing or 0 returns all.

    Returns:
        Featured products.
    """
    items = await service.get_featured(parse_int(limit) or 0)
    return ProductsResponse(data=[product_to_schema(item) for item in items])


# ============================================================================
# Facets
# ============================================================================


@router.get("/brands", response_model=list[str], summary="Distinct brands")
async def get_brands(service: ProductService) -> list[str]:
    """Get sorted brands of published products."""
    return await service.get_brands()


@router.get("/categories", response_model=list[str], summary="Distinct categories")
async def get_categories(service: ProductService) -> list[str]:
    """Get sorted categories of published products."""
    return await service.get_categories()


@router.get("/tags", response_model=list[str], summary="Distinct tags")
async def get_tags(service: ProductService) -> list[str]:
    """Get sorted tags of published products."""
    return await service.get_tags()


# ============================================================================
# Detail
# ============================================================================


@router.get(
    "/slug/{slug}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product by slug",
)
async def get_product_by_slug(slug: str, service: ProductService) -> ProductSchema:
    """Get a published product by slug.

    Raises:
        HTTPException: If product not found.
    """
    item = await service.get_by_slug(slug)
    if item is None:
        raise product_not_found(slug)
    return product_to_schema(item)


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product by ID",
)
async def get_product(product_id: str, service: ProductService) -> ProductSchema:
    """Get a published product by ID.

    Raises:
        HTTPException: If product not found.
    """
    item = await service.get_by_id(product_id)
    if item is None:
        raise product_not_found(product_id)
    return product_to_schema(item)


@router.get(
    "/{product_id}/related",
    response_model=ProductsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get related products",
    description="Products sharing the most tags with the given product.",
)
async def get_related_products(
    product_id: str,
    service: ProductService,
    limit: str | None = None,
) -> ProductsResponse:
    """Get products related to a product by shared tags.

    Args:
        product_id: Base product ID.
        service: Product catalog service.
        limit: Maximum items; defaults to the configured related limit.

    Returns:
        Related products, best match first.

    Raises:
        HTTPException: If the base product is not found.
    """
    items = await service.get_related(product_id, parse_int(limit))
    if items is None:
        raise product_not_found(product_id)
    return ProductsResponse(data=[product_to_schema(item) for item in items])
