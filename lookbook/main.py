"""Lookbook API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lookbook.api.health import router as health_router
from lookbook.api.middleware import setup_middleware
from lookbook.api.moodboards import router as moodboards_router
from lookbook.api.products import router as products_router
from lookbook.domain.exceptions import CatalogValidationError, DomainError
from lookbook.infrastructure.config import settings
from lookbook.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging()
    logger.info(
        "Starting Lookbook API",
        version=settings.api_version,
        debug=settings.debug,
        catalog_backend=settings.catalog_backend,
        fuzzy_search=settings.fuzzy_search_enabled,
    )

    yield

    if settings.catalog_backend != "memory":
        from lookbook.infrastructure.database import engine

        await engine.dispose()
    logger.info("Shutting down Lookbook API")


app = FastAPI(
    title="Lookbook API",
    description="Fashion catalog of products and styling moodboards",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(moodboards_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(CatalogValidationError)
async def catalog_validation_handler(request: Request, exc: CatalogValidationError):
    """Reject invalid catalog queries with a 400."""
    request_id = getattr(request.state, "request_id", None)

    logger.info(
        "Catalog query rejected",
        path=request.url.path,
        field=exc.field,
        error=exc.message,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": exc.message,
            "details": [{"field": exc.field, "message": exc.message}],
            "request_id": request_id,
        },
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Handle remaining domain errors as bad requests."""
    request_id = getattr(request.state, "request_id", None)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error_code": "DOMAIN_ERROR",
            "message": exc.message,
            "details": [],
            "request_id": request_id,
        },
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": request_id,
        },
    )
