"""API layer module.

Contains FastAPI routers and response schemas.
"""

from lookbook.api.health import router as health_router
from lookbook.api.moodboards import router as moodboards_router
from lookbook.api.products import router as products_router

__all__ = [
    "health_router",
    "moodboards_router",
    "products_router",
]
