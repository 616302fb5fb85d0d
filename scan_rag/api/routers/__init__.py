"""API routers."""

from .embeddings import router as embeddings_router
from .health import router as health_router
from .search import router as search_router

__all__ = [
    "embeddings_router",
    "health_router",
    "search_router",
]
