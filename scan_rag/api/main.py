"""
HTTP entry point.

``create_app()`` wires settings, logging, middleware and the versioned
routers; ``app`` is the module-level instance uvicorn serves.

Dependencies: fastapi, uvicorn, python-dotenv, scan_rag.api.routers
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scan_rag import __version__
from scan_rag.api.deps.dependencies import get_service_cache
from scan_rag.configs import get_settings
from scan_rag.observability import configure_logging
from scan_rag.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import embeddings_router, health_router, search_router

load_dotenv()

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store schema and build shared clients before serving."""
    cache = get_service_cache()
    await cache.chunk_store.initialize()
    _ = cache.embedding_client
    logger.info(f"{__name__}:lifespan - Chunk store and embedding client ready")

    yield

    cache.clear()
    logger.info(f"{__name__}:lifespan - Service cache cleared")


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        FastAPI: App with health, embedding lifecycle and search routes
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Scan-scoped document ingestion and semantic retrieval",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last runs first: the correlation ID is set before the access log line
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in (health_router, embeddings_router, search_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("scan_rag.api.main:app", host="0.0.0.0", port=8000)
