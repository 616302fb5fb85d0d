"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: scan_rag.boundary.store
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from scan_rag.api.deps import get_chunk_store_dependency
from scan_rag.boundary.store.base import ChunkStore
from scan_rag.core.exceptions import ChunkStoreError


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=HealthResponse)
async def health_check_store(
    store: ChunkStore = Depends(get_chunk_store_dependency),
) -> HealthResponse:
    """Chunk store health check."""
    try:
        await store.ping()
    except ChunkStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)
    return HealthResponse(status="healthy", message="Chunk store accessible")
