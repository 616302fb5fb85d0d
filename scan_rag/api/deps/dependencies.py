"""
FastAPI dependency providers.

Clients that hold connections (chunk store, embedding client) live in a
process-wide ``ServiceCache``; the manager and retrieval service are cheap
and built per request from them.

Dependencies: scan_rag.configs, scan_rag.application, scan_rag.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from scan_rag.application.lifecycle_manager import EmbeddingLifecycleManager
from scan_rag.application.retrieval_service import RetrievalService
from scan_rag.boundary.embeddings.client import EmbeddingClient
from scan_rag.boundary.store.base import ChunkStore
from scan_rag.configs import Settings, get_settings


class ServiceCache:
    """Lazily built, process-wide clients."""

    def __init__(self) -> None:
        self._chunk_store: ChunkStore | None = None
        self._embedding_client: EmbeddingClient | None = None

    @property
    def chunk_store(self) -> ChunkStore:
        if self._chunk_store is None:
            from scan_rag.boundary.store.factory import get_chunk_store

            self._chunk_store = get_chunk_store()
        return self._chunk_store

    @property
    def embedding_client(self) -> EmbeddingClient:
        if self._embedding_client is None:
            from scan_rag.boundary.embeddings.client import get_embedding_client

            self._embedding_client = get_embedding_client()
        return self._embedding_client

    def clear(self) -> None:
        """Drop cached clients; the next access rebuilds them from settings."""
        self._chunk_store = None
        self._embedding_client = None


_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    return get_settings()


def get_chunk_store_dependency() -> ChunkStore:
    """Store selected by ``CHUNK_STORE_TYPE``."""
    return get_service_cache().chunk_store


def get_embedding_client_dependency() -> EmbeddingClient:
    return get_service_cache().embedding_client


def get_lifecycle_manager(
    store: ChunkStore = Depends(get_chunk_store_dependency),
    embedder: EmbeddingClient = Depends(get_embedding_client_dependency),
    settings: Settings = Depends(get_settings_dependency),
) -> EmbeddingLifecycleManager:
    """
    Get embedding lifecycle manager instance.

    Args:
        store: Chunk store (injected via Depends)
        embedder: Embedding client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        EmbeddingLifecycleManager: Manager bound to the configured chunk size
    """
    from scan_rag.core.chunker import TextChunker

    return EmbeddingLifecycleManager(
        store=store,
        embedder=embedder,
        chunker=TextChunker(settings.chunking.max_chunk_size),
        embedding_concurrency=settings.embedding.concurrency,
    )


def get_retrieval_service(
    store: ChunkStore = Depends(get_chunk_store_dependency),
    embedder: EmbeddingClient = Depends(get_embedding_client_dependency),
    settings: Settings = Depends(get_settings_dependency),
) -> RetrievalService:
    """
    Get retrieval service instance.

    Args:
        store: Chunk store (injected via Depends)
        embedder: Embedding client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        RetrievalService: Service ranking with brute-force cosine similarity
    """
    from scan_rag.core.retriever import SimilarityRetriever

    return RetrievalService(
        embedder=embedder,
        retriever=SimilarityRetriever(store, dimension=settings.embedding.dimension),
        default_top_k=settings.retrieval.default_top_k,
    )
