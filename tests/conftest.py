"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory and SQLite chunk stores, a deterministic embeddings
backend, wired lifecycle manager and retrieval fixtures
Dependencies: pytest, sqlalchemy, langchain_core
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone

import pytest
from langchain_core.embeddings import Embeddings
from tenacity import wait_none

KEYWORDS = ("invoice", "contract", "payment", "shipping")


class KeywordEmbeddings(Embeddings):
    """
    Deterministic embeddings: one dimension per keyword occurrence count,
    plus a constant bias dimension so no vector has zero magnitude.
    """

    def __init__(self, keywords: tuple[str, ...] = KEYWORDS) -> None:
        self.keywords = keywords
        self.calls: list[str] = []

    @property
    def dimension(self) -> int:
        return len(self.keywords) + 1

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        lowered = text.lower()
        return [float(lowered.count(keyword)) for keyword in self.keywords] + [1.0]


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Provide deterministic keyword embeddings backend."""
    return KeywordEmbeddings()


@pytest.fixture
def embedding_client(keyword_embeddings):
    """Provide EmbeddingClient over keyword embeddings without retry delays."""
    from scan_rag.boundary.embeddings.client import EmbeddingClient

    return EmbeddingClient(
        embeddings=keyword_embeddings,
        dimension=keyword_embeddings.dimension,
        timeout_seconds=1.0,
        max_retries=2,
        retry_wait=wait_none(),
    )


@pytest.fixture
def memory_store():
    """Provide empty in-memory chunk store."""
    from scan_rag.boundary.store.memory_store import InMemoryChunkStore

    return InMemoryChunkStore()


@pytest.fixture
def chunker():
    """Provide chunker with a small budget so tests can exercise splitting."""
    from scan_rag.core.chunker import TextChunker

    return TextChunker(max_size=200)


@pytest.fixture
def lifecycle_manager(memory_store, embedding_client, chunker):
    """Provide lifecycle manager wired to the in-memory store."""
    from scan_rag.application.lifecycle_manager import EmbeddingLifecycleManager

    return EmbeddingLifecycleManager(
        store=memory_store,
        embedder=embedding_client,
        chunker=chunker,
    )


@pytest.fixture
def retriever(memory_store, keyword_embeddings):
    """Provide similarity retriever over the in-memory store."""
    from scan_rag.core.retriever import SimilarityRetriever

    return SimilarityRetriever(memory_store, dimension=keyword_embeddings.dimension)


@pytest.fixture
def make_record():
    """
    Provide ChunkRecord factory.

    Returns:
        Callable building a record with sensible scoping defaults
    """
    from scan_rag.models.chunk import ChunkRecord, make_chunk_id

    def _make(
        document_id: str = "doc-1",
        chunk_index: int = 0,
        scan_id: str = "scan-1",
        embedding=None,
        text: str | None = None,
        **overrides,
    ) -> ChunkRecord:
        fields = {
            "id": make_chunk_id(document_id, chunk_index),
            "document_id": document_id,
            "scan_id": scan_id,
            "tenant_id": "tenant-1",
            "workspace_id": "workspace-1",
            "document_type": "Invoice",
            "file_name": f"{document_id}.pdf",
            "chunk_index": chunk_index,
            "text": text or f"chunk {chunk_index} of {document_id}",
            "embedding": embedding,
            "created_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return ChunkRecord(**fields)

    return _make


@pytest.fixture
async def sql_engine():
    """
    Create in-memory SQLite async engine with the chunk schema.

    Yields:
        AsyncEngine: Engine shared by every session of the test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from scan_rag.boundary.store.sql_store import SQLChunkStore

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await SQLChunkStore.create_schema(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def sql_store(sql_engine):
    """Provide SQLChunkStore bound to the in-memory SQLite engine."""
    from scan_rag.boundary.db.connection import get_async_session_factory
    from scan_rag.boundary.store.sql_store import SQLChunkStore

    return SQLChunkStore(get_async_session_factory(sql_engine))
