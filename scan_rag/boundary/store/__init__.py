"""
Chunk record store boundary layer.

Provides the partitioned record store used for chunk persistence.
- SQLChunkStore: Production store (SQLAlchemy async)
- InMemoryChunkStore: Local dev and test store

Dependencies: sqlalchemy
System role: Record store adapter for ingestion and retrieval
"""

from scan_rag.boundary.store.base import ChunkStore
from scan_rag.boundary.store.factory import get_chunk_store
from scan_rag.boundary.store.memory_store import InMemoryChunkStore
from scan_rag.boundary.store.sql_store import SQLChunkStore

__all__ = [
    "ChunkStore",
    "InMemoryChunkStore",
    "SQLChunkStore",
    "get_chunk_store",
]
