"""
Chunk store factory for selecting between in-memory (dev) and SQL (prod).

Depends on CHUNK_STORE_TYPE environment variable.

Dependencies: scan_rag.boundary.store, scan_rag.configs
System role: Chunk store instantiation and selection
"""

import logging

from scan_rag.boundary.db.connection import get_async_session_factory
from scan_rag.boundary.store.base import ChunkStore
from scan_rag.boundary.store.memory_store import InMemoryChunkStore
from scan_rag.boundary.store.sql_store import SQLChunkStore
from scan_rag.configs import get_settings

logger = logging.getLogger(__name__)


def get_chunk_store() -> ChunkStore:
    """
    Factory function to get chunk store based on environment configuration.

    Returns:
        ChunkStore: InMemoryChunkStore or SQLChunkStore

    Raises:
        ValueError: If CHUNK_STORE_TYPE is invalid
    """
    settings = get_settings()
    store_type = settings.chunk_store.type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:get_chunk_store - Creating in-memory chunk store (local dev mode)")
        return InMemoryChunkStore()

    elif store_type == "sql":
        logger.info(f"{__name__}:get_chunk_store - Creating SQL chunk store")
        return SQLChunkStore(get_async_session_factory())

    else:
        raise ValueError(
            f"Invalid CHUNK_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 'sql' (production)."
        )
