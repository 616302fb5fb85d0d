"""
Service settings root.

One ``Settings`` object groups the per-concern settings classes, each of
which reads its own env prefix. ``get_settings()`` caches it for the
process; tests call ``get_settings.cache_clear()`` after changing env.

Dependencies: pydantic, scan_rag.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from scan_rag.configs.base import BaseSettings
from scan_rag.configs.chunk_store import ChunkStoreSettings
from scan_rag.configs.chunking import ChunkingSettings
from scan_rag.configs.database import DatabaseSettings
from scan_rag.configs.embedding import EmbeddingSettings
from scan_rag.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    # default_factory: each Settings() re-reads the environment
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    chunk_store: ChunkStoreSettings = Field(default_factory=ChunkStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    return Settings()
