"""
Chunking configuration settings.

Dependencies: pydantic_settings
System role: Chunk size budget for document ingestion
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scan_rag.configs.base import ENV_FILE


class ChunkingSettings(BaseSettings):
    """Chunk size budget."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="CHUNKING_",
        case_sensitive=False,
        extra="ignore",
    )

    max_chunk_size: int = Field(
        default=8000,
        description="Maximum chunk size in characters",
        gt=0,
    )
