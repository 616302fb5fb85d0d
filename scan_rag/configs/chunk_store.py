"""
Chunk store configuration settings.

Dependencies: pydantic_settings
System role: Record store selection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scan_rag.configs.base import ENV_FILE


class ChunkStoreSettings(BaseSettings):
    """Chunk store selection (in-memory for dev, SQL for prod)."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="CHUNK_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    type: str = Field(
        default="sql",
        description="Chunk store type: 'memory' for local dev, 'sql' for production",
    )
