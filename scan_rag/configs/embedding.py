"""
Embedding service configuration settings.

Model, output dimensionality, input limits and call policy for the
external embedding service.

Dependencies: pydantic, pydantic_settings
System role: Embedding adapter configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scan_rag.configs.base import ENV_FILE


class EmbeddingSettings(BaseSettings):
    """Embedding service configuration."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    dimension: int = Field(
        default=1536,
        description="Embedding vector dimension, constant across all chunk records",
        gt=0,
    )
    google_api_key: str = Field(default="", description="Google Generative AI API key")

    max_input_chars: int = Field(
        default=10000,
        description="Input text is truncated to this many characters before embedding",
        gt=0,
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="Per-call timeout; a timeout fails the ingestion",
        gt=0,
    )
    max_retries: int = Field(
        default=3,
        description="Attempts per embedding call before giving up",
        ge=1,
    )
    concurrency: int = Field(
        default=1,
        description="Concurrent embedding calls per ingestion (1 = sequential)",
        ge=1,
    )
