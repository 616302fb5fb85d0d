"""
Retrieval configuration settings.

Dependencies: pydantic_settings
System role: Similarity search defaults
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scan_rag.configs.base import ENV_FILE


class RetrievalSettings(BaseSettings):
    """Similarity search configuration."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    default_top_k: int = Field(default=5, description="Number of top results to retrieve", ge=1)
    max_top_k: int = Field(default=50, description="Upper bound accepted by the search API", ge=1)
