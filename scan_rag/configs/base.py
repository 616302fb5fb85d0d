"""
Shared settings base.

Every config class reads the same ``.env`` file and ignores keys it does
not own, so one env file can carry all prefixes side by side.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


class BaseSettings(PydanticBaseSettings):
    """Fields common to the whole service."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Scan RAG API", description="Title shown in the OpenAPI docs")
    environment: str = Field(default="development", description="Deployment name, e.g. production")
    log_level: str = Field(default="INFO", description="Root log level")
