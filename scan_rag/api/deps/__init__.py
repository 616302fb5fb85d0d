"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chunk_store_dependency,
    get_embedding_client_dependency,
    get_lifecycle_manager,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chunk_store_dependency",
    "get_embedding_client_dependency",
    "get_lifecycle_manager",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
]
