"""
Application services.

- EmbeddingLifecycleManager: ingest, replace and remove chunk records
- RetrievalService: query text in, ranked chunks out
"""

from scan_rag.application.lifecycle_manager import EmbeddingLifecycleManager
from scan_rag.application.retrieval_service import RetrievalService

__all__ = ["EmbeddingLifecycleManager", "RetrievalService"]
