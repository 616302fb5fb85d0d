"""
Embedding service boundary layer.

- EmbeddingClient: text in, validated vector out, with retry and timeout
- FixedDimensionEmbeddings: Google Gemini embeddings pinned to one dimension

Dependencies: langchain_core, langchain_google_genai, tenacity
System role: Embedding service adapter
"""

from scan_rag.boundary.embeddings.client import EmbeddingClient, get_embedding_client

__all__ = ["EmbeddingClient", "get_embedding_client"]
