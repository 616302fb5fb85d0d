"""
Domain models and API schemas.
"""

from scan_rag.models.chunk import ChunkMatch, ChunkRecord, DocumentChunkSummary, make_chunk_id
from scan_rag.models.ingestion import IngestDocumentRequest, IngestionResult, IngestionStatus
from scan_rag.models.search import DocumentListResponse, SearchRequest, SearchResponse

__all__ = [
    "ChunkMatch",
    "ChunkRecord",
    "DocumentChunkSummary",
    "DocumentListResponse",
    "IngestDocumentRequest",
    "IngestionResult",
    "IngestionStatus",
    "SearchRequest",
    "SearchResponse",
    "make_chunk_id",
]
