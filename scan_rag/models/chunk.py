"""
Chunk domain models.

Represents a stored chunk record with its scoping keys and embedding,
and the ranked match returned by similarity search.

Dependencies: pydantic
System role: Chunk record data structure
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def make_chunk_id(document_id: str, chunk_index: int) -> str:
    """Deterministic record id for the chunk at ``chunk_index`` of a document."""
    return f"{document_id}_chunk_{chunk_index}"


class ChunkRecord(BaseModel):
    """
    Unit of storage and retrieval.

    ``embedding`` is typed loosely because stored records may carry a
    missing or malformed vector; the retriever excludes those.
    """

    id: str = Field(description="Deterministic chunk identifier (document id + index)")
    document_id: str = Field(description="Owning document ID")
    scan_id: str = Field(description="Retrieval scope and partition key")
    tenant_id: str = Field(description="Owning tenant ID")
    workspace_id: str = Field(description="Owning workspace ID")
    document_type: str = Field(default="Unknown", description="Document type for attribution")
    file_name: str = Field(default="", description="Source file name for attribution")
    chunk_index: int = Field(ge=0, description="Zero-based position within the document")
    text: str = Field(min_length=1, description="Chunk text content")
    embedding: Any = Field(default=None, description="Embedding vector")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Time of last write (UTC)",
    )


class ChunkMatch(BaseModel):
    """Single ranked result from similarity search."""

    document_id: str
    document_type: str
    file_name: str
    chunk_index: int
    text: str
    score: float = Field(description="Raw cosine similarity (-1.0 to 1.0)")


class DocumentChunkSummary(BaseModel):
    """Per-document view of the chunk records stored for a scan."""

    document_id: str
    file_name: str
    document_type: str
    chunk_count: int
    created_at: datetime
