"""
Search and scan listing API schemas.

Dependencies: pydantic
System role: Retrieval API contract
"""

from pydantic import BaseModel, Field

from scan_rag.models.chunk import ChunkMatch, DocumentChunkSummary

NO_RESULTS_MESSAGE = "No relevant information found for this scan."


class SearchRequest(BaseModel):
    """Query to rank a scan's chunks against."""

    query: str = Field(min_length=1, description="User query text")
    top_k: int | None = Field(default=None, ge=1, le=50, description="Maximum number of results")


class SearchResponse(BaseModel):
    """Ranked chunks for a query."""

    scan_id: str
    matches: list[ChunkMatch]
    message: str | None = Field(default=None, description="Set when nothing was found")


class DocumentListResponse(BaseModel):
    """Documents with chunk records in a scan."""

    scan_id: str
    documents: list[DocumentChunkSummary]
    total: int
