"""
Ingestion result models.

Structured outcome of a document ingestion, returned to callers instead
of raising so the upload flow can keep the original document.

Dependencies: pydantic
System role: Ingestion API contract
"""

from enum import Enum

from pydantic import BaseModel, Field

INGESTION_FAILED_MESSAGE = "This document could not be indexed, please retry."


class IngestionStatus(str, Enum):
    """Outcome of a single document ingestion."""

    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


class IngestionResult(BaseModel):
    """Result of ingesting one document."""

    document_id: str
    scan_id: str
    status: IngestionStatus
    chunk_count: int = Field(default=0, ge=0, description="Records written by this run")
    retryable: bool = Field(default=False, description="Re-invoking ingestion may succeed")
    error: str | None = Field(default=None, description="Internal error description")
    message: str | None = Field(default=None, description="User-facing message")
    processing_time_ms: float = Field(default=0.0, ge=0.0)

    @property
    def succeeded(self) -> bool:
        """Empty documents count as success."""
        return self.status in (IngestionStatus.SUCCEEDED, IngestionStatus.SKIPPED)


class IngestDocumentRequest(BaseModel):
    """Body of the document ingestion endpoint."""

    tenant_id: str = Field(min_length=1)
    workspace_id: str = Field(min_length=1)
    document_type: str = Field(default="Unknown", description="Document type for attribution")
    file_name: str = Field(default="", description="Source file name for attribution")
    text: str = Field(description="Extracted document text; blank text is skipped")
