"""
Chunk record ORM model.

Stores one embedded chunk per row, partitioned by scan.

Dependencies: sqlalchemy, scan_rag.boundary.db.base
System role: Chunk record persistence
"""

from typing import Any

from sqlalchemy import Index, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scan_rag.boundary.db.base import Base, CreatedAtMixin


class ChunkRecordModel(Base, CreatedAtMixin):
    """
    Chunk record ORM model.

    The primary key is (scan_id, id): scan_id is the partition key and
    the id is only unique within its partition. The embedding is stored
    as raw JSON and validated at retrieval time.

    Attributes:
        scan_id: Partition key and retrieval scope
        id: Deterministic chunk ID (document id + chunk index)
        document_id: Owning document
        tenant_id: Owning tenant
        workspace_id: Owning workspace
        document_type: Attribution metadata
        file_name: Attribution metadata
        chunk_index: Position within the document
        text: Chunk text
        embedding: Embedding vector as JSON
        created_at: Write timestamp (UTC)
    """

    __tablename__ = "chunk_records"
    __table_args__ = (
        Index("ix_chunk_records_document_id", "document_id"),
        Index("ix_chunk_records_tenant_id", "tenant_id"),
    )

    scan_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    id: Mapped[str] = mapped_column(String(512), primary_key=True)
    document_id: Mapped[str] = mapped_column(String(255), nullable=False)
    tenant_id: Mapped[str] = mapped_column(String(255), nullable=False)
    workspace_id: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type: Mapped[str] = mapped_column(String(255), nullable=False, default="Unknown")
    file_name: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<ChunkRecordModel(scan_id={self.scan_id}, id={self.id}, "
            f"chunk_index={self.chunk_index})>"
        )
