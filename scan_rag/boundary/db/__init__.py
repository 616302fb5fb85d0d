"""
Database boundary layer: ORM models and connection management.

Exports:
  - Base, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - ChunkRecordModel: Chunk record table

Dependencies: sqlalchemy, scan_rag.configs
System role: Database adapter backing the SQL chunk store
"""

from scan_rag.boundary.db.base import Base, CreatedAtMixin
from scan_rag.boundary.db.connection import get_async_engine, get_async_session_factory
from scan_rag.boundary.db.chunk_record_model import ChunkRecordModel

__all__ = [
    "Base",
    "CreatedAtMixin",
    "get_async_engine",
    "get_async_session_factory",
    "ChunkRecordModel",
]
