"""
SQL chunk store.

Persists chunk records through SQLAlchemy async sessions. Every operation
runs in its own short transaction, so a document's records are written
one at a time.

Dependencies: sqlalchemy, scan_rag.boundary.db
System role: Production record store
"""

import logging

from sqlalchemy import delete, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from scan_rag.boundary.db.base import Base
from scan_rag.boundary.db.chunk_record_model import ChunkRecordModel
from scan_rag.boundary.store.base import ChunkStore
from scan_rag.core.exceptions import ChunkStoreError
from scan_rag.models.chunk import ChunkRecord

logger = logging.getLogger(__name__)


class SQLChunkStore(ChunkStore):
    """
    Chunk store backed by the ``chunk_records`` table.

    Wraps every SQLAlchemy failure in ChunkStoreError so callers see a
    single retryable error type.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize store.

        Args:
            session_factory: Async session factory bound to the target database
        """
        self._session_factory = session_factory

    @staticmethod
    async def create_schema(engine: AsyncEngine) -> None:
        """Create the chunk_records table if missing."""
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def initialize(self) -> None:
        await self.create_schema(self._session_factory.kw["bind"])

    async def create(self, record: ChunkRecord) -> None:
        row = ChunkRecordModel(**record.model_dump())
        try:
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()
        except IntegrityError as e:
            raise ChunkStoreError(
                f"Chunk record already exists: {record.id}",
                operation="create",
                retryable=False,
                details={"scan_id": record.scan_id, "record_id": record.id},
            ) from e
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                "Failed to create chunk record",
                operation="create",
                details={"scan_id": record.scan_id, "record_id": record.id, "error": str(e)},
            ) from e

    async def query(
        self,
        *,
        scan_id: str | None = None,
        document_id: str | None = None,
        tenant_id: str | None = None,
    ) -> list[ChunkRecord]:
        filters = self._require_filter(
            scan_id=scan_id,
            document_id=document_id,
            tenant_id=tenant_id,
        )
        stmt = select(ChunkRecordModel)
        for key, value in filters.items():
            stmt = stmt.where(getattr(ChunkRecordModel, key) == value)

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                "Failed to query chunk records",
                operation="query",
                details={**filters, "error": str(e)},
            ) from e

        return [self._to_record(row) for row in rows]

    async def delete(self, record_id: str, partition_key: str) -> None:
        stmt = delete(ChunkRecordModel).where(
            ChunkRecordModel.scan_id == partition_key,
            ChunkRecordModel.id == record_id,
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                "Failed to delete chunk record",
                operation="delete",
                details={"scan_id": partition_key, "record_id": record_id, "error": str(e)},
            ) from e

        if result.rowcount == 0:
            raise ChunkStoreError(
                f"Chunk record not found: {record_id}",
                operation="delete",
                retryable=False,
                details={"scan_id": partition_key, "record_id": record_id, "not_found": True},
            )

    async def ping(self) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise ChunkStoreError(
                "Chunk store unreachable",
                operation="ping",
                details={"error": str(e)},
            ) from e

    @staticmethod
    def _to_record(row: ChunkRecordModel) -> ChunkRecord:
        return ChunkRecord(
            id=row.id,
            document_id=row.document_id,
            scan_id=row.scan_id,
            tenant_id=row.tenant_id,
            workspace_id=row.workspace_id,
            document_type=row.document_type,
            file_name=row.file_name,
            chunk_index=row.chunk_index,
            text=row.text,
            embedding=row.embedding,
            created_at=row.created_at,
        )
