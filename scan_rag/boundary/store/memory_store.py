"""
In-memory chunk store.

Dict-backed store keyed by (scan_id, id) for local development and tests.

Dependencies: scan_rag.boundary.store.base
System role: Development record store (no persistence)
"""

import asyncio

from scan_rag.boundary.store.base import ChunkStore
from scan_rag.core.exceptions import ChunkStoreError
from scan_rag.models.chunk import ChunkRecord


class InMemoryChunkStore(ChunkStore):
    """Chunk store held in process memory."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], ChunkRecord] = {}
        self._lock = asyncio.Lock()

    async def create(self, record: ChunkRecord) -> None:
        key = (record.scan_id, record.id)
        async with self._lock:
            if key in self._records:
                raise ChunkStoreError(
                    f"Chunk record already exists: {record.id}",
                    operation="create",
                    retryable=False,
                    details={"scan_id": record.scan_id, "record_id": record.id},
                )
            self._records[key] = record.model_copy(deep=True)

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
        async with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if all(getattr(record, key) == value for key, value in filters.items())
            ]

    async def delete(self, record_id: str, partition_key: str) -> None:
        async with self._lock:
            if self._records.pop((partition_key, record_id), None) is None:
                raise ChunkStoreError(
                    f"Chunk record not found: {record_id}",
                    operation="delete",
                    retryable=False,
                    details={"scan_id": partition_key, "record_id": record_id, "not_found": True},
                )

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        return len(self._records)
