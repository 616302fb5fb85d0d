"""
Chunk record store interface.

Partitioned record store contract: create a record, query records by
scoping fields, delete one record by id within its partition.

Dependencies: scan_rag.models
System role: Record store abstraction for the ingestion pipeline
"""

from abc import ABC, abstractmethod

from scan_rag.core.exceptions import ValidationError
from scan_rag.models.chunk import ChunkRecord


class ChunkStore(ABC):
    """
    Abstract chunk record store.

    The partition key of every record is its scan_id. Records are never
    updated in place; creating an existing (scan_id, id) pair fails.
    """

    @abstractmethod
    async def create(self, record: ChunkRecord) -> None:
        """
        Persist a new chunk record.

        Raises:
            ChunkStoreError: When the write fails or the record already exists
        """

    @abstractmethod
    async def query(
        self,
        *,
        scan_id: str | None = None,
        document_id: str | None = None,
        tenant_id: str | None = None,
    ) -> list[ChunkRecord]:
        """
        Return every record matching all given filters.

        Raises:
            ValidationError: When no filter is given
            ChunkStoreError: When the query fails
        """

    @abstractmethod
    async def delete(self, record_id: str, partition_key: str) -> None:
        """
        Delete one record.

        Args:
            record_id: Chunk record ID
            partition_key: The record's scan_id

        Raises:
            ChunkStoreError: When the delete fails or the record does not exist
        """

    @abstractmethod
    async def ping(self) -> None:
        """
        Check the store is reachable.

        Raises:
            ChunkStoreError: When the store cannot be reached
        """

    async def initialize(self) -> None:
        """Prepare backing storage on startup (no-op by default)."""

    @staticmethod
    def _require_filter(**filters: str | None) -> dict[str, str]:
        """Drop unset filters; querying the whole store is not allowed."""
        active = {key: value for key, value in filters.items() if value is not None}
        if not active:
            raise ValidationError(
                "At least one of scan_id, document_id or tenant_id is required",
                field="filters",
            )
        return active
