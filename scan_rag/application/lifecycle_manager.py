"""
Embedding lifecycle manager.

Owns the chunk records of each document: replaces them on ingestion
(delete all, then create all) and removes them per document or per scan.

Ingestion is not transactional. Records are written one at a time, so a
failure part-way leaves a partial set behind; re-ingesting the document
always starts by deleting it. Concurrent ingestions of the same document
are not coordinated here and must be serialized by the caller.

Dependencies: scan_rag.core, scan_rag.boundary
System role: Document ingestion orchestration
"""

import asyncio
import logging
import time
from collections import defaultdict
from datetime import datetime, timezone

from scan_rag.boundary.embeddings.client import EmbeddingClient
from scan_rag.boundary.store.base import ChunkStore
from scan_rag.core.chunker import TextChunker
from scan_rag.core.exceptions import ChunkStoreError, EmbeddingError, ValidationError
from scan_rag.models.chunk import ChunkRecord, DocumentChunkSummary, make_chunk_id
from scan_rag.models.ingestion import (
    INGESTION_FAILED_MESSAGE,
    IngestionResult,
    IngestionStatus,
)
from scan_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class EmbeddingLifecycleManager:
    """Ingest, replace and remove a document's embedded chunks."""

    def __init__(
        self,
        store: ChunkStore,
        embedder: EmbeddingClient,
        chunker: TextChunker,
        embedding_concurrency: int = 1,
    ) -> None:
        """
        Initialize manager.

        Args:
            store: Chunk record store
            embedder: Embedding service client
            chunker: Text chunker holding the chunk size budget
            embedding_concurrency: Embedding calls in flight per ingestion
                (1 issues them sequentially)
        """
        if embedding_concurrency < 1:
            raise ValidationError(
                "embedding_concurrency must be at least 1",
                field="embedding_concurrency",
            )
        self._store = store
        self._embedder = embedder
        self._chunker = chunker
        self._embedding_concurrency = embedding_concurrency

    async def ingest(
        self,
        document_id: str,
        scan_id: str,
        tenant_id: str,
        workspace_id: str,
        document_type: str,
        file_name: str,
        text: str,
    ) -> IngestionResult:
        """
        Replace a document's chunk records with freshly embedded chunks.

        Args:
            document_id: Document ID
            scan_id: Owning scan (partition key)
            tenant_id: Owning tenant
            workspace_id: Owning workspace
            document_type: Attribution metadata
            file_name: Attribution metadata
            text: Full document text

        Returns:
            IngestionResult: succeeded, skipped (no text) or failed (retryable)
        """
        start_time = time.perf_counter()

        def elapsed_ms() -> float:
            return round((time.perf_counter() - start_time) * 1000, 2)

        def failed(error: Exception, written: int) -> IngestionResult:
            log_exception_with_context(
                logger,
                f"{__name__}:ingest - Ingestion failed",
                error,
                document_id=document_id,
                scan_id=scan_id,
                records_written=written,
            )
            return IngestionResult(
                document_id=document_id,
                scan_id=scan_id,
                status=IngestionStatus.FAILED,
                chunk_count=written,
                retryable=True,
                error=str(error),
                message=INGESTION_FAILED_MESSAGE,
                processing_time_ms=elapsed_ms(),
            )

        try:
            await self.remove_document(document_id)
        except ChunkStoreError as e:
            return failed(e, 0)

        chunks = self._chunker.chunk(text)
        if not chunks:
            logger.info(
                f"{__name__}:ingest - No text to ingest, skipping",
                extra={"document_id": document_id, "scan_id": scan_id},
            )
            return IngestionResult(
                document_id=document_id,
                scan_id=scan_id,
                status=IngestionStatus.SKIPPED,
                processing_time_ms=elapsed_ms(),
            )

        try:
            embeddings = await self._embed_chunks(document_id, chunks)
        except EmbeddingError as e:
            return failed(e, 0)

        written = 0
        try:
            for chunk_index, (chunk, embedding) in enumerate(zip(chunks, embeddings)):
                await self._store.create(
                    ChunkRecord(
                        id=make_chunk_id(document_id, chunk_index),
                        document_id=document_id,
                        scan_id=scan_id,
                        tenant_id=tenant_id,
                        workspace_id=workspace_id,
                        document_type=document_type or "Unknown",
                        file_name=file_name,
                        chunk_index=chunk_index,
                        text=chunk,
                        embedding=embedding,
                        created_at=datetime.now(timezone.utc),
                    )
                )
                written += 1
        except ChunkStoreError as e:
            return failed(e, written)

        logger.info(
            f"{__name__}:ingest - Stored {written} chunks",
            extra={
                "document_id": document_id,
                "scan_id": scan_id,
                "chunk_count": written,
                "processing_time_ms": elapsed_ms(),
            },
        )
        return IngestionResult(
            document_id=document_id,
            scan_id=scan_id,
            status=IngestionStatus.SUCCEEDED,
            chunk_count=written,
            processing_time_ms=elapsed_ms(),
        )

    async def _embed_chunks(self, document_id: str, chunks: list[str]) -> list[list[float]]:
        """
        Embed every chunk, preserving order; the first failure aborts.

        Raises:
            EmbeddingError: When any chunk fails to embed
        """
        if self._embedding_concurrency == 1:
            embeddings = []
            for chunk_index, chunk in enumerate(chunks):
                embeddings.append(await self._embed_one(document_id, chunk_index, chunk))
            return embeddings

        semaphore = asyncio.Semaphore(self._embedding_concurrency)

        async def bounded(chunk_index: int, chunk: str) -> list[float]:
            async with semaphore:
                return await self._embed_one(document_id, chunk_index, chunk)

        tasks = [
            asyncio.ensure_future(bounded(chunk_index, chunk))
            for chunk_index, chunk in enumerate(chunks)
        ]
        try:
            return list(await asyncio.gather(*tasks))
        finally:
            for task in tasks:
                task.cancel()
            # Collect every outcome so sibling failures are not reported as unretrieved
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _embed_one(self, document_id: str, chunk_index: int, chunk: str) -> list[float]:
        try:
            return await self._embedder.embed(chunk)
        except EmbeddingError as e:
            e.details.setdefault("document_id", document_id)
            e.details["chunk_index"] = chunk_index
            raise

    async def remove_document(self, document_id: str, scan_id: str | None = None) -> int:
        """
        Delete every chunk record of a document, optionally within one scan.

        Each record is deleted in its own scan partition. A failed delete
        is logged and the loop continues; the error is raised once every
        record has been attempted.

        Args:
            document_id: Document ID
            scan_id: Restrict the delete to this scan; None removes the
                document from every scan

        Returns:
            int: Number of records deleted (0 when none exist)

        Raises:
            ChunkStoreError: When the lookup fails or any delete failed
        """
        records = await self._store.query(document_id=document_id, scan_id=scan_id)
        scope = {"document_id": document_id}
        if scan_id is not None:
            scope["scan_id"] = scan_id
        return await self._delete_records(records, scope=scope)

    async def remove_scan(self, scan_id: str) -> int:
        """
        Delete every chunk record of a scan, across all its documents.

        Args:
            scan_id: Scan ID

        Returns:
            int: Number of records deleted (0 when none exist)

        Raises:
            ChunkStoreError: When the lookup fails or any delete failed
        """
        records = await self._store.query(scan_id=scan_id)
        return await self._delete_records(records, scope={"scan_id": scan_id})

    async def _delete_records(self, records: list[ChunkRecord], scope: dict[str, str]) -> int:
        deleted = 0
        failed_ids: list[str] = []

        for record in records:
            try:
                await self._store.delete(record.id, record.scan_id)
                deleted += 1
            except ChunkStoreError as e:
                if e.details.get("not_found"):
                    # Already gone, e.g. removed by a concurrent delete.
                    continue
                failed_ids.append(record.id)
                logger.warning(
                    f"{__name__}:delete - Failed to delete chunk record {record.id}: {e.message}",
                    extra={**scope, "record_id": record.id},
                )

        if records:
            logger.info(
                f"{__name__}:delete - Deleted {deleted}/{len(records)} chunk records",
                extra={**scope, "failed_count": len(failed_ids)},
            )

        if failed_ids:
            raise ChunkStoreError(
                f"Failed to delete {len(failed_ids)} of {len(records)} chunk records",
                operation="delete",
                details={**scope, "failed_ids": failed_ids, "deleted": deleted},
            )
        return deleted

    async def get_document_chunks(self, document_id: str) -> list[ChunkRecord]:
        """
        Return a document's chunk records ordered by chunk_index.

        Args:
            document_id: Document ID

        Returns:
            list[ChunkRecord]: Records in reading order
        """
        records = await self._store.query(document_id=document_id)
        return sorted(records, key=lambda record: record.chunk_index)

    async def list_scan_documents(self, scan_id: str) -> list[DocumentChunkSummary]:
        """
        Summarize the documents that have chunk records in a scan.

        Args:
            scan_id: Scan ID

        Returns:
            list[DocumentChunkSummary]: One entry per document, ordered by file name
        """
        by_document: dict[str, list[ChunkRecord]] = defaultdict(list)
        for record in await self._store.query(scan_id=scan_id):
            by_document[record.document_id].append(record)

        summaries = [
            DocumentChunkSummary(
                document_id=document_id,
                file_name=records[0].file_name,
                document_type=records[0].document_type,
                chunk_count=len(records),
                created_at=min(record.created_at for record in records),
            )
            for document_id, records in by_document.items()
        ]
        return sorted(summaries, key=lambda summary: (summary.file_name, summary.document_id))
