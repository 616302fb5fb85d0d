"""
Brute-force cosine similarity retrieval over a scan's chunk records.

Loads every chunk record of the scan, drops records whose embedding is
missing or malformed, scores the rest against the query vector and
returns the top-k matches. Zero-magnitude vectors stay candidates but
rank below every real score.

Dependencies: scan_rag.boundary.store, scan_rag.core.similarity
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from scan_rag.boundary.store.base import ChunkStore
from scan_rag.core.exceptions import ChunkStoreError, RetrievalError, ValidationError
from scan_rag.core.similarity import ZERO_MAGNITUDE_SCORE, as_vector, cosine_similarity
from scan_rag.models.chunk import ChunkMatch, ChunkRecord
from scan_rag.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

# Reported score of a zero-magnitude candidate
MIN_MATCH_SCORE = -1.0


class Retriever(Protocol):
    """Ranks the chunks of a scan against a query vector."""

    async def search(
        self,
        query_vector: Sequence[float],
        scan_id: str,
        top_k: int,
        min_score: float | None = None,
    ) -> list[ChunkMatch]: ...


class SimilarityRetriever:
    """
    Whole-scope similarity search.

    Callers depend only on ``search``; an approximate nearest-neighbour
    index can replace this class without touching ingestion.
    """

    def __init__(self, store: ChunkStore, dimension: int | None = None) -> None:
        """
        Initialize retriever.

        Args:
            store: Chunk record store
            dimension: Expected embedding dimension; when None the query
                vector's length is used
        """
        self._store = store
        self._dimension = dimension

    async def search(
        self,
        query_vector: Sequence[float],
        scan_id: str,
        top_k: int,
        min_score: float | None = None,
    ) -> list[ChunkMatch]:
        """
        Rank the scan's chunks against a query vector.

        Args:
            query_vector: Query embedding
            scan_id: Scan scope
            top_k: Maximum number of results
            min_score: Optional similarity floor

        Returns:
            list[ChunkMatch]: At most top_k matches, highest score first,
            ties broken by chunk_index

        Raises:
            ValidationError: When top_k < 1 or the query vector is invalid
            RetrievalError: When the chunk records cannot be loaded
        """
        if top_k < 1:
            raise ValidationError(f"top_k must be at least 1, got {top_k}", field="top_k")

        dimension = self._dimension or len(query_vector)
        query = as_vector(list(query_vector), dimension)
        if query is None:
            raise ValidationError(
                "Query vector must be a non-empty list of finite numbers "
                f"of dimension {dimension}",
                field="query_vector",
                details={"length": len(query_vector)},
            )

        try:
            records = await self._store.query(scan_id=scan_id)
        except ChunkStoreError as e:
            raise RetrievalError(
                "Failed to load chunk records",
                scan_id=scan_id,
                details={"error": e.message},
            ) from e

        scored: list[tuple[float, bool, ChunkRecord]] = []
        excluded = 0
        for record in records:
            vector = as_vector(record.embedding, dimension)
            if vector is None:
                excluded += 1
                continue
            score = cosine_similarity(query, vector)
            # Zero magnitude ranks last, below any real score of -1.0
            is_zero = score == ZERO_MAGNITUDE_SCORE
            if is_zero:
                score = MIN_MATCH_SCORE
            if min_score is not None and score < min_score:
                continue
            scored.append((score, is_zero, record))

        scored.sort(key=lambda item: (-item[0], item[1], item[2].chunk_index))

        matches = [
            ChunkMatch(
                document_id=record.document_id,
                document_type=record.document_type,
                file_name=record.file_name,
                chunk_index=record.chunk_index,
                text=record.text,
                score=score,
            )
            for score, _, record in scored[:top_k]
        ]

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:search - Ranked {len(scored)} candidates, returning {len(matches)}",
            scan_id=scan_id,
            top_k=top_k,
            record_count=len(records),
            excluded_count=excluded,
        )
        return matches
