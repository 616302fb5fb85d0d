"""
Retrieval service orchestrator.

Embeds a user query and ranks the scan's chunks against it. Failures
degrade to an empty result so the chat flow can answer with
"no relevant information found" instead of erroring.

Dependencies: scan_rag.core.retriever, scan_rag.boundary.embeddings
System role: Retrieval orchestration
"""

import logging

from scan_rag.boundary.embeddings.client import EmbeddingClient
from scan_rag.core.exceptions import (
    ChunkStoreError,
    EmbeddingError,
    RetrievalError,
    ValidationError,
)
from scan_rag.core.retriever import Retriever
from scan_rag.models.chunk import ChunkMatch
from scan_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class RetrievalService:
    """Query-text retrieval over one scan."""

    def __init__(
        self,
        embedder: EmbeddingClient,
        retriever: Retriever,
        default_top_k: int = 5,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            embedder: Embedding client (same model used at ingestion)
            retriever: Ranking implementation
            default_top_k: Result count when the caller does not give one
        """
        self._embedder = embedder
        self._retriever = retriever
        self._default_top_k = default_top_k

    async def retrieve_for_query(
        self,
        query: str,
        scan_id: str,
        top_k: int | None = None,
    ) -> list[ChunkMatch]:
        """
        Retrieve the chunks most relevant to a query.

        Args:
            query: User query text
            scan_id: Scan scope
            top_k: Maximum number of results (defaults to the configured value)

        Returns:
            list[ChunkMatch]: Ranked matches; empty when nothing is found or
            retrieval failed
        """
        if not query or not query.strip():
            return []

        try:
            query_vector = await self._embedder.embed_query(query)
            matches = await self._retriever.search(
                query_vector,
                scan_id=scan_id,
                top_k=top_k or self._default_top_k,
            )
        except (EmbeddingError, RetrievalError, ChunkStoreError, ValidationError) as e:
            log_exception_with_context(
                logger,
                f"{__name__}:retrieve_for_query - Retrieval failed, returning no results",
                e,
                scan_id=scan_id,
                query_length=len(query),
            )
            return []

        logger.info(
            f"{__name__}:retrieve_for_query - Retrieved {len(matches)} chunks",
            extra={"scan_id": scan_id, "result_count": len(matches)},
        )
        return matches
