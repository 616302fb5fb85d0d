"""
Test suite for RetrievalService.

Tests query embedding, ranking over ingested documents and the
degrade-to-empty behaviour on failures.

System role: Verification of retrieval orchestration
"""

from unittest.mock import AsyncMock

import pytest

from scan_rag.application.retrieval_service import RetrievalService
from scan_rag.core.exceptions import (
    ChunkStoreError,
    EmbeddingError,
    RetrievalError,
    ValidationError,
)

SCOPE = {
    "scan_id": "scan-1",
    "tenant_id": "tenant-1",
    "workspace_id": "workspace-1",
    "document_type": "Report",
}


@pytest.fixture
def retrieval_service(embedding_client, retriever) -> RetrievalService:
    """Provide retrieval service over the in-memory store."""
    return RetrievalService(embedder=embedding_client, retriever=retriever, default_top_k=5)


@pytest.fixture
def mock_retriever() -> AsyncMock:
    """Provide mock retriever."""
    retriever = AsyncMock()
    retriever.search.return_value = []
    return retriever


class TestRetrieveForQuery:
    """Test suite for query retrieval over ingested documents."""

    @pytest.mark.asyncio
    async def test_query_should_rank_matching_document_first(
        self, lifecycle_manager, retrieval_service
    ) -> None:
        await lifecycle_manager.ingest(
            document_id="doc-invoice",
            file_name="invoice.pdf",
            text="Invoice 1042. The invoice total is due.",
            **SCOPE,
        )
        await lifecycle_manager.ingest(
            document_id="doc-contract",
            file_name="contract.pdf",
            text="Contract terms for shipping.",
            **SCOPE,
        )

        matches = await retrieval_service.retrieve_for_query("invoice", scan_id="scan-1")

        assert [m.document_id for m in matches] == ["doc-invoice", "doc-contract"]
        assert matches[0].file_name == "invoice.pdf"
        assert matches[0].score > matches[1].score

    @pytest.mark.asyncio
    async def test_top_k_should_limit_results(self, lifecycle_manager, retrieval_service) -> None:
        for index in range(4):
            await lifecycle_manager.ingest(
                document_id=f"doc-{index}",
                file_name=f"{index}.pdf",
                text=f"Payment {index}.",
                **SCOPE,
            )

        matches = await retrieval_service.retrieve_for_query("payment", scan_id="scan-1", top_k=2)

        assert len(matches) == 2

    @pytest.mark.asyncio
    async def test_scan_without_documents_should_return_empty_list(
        self, retrieval_service
    ) -> None:
        assert await retrieval_service.retrieve_for_query("invoice", scan_id="scan-1") == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   "])
    async def test_blank_query_should_return_empty_without_embedding(
        self, mock_retriever, query: str
    ) -> None:
        embedder = AsyncMock()
        service = RetrievalService(embedder=embedder, retriever=mock_retriever)

        assert await service.retrieve_for_query(query, scan_id="scan-1") == []
        embedder.embed_query.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_top_k_should_be_used_when_omitted(self, mock_retriever) -> None:
        embedder = AsyncMock()
        embedder.embed_query.return_value = [1.0, 0.0]
        service = RetrievalService(embedder=embedder, retriever=mock_retriever, default_top_k=7)

        await service.retrieve_for_query("invoice", scan_id="scan-1")

        mock_retriever.search.assert_awaited_once_with([1.0, 0.0], scan_id="scan-1", top_k=7)


class TestRetrieveForQueryFailures:
    """Test suite for degraded retrieval."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            EmbeddingError("quota exceeded"),
            RetrievalError("Failed to load chunk records", scan_id="scan-1"),
            ChunkStoreError("store unreachable", operation="query"),
            ValidationError("bad query vector", field="query_vector"),
        ],
    )
    async def test_failure_should_degrade_to_empty_list(self, mock_retriever, error) -> None:
        embedder = AsyncMock()
        embedder.embed_query.return_value = [1.0, 0.0]
        mock_retriever.search.side_effect = error
        service = RetrievalService(embedder=embedder, retriever=mock_retriever)

        assert await service.retrieve_for_query("invoice", scan_id="scan-1") == []

    @pytest.mark.asyncio
    async def test_embedding_failure_should_skip_search(self, mock_retriever) -> None:
        embedder = AsyncMock()
        embedder.embed_query.side_effect = EmbeddingError("timed out")
        service = RetrievalService(embedder=embedder, retriever=mock_retriever)

        assert await service.retrieve_for_query("invoice", scan_id="scan-1") == []
        mock_retriever.search.assert_not_awaited()
