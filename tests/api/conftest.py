"""
API test fixtures.

Provides: TestClient with services wired to the in-memory store and
deterministic embeddings through dependency overrides
Dependencies: fastapi, pytest
System role: HTTP test infrastructure
"""

import pytest
from fastapi.testclient import TestClient

from scan_rag.api.deps import (
    get_chunk_store_dependency,
    get_lifecycle_manager,
    get_retrieval_service,
)
from scan_rag.api.main import create_app
from scan_rag.application.retrieval_service import RetrievalService


@pytest.fixture
def client(memory_store, lifecycle_manager, embedding_client, retriever):
    """
    Provide TestClient over the in-memory stack.

    Returns:
        TestClient: Client whose app resolves services to test instances
    """
    app = create_app()
    app.dependency_overrides[get_chunk_store_dependency] = lambda: memory_store
    app.dependency_overrides[get_lifecycle_manager] = lambda: lifecycle_manager
    app.dependency_overrides[get_retrieval_service] = lambda: RetrievalService(
        embedder=embedding_client,
        retriever=retriever,
        default_top_k=5,
    )
    return TestClient(app)


@pytest.fixture
def ingest_body():
    """Provide a valid ingestion request body."""
    return {
        "tenant_id": "tenant-1",
        "workspace_id": "workspace-1",
        "document_type": "Invoice",
        "file_name": "invoice.pdf",
        "text": "Invoice 1042.\n\nPayment due in 30 days.",
    }
