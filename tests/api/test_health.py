from unittest.mock import AsyncMock

from scan_rag.api.deps import get_chunk_store_dependency
from scan_rag.core.exceptions import ChunkStoreError


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}

def test_health_check_store(client):
    response = client.get("/api/v1/health/store")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Chunk store accessible"}

def test_health_check_store_unreachable(client):
    store = AsyncMock()
    store.ping.side_effect = ChunkStoreError("Chunk store unreachable", operation="ping")
    client.app.dependency_overrides[get_chunk_store_dependency] = lambda: store

    response = client.get("/api/v1/health/store")

    assert response.status_code == 503
    assert response.json()["detail"] == "Chunk store unreachable"

def test_correlation_id_should_be_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"

def test_correlation_id_should_be_generated_when_missing(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
