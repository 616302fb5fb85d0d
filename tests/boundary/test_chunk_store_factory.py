"""
Test suite for chunk store selection and the in-memory store.

System role: Verification of store wiring from environment configuration
"""

import pytest

from scan_rag.boundary.store import InMemoryChunkStore, SQLChunkStore, get_chunk_store
from scan_rag.configs import get_settings
from scan_rag.core.exceptions import ChunkStoreError, ValidationError


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around each test so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestGetChunkStore:
    """Test suite for get_chunk_store."""

    def test_memory_type_should_return_in_memory_store(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNK_STORE_TYPE", "memory")

        assert isinstance(get_chunk_store(), InMemoryChunkStore)

    def test_sql_type_should_return_sql_store(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNK_STORE_TYPE", "sql")
        monkeypatch.setenv("POSTGRES_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

        assert isinstance(get_chunk_store(), SQLChunkStore)

    def test_unknown_type_should_raise(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNK_STORE_TYPE", "faiss")

        with pytest.raises(ValueError, match="Invalid CHUNK_STORE_TYPE"):
            get_chunk_store()


class TestInMemoryChunkStore:
    """Test suite for the in-memory store contract."""

    @pytest.mark.asyncio
    async def test_duplicate_create_should_raise(self, memory_store, make_record) -> None:
        await memory_store.create(make_record())

        with pytest.raises(ChunkStoreError) as exc_info:
            await memory_store.create(make_record())

        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_delete_should_require_matching_partition(
        self, memory_store, make_record
    ) -> None:
        record = make_record(scan_id="scan-1")
        await memory_store.create(record)

        with pytest.raises(ChunkStoreError) as exc_info:
            await memory_store.delete(record.id, "scan-2")

        assert exc_info.value.details["not_found"] is True
        assert len(memory_store) == 1

    @pytest.mark.asyncio
    async def test_query_without_filter_should_raise(self, memory_store) -> None:
        with pytest.raises(ValidationError):
            await memory_store.query()

    @pytest.mark.asyncio
    async def test_query_should_return_copies(self, memory_store, make_record) -> None:
        await memory_store.create(make_record(embedding=[1.0, 0.0]))

        [record] = await memory_store.query(scan_id="scan-1")
        record.embedding.append(9.0)

        [stored] = await memory_store.query(scan_id="scan-1")
        assert stored.embedding == [1.0, 0.0]
