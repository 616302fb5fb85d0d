"""
Test suite for structured logging helpers and request path tagging.

System role: Verification of log context shaping
"""

import logging

import pytest

from scan_rag.core.exceptions import ChunkStoreError
from scan_rag.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    summarize_value,
)
from scan_rag.observability.middleware import scan_id_from_path


class TestSummarizeValue:
    """Test suite for summarize_value."""

    @pytest.mark.parametrize("value", [None, True, 3, 0.25])
    def test_scalars_should_pass_through(self, value) -> None:
        assert summarize_value(value) == value

    def test_embedding_should_collapse_to_length(self) -> None:
        assert summarize_value([0.1] * 1536) == "vector(len=1536)"

    def test_non_numeric_list_should_report_item_count(self) -> None:
        assert summarize_value(["a", "b"]) == "list(2 items)"

    def test_long_text_should_be_cut(self) -> None:
        summary = summarize_value("x" * 1000, max_length=10)

        assert summary.startswith("xxxxxxxxxx...")
        assert summary.endswith("(1000 chars)")


class TestLogHelpers:
    """Test suite for log_with_context and log_exception_with_context."""

    def test_context_should_be_attached_to_record(self, caplog) -> None:
        logger = logging.getLogger("scan_rag.test")
        with caplog.at_level(logging.INFO, logger="scan_rag.test"):
            log_with_context(logger, logging.INFO, "stored", scan_id="scan-1", embedding=[1.0, 2.0])

        record = caplog.records[-1]
        assert record.scan_id == "scan-1"
        assert record.embedding == "vector(len=2)"

    def test_service_error_details_should_be_merged(self, caplog) -> None:
        logger = logging.getLogger("scan_rag.test")
        error = ChunkStoreError("Store down", operation="query", retryable=False)

        with caplog.at_level(logging.ERROR, logger="scan_rag.test"):
            log_exception_with_context(logger, "query failed", error, scan_id="scan-1")

        record = caplog.records[-1]
        assert record.operation == "query"
        assert record.retryable is False
        assert record.error_type == "ChunkStoreError"
        assert record.scan_id == "scan-1"
        assert record.exc_info is not None


class TestExceptionContext:
    """Test suite for service error context."""

    def test_none_context_should_be_dropped(self) -> None:
        error = ChunkStoreError("Store down")

        assert "operation" not in error.details
        assert str(error) == "Store down"

    def test_to_dict_should_include_details(self) -> None:
        error = ChunkStoreError("Store down", operation="delete", details={"deleted": 2})

        assert error.to_dict() == {
            "error_type": "ChunkStoreError",
            "error_msg": "Store down",
            "retryable": True,
            "deleted": 2,
            "operation": "delete",
        }


class TestScanIdFromPath:
    """Test suite for scan_id_from_path."""

    def test_scan_path_should_yield_scan_id(self) -> None:
        assert scan_id_from_path("/api/v1/scans/scan-42/search") == "scan-42"

    def test_other_path_should_yield_none(self) -> None:
        assert scan_id_from_path("/api/v1/health") is None
