"""
Service error types.

Every error carries a short message, a details dict that ends up in log
records and HTTP error bodies, and a ``retryable`` flag telling callers
whether repeating the same call may succeed.

Dependencies: None (pure domain layer)
System role: Error vocabulary shared by all layers
"""

from typing import Any, ClassVar


class ScanRagException(Exception):
    """Root of the service's error types."""

    default_retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        retryable: bool | None = None,
        **context: Any,
    ) -> None:
        """
        Args:
            message: Human-readable error message
            details: Free-form diagnostic values
            retryable: Overrides the class default when given
            **context: Identifying values (document_id, scan_id, ...);
                None values are dropped
        """
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.details.update({key: value for key, value in context.items() if value is not None})
        self.retryable = self.default_retryable if retryable is None else retryable

    def to_dict(self) -> dict[str, Any]:
        """Flatten the error into a JSON-friendly mapping."""
        return {
            "error_type": type(self).__name__,
            "error_msg": self.message,
            "retryable": self.retryable,
            **self.details,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({rendered})"


class ValidationError(ScanRagException):
    """Input rejected before any external call was made."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details, field=field)


class EmbeddingError(ScanRagException):
    """The embedding service failed, timed out or returned a bad vector."""

    default_retryable = True

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        retryable: bool = True,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details, retryable, document_id=document_id)


class ChunkStoreError(ScanRagException):
    """
    A chunk record store call failed.

    ``operation`` names the store call (create, query, delete, ping).
    Deleting a record that no longer exists sets ``details["not_found"]``.
    """

    default_retryable = True

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        retryable: bool = True,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details, retryable, operation=operation)


class RetrievalError(ScanRagException):
    """Ranking a scan's chunks could not complete."""

    default_retryable = True

    def __init__(
        self,
        message: str,
        scan_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details, scan_id=scan_id)
