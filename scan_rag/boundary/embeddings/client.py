"""
Embedding service client.

Turns one text into one validated vector. Wraps any LangChain Embeddings
implementation with input truncation, a per-call timeout, retry with
exponential backoff, and response validation.

Dependencies: langchain_core, tenacity, scan_rag.core
System role: Embedding generation adapter
"""

import asyncio
import logging

from langchain_core.embeddings import Embeddings
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

from scan_rag.configs import get_settings
from scan_rag.core.exceptions import EmbeddingError, ValidationError
from scan_rag.core.similarity import as_vector

logger = logging.getLogger(__name__)

# HTTP statuses worth another attempt: request timeout, rate limit
RETRYABLE_STATUS_CODES = frozenset({408, 429})


def _status_code(exc: BaseException) -> int | None:
    """HTTP status carried by Google API, google-genai or httpx errors."""
    response = getattr(exc, "response", None)
    for candidate in (
        getattr(exc, "status_code", None),
        getattr(exc, "code", None),
        getattr(response, "status_code", None),
    ):
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return candidate
    return None


def is_transient_error(exc: BaseException) -> bool:
    """
    Decide whether an embedding backend failure may succeed on retry.

    The exception chain is searched because the LangChain wrappers re-raise
    the provider error as the cause. Timeouts, connection failures, 408,
    429 and 5xx responses are transient; anything else (bad API key,
    rejected request) fails immediately.

    Args:
        exc: Exception raised by the backend call

    Returns:
        bool: True when the call should be retried
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (TimeoutError, asyncio.TimeoutError, ConnectionError)):
            return True
        status = _status_code(current)
        if status is not None:
            return status in RETRYABLE_STATUS_CODES or status >= 500
        current = current.__cause__ or current.__context__
    return False


class EmbeddingClient:
    """Embedding generator with fixed output dimension."""

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int,
        max_input_chars: int = 10000,
        timeout_seconds: float = 30.0,
        max_retries: int = 3,
        retry_wait: wait_base | None = None,
    ) -> None:
        """
        Initialize embedding client.

        Args:
            embeddings: LangChain embeddings backend
            dimension: Expected vector length
            max_input_chars: Longer inputs are truncated before the call
            timeout_seconds: Per-attempt timeout
            max_retries: Attempts before giving up
            retry_wait: Backoff policy between attempts
        """
        if dimension <= 0:
            raise ValidationError("dimension must be positive", field="dimension")
        self._embeddings = embeddings
        self.dimension = dimension
        self._max_input_chars = max_input_chars
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries
        self._retry_wait = retry_wait or wait_exponential_jitter(initial=1, max=30, jitter=2)

    async def embed(self, text: str) -> list[float]:
        """
        Generate the embedding for one text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector of length ``dimension``

        Raises:
            ValidationError: When text is blank
            EmbeddingError: When the service fails, times out, or returns
                a malformed vector
        """
        if not text or not text.strip():
            raise ValidationError("Cannot embed empty text", field="text")

        if len(text) > self._max_input_chars:
            logger.info(
                f"{__name__}:embed - Truncating text from {len(text)} to {self._max_input_chars} characters"
            )
            text = text[: self._max_input_chars]

        try:
            raw = await self._embed_with_retry(text)
        except asyncio.TimeoutError as e:
            raise EmbeddingError(
                f"Embedding call timed out after {self._timeout_seconds}s",
                details={"attempts": self._max_retries},
            ) from e
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embedding: {e}",
                retryable=is_transient_error(e),
                details={"error_type": type(e).__name__},
            ) from e

        vector = as_vector(raw, self.dimension)
        if vector is None:
            raise EmbeddingError(
                "Malformed embedding response",
                retryable=True,
                details={
                    "expected_dimension": self.dimension,
                    "received_length": len(raw) if isinstance(raw, (list, tuple)) else None,
                },
            )
        return vector.tolist()

    async def embed_query(self, query: str) -> list[float]:
        """Generate the embedding for query text (same model as chunks)."""
        return await self.embed(query)

    async def _embed_with_retry(self, text: str) -> list[float]:
        """Call the backend, retrying timeouts and transient service errors."""
        async for attempt in AsyncRetrying(
            retry=retry_if_exception(is_transient_error),
            stop=stop_after_attempt(self._max_retries),
            wait=self._retry_wait,
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:embed - Retry {retry_state.attempt_number}/{self._max_retries} "
                f"after {type(retry_state.outcome.exception()).__name__}"
            ),
            reraise=True,
        ):
            with attempt:
                return await asyncio.wait_for(
                    self._embeddings.aembed_query(text),
                    timeout=self._timeout_seconds,
                )


def get_embedding_client() -> EmbeddingClient:
    """
    Build the production embedding client from settings.

    Returns:
        EmbeddingClient: Client backed by Gemini embeddings
    """
    from scan_rag.boundary.embeddings.fixed_dimension import FixedDimensionEmbeddings

    config = get_settings().embedding
    kwargs = {"google_api_key": config.google_api_key} if config.google_api_key else {}
    embeddings = FixedDimensionEmbeddings(
        model=config.model,
        output_dimensionality=config.dimension,
        **kwargs,
    )
    return EmbeddingClient(
        embeddings=embeddings,
        dimension=config.dimension,
        max_input_chars=config.max_input_chars,
        timeout_seconds=config.timeout_seconds,
        max_retries=config.max_retries,
    )
