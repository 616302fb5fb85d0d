"""
Gemini embeddings pinned to one output dimension.

Chunk vectors and query vectors must share a dimension or the chunk is
excluded at retrieval time, so the dimension is fixed at construction and
applied to every query-embedding call.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the chunk store
"""

import logging
from typing import Any

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """``GoogleGenerativeAIEmbeddings`` with a constructor-level dimension."""

    _output_dimensionality: int = 1536

    def __init__(self, model: str, output_dimensionality: int, **kwargs: Any) -> None:
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Gemini embeddings {model} at dimension {output_dimensionality}"
        )

    def _with_dimension(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if kwargs.get("output_dimensionality") is None:
            kwargs["output_dimensionality"] = self._output_dimensionality
        return kwargs

    def embed_query(self, text: str, **kwargs: Any) -> list[float]:
        return super().embed_query(text, **self._with_dimension(kwargs))

    async def aembed_query(self, text: str, **kwargs: Any) -> list[float]:
        return await super().aembed_query(text, **self._with_dimension(kwargs))
