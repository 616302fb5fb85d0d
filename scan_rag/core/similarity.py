"""
Vector validation and cosine similarity.

Dependencies: numpy
System role: Scoring primitives shared by embedding validation and retrieval
"""

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from scan_rag.core.exceptions import ValidationError

# Score for a zero-magnitude vector; ranks below every real similarity.
ZERO_MAGNITUDE_SCORE = float("-inf")


def as_vector(embedding: Any, dimension: int) -> np.ndarray | None:
    """
    Validate an embedding.

    Args:
        embedding: Raw embedding value
        dimension: Expected vector length

    Returns:
        np.ndarray | None: Float vector, or None when the value is not a
        list of finite real numbers of the expected length
    """
    if dimension <= 0:
        return None
    if not isinstance(embedding, (list, tuple)) or len(embedding) != dimension:
        return None
    for value in embedding:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not math.isfinite(value):
            return None
    return np.asarray(embedding, dtype=np.float64)


def cosine_similarity(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """
    Cosine similarity between two vectors of equal length.

    Returns ZERO_MAGNITUDE_SCORE when either vector has zero magnitude.
    The result is clipped to [-1, 1] to absorb floating-point overshoot.
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    if vec_a.shape != vec_b.shape:
        raise ValidationError(
            "Vectors must have the same dimensionality",
            details={"left": vec_a.shape, "right": vec_b.shape},
        )

    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a == 0.0 or norm_b == 0.0:
        return ZERO_MAGNITUDE_SCORE

    score = float(np.dot(vec_a, vec_b) / (norm_a * norm_b))
    return max(-1.0, min(1.0, score))
