"""
Test suite for vector validation and cosine similarity.

System role: Verification of scoring primitives
"""

import math
import random

import numpy as np
import pytest

from scan_rag.core.exceptions import ValidationError
from scan_rag.core.similarity import ZERO_MAGNITUDE_SCORE, as_vector, cosine_similarity


class TestCosineSimilarity:
    """Test suite for cosine_similarity."""

    def test_identical_vectors_should_score_one(self) -> None:
        assert cosine_similarity([0.3, -1.2, 4.0], [0.3, -1.2, 4.0]) == pytest.approx(1.0)

    def test_orthogonal_vectors_should_score_zero(self) -> None:
        assert cosine_similarity([1.0, 0.0, 0.0], [0.0, 2.5, 0.0]) == pytest.approx(0.0)

    def test_opposite_vectors_should_score_minus_one(self) -> None:
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_score_should_ignore_magnitude(self) -> None:
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)

    @pytest.mark.parametrize("seed", range(10))
    def test_score_should_stay_within_bounds(self, seed: int) -> None:
        rng = random.Random(seed)
        a = [rng.uniform(-1e6, 1e6) for _ in range(16)]
        b = [rng.uniform(-1e-6, 1e-6) for _ in range(16)]

        score = cosine_similarity(a, b)

        assert -1.0 <= score <= 1.0

    def test_zero_magnitude_should_score_lowest(self) -> None:
        assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == ZERO_MAGNITUDE_SCORE
        assert cosine_similarity([1.0, 0.0], [0.0, 0.0]) == ZERO_MAGNITUDE_SCORE
        assert ZERO_MAGNITUDE_SCORE < -1.0

    def test_mismatched_dimensions_should_raise(self) -> None:
        with pytest.raises(ValidationError):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


class TestAsVector:
    """Test suite for embedding validation."""

    def test_valid_list_should_convert_to_float_array(self) -> None:
        vector = as_vector([1, 2.5, -3], 3)

        assert isinstance(vector, np.ndarray)
        assert vector.tolist() == [1.0, 2.5, -3.0]

    def test_tuple_should_be_accepted(self) -> None:
        assert as_vector((0.1, 0.2), 2) is not None

    @pytest.mark.parametrize(
        "embedding",
        [
            None,
            "0.1,0.2,0.3",
            {"values": [0.1, 0.2, 0.3]},
            [0.1, 0.2],
            [0.1, 0.2, 0.3, 0.4],
            [0.1, "0.2", 0.3],
            [0.1, None, 0.3],
            [True, 0.2, 0.3],
            [0.1, math.nan, 0.3],
            [0.1, math.inf, 0.3],
        ],
    )
    def test_malformed_embedding_should_be_rejected(self, embedding) -> None:
        assert as_vector(embedding, 3) is None

    def test_non_positive_dimension_should_reject_everything(self) -> None:
        assert as_vector([], 0) is None
