"""Tests for the feature-hashing encoder."""

import numpy as np
import pytest

from query_patterns.config import Settings
from query_patterns.encoder import Encoder, create_encoder
from query_patterns.encoder.hashing import HashingEncoder


class TestHashingEncoder:
    def test_shape_and_norm(self) -> None:
        vectors = HashingEncoder().encode(
            ["research on AI safety", "tensorflow vs pytorch"]
        )

        assert vectors.shape == (2, 384)
        assert vectors.dtype == np.float32
        np.testing.assert_allclose(np.linalg.norm(vectors, axis=1), 1.0, atol=1e-6)

    def test_deterministic(self) -> None:
        a = HashingEncoder().encode(["papers about climate change"])
        b = HashingEncoder().encode(["papers about climate change"])
        assert a.tobytes() == b.tobytes()

    def test_case_insensitive(self) -> None:
        encoder = HashingEncoder()
        assert encoder.embed_one("Climate Change") == encoder.embed_one(
            "climate change"
        )

    def test_shared_words_are_closer(self) -> None:
        vectors = HashingEncoder().encode(
            [
                "research on climate change",
                "papers about climate change",
                "flights from Berlin to Rome",
            ]
        )
        assert vectors[0] @ vectors[1] > vectors[0] @ vectors[2]

    def test_text_without_tokens_is_zero(self) -> None:
        assert not HashingEncoder(dimension=8).encode(["?!"]).any()

    def test_empty_batch(self) -> None:
        assert HashingEncoder().encode([]).shape == (0, 384)

    def test_rejects_non_positive_dimension(self) -> None:
        with pytest.raises(ValueError):
            HashingEncoder(dimension=0)

    def test_created_from_settings(self) -> None:
        encoder = create_encoder(Settings.model_construct(encoder_backend="hashing"))
        assert isinstance(encoder, Encoder)
        assert encoder.model_name == "hashing/word-trigram-384"
