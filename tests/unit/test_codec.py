"""Tests for the fixed-stride embedding codec."""

import base64
import struct

import numpy as np
import pytest

from query_patterns.errors import (
    EmbeddingDecodeError,
    EmbeddingError,
    EmbeddingLengthMismatchError,
)
from query_patterns.storage.codec import (
    EMBEDDING_DIMENSION,
    decode_buffer,
    decode_embeddings,
    encode_embeddings,
    slice_vectors,
)

IDS = ("first", "second", "third")


@pytest.fixture
def vectors() -> np.ndarray:
    rng = np.random.default_rng(7)
    return rng.standard_normal((len(IDS), EMBEDDING_DIMENSION)).astype(np.float32)


class TestRoundTrip:
    def test_encode_decode_is_bit_identical(self, vectors: np.ndarray) -> None:
        decoded = decode_embeddings(encode_embeddings(vectors), IDS)

        assert list(decoded) == list(IDS)
        for i, pattern_id in enumerate(IDS):
            assert decoded[pattern_id].shape == (EMBEDDING_DIMENSION,)
            assert decoded[pattern_id].tobytes() == vectors[i].tobytes()

    def test_layout_is_little_endian_fixed_stride(self) -> None:
        vectors = np.zeros((2, 4), dtype=np.float32)
        vectors[1, 0] = 1.5
        raw = base64.b64decode(encode_embeddings(vectors, dimension=4))

        assert len(raw) == 2 * 4 * 4
        assert struct.unpack_from("<f", raw, 4 * 4)[0] == 1.5

    def test_encode_rejects_wrong_width(self) -> None:
        with pytest.raises(ValueError):
            encode_embeddings(np.zeros((2, 10), dtype=np.float32))


class TestDecodeFailures:
    def test_truncated_payload_raises(self, vectors: np.ndarray) -> None:
        encoded = encode_embeddings(vectors)
        with pytest.raises(EmbeddingError):
            decode_embeddings(encoded[:-10], IDS)

    def test_invalid_characters_raise(self) -> None:
        with pytest.raises(EmbeddingDecodeError) as exc_info:
            decode_buffer("not*base64!!")
        assert exc_info.value.code.value == "EMBEDDING_DECODE_FAILED"

    def test_short_buffer_is_not_padded(self, vectors: np.ndarray) -> None:
        raw = vectors.tobytes()[:-4]
        with pytest.raises(EmbeddingLengthMismatchError) as exc_info:
            slice_vectors(raw, IDS)
        assert exc_info.value.details["expected_bytes"] == len(IDS) * 384 * 4
        assert exc_info.value.details["actual_bytes"] == len(IDS) * 384 * 4 - 4

    def test_trailing_bytes_rejected(self, vectors: np.ndarray) -> None:
        with pytest.raises(EmbeddingLengthMismatchError):
            slice_vectors(vectors.tobytes() + b"\x00" * 4, IDS)

    def test_empty_buffer_rejected(self) -> None:
        with pytest.raises(EmbeddingLengthMismatchError):
            decode_embeddings("", IDS)


class TestReadOnlyViews:
    def test_vectors_are_not_writeable(self, vectors: np.ndarray) -> None:
        decoded = decode_embeddings(encode_embeddings(vectors), IDS)
        vec = decoded["first"]

        assert vec.flags.writeable is False
        with pytest.raises(ValueError):
            vec[0] = 1.0

    def test_mapping_is_read_only(self, vectors: np.ndarray) -> None:
        decoded = decode_embeddings(encode_embeddings(vectors), IDS)
        with pytest.raises(TypeError):
            decoded["new"] = vectors[0]  # type: ignore[index]

    def test_vectors_share_one_buffer(self, vectors: np.ndarray) -> None:
        decoded = decode_embeddings(encode_embeddings(vectors), IDS)
        assert decoded["first"].base is decoded["third"].base
