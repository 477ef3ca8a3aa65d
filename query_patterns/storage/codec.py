"""Fixed-stride base64 codec for pattern embedding vectors.

Layout: little-endian float32, ``dimension`` values per vector, densely
packed in pattern table order with no header. Vector ``i`` starts at byte
offset ``i * dimension * 4``.
"""

import base64
import binascii
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray

from query_patterns.errors import EmbeddingDecodeError, EmbeddingLengthMismatchError

logger = logging.getLogger(__name__)

EMBEDDING_DIMENSION = 384
EMBEDDING_DTYPE = np.dtype("<f4")


def decode_buffer(encoded: str | bytes) -> bytes:
    """Strictly decode a base64 payload into raw bytes."""
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EmbeddingDecodeError(str(e)) from e


def slice_vectors(
    raw: bytes,
    pattern_ids: Sequence[str],
    dimension: int = EMBEDDING_DIMENSION,
) -> Mapping[str, NDArray[np.float32]]:
    """Slice a decoded buffer into read-only per-pattern vector views."""
    expected = len(pattern_ids) * dimension * EMBEDDING_DTYPE.itemsize
    if len(raw) != expected:
        raise EmbeddingLengthMismatchError(len(raw), expected, len(pattern_ids))

    # frombuffer over bytes is read-only, and each row is a view into it
    matrix = np.frombuffer(raw, dtype=EMBEDDING_DTYPE).reshape(
        len(pattern_ids), dimension
    )
    return MappingProxyType(
        {pattern_id: matrix[i] for i, pattern_id in enumerate(pattern_ids)}
    )


def decode_embeddings(
    encoded: str | bytes,
    pattern_ids: Sequence[str],
    dimension: int = EMBEDDING_DIMENSION,
) -> Mapping[str, NDArray[np.float32]]:
    """Decode a base64 blob and key its vectors by pattern ID, in order."""
    return slice_vectors(decode_buffer(encoded), pattern_ids, dimension)


def encode_embeddings(
    vectors: Sequence[NDArray[np.floating]] | NDArray[np.floating],
    dimension: int = EMBEDDING_DIMENSION,
) -> str:
    """Pack vectors (in table order) into the base64 fixed-stride layout."""
    matrix = np.asarray(vectors, dtype=EMBEDDING_DTYPE)
    if matrix.ndim != 2 or matrix.shape[1] != dimension:
        msg = f"Expected vectors of shape (n, {dimension}), got {matrix.shape}"
        raise ValueError(msg)
    return base64.b64encode(np.ascontiguousarray(matrix).tobytes()).decode("ascii")
