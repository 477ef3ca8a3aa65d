"""Offline generation of the pattern embedding asset.

Each pattern's vector is the mean of its example embeddings. Vectors are
written in table order next to a manifest that pins the asset to the
table's ID digest.
"""

import json
import logging
import os
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
from filelock import FileLock
from numpy.typing import NDArray

from query_patterns.data_models import EmbeddingManifest, Pattern
from query_patterns.encoder import Encoder
from query_patterns.patterns import EMBEDDED_PATTERNS, patterns_digest
from query_patterns.storage.codec import EMBEDDING_DIMENSION, encode_embeddings
from query_patterns.storage.embedding_store import blob_path, manifest_path

logger = logging.getLogger(__name__)

LOCK_TIMEOUT_SECONDS = 30


def pattern_texts(pattern: Pattern) -> list[str]:
    """Texts whose embeddings are averaged into the pattern's vector."""
    if pattern.examples:
        return list(pattern.examples)
    return [pattern.id.replace("_", " ")]


def pattern_vectors(
    encoder: Encoder, patterns: Sequence[Pattern] = EMBEDDED_PATTERNS
) -> NDArray[np.float32]:
    """Encode all examples in one pass and average them per pattern.

    Returns
    -------
    NDArray[np.float32]
        Shape (len(patterns), encoder.dimension), in table order.
    """
    texts: list[str] = []
    spans: list[tuple[int, int]] = []
    for pattern in patterns:
        start = len(texts)
        texts.extend(pattern_texts(pattern))
        spans.append((start, len(texts)))

    logger.info("Encoding %d examples for %d patterns", len(texts), len(patterns))
    encoded = encoder.encode(texts)

    vectors = np.empty((len(patterns), encoded.shape[1]), dtype=np.float32)
    for row, (start, end) in enumerate(spans):
        vectors[row] = encoded[start:end].mean(axis=0)
    return vectors


def _atomic_write(path: Path, content: str) -> None:
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(content, encoding="utf-8")
    os.replace(tmp, path)


def write_asset(
    base: Path, vectors: NDArray[np.float32], manifest: EmbeddingManifest
) -> None:
    """Write blob and manifest under a file lock.

    The blob goes first; a reader that sees the new manifest therefore
    never pairs it with a stale blob.
    """
    base.parent.mkdir(parents=True, exist_ok=True)
    encoded = encode_embeddings(vectors, manifest.dimension)

    lock_path = base.with_name(base.name + ".lock")
    with FileLock(str(lock_path), timeout=LOCK_TIMEOUT_SECONDS):
        _atomic_write(blob_path(base), encoded + "\n")
        _atomic_write(
            manifest_path(base),
            json.dumps(manifest.model_dump(mode="json"), indent=2) + "\n",
        )
    logger.info("Wrote %s and %s", blob_path(base), manifest_path(base))


def build_asset(
    encoder: Encoder,
    output: Path,
    patterns: Sequence[Pattern] = EMBEDDED_PATTERNS,
    dimension: int = EMBEDDING_DIMENSION,
) -> EmbeddingManifest:
    """Encode the pattern table and write the asset at ``output``.

    Parameters
    ----------
    encoder
        Encoder whose output width must equal ``dimension``.
    output
        Asset base path without suffix.
    patterns
        Table to encode, in row order.
    dimension
        Vector width the asset layout expects.

    Raises
    ------
    ValueError
        If the encoder produces vectors of a different width.
    """
    if encoder.dimension != dimension:
        msg = (
            f"Encoder {encoder.model_name} produces {encoder.dimension}-d vectors, "
            f"the asset layout needs {dimension}"
        )
        raise ValueError(msg)

    vectors = pattern_vectors(encoder, patterns)
    manifest = EmbeddingManifest(
        model_name=encoder.model_name,
        dimension=dimension,
        pattern_count=len(patterns),
        patterns_sha256=patterns_digest(patterns),
        generated_at=datetime.now(timezone.utc),
    )
    write_asset(output, vectors, manifest)
    return manifest
