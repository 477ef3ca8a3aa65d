"""Decode-once store for the packaged pattern embedding asset."""

import json
import logging
import threading
from collections.abc import Mapping, Sequence
from importlib.resources import files
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError

from query_patterns.config.settings import get_settings
from query_patterns.data_models import EmbeddingManifest, Pattern
from query_patterns.errors import (
    EmbeddingAssetNotFoundError,
    EmbeddingError,
    PatternTableMismatchError,
)
from query_patterns.patterns import EMBEDDED_PATTERNS, patterns_digest

from .codec import EMBEDDING_DIMENSION, decode_buffer, slice_vectors

logger = logging.getLogger(__name__)

ASSET_NAME = "pattern_embeddings"


def get_packaged_asset_path() -> Path:
    """Base path (without suffix) of the asset shipped inside the package."""
    return Path(str(files("query_patterns.storage") / "assets" / ASSET_NAME))


def blob_path(base: Path) -> Path:
    return base.with_suffix(".b64")


def manifest_path(base: Path) -> Path:
    return base.with_suffix(".json")


def load_manifest(base: Path) -> EmbeddingManifest:
    """Load the JSON manifest that sits next to a blob."""
    path = manifest_path(base)
    if not path.exists():
        raise EmbeddingAssetNotFoundError(str(path))
    try:
        with open(path, encoding="utf-8") as f:
            return EmbeddingManifest.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as e:
        raise PatternTableMismatchError(
            f"unreadable manifest {path}", details={"error": str(e)}
        ) from e


class PatternEmbeddingStore:
    """Lazily decodes one embedding asset and serves it read-only.

    Two states: undecoded (initial) and decoded (terminal). The first call to
    ``embeddings()`` reads, verifies and decodes the asset under a lock;
    every later call returns the same mapping. A failed load leaves the
    store undecoded so the error is raised again on the next call.
    """

    def __init__(
        self,
        base_path: Path,
        patterns: Sequence[Pattern] = EMBEDDED_PATTERNS,
        dimension: int = EMBEDDING_DIMENSION,
    ):
        self.base_path = base_path
        self._patterns = tuple(patterns)
        self._dimension = dimension
        self._lock = threading.Lock()
        self._raw: bytes | None = None
        self._embeddings: Mapping[str, NDArray[np.float32]] | None = None

    @property
    def is_decoded(self) -> bool:
        return self._embeddings is not None

    @property
    def raw(self) -> bytes:
        """The decoded contiguous buffer (decodes on first access)."""
        self.embeddings()
        return self._raw  # type: ignore[return-value]

    def embeddings(self) -> Mapping[str, NDArray[np.float32]]:
        embeddings = self._embeddings
        if embeddings is not None:
            logger.debug("Pattern embeddings served from cache")
            return embeddings

        with self._lock:
            if self._embeddings is None:
                try:
                    self._load()
                except EmbeddingError as e:
                    logger.error("Failed to load pattern embeddings: %s", e)
                    raise
            return self._embeddings  # type: ignore[return-value]

    def _verify_manifest(self, manifest: EmbeddingManifest) -> None:
        expected_digest = patterns_digest(self._patterns)
        problems = {}
        if manifest.pattern_count != len(self._patterns):
            problems["pattern_count"] = (manifest.pattern_count, len(self._patterns))
        if manifest.dimension != self._dimension:
            problems["dimension"] = (manifest.dimension, self._dimension)
        if manifest.patterns_sha256 != expected_digest:
            problems["patterns_sha256"] = (manifest.patterns_sha256, expected_digest)
        if problems:
            raise PatternTableMismatchError(
                ", ".join(sorted(problems)) + " differ",
                details={
                    key: {"asset": asset, "table": table}
                    for key, (asset, table) in problems.items()
                },
            )

    def _load(self) -> None:
        path = blob_path(self.base_path)
        if not path.exists():
            raise EmbeddingAssetNotFoundError(str(path))

        manifest = load_manifest(self.base_path)
        self._verify_manifest(manifest)

        logger.info("Decoding pattern embeddings from %s", path)
        raw = decode_buffer(path.read_bytes().strip())
        embeddings = slice_vectors(
            raw, [p.id for p in self._patterns], self._dimension
        )

        self._raw = raw
        self._embeddings = embeddings
        logger.info(
            "Loaded %d pattern embeddings (dim=%d, model=%s)",
            len(embeddings),
            self._dimension,
            manifest.model_name,
        )


_default_store: PatternEmbeddingStore | None = None
_default_store_lock = threading.Lock()


def get_default_store() -> PatternEmbeddingStore:
    """Process-wide store for the configured (or packaged) asset."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            settings = get_settings()
            base_path = settings.embeddings_path or get_packaged_asset_path()
            _default_store = PatternEmbeddingStore(base_path)
        return _default_store


def get_pattern_embeddings() -> Mapping[str, NDArray[np.float32]]:
    """Map every pattern ID to its pre-computed 384-float32 embedding.

    The asset is decoded once per process; later calls return the same
    read-only mapping. Raises an EmbeddingError subclass when the asset is
    missing, malformed or out of sync with the pattern table.
    """
    return get_default_store().embeddings()
