"""Test fixtures for query_patterns."""

import hashlib
import json
import tempfile
from collections.abc import Callable, Generator, Sequence
from pathlib import Path

import numpy as np
import pytest
from numpy.typing import NDArray

from query_patterns.config.settings import get_settings
from query_patterns.data_models import EmbeddingManifest, Pattern
from query_patterns.patterns import patterns_digest
from query_patterns.storage import embedding_store
from query_patterns.storage.codec import EMBEDDING_DIMENSION, encode_embeddings
from query_patterns.storage.embedding_store import ASSET_NAME, blob_path, manifest_path

AssetWriter = Callable[..., NDArray[np.float32]]


class FakeEncoder:
    """Deterministic encoder: every text hashes to a fixed unit vector."""

    def __init__(self, dimension: int = EMBEDDING_DIMENSION) -> None:
        self._dimension = dimension
        self.calls: list[list[str]] = []

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def model_name(self) -> str:
        return "fake/hash-encoder"

    def vector(self, text: str) -> NDArray[np.float32]:
        seed = int.from_bytes(hashlib.sha256(text.encode()).digest()[:8], "little")
        v = np.random.default_rng(seed).standard_normal(self._dimension)
        return (v / np.linalg.norm(v)).astype(np.float32)

    def encode(self, texts: list[str]) -> NDArray[np.float32]:
        self.calls.append(list(texts))
        if not texts:
            return np.zeros((0, self._dimension), dtype=np.float32)
        return np.stack([self.vector(t) for t in texts])


@pytest.fixture
def temp_storage_path() -> Generator[Path, None, None]:
    """Create a temporary directory for embedding assets."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def asset_base(temp_storage_path: Path) -> Path:
    """Asset base path (no suffix) inside the temp directory."""
    return temp_storage_path / ASSET_NAME


@pytest.fixture
def small_patterns() -> tuple[Pattern, ...]:
    """A three-pattern table independent of the packaged one."""
    return (
        Pattern(
            id="alpha",
            category="research",
            examples=("research on alpha",),
            pattern=r"^research on (.+)$",
            template={"like": "${1}"},
            confidence=0.9,
        ),
        Pattern(
            id="beta",
            category="people",
            examples=("people named beta", "people named gamma"),
            pattern=r"^people named (.+)$",
            template={"where": {"name": "${1}"}},
            confidence=0.8,
            frequency="high",
        ),
        Pattern(
            id="gamma",
            category="temporal",
            pattern=r"^since (\d{4})$",
            template={"where": {"year": {"greaterThan": "${1}"}}},
            confidence=0.75,
        ),
    )


@pytest.fixture
def write_asset() -> AssetWriter:
    """Write a synthetic blob + manifest for a table; returns the vectors."""

    def _write(
        base: Path,
        patterns: Sequence[Pattern],
        dimension: int = EMBEDDING_DIMENSION,
        vectors: NDArray[np.float32] | None = None,
        **manifest_overrides,
    ) -> NDArray[np.float32]:
        if vectors is None:
            rng = np.random.default_rng(42)
            vectors = rng.standard_normal((len(patterns), dimension)).astype(
                np.float32
            )
        fields = {
            "model_name": "test-model",
            "dimension": dimension,
            "pattern_count": len(patterns),
            "patterns_sha256": patterns_digest(patterns),
        }
        fields.update(manifest_overrides)
        manifest = EmbeddingManifest(**fields)

        blob_path(base).write_text(encode_embeddings(vectors, dimension) + "\n")
        manifest_path(base).write_text(
            json.dumps(manifest.model_dump(mode="json"), indent=2)
        )
        return vectors

    return _write


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from QUERY_PATTERNS_* variables and cached settings."""
    monkeypatch.delenv("QUERY_PATTERNS_ENV_FILE", raising=False)
    monkeypatch.delenv("QUERY_PATTERNS_EMBEDDINGS_PATH", raising=False)
    monkeypatch.delenv("QUERY_PATTERNS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("QUERY_PATTERNS_ENCODER_BACKEND", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_default_store(
    monkeypatch: pytest.MonkeyPatch, clean_settings: None
) -> None:
    """Drop the process-wide store so the next access builds a fresh one."""
    monkeypatch.setattr(embedding_store, "_default_store", None)


@pytest.fixture
def narrow_encoder() -> FakeEncoder:
    """Encoder whose width does not fit the asset layout."""
    return FakeEncoder(dimension=8)
