"""Tests for the offline embedding asset builder."""

import json
from pathlib import Path

import numpy as np
import pytest

from query_patterns.build import build_asset, pattern_texts, pattern_vectors
from query_patterns.patterns import patterns_digest
from query_patterns.storage.embedding_store import (
    PatternEmbeddingStore,
    blob_path,
    manifest_path,
)


class TestPatternVectors:
    def test_examples_are_averaged(self, fake_encoder, small_patterns) -> None:
        vectors = pattern_vectors(fake_encoder, small_patterns)

        assert vectors.shape == (3, 384)
        assert vectors.dtype == np.float32
        expected = np.stack(
            [
                fake_encoder.vector("people named beta"),
                fake_encoder.vector("people named gamma"),
            ]
        ).mean(axis=0)
        np.testing.assert_allclose(vectors[1], expected, rtol=1e-6)

    def test_pattern_without_examples_uses_id(self, small_patterns) -> None:
        assert pattern_texts(small_patterns[2]) == ["gamma"]
        assert pattern_texts(small_patterns[1]) == [
            "people named beta",
            "people named gamma",
        ]

    def test_single_encode_call(self, fake_encoder, small_patterns) -> None:
        pattern_vectors(fake_encoder, small_patterns)
        assert len(fake_encoder.calls) == 1
        assert len(fake_encoder.calls[0]) == 4


class TestBuildAsset:
    def test_asset_reads_back(
        self, fake_encoder, small_patterns, asset_base: Path
    ) -> None:
        manifest = build_asset(fake_encoder, asset_base, small_patterns)

        assert blob_path(asset_base).exists()
        assert manifest_path(asset_base).exists()
        assert manifest.pattern_count == 3
        assert manifest.model_name == "fake/hash-encoder"
        assert manifest.patterns_sha256 == patterns_digest(small_patterns)
        assert manifest.generated_at is not None

        embeddings = PatternEmbeddingStore(asset_base, small_patterns).embeddings()
        expected = pattern_vectors(fake_encoder, small_patterns)
        for i, p in enumerate(small_patterns):
            assert embeddings[p.id].tobytes() == expected[i].tobytes()

    def test_manifest_is_json(
        self, fake_encoder, small_patterns, asset_base: Path
    ) -> None:
        build_asset(fake_encoder, asset_base, small_patterns)
        data = json.loads(manifest_path(asset_base).read_text())
        assert data["dimension"] == 384
        assert data["pattern_count"] == 3

    def test_creates_missing_directory(
        self, fake_encoder, small_patterns, temp_storage_path: Path
    ) -> None:
        base = temp_storage_path / "nested" / "dir" / "vectors"
        build_asset(fake_encoder, base, small_patterns)
        assert blob_path(base).exists()

    def test_rebuild_overwrites(
        self, fake_encoder, small_patterns, asset_base: Path
    ) -> None:
        build_asset(fake_encoder, asset_base, small_patterns)
        build_asset(fake_encoder, asset_base, small_patterns[:2])

        store = PatternEmbeddingStore(asset_base, small_patterns[:2])
        assert len(store.embeddings()) == 2

    def test_wrong_dimension_rejected(
        self, narrow_encoder, small_patterns, asset_base: Path
    ) -> None:
        with pytest.raises(ValueError, match="384"):
            build_asset(narrow_encoder, asset_base, small_patterns)
        assert not blob_path(asset_base).exists()
