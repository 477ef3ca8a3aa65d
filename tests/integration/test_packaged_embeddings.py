"""Integration tests against the packaged embedding asset.

The asset ships with the package; a missing or stale asset fails here.
"""

import time

import numpy as np
import pytest

from query_patterns import EMBEDDED_PATTERNS, get_pattern_embeddings
from query_patterns.build import pattern_vectors
from query_patterns.encoder.hashing import HashingEncoder
from query_patterns.patterns import patterns_digest
from query_patterns.storage.embedding_store import (
    blob_path,
    get_default_store,
    get_packaged_asset_path,
    load_manifest,
    manifest_path,
)

pytestmark = pytest.mark.integration

# First float32 of the research_on row, i.e. bytes 0..3 of the decoded buffer
RESEARCH_ON_FIRST_VALUE = -0.171498582


@pytest.fixture
def packaged_embeddings(reset_default_store: None):
    return get_pattern_embeddings()


class TestPackagedAsset:
    def test_asset_files_ship_with_package(self) -> None:
        base = get_packaged_asset_path()
        assert blob_path(base).is_file()
        assert manifest_path(base).is_file()

    def test_manifest_matches_table(self) -> None:
        manifest = load_manifest(get_packaged_asset_path())
        assert manifest.pattern_count == len(EMBEDDED_PATTERNS)
        assert manifest.dimension == 384
        assert manifest.patterns_sha256 == patterns_digest()


class TestPackagedEmbeddings:
    def test_one_vector_per_pattern(self, packaged_embeddings) -> None:
        assert len(packaged_embeddings) == 220
        for p in EMBEDDED_PATTERNS:
            vec = packaged_embeddings[p.id]
            assert vec.shape == (384,)
            assert vec.dtype == np.float32
            assert np.isfinite(vec).all()

    def test_research_on_first_value(self, packaged_embeddings) -> None:
        raw = get_default_store().raw
        first = np.frombuffer(raw[:4], dtype="<f4")[0]

        assert first == pytest.approx(RESEARCH_ON_FIRST_VALUE, abs=1e-6)
        assert packaged_embeddings["research_on"][0] == first

    def test_second_call_is_cached(self, packaged_embeddings) -> None:
        start = time.perf_counter()
        again = get_pattern_embeddings()
        elapsed = time.perf_counter() - start

        assert again is packaged_embeddings
        assert elapsed < 0.01

    def test_related_patterns_are_closer(self, packaged_embeddings) -> None:
        def cosine(a: str, b: str) -> float:
            u, v = packaged_embeddings[a], packaged_embeddings[b]
            return float(np.dot(u, v) / (np.linalg.norm(u) * np.linalg.norm(v)))

        assert cosine("research_on", "papers_about") > cosine(
            "research_on", "travel_flights"
        )


class TestAssetIsReproducible:
    def test_rebuild_with_recorded_encoder(self, packaged_embeddings) -> None:
        manifest = load_manifest(get_packaged_asset_path())
        if manifest.model_name != HashingEncoder().model_name:
            pytest.skip(f"asset built with {manifest.model_name}")

        rebuilt = pattern_vectors(HashingEncoder(), EMBEDDED_PATTERNS)
        for i, p in enumerate(EMBEDDED_PATTERNS):
            np.testing.assert_allclose(
                packaged_embeddings[p.id], rebuilt[i], rtol=0, atol=1e-6
            )
