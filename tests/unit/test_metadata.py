"""Tests for PATTERNS_METADATA."""

import pytest

from query_patterns import EMBEDDED_PATTERNS, PATTERNS_METADATA, __version__
from query_patterns.metadata import build_metadata, encoded_table_size


class TestPatternsMetadata:
    def test_total_matches_table(self) -> None:
        assert PATTERNS_METADATA.total_patterns == len(EMBEDDED_PATTERNS)

    def test_version(self) -> None:
        assert PATTERNS_METADATA.version == __version__

    def test_embedding_dimensions(self) -> None:
        assert PATTERNS_METADATA.embedding_dimensions == 384

    def test_categories_and_domains_are_distinct(self) -> None:
        assert len(set(PATTERNS_METADATA.categories)) == len(
            PATTERNS_METADATA.categories
        )
        assert set(PATTERNS_METADATA.categories) == {
            p.category for p in EMBEDDED_PATTERNS
        }
        assert set(PATTERNS_METADATA.domains) == {
            p.domain for p in EMBEDDED_PATTERNS if p.domain
        }

    def test_average_confidence(self) -> None:
        expected = sum(p.confidence for p in EMBEDDED_PATTERNS) / len(EMBEDDED_PATTERNS)
        assert PATTERNS_METADATA.average_confidence == pytest.approx(expected, abs=1e-3)
        assert PATTERNS_METADATA.average_confidence > 0.5

    def test_size_bytes(self) -> None:
        sizes = PATTERNS_METADATA.size_bytes
        assert sizes.embeddings == 220 * 384 * 4
        assert sizes.patterns == encoded_table_size(EMBEDDED_PATTERNS)
        assert sizes.total == sizes.patterns + sizes.embeddings

    def test_coverage_values_are_percent_strings(self) -> None:
        for domain, estimate in PATTERNS_METADATA.coverage.items():
            assert estimate.endswith("%+"), domain

    def test_frozen(self) -> None:
        with pytest.raises(ValueError):
            PATTERNS_METADATA.total_patterns = 0  # type: ignore[misc]


class TestBuildMetadata:
    def test_small_table(self, small_patterns) -> None:
        meta = build_metadata(small_patterns)

        assert meta.total_patterns == 3
        assert meta.categories == ("research", "people", "temporal")
        assert meta.domains == ()
        assert meta.average_confidence == pytest.approx(0.817, abs=1e-3)
        assert meta.size_bytes.embeddings == 3 * 384 * 4
