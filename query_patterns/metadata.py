"""Descriptive metadata for the pattern table and its embedding asset.

Intended for logging and monitoring. Counts and tag lists are derived from
the live table; ``coverage`` is a hand-maintained estimate of how much of a
domain's typical query traffic the table recognizes.
"""

import json

from query_patterns.data_models import Pattern, PatternsMetadata, SizeBytes
from query_patterns.patterns import EMBEDDED_PATTERNS, PATTERNS_VERSION
from query_patterns.storage.codec import EMBEDDING_DIMENSION, EMBEDDING_DTYPE

COVERAGE: dict[str, str] = {
    "general": "95%+",
    "research": "90%+",
    "programming": "85%+",
    "commercial": "85%+",
    "medical": "80%+",
    "finance": "80%+",
    "legal": "75%+",
    "travel": "75%+",
    "education": "75%+",
    "real_estate": "70%+",
    "science": "70%+",
    "sports": "70%+",
    "ecommerce": "70%+",
}


def _unique_in_order(values) -> tuple[str, ...]:
    return tuple(dict.fromkeys(v for v in values if v))


def encoded_table_size(patterns: tuple[Pattern, ...]) -> int:
    """UTF-8 size of the table serialized as compact JSON."""
    payload = json.dumps(
        [p.model_dump(mode="json") for p in patterns],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return len(payload.encode("utf-8"))


def build_metadata(
    patterns: tuple[Pattern, ...] = EMBEDDED_PATTERNS,
    dimension: int = EMBEDDING_DIMENSION,
) -> PatternsMetadata:
    """Derive metadata for a pattern table."""
    table_bytes = encoded_table_size(patterns)
    embedding_bytes = len(patterns) * dimension * EMBEDDING_DTYPE.itemsize
    average = (
        sum(p.confidence for p in patterns) / len(patterns) if patterns else 0.0
    )
    return PatternsMetadata(
        version=PATTERNS_VERSION,
        total_patterns=len(patterns),
        categories=_unique_in_order(p.category for p in patterns),
        domains=_unique_in_order(p.domain for p in patterns),
        embedding_dimensions=dimension,
        average_confidence=round(average, 3),
        coverage=COVERAGE,
        size_bytes=SizeBytes(
            patterns=table_bytes,
            embeddings=embedding_bytes,
            total=table_bytes + embedding_bytes,
        ),
    )


PATTERNS_METADATA: PatternsMetadata = build_metadata()
