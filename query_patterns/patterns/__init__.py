"""The ordered pattern table.

Position in ``EMBEDDED_PATTERNS`` is the row index of the pattern's vector in
the embedding asset, so new patterns go at the end of their module and the
asset must be rebuilt whenever the order or the ID set changes.
"""

import hashlib
from collections.abc import Iterable

from query_patterns.data_models import Pattern
from query_patterns.errors import PatternNotFoundError

from .aggregation import AGGREGATION_PATTERNS
from .commercial import COMMERCIAL_PATTERNS
from .comparison import COMPARISON_PATTERNS, RANKING_PATTERNS
from .documents import DOCUMENT_PATTERNS
from .domain_specific import DOMAIN_PATTERNS
from .filtering import FILTER_PATTERNS, NEGATION_PATTERNS, STATUS_PATTERNS
from .location import LOCATION_PATTERNS
from .people import ORGANIZATION_PATTERNS, PEOPLE_PATTERNS
from .projects import PROJECT_PATTERNS
from .questions import QUESTION_PATTERNS
from .relationship import RELATIONSHIP_PATTERNS, SIMILARITY_PATTERNS
from .research import RESEARCH_PATTERNS
from .temporal import TEMPORAL_PATTERNS

PATTERNS_VERSION = "3.0.0"

EMBEDDED_PATTERNS: tuple[Pattern, ...] = (
    *RESEARCH_PATTERNS,
    *PEOPLE_PATTERNS,
    *ORGANIZATION_PATTERNS,
    *PROJECT_PATTERNS,
    *AGGREGATION_PATTERNS,
    *COMPARISON_PATTERNS,
    *RANKING_PATTERNS,
    *TEMPORAL_PATTERNS,
    *LOCATION_PATTERNS,
    *FILTER_PATTERNS,
    *NEGATION_PATTERNS,
    *STATUS_PATTERNS,
    *RELATIONSHIP_PATTERNS,
    *SIMILARITY_PATTERNS,
    *QUESTION_PATTERNS,
    *COMMERCIAL_PATTERNS,
    *DOCUMENT_PATTERNS,
    *DOMAIN_PATTERNS,
)

_BY_ID: dict[str, Pattern] = {p.id: p for p in EMBEDDED_PATTERNS}


def pattern_ids() -> tuple[str, ...]:
    """Pattern IDs in table (and embedding row) order."""
    return tuple(p.id for p in EMBEDDED_PATTERNS)


def get_pattern(pattern_id: str) -> Pattern:
    try:
        return _BY_ID[pattern_id]
    except KeyError:
        raise PatternNotFoundError(pattern_id) from None


def patterns_digest(patterns: Iterable[Pattern] = EMBEDDED_PATTERNS) -> str:
    """SHA-256 over the ordered pattern IDs.

    Stored in the asset manifest so that a blob built for a different table
    (or a reordered one) is rejected before any vector is served.
    """
    digest = hashlib.sha256()
    for p in patterns:
        digest.update(p.id.encode("utf-8"))
        digest.update(b"\n")
    return digest.hexdigest()


__all__ = [
    "EMBEDDED_PATTERNS",
    "PATTERNS_VERSION",
    "get_pattern",
    "pattern_ids",
    "patterns_digest",
]
