"""Query-classification patterns with pre-computed semantic embeddings.

Public surface:
- ``EMBEDDED_PATTERNS``: the ordered pattern table
- ``get_pattern_embeddings()``: pattern ID -> 384-d float32 vector
- ``PATTERNS_METADATA``: descriptive counts and sizes
"""

from query_patterns.metadata import PATTERNS_METADATA
from query_patterns.patterns import EMBEDDED_PATTERNS
from query_patterns.storage import get_pattern_embeddings

__version__ = "3.0.0"

__all__ = [
    "EMBEDDED_PATTERNS",
    "PATTERNS_METADATA",
    "__version__",
    "get_pattern_embeddings",
]
