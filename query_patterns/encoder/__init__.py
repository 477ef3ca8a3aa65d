"""Text encoders for the offline embedding asset builder.

Only ``query_patterns.build`` imports this package. Backends:
- sentence-transformers (default)
- HuggingFace Transformers with explicit pooling

Usage:
    from query_patterns.encoder import create_encoder

    encoder = create_encoder(settings)
    vectors = encoder.encode(["research on transformers"])
"""

from .factory import create_encoder
from .protocol import Encoder

__all__ = ["Encoder", "create_encoder"]
