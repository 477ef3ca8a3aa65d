"""Offline builder for the pattern embedding asset.

Run ``python -m query_patterns.build --help``. Requires the ``build`` extra.
"""

from .generator import build_asset, pattern_texts, pattern_vectors, write_asset

__all__ = ["build_asset", "pattern_texts", "pattern_vectors", "write_asset"]
