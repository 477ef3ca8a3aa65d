"""Pydantic domain models."""

from .manifest import EmbeddingManifest
from .metadata import PatternsMetadata, SizeBytes
from .pattern import Frequency, Pattern, compile_pattern

__all__ = [
    "EmbeddingManifest",
    "Frequency",
    "Pattern",
    "PatternsMetadata",
    "SizeBytes",
    "compile_pattern",
]
