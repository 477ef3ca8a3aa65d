"""Descriptive metadata about the pattern table and embedding asset."""

from pydantic import BaseModel, ConfigDict


class SizeBytes(BaseModel):
    """Byte sizes of the encoded pattern table and raw embedding vectors."""

    model_config = ConfigDict(frozen=True)

    patterns: int
    embeddings: int
    total: int


class PatternsMetadata(BaseModel):
    """Documentation and telemetry only; nothing should branch on it."""

    model_config = ConfigDict(frozen=True)

    version: str
    total_patterns: int
    categories: tuple[str, ...]
    domains: tuple[str, ...]
    embedding_dimensions: int
    average_confidence: float
    coverage: dict[str, str]
    size_bytes: SizeBytes
