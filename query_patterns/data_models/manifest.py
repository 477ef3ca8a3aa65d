"""Embedding asset manifest domain model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EmbeddingManifest(BaseModel):
    """Sidecar describing which pattern table an embedding blob was built for."""

    model_config = ConfigDict(frozen=True)

    model_name: str
    dimension: int
    pattern_count: int
    patterns_sha256: str
    generated_at: datetime | None = None
