from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """query_patterns configuration."""

    log_level: str = "INFO"

    # Base path of the embedding asset without suffix; the packaged asset
    # is used when unset. The .b64 blob and .json manifest sit side by side.
    embeddings_path: Path | None = None

    # Encoder used by the offline asset builder only
    encoder_backend: Literal["sentence-transformers", "huggingface", "hashing"] = (
        "sentence-transformers"
    )
    encoder_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    # HuggingFace-specific options (ignored for sentence-transformers)
    encoder_pooling: Literal["mean", "cls", "max"] = "mean"
    encoder_normalize: bool = True
    encoder_max_length: int = 512
    device: str = "cpu"

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="QUERY_PATTERNS_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
