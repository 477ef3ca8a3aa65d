"""Embedding storage layer.

This module provides:
- `codec`: the fixed-stride base64 <-> float32 vector layout
- `embedding_store`: the decode-once store for the packaged asset
"""

from .codec import (
    EMBEDDING_DIMENSION,
    EMBEDDING_DTYPE,
    decode_buffer,
    decode_embeddings,
    encode_embeddings,
    slice_vectors,
)
from .embedding_store import (
    ASSET_NAME,
    PatternEmbeddingStore,
    blob_path,
    get_default_store,
    get_packaged_asset_path,
    get_pattern_embeddings,
    load_manifest,
    manifest_path,
)

__all__ = [
    # Codec
    "EMBEDDING_DIMENSION",
    "EMBEDDING_DTYPE",
    "decode_buffer",
    "decode_embeddings",
    "encode_embeddings",
    "slice_vectors",
    # Store
    "ASSET_NAME",
    "PatternEmbeddingStore",
    "blob_path",
    "get_default_store",
    "get_packaged_asset_path",
    "get_pattern_embeddings",
    "load_manifest",
    "manifest_path",
]
