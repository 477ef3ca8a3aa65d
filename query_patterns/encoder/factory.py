"""Build an encoder from settings."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .protocol import Encoder

if TYPE_CHECKING:
    from query_patterns.config.settings import Settings

logger = logging.getLogger(__name__)


def _load_sentence_transformer(settings: Settings) -> Encoder:
    from .sentence_transformer import SentenceTransformerEncoder

    return SentenceTransformerEncoder.load(
        settings.encoder_model, device=settings.device
    )


def _load_huggingface(settings: Settings) -> Encoder:
    from .huggingface import HuggingFaceEncoder, HuggingFaceOptions

    options = HuggingFaceOptions(
        pooling=settings.encoder_pooling,
        normalize=settings.encoder_normalize,
        max_length=settings.encoder_max_length,
        device=settings.device,
    )
    return HuggingFaceEncoder.load(settings.encoder_model, options)


def _load_hashing(settings: Settings) -> Encoder:
    from .hashing import HashingEncoder

    return HashingEncoder()


# Backends import their ML stack on first use only
LOADERS: dict[str, Callable[[Settings], Encoder]] = {
    "sentence-transformers": _load_sentence_transformer,
    "huggingface": _load_huggingface,
    "hashing": _load_hashing,
}


def create_encoder(settings: Settings) -> Encoder:
    """Create the encoder selected by ``settings.encoder_backend``.

    Raises
    ------
    ValueError
        If no loader is registered for the backend.
    """
    loader = LOADERS.get(settings.encoder_backend)
    if loader is None:
        msg = f"Unknown encoder backend: {settings.encoder_backend}"
        raise ValueError(msg)

    logger.info(
        "Creating encoder: backend=%s, model=%s",
        settings.encoder_backend,
        settings.encoder_model,
    )
    return loader(settings)
