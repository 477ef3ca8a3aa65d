"""sentence-transformers backend."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray
from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


class SentenceTransformerEncoder:
    """Default backend; all-MiniLM-L6-v2 yields the 384-d vectors the asset stores.

    Tokenization, mean pooling and normalization are handled by the model's
    own sentence-transformers configuration.
    """

    def __init__(
        self,
        model: SentenceTransformer,
        model_name: str,
        batch_size: int = 64,
    ):
        self._model = model
        self._model_name = model_name
        self._batch_size = batch_size

    @classmethod
    def load(
        cls, model_name: str, device: str = "cpu", batch_size: int = 64
    ) -> SentenceTransformerEncoder:
        """Load a model from the HuggingFace Hub or a local path.

        Parameters
        ----------
        model_name
            Model identifier, e.g. "sentence-transformers/all-MiniLM-L6-v2".
        device
            Torch device string passed to SentenceTransformer.
        batch_size
            Number of texts encoded per forward pass.
        """
        logger.info("Loading SentenceTransformer model: %s (%s)", model_name, device)
        model = SentenceTransformer(model_name, device=device)
        return cls(model, model_name, batch_size=batch_size)

    @property
    def dimension(self) -> int:
        dim = self._model.get_sentence_embedding_dimension()
        if dim is None:
            msg = f"Could not determine embedding dimension of {self._model_name}"
            raise ValueError(msg)
        return dim

    @property
    def model_name(self) -> str:
        return self._model_name

    def encode(self, texts: list[str]) -> NDArray[np.float32]:
        if not texts:
            return np.zeros((0, self.dimension), dtype=np.float32)

        embeddings = self._model.encode(
            texts,
            batch_size=self._batch_size,
            convert_to_numpy=True,
            show_progress_bar=False,
            normalize_embeddings=True,
        )
        return embeddings.astype(np.float32)
