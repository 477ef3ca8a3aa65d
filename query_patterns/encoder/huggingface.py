"""Plain HuggingFace Transformers backend with configurable pooling."""

from __future__ import annotations

import logging
from typing import Any, Literal

import numpy as np
import torch
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field
from transformers import AutoModel, AutoTokenizer

logger = logging.getLogger(__name__)

PoolingStrategy = Literal["mean", "cls", "max"]


class HuggingFaceOptions(BaseModel):
    """Tokenization, pooling and placement options for HuggingFaceEncoder."""

    model_config = ConfigDict(frozen=True)

    pooling: PoolingStrategy = "mean"
    normalize: bool = True
    max_length: int = Field(default=512, gt=0)
    batch_size: int = Field(default=32, gt=0)
    device: str = "cpu"


def pool_hidden_states(
    hidden_states: torch.Tensor,
    attention_mask: torch.Tensor,
    strategy: PoolingStrategy = "mean",
) -> torch.Tensor:
    """Reduce (batch, seq_len, hidden) to (batch, hidden), ignoring padding."""
    if strategy == "cls":
        return hidden_states[:, 0]

    mask = attention_mask.unsqueeze(-1).bool()
    if strategy == "max":
        return hidden_states.masked_fill(~mask, float("-inf")).max(dim=1).values

    summed = (hidden_states * mask).sum(dim=1)
    counts = mask.sum(dim=1).clamp(min=1)
    return summed / counts


class HuggingFaceEncoder:
    """Encoder for checkpoints that ship without a sentence-transformers config.

    Texts are encoded in batches of ``options.batch_size``; each batch is
    padded only to its own longest sequence.
    """

    def __init__(
        self,
        model: Any,
        tokenizer: Any,
        model_name: str,
        options: HuggingFaceOptions | None = None,
    ):
        self.options = options or HuggingFaceOptions()
        self._tokenizer = tokenizer
        self._model_name = model_name
        self._model = model.to(self.options.device)
        self._model.eval()

    @classmethod
    def load(
        cls, model_name: str, options: HuggingFaceOptions | None = None
    ) -> HuggingFaceEncoder:
        """Fetch tokenizer and weights for ``model_name`` (Hub ID or local path)."""
        options = options or HuggingFaceOptions()
        logger.info("Loading HuggingFace model: %s (%s)", model_name, options)
        return cls(
            AutoModel.from_pretrained(model_name),
            AutoTokenizer.from_pretrained(model_name),
            model_name,
            options,
        )

    @property
    def dimension(self) -> int:
        width = getattr(self._model.config, "hidden_size", None)
        if width is None:
            msg = f"Model config of {self._model_name} has no hidden_size"
            raise ValueError(msg)
        return int(width)

    @property
    def model_name(self) -> str:
        return self._model_name

    def encode(self, texts: list[str]) -> NDArray[np.float32]:
        if not texts:
            return np.zeros((0, self.dimension), dtype=np.float32)

        step = self.options.batch_size
        batches = [
            self._encode_batch(texts[start : start + step])
            for start in range(0, len(texts), step)
        ]
        return np.concatenate(batches, axis=0)

    def _encode_batch(self, texts: list[str]) -> NDArray[np.float32]:
        inputs = self._tokenizer(
            texts,
            padding=True,
            truncation=True,
            max_length=self.options.max_length,
            return_tensors="pt",
        ).to(self.options.device)

        with torch.inference_mode():
            hidden = self._model(**inputs).last_hidden_state

        pooled = pool_hidden_states(
            hidden, inputs["attention_mask"], self.options.pooling
        )
        if self.options.normalize:
            pooled = torch.nn.functional.normalize(pooled, p=2, dim=1)
        return pooled.cpu().numpy().astype(np.float32)
