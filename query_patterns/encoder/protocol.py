"""Encoder protocol used by the embedding asset builder."""

from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Encoder(Protocol):
    """Anything that turns a batch of strings into fixed-size vectors.

    The builder only needs the vector width (to check it against the asset
    layout), a model identifier (recorded in the manifest) and ``encode``.
    """

    @property
    def dimension(self) -> int: ...

    @property
    def model_name(self) -> str: ...

    def encode(self, texts: list[str]) -> NDArray[np.float32]:
        """Encode texts to an array of shape (len(texts), dimension)."""
        ...
