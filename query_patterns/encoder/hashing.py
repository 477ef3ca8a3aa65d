"""Deterministic feature-hashing backend.

Needs no model download: every lowercase word token and every character
trigram of ``#token#`` is hashed into one of ``dimension`` buckets with a
signed weight, and the bucket vector is L2-normalized. Texts that share
words or word fragments end up close; it carries no deeper semantics.
"""

from __future__ import annotations

import hashlib
import math
import re

import numpy as np
from numpy.typing import NDArray

TOKEN_RE = re.compile(r"[0-9a-z_]+")

WORD_WEIGHT = 1.0
TRIGRAM_WEIGHT = 0.5


def _features(text: str) -> list[tuple[str, float]]:
    features = []
    for token in TOKEN_RE.findall(text.lower()):
        features.append((f"w:{token}", WORD_WEIGHT))
        padded = f"#{token}#"
        for i in range(len(padded) - 2):
            features.append((f"c:{padded[i : i + 3]}", TRIGRAM_WEIGHT))
    return features


class HashingEncoder:
    def __init__(self, dimension: int = 384):
        if dimension <= 0:
            msg = "dimension must be positive"
            raise ValueError(msg)
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def model_name(self) -> str:
        return f"hashing/word-trigram-{self._dimension}"

    def embed_one(self, text: str) -> list[float]:
        vec = [0.0] * self._dimension
        for key, weight in _features(text):
            digest = hashlib.sha256(key.encode("utf-8")).digest()
            index = int.from_bytes(digest[:4], "big") % self._dimension
            vec[index] += weight if digest[4] < 128 else -weight

        norm = math.sqrt(sum(v * v for v in vec))
        if norm > 0.0:
            vec = [v / norm for v in vec]
        return vec

    def encode(self, texts: list[str]) -> NDArray[np.float32]:
        if not texts:
            return np.zeros((0, self._dimension), dtype=np.float32)
        return np.asarray([self.embed_one(t) for t in texts], dtype=np.float32)
