"""Tests for HuggingFace pooling strategies."""

import pytest

torch = pytest.importorskip("torch")
pytest.importorskip("transformers")

from query_patterns.encoder.huggingface import (  # noqa: E402
    HuggingFaceOptions,
    pool_hidden_states,
)


@pytest.fixture
def batch():
    hidden = torch.tensor(
        [
            [[1.0, 2.0], [3.0, 4.0], [100.0, 100.0]],
            [[-1.0, 0.0], [5.0, -2.0], [2.0, 2.0]],
        ]
    )
    # Third token of the first row is padding
    mask = torch.tensor([[1, 1, 0], [1, 1, 1]])
    return hidden, mask


class TestPoolHiddenStates:
    def test_mean_ignores_padding(self, batch) -> None:
        hidden, mask = batch
        pooled = pool_hidden_states(hidden, mask, "mean")
        assert pooled[0].tolist() == [2.0, 3.0]
        assert pooled[1].tolist() == [2.0, 0.0]

    def test_cls(self, batch) -> None:
        hidden, mask = batch
        assert pool_hidden_states(hidden, mask, "cls").tolist() == [
            [1.0, 2.0],
            [-1.0, 0.0],
        ]

    def test_max_ignores_padding(self, batch) -> None:
        hidden, mask = batch
        pooled = pool_hidden_states(hidden, mask, "max")
        assert pooled[0].tolist() == [3.0, 4.0]
        assert pooled[1].tolist() == [5.0, 2.0]

    def test_input_not_mutated(self, batch) -> None:
        hidden, mask = batch
        before = hidden.clone()
        pool_hidden_states(hidden, mask, "max")
        assert torch.equal(hidden, before)


class TestHuggingFaceOptions:
    def test_defaults(self) -> None:
        options = HuggingFaceOptions()
        assert options.pooling == "mean"
        assert options.normalize is True
        assert options.device == "cpu"

    def test_rejects_non_positive_batch_size(self) -> None:
        with pytest.raises(ValueError):
            HuggingFaceOptions(batch_size=0)
