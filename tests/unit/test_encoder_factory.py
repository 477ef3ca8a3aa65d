"""Tests for encoder creation."""

import pytest

from query_patterns.config import Settings
from query_patterns.encoder import Encoder, create_encoder
from query_patterns.encoder import factory


class TestCreateEncoder:
    def test_unknown_backend(self) -> None:
        settings = Settings.model_construct(
            encoder_backend="word2vec", encoder_model="x"
        )
        with pytest.raises(ValueError, match="Unknown encoder backend"):
            create_encoder(settings)

    def test_every_configurable_backend_has_loader(self) -> None:
        assert set(factory.LOADERS) == {
            "sentence-transformers",
            "huggingface",
            "hashing",
        }

    def test_dispatches_on_backend(
        self, monkeypatch: pytest.MonkeyPatch, fake_encoder
    ) -> None:
        seen = []

        def loader(settings):
            seen.append(settings.encoder_model)
            return fake_encoder

        monkeypatch.setitem(factory.LOADERS, "huggingface", loader)
        settings = Settings.model_construct(
            encoder_backend="huggingface", encoder_model="some/model"
        )

        assert create_encoder(settings) is fake_encoder
        assert seen == ["some/model"]

    def test_fake_encoder_satisfies_protocol(self, fake_encoder) -> None:
        assert isinstance(fake_encoder, Encoder)
