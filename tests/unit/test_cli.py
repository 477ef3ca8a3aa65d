"""Tests for the asset builder CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from query_patterns.build import __main__ as cli
from query_patterns.storage.embedding_store import blob_path

runner = CliRunner()


@pytest.fixture
def use_fake_encoder(monkeypatch: pytest.MonkeyPatch, fake_encoder) -> None:
    monkeypatch.setattr(cli, "create_encoder", lambda settings: fake_encoder)


class TestInfoCommand:
    def test_prints_metadata(self, clean_settings: None) -> None:
        result = runner.invoke(cli.app, ["info"])

        assert result.exit_code == 0
        assert "220" in result.output
        assert "research" in result.output


class TestBuildAndVerify:
    def test_build_then_verify(
        self, clean_settings: None, use_fake_encoder: None, asset_base: Path
    ) -> None:
        result = runner.invoke(cli.app, ["build", "--output", str(asset_base)])

        assert result.exit_code == 0, result.output
        assert "Wrote 220 vectors" in result.output
        assert blob_path(asset_base).exists()

        result = runner.invoke(cli.app, ["verify", "--path", str(asset_base)])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output

    def test_verify_missing_asset(
        self, clean_settings: None, temp_storage_path: Path
    ) -> None:
        result = runner.invoke(
            cli.app, ["verify", "--path", str(temp_storage_path / "absent")]
        )

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_build_with_wrong_dimension(
        self,
        clean_settings: None,
        monkeypatch: pytest.MonkeyPatch,
        narrow_encoder,
        asset_base: Path,
    ) -> None:
        monkeypatch.setattr(cli, "create_encoder", lambda settings: narrow_encoder)

        result = runner.invoke(cli.app, ["build", "--output", str(asset_base)])

        assert result.exit_code == 1
        assert "Error" in result.output
