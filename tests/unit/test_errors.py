"""Tests for the error hierarchy."""

import pytest

from query_patterns.errors import (
    EmbeddingAssetNotFoundError,
    EmbeddingDecodeError,
    EmbeddingError,
    EmbeddingLengthMismatchError,
    ErrorCode,
    PatternNotFoundError,
    PatternTableMismatchError,
    QueryPatternsError,
    TemplateError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error,code",
        [
            (EmbeddingDecodeError("bad padding"), ErrorCode.EMBEDDING_DECODE_FAILED),
            (
                EmbeddingLengthMismatchError(10, 1536, 1),
                ErrorCode.EMBEDDING_LENGTH_MISMATCH,
            ),
            (
                EmbeddingAssetNotFoundError("/missing.b64"),
                ErrorCode.EMBEDDING_ASSET_NOT_FOUND,
            ),
            (PatternTableMismatchError("digest"), ErrorCode.PATTERN_TABLE_MISMATCH),
        ],
    )
    def test_embedding_errors(self, error: EmbeddingError, code: ErrorCode) -> None:
        assert isinstance(error, EmbeddingError)
        assert isinstance(error, QueryPatternsError)
        assert error.code == code

    def test_lookup_errors_are_not_embedding_errors(self) -> None:
        assert not isinstance(PatternNotFoundError("x"), EmbeddingError)
        assert not isinstance(TemplateError(2, 1), EmbeddingError)

    def test_str_is_message(self) -> None:
        error = PatternNotFoundError("nope")
        assert str(error) == "No pattern with id: nope"
        assert "PATTERN_NOT_FOUND" in repr(error)

    def test_asset_not_found_mentions_builder(self) -> None:
        assert "query_patterns.build" in str(EmbeddingAssetNotFoundError("/x.b64"))
