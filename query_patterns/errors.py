"""Exception hierarchy and error codes.

Every error raised by this package inherits from QueryPatternsError so that
consumers can catch the whole family in one place. None of these errors are
recoverable at this layer: the pattern table and the embedding asset are
static, so retrying yields the same failure.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Embedding asset errors
    EMBEDDING_DECODE_FAILED = "EMBEDDING_DECODE_FAILED"
    EMBEDDING_LENGTH_MISMATCH = "EMBEDDING_LENGTH_MISMATCH"
    EMBEDDING_ASSET_NOT_FOUND = "EMBEDDING_ASSET_NOT_FOUND"
    PATTERN_TABLE_MISMATCH = "PATTERN_TABLE_MISMATCH"

    # Pattern table errors
    PATTERN_NOT_FOUND = "PATTERN_NOT_FOUND"
    TEMPLATE_GROUP_MISSING = "TEMPLATE_GROUP_MISSING"

    # General
    INTERNAL_ERROR = "INTERNAL_ERROR"


class QueryPatternsError(Exception):  # NOQA: N818
    """Base exception for all query_patterns errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class EmbeddingError(QueryPatternsError):
    """Base exception for embedding asset errors."""


class EmbeddingDecodeError(EmbeddingError):
    """Raised when the base64 payload is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Pattern embedding payload is not valid base64: {reason}",
            code=ErrorCode.EMBEDDING_DECODE_FAILED,
            details={"reason": reason},
        )


class EmbeddingLengthMismatchError(EmbeddingError):
    """Raised when the decoded buffer does not fit the pattern table."""

    def __init__(self, actual_bytes: int, expected_bytes: int, pattern_count: int):
        super().__init__(
            message=(
                f"Decoded embedding buffer has {actual_bytes} bytes, expected "
                f"{expected_bytes} for {pattern_count} patterns. The embedding "
                "asset and the pattern table are out of sync."
            ),
            code=ErrorCode.EMBEDDING_LENGTH_MISMATCH,
            details={
                "actual_bytes": actual_bytes,
                "expected_bytes": expected_bytes,
                "pattern_count": pattern_count,
            },
        )


class EmbeddingAssetNotFoundError(EmbeddingError):
    """Raised when the embedding asset cannot be located."""

    def __init__(self, path: str) -> None:
        super().__init__(
            message=(
                f"Pattern embedding asset not found: {path}. "
                "Generate it with `python -m query_patterns.build build`."
            ),
            code=ErrorCode.EMBEDDING_ASSET_NOT_FOUND,
            details={"path": path},
        )


class PatternTableMismatchError(EmbeddingError):
    """Raised when the asset manifest was built for a different table."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=f"Embedding asset does not match the pattern table: {reason}",
            code=ErrorCode.PATTERN_TABLE_MISMATCH,
            details=details,
        )


class PatternNotFoundError(QueryPatternsError):
    """Raised when a pattern ID is not part of the table."""

    def __init__(self, pattern_id: str) -> None:
        super().__init__(
            message=f"No pattern with id: {pattern_id}",
            code=ErrorCode.PATTERN_NOT_FOUND,
            details={"pattern_id": pattern_id},
        )


class TemplateError(QueryPatternsError):
    """Raised when a template references a capture group the match lacks."""

    def __init__(self, group: int, available: int) -> None:
        super().__init__(
            message=(
                f"Template placeholder ${{{group}}} refers to a missing capture "
                f"group (match has {available})"
            ),
            code=ErrorCode.TEMPLATE_GROUP_MISSING,
            details={"group": group, "available": available},
        )
