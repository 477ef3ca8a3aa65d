"""Pattern record domain model."""

import re
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from query_patterns.templates import placeholder_groups

Frequency = Literal["medium", "high", "very_high"]


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a pattern the way consumers apply it (case-insensitive search)."""
    return re.compile(pattern, re.IGNORECASE)


class Pattern(BaseModel):
    """One query-classification rule: regex, output template and metadata."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: str
    domain: str | None = None
    examples: tuple[str, ...] = ()
    pattern: str
    template: dict[str, Any]
    confidence: float = Field(ge=0.0, le=1.0)
    frequency: Frequency | None = None

    @field_validator("pattern")
    @classmethod
    def check_pattern_compiles(cls, v: str) -> str:
        try:
            compile_pattern(v)
        except re.error as e:
            msg = f"invalid regular expression {v!r}: {e}"
            raise ValueError(msg) from e
        return v

    @property
    def regex(self) -> re.Pattern[str]:
        return compile_pattern(self.pattern)

    @property
    def group_count(self) -> int:
        """Number of capturing groups in the pattern."""
        return self.regex.groups

    @property
    def placeholder_groups(self) -> tuple[int, ...]:
        """Capture group numbers referenced by ``${N}`` in the template."""
        return placeholder_groups(self.template)
