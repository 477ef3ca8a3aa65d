"""Template placeholders and single-match template filling.

Templates are nested structures of dicts, lists and scalars. String keys and
values may contain ``${N}`` placeholders that refer to the Nth capture group
of the pattern's regex. These helpers fill one template from one match; they
never decide which pattern applies to a query.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from query_patterns.errors import TemplateError

if TYPE_CHECKING:
    from query_patterns.data_models import Pattern

PLACEHOLDER = re.compile(r"\$\{(\d+)\}")


def placeholder_groups(template: Any) -> tuple[int, ...]:
    """Return the sorted, distinct group numbers referenced in a template."""
    found: set[int] = set()

    def walk(node: Any) -> None:
        if isinstance(node, str):
            found.update(int(n) for n in PLACEHOLDER.findall(node))
        elif isinstance(node, dict):
            for key, value in node.items():
                walk(key)
                walk(value)
        elif isinstance(node, (list, tuple)):
            for item in node:
                walk(item)

    walk(template)
    return tuple(sorted(found))


def fill_template(
    template: Any, match: re.Match[str] | Sequence[str | None]
) -> Any:
    """Return a copy of ``template`` with ``${N}`` replaced by capture groups.

    Captured values are stripped of surrounding whitespace. A group that did
    not participate in the match fills in as an empty string.

    A placeholder numbered 0 or above the match's group count raises
    TemplateError instead of filling in as an empty string. Such a
    placeholder can never be satisfied by any query, so it marks a broken
    template rather than an optional slot; every template in the pattern
    table stays within its regex's group count.

    Raises
    ------
    TemplateError
        If a placeholder refers to a group the match does not have.
    """
    groups = match.groups() if isinstance(match, re.Match) else tuple(match)

    def substitute(m: re.Match[str]) -> str:
        index = int(m.group(1))
        if index < 1 or index > len(groups):
            raise TemplateError(index, len(groups))
        value = groups[index - 1]
        return value.strip() if value is not None else ""

    def replace(node: Any) -> Any:
        if isinstance(node, str):
            return PLACEHOLDER.sub(substitute, node)
        if isinstance(node, dict):
            return {replace(key): replace(value) for key, value in node.items()}
        if isinstance(node, (list, tuple)):
            return [replace(item) for item in node]
        return node

    return replace(template)


def instantiate(pattern: Pattern, query: str) -> dict[str, Any] | None:
    """Apply a single pattern to a query; None when the regex does not match."""
    match = pattern.regex.search(query)
    if match is None:
        return None
    return fill_template(pattern.template, match)
