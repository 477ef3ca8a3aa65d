"""Tests for template placeholder filling."""

import pytest

from query_patterns.errors import TemplateError
from query_patterns.patterns import get_pattern
from query_patterns.templates import fill_template, instantiate, placeholder_groups


class TestPlaceholderGroups:
    def test_finds_groups_in_nested_values_and_keys(self) -> None:
        template = {
            "like": ["${1}", "${3}"],
            "where": {"${2}": {"greaterThan": "${4}"}},
            "limit": 10,
        }
        assert placeholder_groups(template) == (1, 2, 3, 4)

    def test_no_placeholders(self) -> None:
        assert placeholder_groups({"where": {"type": "comparison"}}) == ()

    def test_repeated_placeholder_counted_once(self) -> None:
        assert placeholder_groups({"a": "${1}", "b": "${1} and ${1}"}) == (1,)


class TestCommercialCompare:
    def test_groups(self) -> None:
        match = get_pattern("commercial_compare").regex.search("tensorflow vs pytorch")
        assert match is not None
        assert match.groups() == ("tensorflow", "vs", "pytorch")

    def test_template_interpolation(self) -> None:
        result = instantiate(get_pattern("commercial_compare"), "tensorflow vs pytorch")
        assert result == {
            "like": ["tensorflow", "pytorch"],
            "where": {"type": "comparison"},
        }


class TestFillTemplate:
    def test_values_are_stripped(self) -> None:
        assert fill_template({"like": "${1}"}, ["  spaced out  "]) == {
            "like": "spaced out"
        }

    def test_unmatched_optional_group_is_empty(self) -> None:
        assert fill_template({"like": "${1}${2}"}, ["a", None]) == {"like": "a"}

    def test_keys_are_filled(self) -> None:
        result = fill_template({"where": {"${1}": "${2}"}}, ["author", "Ada"])
        assert result == {"where": {"author": "Ada"}}

    def test_non_string_values_pass_through(self) -> None:
        template = {"limit": 5, "desc": True, "price": 0, "like": None}
        assert fill_template(template, []) == template

    def test_template_is_not_mutated(self) -> None:
        template = {"like": ["${1}"]}
        fill_template(template, ["x"])
        assert template == {"like": ["${1}"]}

    def test_missing_group_raises(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            fill_template({"like": "${3}"}, ["only", "two"])
        assert exc_info.value.details == {"group": 3, "available": 2}

    def test_group_zero_raises(self) -> None:
        with pytest.raises(TemplateError):
            fill_template({"like": "${0}"}, ["value"])

    def test_optional_group_fills_empty_but_absent_group_raises(self) -> None:
        template = {"like": "${1}", "where": {"year": "${2}"}}
        assert fill_template(template, ["x", None]) == {
            "like": "x",
            "where": {"year": ""},
        }
        with pytest.raises(TemplateError):
            fill_template(template, ["x"])


class TestInstantiate:
    def test_no_match_returns_none(self) -> None:
        assert instantiate(get_pattern("commercial_compare"), "just words") is None

    def test_match_is_case_insensitive(self) -> None:
        result = instantiate(get_pattern("research_on"), "Research On Graph Neural Nets")
        assert result is not None
        assert result["like"] == "Graph Neural Nets"
