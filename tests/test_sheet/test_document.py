"""Tests for the document model: parsing and path access."""

import pytest

from beefbrain.exceptions import BeefBrainError, ParseError
from beefbrain.sheet.document import (
    format_path,
    get_mapping,
    get_path,
    is_number,
    parse_document,
    set_path,
    sum_numbers,
)


class TestParseDocument:
    """Tests for YAML parsing."""

    def test_parse_mapping(self):
        doc = parse_document("character:\n  abilities:\n    strength: [15, str: 2]\n")
        assert doc == {"character": {"abilities": {"strength": [15, {"str": 2}]}}}

    def test_parse_empty(self):
        assert parse_document("") is None

    def test_parse_error_keys_on_one_line(self):
        """Three keys on one unindented line are not valid YAML."""
        with pytest.raises(ParseError) as exc_info:
            parse_document("---\ncharacter: abilities: strength: [15, str: 2]\n")

        assert exc_info.value.details["line"] == 2
        assert isinstance(exc_info.value, BeefBrainError)

    def test_parse_error_unclosed_flow(self):
        with pytest.raises(ParseError):
            parse_document("character:\n  abilities:\n    strength: [15, str: 2\n")

    def test_parse_error_chains_yaml_error(self):
        import yaml

        with pytest.raises(ParseError) as exc_info:
            parse_document("a: b: c")

        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_parse_error_deep_nesting(self):
        """Nesting past the recursion limit is reported as a parse error."""
        with pytest.raises(ParseError) as exc_info:
            parse_document("[" * 5000 + "]" * 5000)

        assert isinstance(exc_info.value.__cause__, RecursionError)


class TestPathAccess:
    """Tests for get_path, get_mapping and set_path."""

    @pytest.fixture
    def doc(self):
        return {"character": {"skills": {"climb": [3, {"str": 2}]}, "feats": ["a", "b"]}}

    def test_get_nested(self, doc):
        assert get_path(doc, ("character", "skills", "climb", 1, "str")) == 2

    def test_get_missing_returns_default(self, doc):
        assert get_path(doc, ("character", "combat", "saves")) is None
        assert get_path(doc, ("character", "feats", 5), default="none") == "none"

    def test_get_through_scalar(self, doc):
        assert get_path(doc, ("character", "feats", 0, "x")) is None

    def test_get_on_non_mapping_root(self):
        assert get_path(None, ("character",)) is None
        assert get_path("text", ("character",)) is None

    def test_get_mapping_rejects_non_mapping(self, doc):
        assert get_mapping(doc, ("character", "feats")) is None
        assert get_mapping(doc, ("character", "skills")) == {"climb": [3, {"str": 2}]}

    def test_set_replaces_value(self, doc):
        set_path(doc, ("character", "skills", "climb"), [5, {"str": 4}])
        assert doc["character"]["skills"]["climb"] == [5, {"str": 4}]

    def test_set_keeps_key_position(self, doc):
        doc["character"]["skills"]["jump"] = [0, {}]
        set_path(doc, ("character", "skills", "climb"), [1, {}])
        assert list(doc["character"]["skills"]) == ["climb", "jump"]

    def test_set_list_index(self, doc):
        set_path(doc, ("character", "feats", 1), "c")
        assert doc["character"]["feats"] == ["a", "c"]

    def test_set_without_parent(self, doc):
        with pytest.raises(KeyError):
            set_path(doc, ("character", "combat", "initiative"), [0, {}])

    def test_set_root(self, doc):
        with pytest.raises(KeyError):
            set_path(doc, (), {})

    def test_format_path(self):
        assert format_path(("character", "feats", 0)) == "character.feats.0"


class TestNumbers:
    """Tests for numeric helpers."""

    def test_booleans_are_not_numbers(self):
        assert is_number(3)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("3")

    def test_sum_ignores_non_numbers(self):
        assert sum_numbers({"a": 2, "b": -3, "note": "x", "flag": True, "c": None}) == -1
