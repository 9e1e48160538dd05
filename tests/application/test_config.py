"""Unit tests for layered configuration."""

import pytest
from pydantic import ValidationError

from typeahead.application.config import EngineConfig, resolve_config, resolve_list_source
from typeahead.application.matching import filter_contains, filter_starts_with


def test_defaults():
    config = resolve_config()
    assert config.min_chars == 2
    assert config.max_items == 10
    assert config.auto_first is False
    assert config.matcher is filter_contains


def test_option_overrides_default():
    config = resolve_config(options={"min_chars": 1, "auto_first": True})
    assert config.min_chars == 1
    assert config.auto_first is True


def test_attribute_overrides_option():
    config = resolve_config(
        attributes={"data-minchars": "3", "data-maxitems": "5"},
        options={"min_chars": 1, "max_items": 20},
    )
    assert config.min_chars == 3
    assert config.max_items == 5


def test_attribute_zero_is_kept():
    config = resolve_config(attributes={"data-minchars": "0"}, options={"min_chars": 4})
    assert config.min_chars == 0


def test_integer_attribute_parsed_leniently():
    assert resolve_config(attributes={"data-maxitems": "7 items"}).max_items == 7


def test_malformed_attribute_falls_back_to_option():
    config = resolve_config(attributes={"data-minchars": "many"}, options={"min_chars": 4})
    assert config.min_chars == 4


def test_invalid_option_falls_back_to_default():
    config = resolve_config(options={"max_items": -3, "matcher": "not callable"})
    assert config.max_items == 10
    assert config.matcher is filter_contains


def test_boolean_attribute_presence():
    assert resolve_config(attributes={"data-autofirst": ""}).auto_first is True
    assert resolve_config(attributes={"data-autofirst": "false"}, options={"auto_first": True}).auto_first is False


def test_filter_attribute_selects_builtin_matcher():
    assert resolve_config(attributes={"data-filter": "startswith"}).matcher is filter_starts_with
    assert resolve_config(attributes={"data-filter": "fuzzy"}).matcher is filter_contains


def test_unknown_options_are_ignored():
    assert resolve_config(options={"colour": "red"}) == EngineConfig()


def test_config_is_frozen():
    config = resolve_config()
    with pytest.raises(ValidationError):
        config.min_chars = 5


class TestListSource:
    """Tests for list source precedence."""

    def test_list_attribute_becomes_reference(self):
        assert resolve_list_source({"list": "fruits", "data-list": "a, b"}, ["x"]) == "#fruits"

    def test_data_list_attribute(self):
        assert resolve_list_source({"data-list": "a, b"}, ["x"]) == "a, b"

    def test_explicit_source(self):
        assert resolve_list_source({}, ["x"]) == ["x"]

    def test_nothing_configured(self):
        assert resolve_list_source(None) == []
