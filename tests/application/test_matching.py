"""Unit tests for matchers."""

from typeahead.application.matching import MATCHERS, filter_contains, filter_starts_with


class TestFilterContains:
    """Tests for the default substring matcher."""

    def test_matches_substring_case_insensitively(self):
        assert filter_contains("Pineapple", "APP")

    def test_trims_query(self):
        assert filter_contains("banana", "  nan  ")

    def test_rejects_missing_substring(self):
        assert not filter_contains("banana", "kiwi")

    def test_regex_metacharacters_are_literal(self):
        assert filter_contains("C++ primer", "c++")
        assert not filter_contains("abc", "a.c")
        assert filter_contains("a.c", "a.c")
        assert filter_contains("(draft) notes", "(draft)")


class TestFilterStartsWith:
    """Tests for the anchored matcher."""

    def test_matches_prefix(self):
        assert filter_starts_with("Apple", "ap")

    def test_rejects_inner_occurrence(self):
        assert not filter_starts_with("grape", "ap")

    def test_escapes_query(self):
        assert filter_starts_with("$100 off", "$1")


def test_matchers_registry_names():
    assert MATCHERS["contains"] is filter_contains
    assert MATCHERS["startswith"] is filter_starts_with
    assert MATCHERS["starts-with"] is filter_starts_with
