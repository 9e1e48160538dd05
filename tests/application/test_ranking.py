"""Unit tests for the default ranker."""

from typeahead.application.ranking import rank, sort_by_length


def test_shorter_labels_rank_first():
    assert sort_by_length("fig", "kiwi") < 0
    assert sort_by_length("kiwi", "fig") > 0


def test_equal_length_is_lexicographic():
    assert sort_by_length("kiwi", "lime") < 0
    assert sort_by_length("lime", "kiwi") > 0


def test_identical_labels_tie():
    assert sort_by_length("pear", "pear") == 0


def test_rank_default_order_for_fixed_input():
    labels = ["kiwi", "fig", "apple", "date", "banana"]
    assert list(rank(labels, sort_by_length, label_of=lambda label: label)) == [
        "fig",
        "date",
        "kiwi",
        "apple",
        "banana",
    ]


def test_rank_is_stable_for_ties():
    entries = [("a", "pear"), ("b", "plum"), ("c", "pear")]
    ranked = rank(entries, sort_by_length, label_of=lambda entry: entry[1])
    assert [key for key, _ in ranked] == ["a", "c", "b"]


def test_rank_with_custom_comparison():
    reverse_alpha = lambda a, b: (a < b) - (a > b)
    assert list(rank(["b", "c", "a"], reverse_alpha, label_of=str)) == ["c", "b", "a"]
