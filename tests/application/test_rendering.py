"""Unit tests for renderers."""

from typeahead.application.rendering import find_highlights, mark_up, render_candidate
from typeahead.domain.types import IdentifiedCandidate, PlainCandidate


def test_render_plain_marks_every_occurrence():
    item = render_candidate(PlainCandidate("Banana"), "an")

    assert item.text == "Banana"
    assert item.markup == "B<mark>an</mark><mark>an</mark>a"
    assert item.highlights == ((1, 3), (3, 5))
    assert item.selected is False
    assert item.candidate_id is None


def test_render_is_case_insensitive_and_keeps_original_case():
    item = render_candidate(PlainCandidate("Apple"), "aP")
    assert item.markup == "<mark>Ap</mark>ple"


def test_render_escapes_query_and_label():
    item = render_candidate(PlainCandidate("a<b> (x)"), "(x)")
    assert item.markup == "a&lt;b&gt; <mark>(x)</mark>"
    assert item.text == "a<b> (x)"


def test_render_identified_records_id():
    candidate = IdentifiedCandidate(id="fr", label="France")
    item = render_candidate(candidate, "fra")

    assert item.candidate is candidate
    assert item.candidate_id == "fr"
    assert item.markup == "<mark>Fra</mark>nce"


def test_render_does_not_mutate_candidate():
    candidate = PlainCandidate("grape")
    render_candidate(candidate, "ap")
    assert candidate == PlainCandidate("grape")


def test_empty_query_has_no_highlights():
    assert find_highlights("apple", "   ") == ()
    assert mark_up("apple", ()) == "apple"
