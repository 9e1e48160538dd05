"""Unit tests for committers."""

from typeahead.application.commit import commit_item
from typeahead.application.rendering import render_candidate
from typeahead.domain.types import IdentifiedCandidate, PlainCandidate
from typeahead.infrastructure import HiddenValue, TextBuffer


def test_commit_plain_writes_text_only():
    text, hidden = TextBuffer("ap"), HiddenValue("previous")
    commit_item(render_candidate(PlainCandidate("Apple"), "ap"), text, hidden)

    assert text.value == "Apple"
    assert hidden.value == "previous"


def test_commit_identified_writes_text_and_id():
    text, hidden = TextBuffer("fr"), HiddenValue()
    commit_item(render_candidate(IdentifiedCandidate("fr", "France"), "fr"), text, hidden)

    assert text.value == "France"
    assert hidden.value == "fr"


def test_commit_identified_without_hidden_surface():
    text = TextBuffer("fr")
    commit_item(render_candidate(IdentifiedCandidate("fr", "France"), "fr"), text, None)
    assert text.value == "France"
