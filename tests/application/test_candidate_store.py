"""Unit tests for CandidateStore."""

from typeahead.application.candidate_store import CandidateStore
from typeahead.domain.types import CandidateKind, IdentifiedCandidate, PlainCandidate
from typeahead.infrastructure import ElementRegistry


class TestSources:
    """Tests for each accepted source shape."""

    def test_list_of_labels(self):
        store = CandidateStore(["apple", "banana"])
        assert store.candidates == (PlainCandidate("apple"), PlainCandidate("banana"))
        assert store.kind is CandidateKind.PLAIN

    def test_list_of_pairs_is_identified(self):
        store = CandidateStore([("fr", "France"), (49, "Germany")])
        assert store.kind is CandidateKind.IDENTIFIED
        assert store.candidates == (
            IdentifiedCandidate("fr", "France"),
            IdentifiedCandidate("49", "Germany"),
        )

    def test_comma_delimited_string_is_trimmed(self):
        store = CandidateStore(" apple ,banana,  grape")
        assert [c.label for c in store.candidates] == ["apple", "banana", "grape"]

    def test_element_reference(self):
        registry = ElementRegistry()
        registry.register("fruits", [" kiwi ", "fig"])
        store = CandidateStore("#fruits", resolver=registry)
        assert [c.label for c in store.candidates] == ["kiwi", "fig"]

    def test_candidate_objects_pass_through(self):
        candidates = [PlainCandidate("a"), PlainCandidate("b")]
        assert CandidateStore(candidates).candidates == tuple(candidates)

    def test_none_is_empty(self):
        assert CandidateStore(None).candidates == ()


class TestDegradation:
    """Unusable sources degrade to an empty list instead of raising."""

    def test_unresolved_reference(self):
        store = CandidateStore("#missing", resolver=ElementRegistry())
        assert store.candidates == ()

    def test_reference_without_resolver(self):
        assert CandidateStore("#fruits").candidates == ()

    def test_mixed_shapes(self):
        store = CandidateStore([("fr", "France"), "Germany"])
        assert store.candidates == ()
        assert store.kind is CandidateKind.PLAIN

    def test_unsupported_type(self):
        assert CandidateStore(42).candidates == ()


class TestLaziness:
    """Derivation happens on read after a reassignment."""

    def test_reassignment_rederives(self):
        store = CandidateStore(["apple"])
        assert len(store) == 1
        store.source = "kiwi, fig"
        assert [c.label for c in store.candidates] == ["kiwi", "fig"]

    def test_refresh_rereads_element(self):
        registry = ElementRegistry()
        registry.register("fruits", ["kiwi"])
        store = CandidateStore("#fruits", resolver=registry)
        assert len(store) == 1

        registry.register("fruits", ["kiwi", "fig"])
        assert len(store) == 1
        store.refresh()
        assert len(store) == 2
