"""Unit tests for in-memory infrastructure."""

from typeahead.infrastructure import ElementRegistry, StaticFocus, TextBuffer


def test_registry_resolves_hash_and_bare_ids():
    registry = ElementRegistry()
    registry.register("langs", [" Python", "Ruby "])

    assert registry.resolve("#langs") == ["Python", "Ruby"]
    assert registry.resolve("langs") == ["Python", "Ruby"]


def test_registry_unknown_reference():
    registry = ElementRegistry()
    registry.register("langs", ["Python"])
    registry.unregister("langs")
    assert registry.resolve("#langs") is None


def test_surfaces_hold_values():
    buffer = TextBuffer()
    buffer.value = "typed"
    assert buffer.value == "typed"
    assert StaticFocus(True).has_focus
