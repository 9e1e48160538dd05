"""Layered engine configuration.

Each option is resolved once, when the engine is built, from three layers in
precedence order:

1. attribute-like overrides (``data-minchars``, ``data-maxitems``,
   ``data-autofirst``, ``data-filter``), as read from the surrounding markup
   or environment
2. options passed explicitly by the caller
3. built-in defaults

A value that fails validation is logged as a ``ConfigurationError`` and the
next layer is tried instead.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typeahead.domain.errors import ConfigurationError
from typeahead.domain.types import RenderedItem
from typeahead.logger import get_logger
from typeahead.utils import parse_flag, parse_int_prefix

from .commit import commit_item
from .matching import MATCHERS, filter_contains
from .ranking import sort_by_length
from .rendering import render_candidate

logger = get_logger("config")

# Option name -> attribute name
ATTRIBUTE_NAMES: dict[str, str] = {
    "min_chars": "data-minchars",
    "max_items": "data-maxitems",
    "auto_first": "data-autofirst",
    "matcher": "data-filter",
}


class EngineConfig(BaseModel):
    """Resolved, immutable engine options."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    min_chars: int = Field(default=2, ge=0, description="Minimum trimmed query length before suggesting")
    max_items: int = Field(default=10, ge=0, description="Maximum number of visible items")
    auto_first: bool = Field(default=False, description="Highlight the first item whenever the dropdown opens")
    matcher: Callable[[str, str], bool] = Field(default=filter_contains, description="Label/query filter")
    ranker: Callable[[str, str], int] = Field(default=sort_by_length, description="Three-way label comparison")
    renderer: Callable[[Any, str], RenderedItem] = Field(default=render_candidate, description="Candidate renderer")
    committer: Callable[..., None] = Field(default=commit_item, description="Writes a selection back")


def _validate_field(name: str, value: Any) -> Any:
    """Validate a single option value, returning its coerced form."""
    try:
        validated = EngineConfig.model_validate({name: value})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid value for option '{name}': {value!r}", option=name, value=value) from e
    return getattr(validated, name)


def _from_attribute(name: str, raw: str) -> Any:
    """Convert the raw attribute string of option ``name``."""
    if name in ("min_chars", "max_items"):
        parsed = parse_int_prefix(raw)
        if parsed is None:
            raise ConfigurationError(f"Attribute {ATTRIBUTE_NAMES[name]}={raw!r} is not an integer", option=name, value=raw)
        return parsed
    if name == "auto_first":
        return parse_flag(raw)
    if name == "matcher":
        matcher = MATCHERS.get(raw.strip().lower())
        if matcher is None:
            raise ConfigurationError(f"Unknown filter {raw!r}", option=name, value=raw)
        return matcher
    raise ConfigurationError(f"Option '{name}' cannot be set from an attribute", option=name, value=raw)


def _layers(name: str, attributes: Mapping[str, str], options: Mapping[str, Any]):
    attribute = ATTRIBUTE_NAMES.get(name)
    if attribute is not None and attributes.get(attribute) is not None:
        yield "attribute", lambda: _from_attribute(name, attributes[attribute])
    if options.get(name) is not None:
        yield "option", lambda: options[name]


def resolve_config(
    attributes: Mapping[str, str] | None = None,
    options: Mapping[str, Any] | None = None,
) -> EngineConfig:
    """
    Resolve the engine configuration from its layers.

    Args:
        attributes: Attribute-like overrides keyed by attribute name (``data-minchars`` ...)
        options: Explicit options keyed by option name (``min_chars`` ...)

    Returns:
        EngineConfig: Fully resolved configuration; never raises
    """
    attributes = attributes or {}
    options = options or {}

    unknown = set(options) - set(EngineConfig.model_fields)
    if unknown:
        logger.warning(f"Ignoring unknown options: {sorted(unknown)}")

    values: dict[str, Any] = {}
    for name in EngineConfig.model_fields:
        for layer, produce in _layers(name, attributes, options):
            try:
                value = _validate_field(name, produce())
            except ConfigurationError as e:
                logger.warning(f"{e} ({layer}); falling back")
                continue
            values[name] = value
            logger.debug(f"Option {name} resolved from {layer}")
            break

    return EngineConfig(**values)


def resolve_list_source(attributes: Mapping[str, str] | None, source: Any = None) -> Any:
    """
    Pick the list source: ``list`` attribute (a datalist id), then
    ``data-list``, then the explicit source.
    """
    attributes = attributes or {}
    if attributes.get("list"):
        return "#" + attributes["list"]
    if attributes.get("data-list"):
        return attributes["data-list"]
    return source if source is not None else []
