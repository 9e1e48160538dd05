"""Application layer - the suggestion engine and its pluggable strategies."""

from .candidate_store import CandidateStore
from .commit import commit_identified, commit_item, commit_text
from .config import EngineConfig, resolve_config, resolve_list_source
from .engine import SuggestionEngine
from .matching import MATCHERS, filter_contains, filter_starts_with
from .ranking import rank, sort_by_length
from .rendering import render_candidate, render_identified, render_plain

__all__ = [
    "SuggestionEngine",
    "CandidateStore",
    "EngineConfig",
    "resolve_config",
    "resolve_list_source",
    "MATCHERS",
    "filter_contains",
    "filter_starts_with",
    "rank",
    "sort_by_length",
    "render_candidate",
    "render_plain",
    "render_identified",
    "commit_item",
    "commit_text",
    "commit_identified",
]
