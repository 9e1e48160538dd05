"""Shared domain types."""

from .candidates import Candidate, CandidateKind, IdentifiedCandidate, PlainCandidate
from .state import EngineState, EngineStatus, RenderedItem

__all__ = [
    "Candidate",
    "CandidateKind",
    "PlainCandidate",
    "IdentifiedCandidate",
    "RenderedItem",
    "EngineState",
    "EngineStatus",
]
