"""Candidate types.

A candidate is either a plain label or an ``(id, label)`` pair. A candidate
list is homogeneous; its kind is decided once when the list is built.
"""

from dataclasses import dataclass
from enum import Enum


class CandidateKind(Enum):
    """Shape of every candidate in a list."""

    PLAIN = "plain"
    IDENTIFIED = "identified"


@dataclass(frozen=True, slots=True)
class PlainCandidate:
    """A suggestion that is only a label."""

    label: str

    @property
    def kind(self) -> CandidateKind:
        return CandidateKind.PLAIN


@dataclass(frozen=True, slots=True)
class IdentifiedCandidate:
    """A suggestion whose label is shown and whose id is committed alongside it."""

    id: str
    label: str

    @property
    def kind(self) -> CandidateKind:
        return CandidateKind.IDENTIFIED


Candidate = PlainCandidate | IdentifiedCandidate
