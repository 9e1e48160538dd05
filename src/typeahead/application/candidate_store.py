"""Candidate store.

Normalizes a configured list source into an ordered, homogeneous tuple of
candidates. Accepted sources:

- a sequence of labels, of ``(id, label)`` pairs, or of candidate objects
- a comma-delimited string (``"apple, banana, grape"``)
- an element reference (``"#fruits"``) resolved through an ``ElementResolver``

The kind of the list (plain or identified) is decided from its first element.
Derivation is lazy: assigning a source only marks the store stale, and the
candidates are derived on the next read.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from typeahead.domain.errors import ConfigurationError
from typeahead.domain.protocols import ElementResolver
from typeahead.domain.types import Candidate, CandidateKind, IdentifiedCandidate, PlainCandidate
from typeahead.logger import get_logger
from typeahead.utils import split_delimited

logger = get_logger("candidate_store")


def _is_pair(entry: Any) -> bool:
    return isinstance(entry, (tuple, list)) and len(entry) == 2


class CandidateStore:
    """Holds the list source and the candidates derived from it."""

    def __init__(self, source: Any = None, resolver: ElementResolver | None = None) -> None:
        self._resolver = resolver
        self._source: Any = None
        self._candidates: tuple[Candidate, ...] = ()
        self._kind = CandidateKind.PLAIN
        self._stale = False
        if source is not None:
            self.source = source

    @property
    def source(self) -> Any:
        return self._source

    @source.setter
    def source(self, source: Any) -> None:
        self._source = source
        self._stale = True
        logger.debug(f"List source reassigned ({type(source).__name__})")

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        if self._stale:
            self._derive()
        return self._candidates

    @property
    def kind(self) -> CandidateKind:
        if self._stale:
            self._derive()
        return self._kind

    def refresh(self) -> None:
        """Re-read the source on next access (e.g. after the referenced element changed)."""
        self._stale = True

    def __len__(self) -> int:
        return len(self.candidates)

    def _derive(self) -> None:
        self._stale = False
        try:
            self._candidates, self._kind = self._normalize(self._source)
        except ConfigurationError as e:
            logger.warning(f"Unusable list source, using an empty list: {e}")
            self._candidates, self._kind = (), CandidateKind.PLAIN
            return
        logger.debug(f"Derived {len(self._candidates)} {self._kind.value} candidate(s)")

    def _normalize(self, source: Any) -> tuple[tuple[Candidate, ...], CandidateKind]:
        if source is None:
            return (), CandidateKind.PLAIN
        if isinstance(source, str):
            if "," in source:
                return tuple(PlainCandidate(label) for label in split_delimited(source)), CandidateKind.PLAIN
            return self._resolve_reference(source)
        if isinstance(source, Iterable):
            return self._from_entries(list(source))
        raise ConfigurationError(f"Unsupported list source type {type(source).__name__}", option="list", value=source)

    def _resolve_reference(self, reference: str) -> tuple[tuple[Candidate, ...], CandidateKind]:
        if self._resolver is None:
            raise ConfigurationError(f"No resolver available for list reference {reference!r}", option="list", value=reference)
        try:
            texts = self._resolver.resolve(reference)
        except Exception as e:
            raise ConfigurationError(f"List reference {reference!r} failed to resolve: {e}", option="list", value=reference) from e
        if texts is None:
            raise ConfigurationError(f"List reference {reference!r} did not resolve", option="list", value=reference)
        return tuple(PlainCandidate(str(text).strip()) for text in texts), CandidateKind.PLAIN

    def _from_entries(self, entries: list[Any]) -> tuple[tuple[Candidate, ...], CandidateKind]:
        if not entries:
            return (), CandidateKind.PLAIN

        first = entries[0]
        if isinstance(first, IdentifiedCandidate) or _is_pair(first):
            return tuple(self._identified(entry) for entry in entries), CandidateKind.IDENTIFIED
        return tuple(self._plain(entry) for entry in entries), CandidateKind.PLAIN

    @staticmethod
    def _identified(entry: Any) -> IdentifiedCandidate:
        if isinstance(entry, IdentifiedCandidate):
            return entry
        if _is_pair(entry):
            candidate_id, label = entry
            return IdentifiedCandidate(id=str(candidate_id), label=str(label))
        raise ConfigurationError(f"Expected an (id, label) pair, got {entry!r}", option="list", value=entry)

    @staticmethod
    def _plain(entry: Any) -> PlainCandidate:
        if isinstance(entry, PlainCandidate):
            return entry
        if isinstance(entry, str):
            return PlainCandidate(entry)
        raise ConfigurationError(f"Expected a label, got {entry!r}", option="list", value=entry)
